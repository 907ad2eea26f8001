#############################################################################
#
#  Project Name        :    Video content type resolution
#
#  Author              :    Alex Ashley
#
#############################################################################
import logging
import re

from werkzeug.http import parse_options_header

_TOKEN = r"[a-z0-9!#$%&'*+\-.^_`|~]+"
_MEDIA_TYPE_RE = re.compile(rf'^{_TOKEN}/{_TOKEN}$', re.ASCII)
_PARAMETER_RE = re.compile(
    r"""
    \s*;\s*
    (?:
        ([\w!#$%&'*+\-.^`|~]+)  # key
        \s*=\s*
        ([\w!#$%&'*+\-.^`|~]+|"(?:\\.|[^"\\])*")  # token or quoted string
    )?
    """,
    re.ASCII | re.VERBOSE)
# control characters, other than horizontal tab
_CONTROL_RE = re.compile(r'[\x00-\x08\x0a-\x1f\x7f]')

ContentTypeParts = tuple[str, dict[str, str]]

def parse_content_type(content_type: str | None) -> ContentTypeParts | None:
    """
    Splits a content type into its lower case media type and a dictionary
    of its parameters. Returns None if the string is not a valid content type.
    """
    if not content_type:
        return None
    content_type = content_type.strip()
    if _CONTROL_RE.search(content_type):
        logging.debug('Content type contains control characters: %r', content_type)
        return None
    media_type, _, rest = content_type.partition(';')
    media_type = media_type.strip().lower()
    if not _MEDIA_TYPE_RE.match(media_type):
        logging.debug('Invalid media type "%s"', media_type)
        return None
    pairs = _split_parameters(rest)
    if pairs is None:
        logging.debug('Invalid content type parameters "%s"', rest)
        return None
    header = '; '.join([media_type] + [f'{key}={value}' for key, value in pairs])
    _, options = parse_options_header(header)
    params: dict[str, str] = {}
    for key, value in options.items():
        key = key.strip().lower()
        value = _clean_parameter_value(key, value)
        if key and value:
            params[key] = value
    return (media_type, params)

def _split_parameters(rest: str) -> list[tuple[str, str]] | None:
    """
    Returns the key=value pairs of the parameters of a content type, or None
    if any of the text is not a valid parameter or if a key is repeated.
    """
    pairs: list[tuple[str, str]] = []
    keys: set[str] = set()
    rest = f';{rest}'.rstrip()
    pos = 0
    while pos < len(rest):
        match = _PARAMETER_RE.match(rest, pos)
        if match is None:
            return None
        pos = match.end()
        key, value = match.groups()
        if key is None:
            continue
        key = key.lower()
        if key in keys:
            return None
        keys.add(key)
        pairs.append((key, value))
    return pairs

def format_content_type(media_type: str, params: dict[str, str]) -> str:
    parts: list[str] = [media_type]
    for key in sorted(params.keys()):
        parts.append(f'{key}="{params[key]}"')
    return '; '.join(parts)

def clean_content_type(content_type: str | None) -> str:
    """
    Converts a content type into its canonical form, e.g.
    ' Video/MP4;CODECS=avc1.640028 ' becomes 'video/mp4; codecs="avc1.640028"'

    An empty string is returned if the content type cannot be parsed.
    Calling clean_content_type() with its own output returns the same value.
    """
    parts = parse_content_type(content_type)
    if parts is None:
        return ''
    media_type, params = parts
    return format_content_type(media_type, params)

def _clean_parameter_value(key: str, value: str | None) -> str:
    if value is None:
        return ''
    value = value.replace('"', '').replace('\\', '').strip()
    if key == 'codecs':
        codecs = [c.strip() for c in value.split(',')]
        value = ', '.join([c for c in codecs if c])
    return value
