#############################################################################
#
#  Project Name        :    Video content type resolution
#
#  Author              :    Alex Ashley
#
#############################################################################
import logging

from vidcontent.sanitize import clean_content_type, parse_content_type

def primary_codec(codecs: str) -> str:
    """
    Returns the name of the first entry of a "codecs" parameter, which is
    the video codec when the content contains more than one track. The
    profile and level details are removed, e.g.
    "avc1.640028, mp4a.40.2" becomes "avc1"
    """
    codec = codecs.split(',')[0].strip()
    return codec.split('.')[0].strip()

def compatible(content_type1: str, content_type2: str) -> bool:
    """
    Checks if two video content types are expected to be compatible, so
    that one can be played in place of the other without re-encoding.
    """
    if not content_type1 or not content_type2:
        return False
    if content_type1.lower() == content_type2.lower():
        return True

    parts1 = parse_content_type(clean_content_type(content_type1))
    parts2 = parse_content_type(clean_content_type(content_type2))
    if parts1 is None or parts2 is None:
        logging.debug('Unable to compare "%s" with "%s"',
                      content_type1, content_type2)
        return False

    media_type1, params1 = parts1
    media_type2, params2 = parts2
    if not params1 and not params2:
        return media_type1.lower() == media_type2.lower()
    if media_type1.lower() != media_type2.lower():
        return False

    codecs1 = params1.get('codecs', '')
    codecs2 = params2.get('codecs', '')
    if codecs1.lower() == codecs2.lower():
        return True

    return primary_codec(codecs1).lower() == primary_codec(codecs2).lower()
