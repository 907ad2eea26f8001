#############################################################################
#
#  Project Name        :    Video content type resolution
#
#  Author              :    Alex Ashley
#
#############################################################################
from types import MappingProxyType
from typing import Mapping

CODEC_AVC1 = 'avc1'
CODEC_AVC3 = 'avc3'
CODEC_HVC1 = 'hvc1'
CODEC_HEV1 = 'hev1'
CODEC_VVC1 = 'vvc1'
CODEC_EVC1 = 'evc1'
CODEC_AV01 = 'av01'
CODEC_VP08 = 'vp8'
CODEC_VP09 = 'vp9'
CODEC_THEORA = 'theora'

CODEC_NAMES: Mapping[str, str] = MappingProxyType({
    'avc': CODEC_AVC1,
    'avc1': CODEC_AVC1,
    'h264': CODEC_AVC1,
    'x264': CODEC_AVC1,
    'v_mpeg4/iso/avc': CODEC_AVC1,
    'avc3': CODEC_AVC3,
    'hvc': CODEC_HVC1,
    'hvc1': CODEC_HVC1,
    'hevc': CODEC_HVC1,
    'h265': CODEC_HVC1,
    'x265': CODEC_HVC1,
    'hev': CODEC_HEV1,
    'hev1': CODEC_HEV1,
    'vvc': CODEC_VVC1,
    'vvc1': CODEC_VVC1,
    'h266': CODEC_VVC1,
    'evc': CODEC_EVC1,
    'evc1': CODEC_EVC1,
    'av1': CODEC_AV01,
    'av01': CODEC_AV01,
    'vp8': CODEC_VP08,
    'vp08': CODEC_VP08,
    'vp9': CODEC_VP09,
    'vp09': CODEC_VP09,
    'ogv': CODEC_THEORA,
    'theora': CODEC_THEORA,
})

def codec_name(codec_id: str | None) -> str:
    """
    Returns the name used in the "codecs" content type parameter for the
    given codec identifier, or an empty string if the codec is unknown.
    """
    if not codec_id:
        return ''
    return CODEC_NAMES.get(codec_id.strip().lower(), '')
