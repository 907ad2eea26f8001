#############################################################################
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
#############################################################################
#
#  Project Name        :    Video content type resolution
#
#  Author              :    Alex Ashley
#
#############################################################################
import logging

from vidcontent import content_types as ct
from vidcontent.codecs import (
    codec_name,
    CODEC_AV01, CODEC_AVC1, CODEC_AVC3, CODEC_EVC1, CODEC_HEV1, CODEC_HVC1,
    CODEC_THEORA, CODEC_VP08, CODEC_VP09, CODEC_VVC1
)
from vidcontent.file_types import FileType
from vidcontent.sanitize import clean_content_type

def _canonical(*content_types: str) -> frozenset[str]:
    return frozenset([clean_content_type(c) for c in content_types])

# Content types that are upgraded to their 10-bit variant for HDR video.
# Entries are compared against the output of clean_content_type()
HDR_AVC_SOURCES = _canonical(
    ct.MOV_AVC, ct.MOV_AVC_MAIN, ct.MOV_AVC_HIGH, ct.MP4_AVC,
    ct.MP4_AVC_BASELINE, ct.MP4_AVC_MAIN, ct.MP4_AVC_HIGH)
HDR_AVC3_SOURCES = _canonical(ct.MP4_AVC3, ct.MP4_AVC3_MAIN, ct.MP4_AVC3_HIGH)
HDR_HVC_SOURCES = _canonical(ct.MP4_HVC, ct.MOV_HVC, ct.MP4_HVC_MAIN)
HDR_HEV_SOURCES = _canonical(ct.MP4_HEV, ct.MP4_HEV_MAIN)
HDR_AV1_SOURCES = _canonical(ct.AV1, ct.MOV_AV1, ct.MP4_AV1, ct.MP4_AV1_MAIN)
HDR_WEBM_AV1_SOURCES = _canonical(ct.WEBM_AV1, ct.WEBM_AV1_MAIN)
HDR_MKV_AV1_SOURCES = _canonical(ct.MKV_AV1, ct.MKV_AV1_MAIN)

HDR_UPGRADES: tuple[tuple[frozenset[str], str], ...] = (
    (HDR_AVC3_SOURCES, ct.MP4_AVC3_HIGH10),
    (HDR_HVC_SOURCES, ct.MP4_HVC_MAIN10),
    (HDR_HEV_SOURCES, ct.MP4_HEV_MAIN10),
    (HDR_AV1_SOURCES, ct.MP4_AV1_MAIN10),
    (HDR_WEBM_AV1_SOURCES, ct.WEBM_AV1_MAIN10),
    (HDR_MKV_AV1_SOURCES, ct.MKV_AV1_MAIN10),
)

def content_type(media_type: str, file_type: str, codec_id: str,
                 hdr: bool = False) -> str:
    """
    Returns a normalized video content type, based upon the file type and
    video codec of a video file.

    If media_type is not empty it is used as the starting point, rather
    than deriving it from file_type and codec_id. An empty string is
    returned if no content type could be found.
    """
    if not media_type and not file_type and not codec_id:
        return ct.BINARY

    codec = codec_name(codec_id)

    if not media_type:
        media_type = _media_type_from_file(
            FileType.normalize(file_type or ''), codec, hdr)

    if media_type and ';' not in media_type and codec:
        media_type = f'{media_type}; codecs="{codec}"'

    media_type = clean_content_type(media_type)

    if hdr:
        media_type = hdr_content_type(media_type, codec)

    return media_type

def _media_type_from_file(file_type: str, codec: str, hdr: bool) -> str:
    # the order of these checks is significant, as some containers
    # match more than one rule
    mp4 = FileType.MP4.equal(file_type)
    if mp4 and codec == CODEC_AVC3:
        return ct.MP4_AVC3_HIGH10 if hdr else ct.MP4_AVC3_MAIN
    if FileType.AVC.equal(file_type) or (mp4 and codec == CODEC_AVC1):
        return ct.MP4_AVC_HIGH10 if hdr else ct.MP4_AVC_MAIN
    if FileType.HVC.equal(file_type) or (mp4 and codec == CODEC_HVC1):
        return ct.MP4_HVC_MAIN10
    if FileType.HEV.equal(file_type) or (mp4 and codec == CODEC_HEV1):
        return ct.MP4_HEV_MAIN10
    if FileType.VVC.equal(file_type) or (mp4 and codec == CODEC_VVC1):
        return ct.MP4_VVC
    if FileType.EVC.equal(file_type) or (mp4 and codec == CODEC_EVC1):
        return ct.MP4_EVC
    if FileType.VP8.equal(file_type) or codec == CODEC_VP08:
        return ct.WEBM_VP8
    if FileType.VP9.equal(file_type) or codec == CODEC_VP09:
        return ct.WEBM_VP9
    if codec == CODEC_AV01:
        if mp4:
            return ct.MP4_AV1_MAIN10
        if FileType.WEBM.equal(file_type):
            return ct.WEBM_AV1_MAIN10
        if FileType.MKV.equal(file_type):
            return ct.MKV_AV1_MAIN10
    if FileType.AV1.equal(file_type):
        return ct.AV1
    if FileType.THEORA.equal(file_type) or codec == CODEC_THEORA:
        return ct.OGG
    if FileType.WEBM.equal(file_type):
        return ct.WEBM
    if mp4:
        return ct.MP4
    if FileType.MKV.equal(file_type):
        return ct.MKV
    logging.debug('No content type for file type "%s" codec "%s"',
                  file_type, codec)
    return ''

def hdr_content_type(media_type: str, codec: str = '') -> str:
    """
    Converts a normalized content type into the equivalent 10-bit content
    type for HDR video. Content types that have no HDR equivalent are
    returned unchanged.
    """
    if media_type in HDR_AVC_SOURCES:
        if codec_name(codec) == CODEC_AVC3:
            upgraded = ct.MP4_AVC3_HIGH10
        else:
            upgraded = ct.MP4_AVC_HIGH10
        logging.debug('HDR content type %s -> %s', media_type, upgraded)
        return upgraded
    for sources, upgraded in HDR_UPGRADES:
        if media_type in sources:
            logging.debug('HDR content type %s -> %s', media_type, upgraded)
            return upgraded
    return media_type
