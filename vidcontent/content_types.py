#############################################################################
#
#  Project Name        :    Video content type resolution
#
#  Author              :    Alex Ashley
#
#############################################################################

BINARY = 'application/octet-stream'

# MPEG-4 part 14
MP4 = 'video/mp4'
MP4_AVC = f'{MP4}; codecs="avc1"'
MP4_AVC_BASELINE = f'{MP4}; codecs="avc1.420028"'
MP4_AVC_MAIN = f'{MP4}; codecs="avc1.4d0028"'
MP4_AVC_HIGH = f'{MP4}; codecs="avc1.640028"'
MP4_AVC_HIGH10 = f'{MP4}; codecs="avc1.6e0028"'
MP4_AVC3 = f'{MP4}; codecs="avc3"'
MP4_AVC3_MAIN = f'{MP4}; codecs="avc3.4d0028"'
MP4_AVC3_HIGH = f'{MP4}; codecs="avc3.640028"'
MP4_AVC3_HIGH10 = f'{MP4}; codecs="avc3.6e0028"'
MP4_HVC = f'{MP4}; codecs="hvc1"'
MP4_HVC_MAIN = f'{MP4}; codecs="hvc1.1.6.L93.B0"'
MP4_HVC_MAIN10 = f'{MP4}; codecs="hvc1.2.4.L153.B0"'
MP4_HEV = f'{MP4}; codecs="hev1"'
MP4_HEV_MAIN = f'{MP4}; codecs="hev1.1.6.L93.B0"'
MP4_HEV_MAIN10 = f'{MP4}; codecs="hev1.2.4.L153.B0"'
MP4_VVC = f'{MP4}; codecs="vvc1"'
MP4_EVC = f'{MP4}; codecs="evc1"'
MP4_AV1 = f'{MP4}; codecs="av01"'
MP4_AV1_MAIN = f'{MP4}; codecs="av01.0.08M.08"'
MP4_AV1_MAIN10 = f'{MP4}; codecs="av01.0.08M.10"'

# Apple QuickTime
MOV = 'video/quicktime'
MOV_AVC = f'{MOV}; codecs="avc1"'
MOV_AVC_MAIN = f'{MOV}; codecs="avc1.4d0028"'
MOV_AVC_HIGH = f'{MOV}; codecs="avc1.640028"'
MOV_HVC = f'{MOV}; codecs="hvc1"'
MOV_AV1 = f'{MOV}; codecs="av01"'

AV1 = 'video/av1'

WEBM = 'video/webm'
WEBM_VP8 = f'{WEBM}; codecs="vp8"'
WEBM_VP9 = f'{WEBM}; codecs="vp9"'
WEBM_AV1 = f'{WEBM}; codecs="av01"'
WEBM_AV1_MAIN = f'{WEBM}; codecs="av01.0.08M.08"'
WEBM_AV1_MAIN10 = f'{WEBM}; codecs="av01.0.08M.10"'

MKV = 'video/x-matroska'
MKV_AV1 = f'{MKV}; codecs="av01"'
MKV_AV1_MAIN = f'{MKV}; codecs="av01.0.08M.08"'
MKV_AV1_MAIN10 = f'{MKV}; codecs="av01.0.08M.10"'

OGG = 'video/ogg'
