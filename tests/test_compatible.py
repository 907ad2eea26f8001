#############################################################################
#
#  Project Name        :    Video content type resolution
#
#  Author              :    Alex Ashley
#
#############################################################################

import unittest

from vidcontent import content_types as ct
from vidcontent.compatible import compatible, primary_codec

class CompatibleTests(unittest.TestCase):
    def test_empty_content_types(self) -> None:
        for other in ['', ct.MP4, ct.MP4_AVC_HIGH, 'invalid']:
            self.assertFalse(compatible('', other))
            self.assertFalse(compatible(other, ''))

    def test_reflexive(self) -> None:
        for name in dir(ct):
            if not name.isupper():
                continue
            value = getattr(ct, name)
            self.assertTrue(compatible(value, value), msg=name)
            self.assertTrue(compatible(value, value.upper()), msg=name)

    def test_compatible(self) -> None:
        test_cases = [
            (ct.MP4, 'VIDEO/MP4', True),
            (ct.MP4, ' video/mp4 ', True),
            (ct.MP4, ct.WEBM, False),
            (ct.MKV, ct.MP4, False),
            ('video/mp4; codecs="avc1.640028"', 'video/mp4; codecs="avc1.4d401f"', True),
            ('video/mp4; codecs="avc1.640028"', 'video/mp4; codecs="hvc1.1.6.L93.B0"', False),
            ('video/mp4; codecs="avc1.640028"', 'video/webm; codecs="avc1.640028"', False),
            ('video/mp4; codecs="AVC1.640028"', 'video/mp4;codecs=avc1.4D401F', True),
            ('video/mp4; codecs="avc1.640028, mp4a.40.2"', 'video/mp4; codecs="avc1.4d401f"', True),
            ('video/mp4; codecs="avc1.640028,mp4a.40.2"',
             'video/mp4; codecs="avc1.640028, mp4a.40.2"', True),
            ('video/mp4; codecs="mp4a.40.2, avc1.640028"', 'video/mp4; codecs="avc1.640028"', False),
            (ct.MP4_HVC_MAIN, ct.MP4_HVC_MAIN10, True),
            (ct.MP4_HVC_MAIN10, ct.MP4_HEV_MAIN10, False),
            (ct.MP4_AVC_MAIN, ct.MP4_AVC3_MAIN, False),
            (ct.MP4_AV1_MAIN, ct.MP4_AV1_MAIN10, True),
            (ct.WEBM_VP8, ct.WEBM_VP9, False),
            (ct.MP4, ct.MP4_AVC, False),
            ('video/mp4; profiles="isom"', ct.MP4, True),
            ('video/mp4; profiles="isom"', 'video/mp4; profiles="iso6"', True),
            ('video/mp4', 'video/mp4/avc', False),
            ('invalid', ct.MP4, False),
            ('video/mp4;\n codecs="avc1"', 'video/mp4; codecs="avc1.640028"', False),
            ('video/mp4; codecs="avc1"\r\n', 'video/mp4; codecs="avc1.640028"', True),
            ('video/mp4; codecs = "avc1.640028"', 'video/mp4; codecs = "hvc1.1.6.L93.B0"', False),
            ('video/mp4; codecs = "avc1.640028"', 'video/mp4; codecs="avc1.4d401f"', True),
            ('video/mp4; codecs="avc1.640028"; codecs="hvc1.2.4.L153.B0"',
             'video/mp4; codecs="hvc1.1.6.L93.B0"', False),
            ('video/mp4; codecs=avc1.640028, mp4a.40.2', 'video/mp4; codecs="hvc1.1.6.L93.B0"', False),
        ]
        for type1, type2, expected in test_cases:
            msg = f'"{type1}" "{type2}"'
            self.assertEqual(expected, compatible(type1, type2), msg=msg)
            self.assertEqual(expected, compatible(type2, type1), msg=msg)

    def test_primary_codec(self) -> None:
        test_cases = [
            ('avc1.640028', 'avc1'),
            (' avc1.640028 , mp4a.40.2', 'avc1'),
            ('hvc1.2.4.L153.B0', 'hvc1'),
            ('vp9', 'vp9'),
            (' ', ''),
            ('', ''),
        ]
        for codecs, expected in test_cases:
            self.assertEqual(expected, primary_codec(codecs))


if __name__ == "__main__":
    unittest.main()
