#############################################################################
#
#  Project Name        :    Video content type resolution
#
#  Author              :    Alex Ashley
#
#############################################################################
from enum import Enum

class FileType(Enum):
    """
    Container (or elementary stream) formats of video files
    """

    MP4 = 'mp4'
    MOV = 'mov'
    M4V = 'm4v'
    AVC = 'avc'
    HVC = 'hvc'
    HEV = 'hev'
    VVC = 'vvc'
    EVC = 'evc'
    VP8 = 'vp8'
    VP9 = 'vp9'
    AV1 = 'av1'
    THEORA = 'theora'
    WEBM = 'webm'
    MKV = 'mkv'

    @classmethod
    def normalize(cls, file_type: str) -> str:
        """
        Maps the MOV and M4V aliases to MP4, as their content
        can be described using the MP4 content types.
        """
        if cls.MOV.equal(file_type) or cls.M4V.equal(file_type):
            return cls.MP4.value
        return file_type

    def extensions(self) -> tuple[str, ...]:
        return (self.value,) + _EXTRA_EXTENSIONS.get(self.value, ())

    def equal(self, file_type: str | None) -> bool:
        if not file_type:
            return False
        return _strip_extension(file_type) in self.extensions()


_EXTRA_EXTENSIONS: dict[str, tuple[str, ...]] = {
    'mov': ('qt',),
    'theora': ('ogv',),
}

def _strip_extension(name: str) -> str:
    name = name.strip().lower()
    if name.startswith('.'):
        name = name[1:]
    return name
