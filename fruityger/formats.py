"""Audio and cover image formats."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .errors import ErrorKind, FruitygerError


class AudioCodec(enum.Enum):
    """Audio codec of a downloaded stream."""

    FLAC = "flac"
    MP3 = "mp3"
    AAC = "aac"


_AUDIO_EXTENSIONS = {
    AudioCodec.FLAC: "flac",
    AudioCodec.MP3: "mp3",
    AudioCodec.AAC: "m4a",
}

_AUDIO_MIME_TYPES = {
    AudioCodec.FLAC: "audio/flac",
    AudioCodec.MP3: "audio/mpeg",
    AudioCodec.AAC: "audio/aac",
}


@dataclass(frozen=True)
class AudioFormat:
    """An audio codec together with its bitrate, where the codec has one."""

    codec: AudioCodec
    bitrate: Optional[int] = None

    @classmethod
    def flac(cls) -> "AudioFormat":
        return cls(AudioCodec.FLAC)

    @classmethod
    def mp3(cls, bitrate: int) -> "AudioFormat":
        return cls(AudioCodec.MP3, bitrate)

    @classmethod
    def aac(cls, bitrate: int) -> "AudioFormat":
        return cls(AudioCodec.AAC, bitrate)

    def extension(self) -> str:
        return _AUDIO_EXTENSIONS[self.codec]

    def mime_type(self) -> str:
        return _AUDIO_MIME_TYPES[self.codec]


class CoverFormat(enum.Enum):
    """Image format of a cover picture."""

    PNG = "image/png"
    JPEG = "image/jpeg"

    def extension(self) -> str:
        return "png" if self is CoverFormat.PNG else "jpg"

    def mime_type(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "CoverFormat":
        """Recognise a cover format from a MIME type or a file name."""
        for member in cls:
            if member.value == value:
                return member
        if value.endswith(".jpg"):
            return cls.JPEG
        if value.endswith(".png"):
            return cls.PNG
        raise FruitygerError(ErrorKind.OTHER, "unknown cover format")