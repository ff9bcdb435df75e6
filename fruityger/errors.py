"""Error type shared by every part of the package."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Broad category of a failure."""

    SERVICE_ERROR = "service_error"
    REMUX_ERROR = "remux_error"
    INVALID_URL_ERROR = "invalid_url_error"
    NO_AVAILABLE_MODULES = "no_available_modules"
    UNSUPPORTED_CODEC_ERROR = "unsupported_codec_error"
    OTHER = "other"


class FruitygerError(Exception):
    """An error raised by the package, tagged with an :class:`ErrorKind`."""

    def __init__(self, kind: ErrorKind = ErrorKind.OTHER, message: str = "") -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message or self.kind.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind!r}, {self.message!r})"