"""Shared data types and helpers that save downloaded content."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional, Union

import httpx

from .formats import AudioFormat, CoverFormat

PathLike = Union[str, "os.PathLike[str]"]

_DEFAULT_COVER_TYPE = "image/jpeg"


@dataclass
class Metadata:
    """Tags written into an output audio file."""

    title: str
    artist: str
    album: Optional[str] = None
    album_artist: Optional[str] = None
    composer: Optional[str] = None
    copyright: Optional[str] = None
    creation_time: Optional[str] = None
    date: Optional[str] = None
    disc: Optional[str] = None
    genre: Optional[str] = None
    language: Optional[str] = None
    performer: Optional[str] = None
    publisher: Optional[str] = None
    track: Optional[str] = None

    def as_tags(self) -> dict:
        """Return the set tags in container order: title, artist, then the rest."""
        tags = {"title": self.title, "artist": self.artist}
        for f in fields(self):
            if f.name in tags:
                continue
            value = getattr(self, f.name)
            if value is not None:
                tags[f.name] = value
        return tags


@dataclass
class Artist:
    id: str
    name: str


@dataclass
class Track:
    id: str
    url: str
    title: str
    duration_ms: int
    artists: List[Artist] = field(default_factory=list)
    cover_url: str = ""


@dataclass
class SearchResults:
    tracks: List[Track] = field(default_factory=list)


@dataclass
class AudioStream:
    """An HTTP response carrying audio, and the format of that audio."""

    response: httpx.Response
    format: AudioFormat


async def save_cover(response: httpx.Response, directory: PathLike, filename: str) -> Path:
    """Write a cover image to ``directory``, naming it by its content type."""
    content_type = response.headers.get("content-type", _DEFAULT_COVER_TYPE)
    cover_format = CoverFormat.parse(content_type)
    path = Path(directory) / f"{filename}.{cover_format.extension()}"
    await _save(response, path)
    return path


async def save_audio_stream(
    audio_stream: AudioStream, directory: PathLike, filename: str
) -> Path:
    """Write an audio stream to ``directory`` with the extension of its format."""
    path = Path(directory) / f"{filename}.{audio_stream.format.extension()}"
    await _save(audio_stream.response, path)
    return path


async def _save(response: httpx.Response, path: Path) -> None:
    with path.open("wb") as out:
        async for chunk in response.aiter_bytes():
            out.write(chunk)