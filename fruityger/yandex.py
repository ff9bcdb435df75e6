"""Client for the Yandex Music streaming service."""

from __future__ import annotations

import base64
import hashlib
import hmac
import os
import time
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
from urllib.parse import urlsplit

import httpx

from .errors import ErrorKind, FruitygerError
from .formats import AudioFormat
from .models import Artist, AudioStream, SearchResults, Track

_API_ROOT = "https://api.music.yandex.net"
_SIGN_KEY = b"kzqU4XhfCaY6B6JTHODeq5"
_CLIENT_HEADERS = {
    "x-yandex-music-client": "YandexMusicDesktopAppWindows/5.18.2",
    "user-agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) YandexMusic/5.18.2 Chrome/122.0.6261.156 "
        "Electron/29.4.6 Safari/537.36"
    ),
}
_QUALITY = "lossless"
_CODECS = "flac,flac-mp4,aac,aac-mp4,mp3"
_TRANSPORTS = "raw"
_U64_LIMIT = 2**64
_U16_LIMIT = 2**16


@dataclass(frozen=True)
class Config:
    """Credentials for the Yandex Music API."""

    token: str

    @classmethod
    def from_env(cls) -> "Config":
        """Read the OAuth token from the ``YANDEX_TOKEN`` environment variable."""
        token = os.environ.get("YANDEX_TOKEN")
        if token is None:
            raise FruitygerError(ErrorKind.OTHER, "environment variable not found")
        return cls(token=token)


def sign_file_info_request(
    timestamp: Any, track_id: Any, quality: str, codecs: str, transports: str
) -> str:
    """Return the HMAC-SHA256 signature of a ``get-file-info`` call, base64 without padding."""
    message = (
        f"{timestamp}{track_id}{quality}"
        f"{codecs.replace(',', '')}{transports.replace(',', '')}"
    )
    digest = hmac.new(_SIGN_KEY, message.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii").rstrip("=")


def _path_segment(url: str, index: int) -> str:
    parts = urlsplit(url)
    if not parts.scheme:
        raise FruitygerError(ErrorKind.OTHER, "relative URL without a base")
    path = parts.path
    if not parts.netloc and not path.startswith("/"):
        raise FruitygerError(ErrorKind.INVALID_URL_ERROR)
    segments = path[1:].split("/") if path.startswith("/") else [""]
    if index >= len(segments):
        raise FruitygerError(ErrorKind.INVALID_URL_ERROR)
    return segments[index]


def _track_id(url: str) -> int:
    segment = _path_segment(url, 3)
    digits = segment[1:] if segment.startswith("+") else segment
    if not digits or not digits.isascii() or not digits.isdigit():
        raise FruitygerError(ErrorKind.INVALID_URL_ERROR)
    value = int(digits)
    if value >= _U64_LIMIT:
        raise FruitygerError(ErrorKind.INVALID_URL_ERROR)
    return value


def _expect(value: Any, kind: type) -> Any:
    if isinstance(value, bool) and kind is not bool:
        raise TypeError(f"expected {kind.__name__}")
    if not isinstance(value, kind):
        raise TypeError(f"expected {kind.__name__}")
    return value


def _unsigned(value: Any, limit: int) -> int:
    number = _expect(value, int)
    if not 0 <= number < limit:
        raise ValueError("integer out of range")
    return number


def _artist(item: dict) -> Artist:
    return Artist(
        id=str(_unsigned(item["id"], _U64_LIMIT)),
        name=_expect(item["name"], str),
    )


def _track(item: dict) -> Track:
    track_id = _unsigned(item["id"], _U64_LIMIT)
    albums = _expect(item["albums"], list)
    album_ids = [_unsigned(album["id"], _U64_LIMIT) for album in albums]
    cover_uri = _expect(item["coverUri"], str)
    return Track(
        id=str(track_id),
        url=f"https://music.yandex.ru/album/{album_ids[0]}/track/{track_id}",
        title=_expect(item["title"], str),
        duration_ms=_unsigned(item["durationMs"], _U64_LIMIT),
        artists=[_artist(artist) for artist in _expect(item["artists"], list)],
        cover_url=f"https://{cover_uri.replace('%%', 'orig')}",
    )


def _search_results(payload: Any) -> SearchResults:
    results = _expect(payload["result"]["tracks"]["results"], list)
    return SearchResults(tracks=[_track(item) for item in results])


def _download_info(payload: Any) -> Tuple[str, int, str]:
    info = payload["result"]["downloadInfo"]
    return (
        _expect(info["codec"], str),
        _unsigned(info["bitrate"], _U16_LIMIT),
        _expect(info["url"], str),
    )


def _parse(payload: Any, parse):
    try:
        return parse(payload)
    except (KeyError, TypeError, ValueError, IndexError) as exc:
        raise FruitygerError(ErrorKind.OTHER, "unexpected response from service") from exc


class Yandex:
    """Searches the Yandex Music catalogue and opens audio streams."""

    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None) -> None:
        self.config = config
        self._owns_client = client is None
        self._client = httpx.AsyncClient() if client is None else client

    async def __aenter__(self) -> "Yandex":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this object created it."""
        if self._owns_client:
            await self._client.aclose()

    def _api_request(self, endpoint: str, params: List[Tuple[str, str]]) -> httpx.Request:
        return self._client.build_request(
            "GET",
            f"{_API_ROOT}{endpoint}",
            params=params,
            headers={**_CLIENT_HEADERS, "authorization": f"OAuth {self.config.token}"},
        )

    async def _send(self, request: httpx.Request, stream: bool = False) -> httpx.Response:
        try:
            return await self._client.send(request, stream=stream, follow_redirects=False)
        except httpx.HTTPError as exc:
            raise FruitygerError(ErrorKind.OTHER, str(exc)) from exc

    async def _api_json(self, request: httpx.Request) -> Any:
        response = await self._send(request)
        try:
            return response.json()
        except ValueError as exc:
            raise FruitygerError(ErrorKind.OTHER, f"invalid JSON: {exc}") from exc

    async def search(self, query: str, page: int = 0) -> SearchResults:
        """Search for tracks on the given result page."""
        payload = await self._api_json(
            self._api_request(
                "/search",
                [("text", query), ("type", "track"), ("page", str(page))],
            )
        )
        return _parse(payload, _search_results)

    async def get_stream(self, url: str) -> AudioStream:
        """Open a stream of the track that ``url`` points to, in the best codec offered."""
        track_id = str(_track_id(url))
        timestamp = str(int(time.time()))
        signature = sign_file_info_request(
            timestamp, track_id, _QUALITY, _CODECS, _TRANSPORTS
        )
        payload = await self._api_json(
            self._api_request(
                "/get-file-info",
                [
                    ("ts", timestamp),
                    ("trackId", track_id),
                    ("quality", _QUALITY),
                    ("codecs", _CODECS),
                    ("transports", _TRANSPORTS),
                    ("sign", signature),
                ],
            )
        )
        codec, bitrate, file_url = _parse(payload, _download_info)

        if codec == "mp3":
            audio_format = AudioFormat.mp3(bitrate)
        elif codec == "aac-mp4":
            audio_format = AudioFormat.aac(bitrate)
        elif codec == "flac-mp4":
            audio_format = AudioFormat.flac()
        else:
            raise FruitygerError(ErrorKind.UNSUPPORTED_CODEC_ERROR)

        download = self._client.build_request("GET", file_url, headers=_CLIENT_HEADERS)
        response = await self._send(download, stream=True)
        return AudioStream(response=response, format=audio_format)