import httpx
import pytest

from fruityger.errors import FruitygerError
from fruityger.formats import AudioFormat
from fruityger.models import (
    Artist,
    AudioStream,
    Metadata,
    SearchResults,
    Track,
    save_audio_stream,
    save_cover,
)


def test_metadata_from_remux_case_has_only_required_tags():
    metadata = Metadata(title="remux test", artist="fruityger")
    assert metadata.as_tags() == {"title": "remux test", "artist": "fruityger"}


def test_metadata_tags_keep_order_and_skip_unset():
    metadata = Metadata(
        title="remux test",
        artist="fruityger",
        track="3",
        album="Periphery",
        genre="metal",
    )
    tags = metadata.as_tags()
    assert list(tags) == ["title", "artist", "album", "genre", "track"]
    assert tags["album"] == "Periphery"
    assert tags["track"] == "3"


def test_metadata_all_fields_present():
    values = {
        name: name.upper()
        for name in (
            "album",
            "album_artist",
            "composer",
            "copyright",
            "creation_time",
            "date",
            "disc",
            "genre",
            "language",
            "performer",
            "publisher",
            "track",
        )
    }
    tags = Metadata(title="t", artist="a", **values).as_tags()
    assert list(tags)[:2] == ["title", "artist"]
    assert list(tags)[2:] == list(values)
    assert len(tags) == 14


def test_search_results_hold_tracks():
    track = Track(
        id="1",
        url="https://open.qobuz.com/track/1",
        title="Scarlet",
        duration_ms=4000,
        artists=[Artist(id="7", name="Periphery")],
        cover_url="https://example.com/cover.jpg",
    )
    results = SearchResults(tracks=[track])
    assert results.tracks[0].artists[0].name == "Periphery"
    assert SearchResults().tracks == []


@pytest.mark.asyncio
async def test_save_audio_stream_writes_body(tmp_path):
    body = b"fLaC" + bytes(range(64))
    stream = AudioStream(response=httpx.Response(200, content=body), format=AudioFormat.flac())
    path = await save_audio_stream(stream, tmp_path, "hifi_test")
    assert path == tmp_path / "hifi_test.flac"
    assert path.read_bytes() == body


@pytest.mark.asyncio
async def test_save_audio_stream_uses_format_extension(tmp_path):
    stream = AudioStream(response=httpx.Response(200, content=b"x"), format=AudioFormat.aac(256))
    path = await save_audio_stream(stream, str(tmp_path), "yandex_test")
    assert path.name == "yandex_test.m4a"
    assert path.read_bytes() == b"x"


@pytest.mark.asyncio
async def test_save_cover_png(tmp_path):
    response = httpx.Response(200, headers={"content-type": "image/png"}, content=b"png-data")
    path = await save_cover(response, tmp_path, "cover")
    assert path == tmp_path / "cover.png"
    assert path.read_bytes() == b"png-data"


@pytest.mark.asyncio
async def test_save_cover_defaults_to_jpeg(tmp_path):
    response = httpx.Response(200, content=b"jpeg-data")
    path = await save_cover(response, tmp_path, "cover")
    assert path == tmp_path / "cover.jpg"
    assert path.read_bytes() == b"jpeg-data"


@pytest.mark.asyncio
async def test_save_cover_unknown_type_raises(tmp_path):
    response = httpx.Response(200, headers={"content-type": "image/gif"}, content=b"gif")
    with pytest.raises(FruitygerError):
        await save_cover(response, tmp_path, "cover")
    assert list(tmp_path.iterdir()) == []