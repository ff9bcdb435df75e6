# fruityger

An asynchronous client library for the Yandex Music service. It searches
the catalogue for tracks and downloads their audio and cover art to disk.

## Installation

```
pip install fruityger
```

## Usage

```python
import asyncio
from pathlib import Path

import httpx

from fruityger.models import save_audio_stream, save_cover
from fruityger.yandex import Config, Yandex


async def main():
    config = Config.from_env()          # reads YANDEX_TOKEN
    async with Yandex(config) as yandex:
        results = await yandex.search("periphery scarlet", 0)
        track = results.tracks[0]

        stream = await yandex.get_stream(track.url)
        try:
            audio_path = await save_audio_stream(stream, Path("/tmp"), "track")
        finally:
            await stream.response.aclose()

    async with httpx.AsyncClient() as client:
        async with client.stream("GET", track.cover_url) as response:
            cover_path = await save_cover(response, Path("/tmp"), "cover")

    print(audio_path, cover_path)


asyncio.run(main())
```

`Config` can also be built directly: `Config(token="token")`. `Yandex` takes
an optional `httpx.AsyncClient` as its second argument; a client passed in is
not closed by `aclose()`, one that `Yandex` created itself is.

### `fruityger.yandex`

- `Yandex.search(query, page=0)` returns a `SearchResults` for one page of
  track results.
- `Yandex.get_stream(url)` takes a track URL of the form
  `https://music.yandex.ru/album/<album id>/track/<track id>` and returns an
  `AudioStream` whose response is opened in streaming mode. Lossless audio is
  requested; the service picks among FLAC, AAC and MP3.
- `sign_file_info_request(timestamp, track_id, quality, codecs, transports)`
  computes the request signature the service expects.

### `fruityger.models`

`SearchResults` holds `Track` objects, each with `id`, `url`, `title`,
`duration_ms`, a list of `Artist` objects (`id`, `name`) and `cover_url`.
`AudioStream` pairs an `httpx.Response` with the `AudioFormat` of its audio.

- `save_audio_stream(audio_stream, directory, filename)` writes the audio to
  `directory/filename.<extension>` and returns the path.
- `save_cover(response, directory, filename)` writes a cover image, choosing
  the extension from the response's `content-type` (JPEG when absent), and
  returns the path.

`Metadata` describes tags for a track (`title`, `artist`, and optional
`album`, `album_artist`, `composer`, `copyright`, `creation_time`, `date`,
`disc`, `genre`, `language`, `performer`, `publisher`, `track`);
`Metadata.as_tags()` returns the set tags as a dict, title and artist first.

### `fruityger.formats`

`AudioFormat.flac()`, `AudioFormat.mp3(bitrate)` and `AudioFormat.aac(bitrate)`
describe downloaded audio and give its file `extension()` (`flac`, `mp3`,
`m4a`) and `mime_type()`. `CoverFormat.parse(value)` recognises a cover image
from a MIME type (`image/jpeg`, `image/png`) or a file name ending in `.jpg`
or `.png`.

## Errors

Failures raise `fruityger.errors.FruitygerError`. Its `kind` is an
`ErrorKind`: `SERVICE_ERROR`, `REMUX_ERROR`, `INVALID_URL_ERROR`,
`NO_AVAILABLE_MODULES`, `UNSUPPORTED_CODEC_ERROR` or `OTHER`. A malformed
track URL raises `INVALID_URL_ERROR`, a codec the package does not know raises
`UNSUPPORTED_CODEC_ERROR`, and network failures, bad responses, an unknown
cover format or a missing `YANDEX_TOKEN` raise `OTHER`.

## What it does not do

- Yandex Music is the only service the package talks to.
- It does not write tags or cover art into audio files. `Metadata` only
  collects the tags; the audio is saved as the service sends it.
- There is no command-line program; the package is used as a library.

## Tests

```
pip install -e ".[test]"
pytest
```