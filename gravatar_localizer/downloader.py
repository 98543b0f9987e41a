"""Download an avatar image and name it after its magic bytes."""

import requests

from gravatar_localizer.errors import DownloadError, ShortReadError

HEADER_SIZE = 3
CHUNK_SIZE = 8192

JPG_HEADER = b"\xff\xd8\xff"
PNG_HEADER = b"\x89\x50\x4e"


def sniff_extension(header: bytes) -> str:
    if header == JPG_HEADER:
        return ".jpg"
    if header == PNG_HEADER:
        return ".png"

    print(f"Unrecognized image header: {header.hex(' ')}")
    return ""


def read_header(chunks) -> tuple[bytes, bytes]:
    """Pull chunks until the header is complete; returns (header, leftover)."""
    buf = b""
    for chunk in chunks:
        buf += chunk
        if len(buf) >= HEADER_SIZE:
            break

    if len(buf) < HEADER_SIZE:
        raise ShortReadError(f"Expected to read {HEADER_SIZE} bytes but got {len(buf)}")

    return buf[:HEADER_SIZE], buf[HEADER_SIZE:]


def fetch(url: str, base_path: str) -> str:
    """Download url to base_path plus the sniffed extension and return the extension."""
    try:
        with requests.get(url, stream=True) as resp:
            resp.raise_for_status()

            chunks = resp.iter_content(chunk_size=CHUNK_SIZE)
            header, rest = read_header(chunks)
            extension = sniff_extension(header)

            with open(base_path + extension, "wb") as f:
                f.write(header)
                f.write(rest)
                for chunk in chunks:
                    f.write(chunk)
    except requests.RequestException as e:
        raise DownloadError(f"Failed to download {url}: {e}") from e
    except OSError as e:
        raise DownloadError(f"Failed to save {url}: {e}") from e

    return extension
