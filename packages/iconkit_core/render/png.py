"""PNG container encoding for a finished canvas.

Output is always 8-bit RGBA, non-interlaced, with filter type 0 on every
scanline and a single IDAT chunk.
"""

from __future__ import annotations

import logging
import struct
import zlib
from typing import Iterator

from .canvas import Canvas
from .crc import crc32

logger = logging.getLogger("iconkit_core.render.png")

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

BIT_DEPTH = 8
COLOR_TYPE_RGBA = 6
COMPRESSION_LEVEL = 9


def png_chunk(tag: bytes, payload: bytes) -> bytes:
    # CRC covers tag + payload, never the length field.
    return (
        struct.pack(">I", len(payload))
        + tag
        + payload
        + struct.pack(">I", crc32(tag + payload))
    )


def ihdr_payload(width: int, height: int) -> bytes:
    return struct.pack(">IIBBBBB", width, height, BIT_DEPTH, COLOR_TYPE_RGBA, 0, 0, 0)


def scanlines(canvas: Canvas) -> bytes:
    raw = bytearray()
    for y in range(canvas.height):
        raw.append(0)  # no filter
        raw.extend(canvas.row_bytes(y))
    return bytes(raw)


def encode_png(canvas: Canvas) -> bytes:
    raw = scanlines(canvas)
    compressed = zlib.compress(raw, level=COMPRESSION_LEVEL)
    logger.debug(
        "[PNG] Compressed %dx%d scanlines: raw=%d, compressed=%d",
        canvas.width, canvas.height, len(raw), len(compressed),
    )
    return b"".join(
        [
            PNG_SIGNATURE,
            png_chunk(b"IHDR", ihdr_payload(canvas.width, canvas.height)),
            png_chunk(b"IDAT", compressed),
            png_chunk(b"IEND", b""),
        ]
    )


def iter_chunks(data: bytes) -> Iterator[tuple[bytes, bytes, int]]:
    """Yield ``(tag, payload, crc)`` for every chunk in a PNG buffer.

    Raises ``ValueError`` for a bad signature, a truncated chunk or a CRC that
    does not match its tag and payload.
    """

    if not data.startswith(PNG_SIGNATURE):
        raise ValueError("Missing PNG signature")
    offset = len(PNG_SIGNATURE)
    while offset < len(data):
        if offset + 8 > len(data):
            raise ValueError(f"Truncated chunk header at offset {offset}")
        length, tag = struct.unpack(">I4s", data[offset : offset + 8])
        end = offset + 8 + length + 4
        if end > len(data):
            raise ValueError(f"Truncated {tag!r} chunk at offset {offset}")
        payload = data[offset + 8 : offset + 8 + length]
        (crc,) = struct.unpack(">I", data[end - 4 : end])
        if crc != crc32(tag + payload):
            raise ValueError(f"CRC mismatch in {tag!r} chunk at offset {offset}")
        yield tag, payload, crc
        offset = end
