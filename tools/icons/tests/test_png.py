#!/usr/bin/env python3

from __future__ import annotations

import io
import struct
import unittest
import zlib

from PIL import Image

from packages.iconkit_core.render.canvas import Canvas
from packages.iconkit_core.render.png import (
    PNG_SIGNATURE,
    encode_png,
    iter_chunks,
    png_chunk,
    scanlines,
)


def decode(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


class PngEncoderTests(unittest.TestCase):
    def test_iend_chunk_bytes(self) -> None:
        self.assertEqual(png_chunk(b"IEND", b""), bytes.fromhex("0000000049454e44ae426082"))

    def test_chunk_layout(self) -> None:
        chunk = png_chunk(b"tEXt", b"abc")
        self.assertEqual(chunk[:4], struct.pack(">I", 3))
        self.assertEqual(chunk[4:8], b"tEXt")
        self.assertEqual(chunk[8:11], b"abc")
        self.assertEqual(chunk[11:], struct.pack(">I", zlib.crc32(b"tEXtabc") & 0xFFFFFFFF))

    def test_file_structure(self) -> None:
        canvas = Canvas(3, 2)
        data = encode_png(canvas)
        self.assertTrue(data.startswith(PNG_SIGNATURE))

        chunks = list(iter_chunks(data))
        self.assertEqual([tag for tag, _, _ in chunks], [b"IHDR", b"IDAT", b"IEND"])

        ihdr = chunks[0][1]
        self.assertEqual(ihdr, struct.pack(">IIBBBBB", 3, 2, 8, 6, 0, 0, 0))
        self.assertEqual(chunks[2][1], b"")
        self.assertEqual(chunks[2][2], 0xAE426082)

    def test_idat_holds_unfiltered_scanlines(self) -> None:
        canvas = Canvas(3, 2)
        canvas.set_pixel(2, 1, 5, 6, 7, 8)
        chunks = dict((tag, payload) for tag, payload, _ in iter_chunks(encode_png(canvas)))
        raw = zlib.decompress(chunks[b"IDAT"])
        self.assertEqual(raw, scanlines(canvas))
        self.assertEqual(len(raw), 2 * (1 + 3 * 4))
        self.assertEqual(raw[0], 0)
        self.assertEqual(raw[13], 0)
        self.assertEqual(raw[-4:], bytes([5, 6, 7, 8]))

    def test_solid_fill_round_trip(self) -> None:
        canvas = Canvas(4, 4)
        canvas.fill_rect(0, 0, 4, 4, (10, 20, 30))
        image = decode(encode_png(canvas))
        self.assertEqual(image.size, (4, 4))
        self.assertEqual(image.mode, "RGBA")
        for y in range(4):
            for x in range(4):
                self.assertEqual(image.getpixel((x, y)), (10, 20, 30, 255))

    def test_round_trip_is_bit_exact(self) -> None:
        canvas = Canvas(13, 7)
        canvas.fill_rect(1, 1, 8, 4, (250, 0, 120))
        canvas.fill_circle(9, 3, 3, (1, 2, 3))
        canvas.set_pixel(0, 6, 40, 50, 60, 70)
        image = decode(encode_png(canvas))
        self.assertEqual(image.size, (13, 7))
        self.assertEqual(image.tobytes(), bytes(canvas.pixels))

    def test_encoding_is_deterministic(self) -> None:
        canvas = Canvas(8, 8)
        canvas.fill_circle(4, 4, 3, (9, 9, 9))
        self.assertEqual(encode_png(canvas), encode_png(canvas))

    def test_iter_chunks_rejects_bad_signature(self) -> None:
        with self.assertRaises(ValueError):
            list(iter_chunks(b"GIF89a" + bytes(20)))

    def test_iter_chunks_rejects_corrupt_crc(self) -> None:
        data = bytearray(encode_png(Canvas(2, 2)))
        # first IHDR payload byte
        data[len(PNG_SIGNATURE) + 8] ^= 0xFF
        with self.assertRaises(ValueError):
            list(iter_chunks(bytes(data)))

    def test_iter_chunks_rejects_truncation(self) -> None:
        data = encode_png(Canvas(2, 2))
        with self.assertRaises(ValueError):
            list(iter_chunks(data[:-3]))


if __name__ == "__main__":
    unittest.main()
