"""Rasterizer and PNG encoder for procedurally drawn icons."""

from .canvas import Canvas
from .config import IconConfig, Palette, load_config, parse_config
from .crc import CRC_TABLE, crc32
from .errors import IconError, InvalidConfigError
from .png import PNG_SIGNATURE, encode_png, iter_chunks, png_chunk
from .scene import draw_scene, render_canvas, render_icon, render_icon_to_file

__all__ = [
    "Canvas",
    "IconConfig",
    "Palette",
    "load_config",
    "parse_config",
    "CRC_TABLE",
    "crc32",
    "IconError",
    "InvalidConfigError",
    "PNG_SIGNATURE",
    "encode_png",
    "iter_chunks",
    "png_chunk",
    "draw_scene",
    "render_canvas",
    "render_icon",
    "render_icon_to_file",
]
