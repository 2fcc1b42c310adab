"""Compose a configured scene onto a canvas and encode it as PNG."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable, Optional

from .canvas import Canvas
from .config import (
    CircleOp,
    DrawOp,
    IconConfig,
    Palette,
    PixelOp,
    RectOp,
    RoundRectOp,
    WaveOp,
)
from .png import encode_png

logger = logging.getLogger("iconkit_core.render.scene")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def draw_wave(canvas: Canvas, op: WaveOp, color: tuple[int, int, int]) -> None:
    r, g, b = color
    span = op.x1 - op.x0
    for x in range(max(op.x0, 0), min(op.x1 + 1, canvas.width)):
        y_base = op.y + _round_half_up(op.amplitude * math.sin((x - op.x0) / span * math.pi))
        for y in range(max(y_base, 0), min(y_base + op.thickness, canvas.height)):
            canvas.set_pixel(x, y, r, g, b)


def draw_op(canvas: Canvas, op: DrawOp, palette: Palette) -> None:
    color = palette.resolve(op.color)
    if isinstance(op, PixelOp):
        canvas.set_pixel(op.x, op.y, *color, op.alpha)
    elif isinstance(op, RectOp):
        canvas.fill_rect(op.x, op.y, op.w, op.h, color)
    elif isinstance(op, CircleOp):
        canvas.fill_circle(op.cx, op.cy, op.r, color)
    elif isinstance(op, RoundRectOp):
        canvas.fill_round_rect(op.x, op.y, op.w, op.h, op.r, color)
    elif isinstance(op, WaveOp):
        draw_wave(canvas, op, color)
    else:
        raise TypeError(f"Unsupported draw op: {op!r}")


def draw_scene(canvas: Canvas, ops: Iterable[DrawOp], palette: Palette) -> None:
    """Apply ``ops`` in order; later ops overwrite earlier pixels."""

    for op in ops:
        draw_op(canvas, op, palette)


def render_canvas(config: IconConfig) -> Canvas:
    canvas = Canvas(config.width, config.height)
    draw_scene(canvas, config.scene, config.palette)
    logger.debug("[SCENE] Drew %d ops on %dx%d canvas", len(config.scene), canvas.width, canvas.height)
    return canvas


def render_icon(config: Optional[IconConfig] = None) -> bytes:
    config = config or IconConfig()
    data = encode_png(render_canvas(config))
    logger.info("[SCENE] Rendered icon: %dx%d, %d bytes", config.width, config.height, len(data))
    return data


def render_icon_to_file(out_path: Path, config: Optional[IconConfig] = None) -> tuple[Path, int]:
    data = render_icon(config)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(data)
    logger.info("[SCENE] Icon written: out='%s', bytes=%d", out_path, len(data))
    return out_path, len(data)
