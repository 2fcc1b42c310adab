"""Icon rendering endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import Response

from packages.iconkit_core.render.config import IconConfig
from packages.iconkit_core.render.png import iter_chunks
from packages.iconkit_core.render.scene import render_icon

logger = logging.getLogger("iconkit_api.icons")

router = APIRouter(prefix="/api/v1/icons", tags=["icons"])

PNG_MEDIA_TYPE = "image/png"


@router.get("/default.png")
def default_icon() -> Response:
    logger.info("[ICONS] Default icon request")
    return Response(content=render_icon(), media_type=PNG_MEDIA_TYPE)


@router.post("/render")
def render_icon_inline(config: IconConfig) -> Response:
    logger.info("[ICONS] Inline render request: %dx%d, %d ops", config.width, config.height, len(config.scene))
    return Response(content=render_icon(config), media_type=PNG_MEDIA_TYPE)


@router.post("/inspect")
def inspect_icon(config: IconConfig) -> dict[str, Any]:
    data = render_icon(config)
    chunks = [
        {"type": tag.decode("ascii"), "length": len(payload), "crc": crc}
        for tag, payload, crc in iter_chunks(data)
    ]
    logger.info("[ICONS] Inspect complete: bytes=%d, chunks=%d", len(data), len(chunks))
    return {
        "ok": True,
        "width": config.width,
        "height": config.height,
        "bytes": len(data),
        "chunks": chunks,
    }
