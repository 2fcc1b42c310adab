"""Icon configuration: canvas size, palette and the ordered scene."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .canvas import Color
from .errors import InvalidConfigError

logger = logging.getLogger("iconkit_core.render.config")

MAX_DIMENSION = 4096
MAX_COORD = 2 * MAX_DIMENSION
DEFAULT_SIZE = 128

Channel = Annotated[int, Field(ge=0, le=255)]
Coord = Annotated[int, Field(ge=-MAX_COORD, le=MAX_COORD)]
Extent = Annotated[int, Field(ge=-MAX_COORD, le=MAX_COORD)]
Radius = Annotated[int, Field(ge=0, le=MAX_COORD)]
RGB = tuple[Channel, Channel, Channel]
PaletteName = Literal["background", "accent", "highlight", "shadow"]
ColorRef = Union[PaletteName, RGB]


class Palette(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    background: RGB = (30, 41, 59)
    accent: RGB = (56, 189, 248)
    highlight: RGB = (255, 255, 255)
    shadow: RGB = (15, 23, 42)

    def resolve(self, ref: ColorRef) -> Color:
        if isinstance(ref, str):
            return tuple(getattr(self, ref))
        return tuple(ref)


class PixelOp(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["pixel"]
    x: Coord
    y: Coord
    color: ColorRef
    alpha: Channel = 255


class RectOp(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["rect"]
    x: Coord
    y: Coord
    w: Extent
    h: Extent
    color: ColorRef


class CircleOp(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["circle"]
    cx: Coord
    cy: Coord
    r: Radius
    color: ColorRef


class RoundRectOp(BaseModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["round_rect"]
    x: Coord
    y: Coord
    w: Extent
    h: Extent
    r: Radius
    color: ColorRef


class WaveOp(BaseModel):
    """Half a sine period stroked from ``x0`` to ``x1`` inclusive."""

    model_config = ConfigDict(extra="forbid")

    op: Literal["wave"]
    x0: Coord
    x1: Coord
    y: Coord
    amplitude: float = Field(default=2.0, ge=-MAX_COORD, le=MAX_COORD, allow_inf_nan=False)
    thickness: int = Field(default=1, ge=1, le=MAX_COORD)
    color: ColorRef

    @model_validator(mode="after")
    def _check_span(self) -> "WaveOp":
        if self.x1 <= self.x0:
            raise ValueError("wave requires x1 > x0")
        return self


DrawOp = Annotated[
    Union[PixelOp, RectOp, CircleOp, RoundRectOp, WaveOp],
    Field(discriminator="op"),
]


ROBOT_SCENE: list[dict[str, Any]] = [
    # frame
    {"op": "round_rect", "x": 0, "y": 0, "w": 128, "h": 128, "r": 16, "color": "background"},
    # head and face
    {"op": "round_rect", "x": 30, "y": 22, "w": 68, "h": 56, "r": 10, "color": "accent"},
    {"op": "round_rect", "x": 36, "y": 28, "w": 56, "h": 44, "r": 6, "color": "shadow"},
    {"op": "circle", "cx": 52, "cy": 46, "r": 7, "color": "accent"},
    {"op": "circle", "cx": 76, "cy": 46, "r": 7, "color": "accent"},
    {"op": "circle", "cx": 50, "cy": 44, "r": 3, "color": "highlight"},
    {"op": "circle", "cx": 74, "cy": 44, "r": 3, "color": "highlight"},
    {"op": "wave", "x0": 48, "x1": 80, "y": 58, "amplitude": 2, "thickness": 2, "color": "accent"},
    # antenna
    {"op": "rect", "x": 62, "y": 10, "w": 4, "h": 14, "color": "accent"},
    {"op": "circle", "cx": 64, "cy": 8, "r": 5, "color": "accent"},
    {"op": "circle", "cx": 64, "cy": 8, "r": 3, "color": "highlight"},
    # body
    {"op": "round_rect", "x": 38, "y": 82, "w": 52, "h": 28, "r": 6, "color": "accent"},
    {"op": "round_rect", "x": 42, "y": 86, "w": 44, "h": 20, "r": 4, "color": "shadow"},
    {"op": "rect", "x": 50, "y": 90, "w": 28, "h": 2, "color": "accent"},
    {"op": "rect", "x": 50, "y": 95, "w": 28, "h": 2, "color": "accent"},
    {"op": "rect", "x": 50, "y": 100, "w": 28, "h": 2, "color": "accent"},
]


class IconConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=DEFAULT_SIZE, gt=0, le=MAX_DIMENSION)
    height: int = Field(default=DEFAULT_SIZE, gt=0, le=MAX_DIMENSION)
    palette: Palette = Field(default_factory=Palette)
    scene: list[DrawOp] = Field(default_factory=lambda: list(ROBOT_SCENE), validate_default=True)


def parse_config(data: Optional[dict[str, Any]] = None) -> IconConfig:
    """Validate raw configuration data, raising ``InvalidConfigError`` on failure."""

    try:
        config = IconConfig.model_validate(data or {})
    except ValidationError as exc:
        logger.warning("[CONFIG] Rejected icon config: %d errors", exc.error_count())
        raise InvalidConfigError(
            f"Invalid icon config: {exc.error_count()} validation errors",
            details=exc.errors(include_url=False, include_context=False),
        ) from exc
    logger.debug(
        "[CONFIG] Parsed icon config: %dx%d, %d ops",
        config.width, config.height, len(config.scene),
    )
    return config


def load_config(path: Path) -> IconConfig:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidConfigError(f"Unreadable config JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidConfigError(f"Config in {path} must be a JSON object")
    return parse_config(data)
