"""RGBA pixel canvas with painter's-order fill primitives.

Every draw call overwrites the pixels it touches, alpha included. Nothing is
blended, so the final image depends on the order of calls.
"""

from __future__ import annotations

from .errors import InvalidConfigError

Color = tuple[int, int, int]
Pixel = tuple[int, int, int, int]


class Canvas:
    def __init__(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise InvalidConfigError(
                f"Canvas dimensions must be positive, got {width}x{height}",
                error_code="invalid_dimensions",
            )
        self.width = int(width)
        self.height = int(height)
        self.pixels = bytearray(self.width * self.height * 4)

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int, a: int = 255) -> None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return
        i = (y * self.width + x) * 4
        self.pixels[i : i + 4] = bytes((r, g, b, a))

    def get_pixel(self, x: int, y: int) -> Pixel:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        i = (y * self.width + x) * 4
        r, g, b, a = self.pixels[i : i + 4]
        return (r, g, b, a)

    def row_bytes(self, y: int) -> bytes:
        stride = self.width * 4
        return bytes(self.pixels[y * stride : (y + 1) * stride])

    def _clip_x(self, x0: int, x1: int) -> range:
        # half-open [x0, x1) limited to the canvas columns
        return range(max(x0, 0), min(x1, self.width))

    def _clip_y(self, y0: int, y1: int) -> range:
        return range(max(y0, 0), min(y1, self.height))

    def fill_rect(self, x0: int, y0: int, w: int, h: int, color: Color) -> None:
        r, g, b = color
        for y in self._clip_y(y0, y0 + h):
            for x in self._clip_x(x0, x0 + w):
                self.set_pixel(x, y, r, g, b)

    def fill_circle(self, cx: int, cy: int, radius: int, color: Color) -> None:
        r, g, b = color
        limit = radius * radius
        for y in self._clip_y(cy - radius, cy + radius + 1):
            for x in self._clip_x(cx - radius, cx + radius + 1):
                dx = x - cx
                dy = y - cy
                if dx * dx + dy * dy <= limit:
                    self.set_pixel(x, y, r, g, b)

    def fill_round_rect(self, x0: int, y0: int, w: int, h: int, radius: int, color: Color) -> None:
        """Fill a box whose corners are discs of ``radius``.

        The right and bottom discs sit one pixel further in than the left and
        top ones so that each disc ends on the box's last column or row.
        Radii above half the width or height overlap and are not guarded.
        """

        self.fill_rect(x0 + radius, y0, w - 2 * radius, h, color)
        self.fill_rect(x0, y0 + radius, radius, h - 2 * radius, color)
        self.fill_rect(x0 + w - radius, y0 + radius, radius, h - 2 * radius, color)

        right = x0 + w - radius - 1
        bottom = y0 + h - radius - 1
        self.fill_circle(x0 + radius, y0 + radius, radius, color)
        self.fill_circle(right, y0 + radius, radius, color)
        self.fill_circle(x0 + radius, bottom, radius, color)
        self.fill_circle(right, bottom, radius, color)
