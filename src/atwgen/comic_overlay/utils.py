"""Geometry and canvas helpers shared by the renderer, compositor and assembler."""
from typing import NamedTuple, Tuple

from PIL import Image


class Rectangle(NamedTuple):
    """Axis-aligned rectangle with an exclusive max corner (x1, y1)."""
    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def top_left(self) -> Tuple[int, int]:
        return self.x0, self.y0

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """PIL-style (left, upper, right, lower) box."""
        return self.x0, self.y0, self.x1, self.y1

    def is_empty(self) -> bool:
        return self.x1 <= self.x0 or self.y1 <= self.y0

    def translate(self, dx: int, dy: int) -> "Rectangle":
        return Rectangle(self.x0 + dx, self.y0 + dy, self.x1 + dx, self.y1 + dy)

    def contains(self, other: "Rectangle") -> bool:
        return (self.x0 <= other.x0 and self.y0 <= other.y0
                and other.x1 <= self.x1 and other.y1 <= self.y1)

    def intersects(self, other: "Rectangle") -> bool:
        return (self.x0 < other.x1 and other.x0 < self.x1
                and self.y0 < other.y1 and other.y0 < self.y1)

    def with_padding(self, padding: int) -> "Rectangle":
        """Grow the rectangle by ``padding`` pixels on every side.

        A negative padding shrinks it instead; an axis that would invert is
        collapsed to zero size at its centre so min <= max always holds.
        """
        x0, x1 = _pad_axis(self.x0, self.x1, padding)
        y0, y1 = _pad_axis(self.y0, self.y1, padding)
        return Rectangle(x0, y0, x1, y1)


def _pad_axis(low, high, padding):
    low, high = low - padding, high + padding
    if low > high:
        middle = (low + high) // 2
        return middle, middle
    return low, high


def copy_image(image: Image.Image) -> Image.Image:
    """Return an independent RGBA copy of ``image``."""
    if image.mode == 'RGBA':
        return image.copy()
    return image.convert('RGBA')


def new_canvas(width: int, height: int) -> Image.Image:
    """Fully transparent RGBA canvas."""
    return Image.new('RGBA', (width, height), (0, 0, 0, 0))
