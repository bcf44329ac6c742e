"""A 32-bit pixel image with clipped drawing primitives."""

from __future__ import annotations

from array import array

from .constants import HEIGHT, WIDTH

_COLOR_MASK = 0xFFFFFFFF


class Image:
    """A width x height grid of 32-bit colours, stored row by row."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array("I", bytes(4 * width * height))

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the image are ignored."""
        if not self._inside(x, y):
            return
        self._pixels[y * self.width + x] = color & _COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """The colour at (x, y); raises IndexError outside the image."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self._pixels[y * self.width + x]

    def draw_square(self, x: int, y: int, size: int, color: int) -> None:
        """Outline a square whose top-left corner is (x, y)."""
        for i in range(size):
            self.put_pixel(x + i, y, color)
            self.put_pixel(x + i, y + size, color)
            self.put_pixel(x, y + i, color)
            self.put_pixel(x + size, y + i, color)

    def clear(self) -> None:
        """Set every pixel to black."""
        self._pixels = array("I", bytes(4 * self.width * self.height))

    def draw_wall_split(self, x: int, top: int, bottom: int, color: int) -> None:
        """Fill column x from top to bottom inclusive, clamped to the image."""
        top = max(top, 0)
        bottom = min(bottom, self.height - 1)
        for y in range(top, bottom + 1):
            self.put_pixel(x, y, color)

    def tobytes(self) -> bytes:
        """The pixels as little-endian 32-bit words, row by row (BGRA order)."""
        data = array("I", self._pixels)
        if data.itemsize != 4:
            raise RuntimeError("platform unsigned int is not 32 bits")
        import sys

        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()