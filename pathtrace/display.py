"""Display geometry and framebuffer addressing."""

from __future__ import annotations

import math


class Display:
    """Width, height and aspect ratio of an RGBA output surface."""

    __slots__ = ("width", "height", "aspect_ratio")

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        divisor = math.gcd(self.width, self.height)
        self.aspect_ratio = (self.width / divisor) / (self.height / divisor)

    @classmethod
    def from_aspect_ratio(cls, width: int, aspect_ratio: float) -> "Display":
        """Build a display whose height follows from the width and ratio."""
        display = cls.__new__(cls)
        display.width = int(width)
        display.aspect_ratio = float(aspect_ratio)
        display.height = int(width / aspect_ratio)
        return display

    def change_resolution(self, width: int, height: int) -> None:
        """Set a new size; the ratio is the integer quotient of width and height."""
        self.width = int(width)
        self.height = int(height)
        self.aspect_ratio = float(self.width // self.height)

    def framebuffer_pos(self, x: int, y: int) -> int:
        """Return the index of the red byte of pixel (x, y), counted from the top left."""
        if x < self.width + 1 and y < self.height + 1:
            return (y * self.width + x) * 4
        raise ValueError("x or y is too big for the given window size")

    def __repr__(self) -> str:
        return f"Display(width={self.width}, height={self.height}, aspect_ratio={self.aspect_ratio})"