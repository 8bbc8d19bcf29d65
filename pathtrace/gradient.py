"""A simple colour gradient used to check the framebuffer path."""

from __future__ import annotations

from typing import MutableSequence

from pathtrace.display import Display


def draw_gradient(framebuffer: MutableSequence[int], display: Display) -> None:
    """Fill the framebuffer with red rising left to right and green rising top to bottom."""
    width, height = display.width, display.height
    if len(framebuffer) < width * height * 4:
        raise ValueError("framebuffer is too small for the display")
    for y in range(height):
        green = int(y / (height - 1) * 255)
        for x in range(width):
            red = int(x / (width - 1) * 255)
            pos = display.framebuffer_pos(x, y)
            framebuffer[pos:pos + 4] = bytes((red, green, 0, 255))