"""Colour values and LED wire formats."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class LEDFormat(IntEnum):
    """Byte order in which an LED strip expects its colour channels."""

    GRB = 0
    RGB = 1
    GRBW = 2
    RGBW = 3


@dataclass(frozen=True)
class RGB:
    """An 8-bit-per-channel colour with an optional white channel."""

    r: int = 0
    g: int = 0
    b: int = 0
    w: int = 0

    @classmethod
    def from_packed(cls, value: int) -> RGB:
        """Build a colour from a 0xRRGGBB integer."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @staticmethod
    def wheel(pos: int) -> RGB:
        """Colour at position ``pos`` (0-255) on a red-green-blue colour wheel."""
        pos = (255 - pos) & 0xFF
        if pos < 85:
            return RGB(255 - pos * 3, 0, pos * 3)
        if pos < 170:
            pos -= 85
            return RGB(0, pos * 3, 255 - pos * 3)
        pos -= 170
        return RGB(pos * 3, 255 - pos * 3, 0)

    def value(self, format: LEDFormat, brightness: float = 1.0) -> int:
        """Pack the colour for ``format``, scaling every channel by ``brightness``."""

        def scaled(channel: int) -> int:
            return int(channel * brightness) & 0xFFFFFFFF

        if format == LEDFormat.GRB:
            return (scaled(self.g) << 16) | (scaled(self.r) << 8) | scaled(self.b)
        if format == LEDFormat.RGB:
            return (scaled(self.r) << 16) | (scaled(self.g) << 8) | scaled(self.b)
        if format in (LEDFormat.GRBW, LEDFormat.RGBW):
            if self.r == self.g == self.b:
                return scaled(self.r)
            first, second = (self.g, self.r) if format == LEDFormat.GRBW else (self.r, self.g)
            value = (
                (scaled(first) << 24)
                | (scaled(second) << 16)
                | (scaled(self.b) << 8)
                | scaled(self.w)
            )
            return value & 0xFFFFFFFF
        raise ValueError(f"unknown LED format: {format!r}")


COLOR_BLACK = RGB(0, 0, 0)
COLOR_WHITE = RGB(255, 255, 255)
COLOR_RED = RGB(255, 0, 0)
COLOR_ORANGE = RGB(255, 128, 0)
COLOR_YELLOW = RGB(255, 255, 0)
COLOR_LIME_GREEN = RGB(128, 255, 0)
COLOR_GREEN = RGB(0, 255, 0)
COLOR_SEAFOAM = RGB(0, 255, 128)
COLOR_AQUA = RGB(0, 255, 255)
COLOR_SKY_BLUE = RGB(0, 128, 255)
COLOR_BLUE = RGB(0, 0, 255)
COLOR_PURPLE = RGB(128, 0, 255)
COLOR_PINK = RGB(255, 0, 255)
COLOR_MAGENTA = RGB(255, 0, 128)

COLORS: tuple[RGB, ...] = (
    COLOR_BLACK,
    COLOR_WHITE,
    COLOR_RED,
    COLOR_ORANGE,
    COLOR_YELLOW,
    COLOR_LIME_GREEN,
    COLOR_GREEN,
    COLOR_SEAFOAM,
    COLOR_AQUA,
    COLOR_SKY_BLUE,
    COLOR_BLUE,
    COLOR_PURPLE,
    COLOR_PINK,
    COLOR_MAGENTA,
)