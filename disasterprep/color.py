"""RGB colours with HTML and HSV conversions."""

from __future__ import annotations

import functools
import math
import random as _random
from typing import ClassVar

_MAX_RGB = 0xFFFFFF


@functools.total_ordering
class Color:
    """An immutable 24-bit RGB colour. The default colour is black."""

    __slots__ = ("_rgb",)

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    GRAY: ClassVar[Color]

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        if not all(0 <= part < 256 for part in (red, green, blue)):
            raise ValueError("Color values out of range.")
        self._rgb = (red << 16) + (green << 8) + blue

    def red(self) -> int:
        """Amount of red, from 0 to 255."""
        return (self._rgb >> 16) & 0xFF

    def green(self) -> int:
        """Amount of green, from 0 to 255."""
        return (self._rgb >> 8) & 0xFF

    def blue(self) -> int:
        """Amount of blue, from 0 to 255."""
        return self._rgb & 0xFF

    def to_rgb(self) -> int:
        """The colour packed as 0xRRGGBB."""
        return self._rgb

    def to_html(self) -> str:
        """The colour as an HTML string such as ``#a0b1c2``."""
        return f"#{self.red():02x}{self.green():02x}{self.blue():02x}"

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build a colour from a packed 0xRRGGBB value."""
        if not 0 <= hex_value <= _MAX_RGB:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from hue, saturation and value, each in [0, 1]."""
        if not all(0 <= part <= 1 for part in (h, s, v)):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n: int) -> int:
            k = math.fmod(n + h * 6, 6)
            return int(255 * (v - v * s * max(0.0, min(k, 4 - k, 1.0))))

        return cls(channel(5), channel(3), channel(1))

    @classmethod
    def random(cls) -> Color:
        """A randomly chosen colour."""
        return cls(_random.randint(0, 255), _random.randint(0, 255), _random.randint(0, 255))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb < other._rgb

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __repr__(self) -> str:
        return f"Color({self.red()}, {self.green()}, {self.blue()})"

    def __str__(self) -> str:
        name = _NAMES.get(self._rgb)
        return f"Color.{name}" if name else self.to_html()


_PRESETS = {
    "BLACK": 0x000000,
    "BLUE": 0x0000FF,
    "CYAN": 0x00FFFF,
    "GRAY": 0x808080,
    "GREEN": 0x00FF00,
    "MAGENTA": 0xFF00FF,
    "RED": 0xFF0000,
    "WHITE": 0xFFFFFF,
    "YELLOW": 0xFFFF00,
}

_NAMES = {value: name for name, value in _PRESETS.items()}

for _name, _value in _PRESETS.items():
    setattr(Color, _name, Color.from_hex(_value))