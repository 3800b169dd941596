"""Styled fonts: family, style, size and colour."""

from __future__ import annotations

import dataclasses
import enum
import sys

from disasterprep.color import Color


class FontFamily(enum.Enum):
    SERIF = enum.auto()
    SANS_SERIF = enum.auto()
    MONOSPACE = enum.auto()
    UNICODE_SERIF = enum.auto()
    UNICODE_SANS_SERIF = enum.auto()
    UNICODE_MONOSPACE = enum.auto()


class FontStyle(enum.Enum):
    NORMAL = "<normal>"
    BOLD = "BOLD"
    ITALIC = "ITALIC"
    BOLD_ITALIC = "BOLDITALIC"


# Per-family names: (macOS, Windows, other).
_FAMILY_NAMES = {
    FontFamily.SERIF: ("Didot", "Serif", "Serif"),
    FontFamily.SANS_SERIF: ("Helvetica", "Sans Serif", "Sans Serif"),
    FontFamily.MONOSPACE: ("Monaco", "Monospace", "Monospace"),
    FontFamily.UNICODE_SERIF: ("Times", "Times New Roman", "Serif"),
    FontFamily.UNICODE_SANS_SERIF: ("Lucida Grande", "Lucida Sans Unicode", "Sans Serif"),
    FontFamily.UNICODE_MONOSPACE: ("Lucida Grande", "Lucida Sans Unicode", "Monospace"),
}


def _family_name(family: FontFamily) -> str:
    mac, windows, other = _FAMILY_NAMES[family]
    if sys.platform == "darwin":
        return mac
    if sys.platform == "win32":
        return windows
    return other


@dataclasses.dataclass(frozen=True)
class Font:
    """An immutable combination of font family, style, size and colour."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = dataclasses.field(default_factory=lambda: Color.BLACK)

    def with_family(self, family: FontFamily) -> Font:
        return dataclasses.replace(self, family=family)

    def with_style(self, style: FontStyle) -> Font:
        return dataclasses.replace(self, style=style)

    def with_size(self, size: int) -> Font:
        return dataclasses.replace(self, size=size)

    def with_color(self, color: Color) -> Font:
        return dataclasses.replace(self, color=color)

    def font_string(self) -> str:
        """The font as a ``Family-STYLE-size`` string for the current platform."""
        parts = [_family_name(self.family)]
        if self.style is not FontStyle.NORMAL:
            parts.append(self.style.value)
        parts.append(str(self.size))
        return "-".join(parts)