"""A text console whose output carries colour, weight and size, rendered as HTML."""

from __future__ import annotations

import contextlib
import dataclasses
import enum
import html
from collections.abc import Iterator

from disasterprep.color import Color

DEFAULT_FONT_SIZE = 11

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """


class ConsoleFontStyle(enum.IntFlag):
    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


@dataclasses.dataclass(frozen=True)
class _Style:
    color: Color = dataclasses.field(default_factory=lambda: Color.BLACK)
    font_style: ConsoleFontStyle = ConsoleFontStyle.NORMAL
    font_size: int = DEFAULT_FONT_SIZE


def _check_size(size: int) -> int:
    if size < 0:
        raise ValueError("Font size must not be negative.")
    return size


class ColorConsole:
    """Collects written text in styled runs and renders them as an HTML page.

    The console is file-like, so ``print(..., file=console)`` works.
    """

    def __init__(self) -> None:
        self._style = _Style()
        self._buffer: list[str] = []
        self._contents: list[tuple[_Style, str]] = []

    @property
    def color(self) -> Color:
        return self._style.color

    @property
    def style(self) -> ConsoleFontStyle:
        return self._style.font_style

    @property
    def font_size(self) -> int:
        return self._style.font_size

    @property
    def runs(self) -> list[tuple[Color, ConsoleFontStyle, int, str]]:
        """Every run of text written so far, with the style it was written in."""
        self._flush_buffer()
        return [
            (style.color, style.font_style, style.font_size, text)
            for style, text in self._contents
        ]

    def write(self, text: str) -> int:
        """Append text in the current style."""
        self._buffer.append(text)
        return len(text)

    def flush(self) -> None:
        self._flush_buffer()

    def _flush_buffer(self) -> None:
        text = "".join(self._buffer)
        if not text:
            return
        self._buffer.clear()
        self._contents.append((self._style, text))

    def set_style(
        self,
        color: Color | None = None,
        style: ConsoleFontStyle = ConsoleFontStyle.NORMAL,
        size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        """Switch the style used for text written from now on."""
        self._flush_buffer()
        self._style = _Style(
            color if color is not None else Color.BLACK,
            ConsoleFontStyle(style),
            _check_size(size),
        )

    @contextlib.contextmanager
    def styled(
        self,
        color: Color | None = None,
        style: ConsoleFontStyle | None = None,
        size: int | None = None,
    ) -> Iterator[ColorConsole]:
        """Temporarily change the parts of the style that are given."""
        old = self._style
        self.set_style(
            color if color is not None else old.color,
            style if style is not None else old.font_style,
            size if size is not None else old.font_size,
        )
        try:
            yield self
        finally:
            self.set_style(old.color, old.font_style, old.font_size)

    def clear_display(self) -> None:
        """Forget everything written so far."""
        self._flush_buffer()
        self._contents.clear()

    def render_html(self) -> str:
        """The whole console contents as an HTML document."""
        self._flush_buffer()
        parts = [_HTML_HEADER]
        for style, text in self._contents:
            css = [f"color:{style.color.to_html()};"]
            if style.font_style & ConsoleFontStyle.BOLD:
                css.append("font-weight:bold;")
            if style.font_style & ConsoleFontStyle.ITALIC:
                css.append("font-style:italic;")
            css.append(f"font-size:{style.font_size}pt;")
            parts.append(f'<span style="{"".join(css)}">{html.escape(text)}</span>')
        parts.append(_HTML_FOOTER)
        return "".join(parts)