import pytest

from disasterprep.color import Color
from disasterprep.colorconsole import DEFAULT_FONT_SIZE, ColorConsole, ConsoleFontStyle


def test_defaults():
    console = ColorConsole()
    assert console.color == Color.BLACK
    assert console.style == ConsoleFontStyle.NORMAL
    assert console.font_size == DEFAULT_FONT_SIZE


def test_bold_italic_is_union():
    console = ColorConsole()
    console.set_style(Color.BLACK, ConsoleFontStyle.BOLD | ConsoleFontStyle.ITALIC, 12)
    assert console.style == ConsoleFontStyle.BOLD_ITALIC
    console.write("x")
    page = console.render_html()
    assert "font-weight:bold;" in page
    assert "font-style:italic;" in page


def test_consecutive_writes_form_one_run():
    console = ColorConsole()
    console.write("ab")
    console.write("cd")
    assert console.runs == [(Color.BLACK, ConsoleFontStyle.NORMAL, DEFAULT_FONT_SIZE, "abcd")]


def test_style_change_splits_runs():
    console = ColorConsole()
    console.write("one")
    console.set_style(Color.RED, ConsoleFontStyle.BOLD, 14)
    console.write("two")
    runs = console.runs
    assert [text for *_, text in runs] == ["one", "two"]
    assert runs[1][:3] == (Color.RED, ConsoleFontStyle.BOLD, 14)


def test_print_goes_to_console():
    console = ColorConsole()
    print("hello", file=console)
    assert console.runs[0][3] == "hello\n"


def test_render_html_styles_and_escapes():
    console = ColorConsole()
    console.set_style(Color.BLUE, ConsoleFontStyle.BOLD_ITALIC, 20)
    console.write("<a & b>")
    page = console.render_html()
    assert "<pre>" in page and "</pre>" in page
    assert "&lt;a &amp; b&gt;" in page
    assert f"color:{Color.BLUE.to_html()};" in page
    assert "font-weight:bold;" in page
    assert "font-style:italic;" in page
    assert "font-size:20pt;" in page


def test_render_html_normal_has_no_weight():
    console = ColorConsole()
    console.write("x")
    page = console.render_html()
    assert "font-weight" not in page
    assert "font-style" not in page
    assert page.count("<span") == 1


def test_clear_display():
    console = ColorConsole()
    console.write("gone")
    console.clear_display()
    assert console.runs == []
    assert "gone" not in console.render_html()


def test_styled_restores_style():
    console = ColorConsole()
    console.set_style(Color.GREEN, ConsoleFontStyle.ITALIC, 9)
    with console.styled(style=ConsoleFontStyle.BOLD):
        assert console.color == Color.GREEN
        assert console.style == ConsoleFontStyle.BOLD
        assert console.font_size == 9
        console.write("in")
    assert (console.color, console.style, console.font_size) == (
        Color.GREEN,
        ConsoleFontStyle.ITALIC,
        9,
    )
    assert console.runs[0][:3] == (Color.GREEN, ConsoleFontStyle.BOLD, 9)


def test_styled_restores_after_exception():
    console = ColorConsole()
    with pytest.raises(RuntimeError):
        with console.styled(color=Color.RED, size=30):
            raise RuntimeError("boom")
    assert console.color == Color.BLACK
    assert console.font_size == DEFAULT_FONT_SIZE


def test_negative_size_rejected():
    console = ColorConsole()
    with pytest.raises(ValueError):
        console.set_style(Color.BLACK, ConsoleFontStyle.NORMAL, -1)