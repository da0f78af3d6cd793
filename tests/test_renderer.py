"""Tests for the ANSI glyph renderer."""

from colorama import Back, Fore, Style

from motus.mask import FeedbackCategory


def test_category_to_color_mapping():
    from motus.renderer import category_to_color

    assert category_to_color(FeedbackCategory.CORRECT) == Back.RED
    assert category_to_color(FeedbackCategory.MISPLACED) == Back.YELLOW
    assert category_to_color(FeedbackCategory.ABSENT) == Back.BLUE


def test_render_char_is_white_on_category_color():
    from motus.renderer import render_char

    out = render_char("m", FeedbackCategory.MISPLACED)
    assert out == f"{Back.YELLOW}{Fore.WHITE}m{Style.RESET_ALL}"


def test_render_preview_returns_to_line_start():
    """The preview must not advance the line so the reveal overwrites it."""
    from motus.renderer import render_preview

    out = render_preview("motus")
    assert "motus" in out
    assert out.endswith("\r")
    assert "\n" not in out
