"""ANSI glyph renderer for revealed characters."""

from colorama import Back, Fore, Style

from motus.mask import FeedbackCategory

CATEGORY_COLORS = {
    FeedbackCategory.CORRECT: Back.RED,
    FeedbackCategory.MISPLACED: Back.YELLOW,
    FeedbackCategory.ABSENT: Back.BLUE,
}

PREVIEW_COLOR = Back.BLUE


def category_to_color(category: FeedbackCategory) -> str:
    """Map a feedback category to its background escape code."""
    return CATEGORY_COLORS[category]


def render_char(char: str, category: FeedbackCategory) -> str:
    """White glyph on the category's background."""
    return f"{category_to_color(category)}{Fore.WHITE}{char}{Style.RESET_ALL}"


def render_preview(text: str) -> str:
    """Whole text, unrevealed, ending with a carriage return.

    The reveal then redraws the same line character by character.
    """
    return f"{PREVIEW_COLOR}{Fore.WHITE}{text}{Style.RESET_ALL}\r"
