"""Motus — reveal a guess letter by letter, lingo style."""

from motus.errors import ClipLoadError, InvalidArgument, MotusError, NoSoundError
from motus.mask import FeedbackCategory, build_mask
from motus.player import Displayer, RevealResult, display_text

__version__ = "0.1.0"

__all__ = [
    "ClipLoadError",
    "Displayer",
    "FeedbackCategory",
    "InvalidArgument",
    "MotusError",
    "NoSoundError",
    "RevealResult",
    "build_mask",
    "display_text",
]
