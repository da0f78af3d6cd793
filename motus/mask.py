"""Feedback mask — which category each character of a guess gets."""

from __future__ import annotations

import enum
import random

from motus.errors import InvalidArgument


class FeedbackCategory(enum.Enum):
    CORRECT = "correct"
    MISPLACED = "misplaced"
    ABSENT = "absent"


def build_mask(
    text: str,
    ok_count: int,
    misplaced_count: int,
    rng: random.Random | None = None,
) -> list[FeedbackCategory]:
    """Spread ok/misplaced/absent categories over the characters of text.

    Negative counts are treated as zero. The order is shuffled, so only the
    number of each category is meaningful.

    Raises InvalidArgument if the counts don't fit in the text.
    """
    if not text:
        return []

    ok_count = max(0, ok_count)
    misplaced_count = max(0, misplaced_count)

    if len(text) < ok_count + misplaced_count:
        raise InvalidArgument(
            f"{ok_count} ok + {misplaced_count} misplaced exceeds "
            f"{len(text)} characters"
        )

    absent = len(text) - ok_count - misplaced_count
    mask = (
        [FeedbackCategory.CORRECT] * ok_count
        + [FeedbackCategory.MISPLACED] * misplaced_count
        + [FeedbackCategory.ABSENT] * absent
    )

    (rng or random.Random()).shuffle(mask)
    return mask


def count_categories(mask: list[FeedbackCategory]) -> dict[FeedbackCategory, int]:
    """Count how many positions each category holds."""
    counts = {cat: 0 for cat in FeedbackCategory}
    for cat in mask:
        counts[cat] += 1
    return counts
