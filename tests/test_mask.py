"""Tests for the feedback mask builder."""

import random

import pytest

from motus.errors import InvalidArgument
from motus.mask import FeedbackCategory, build_mask, count_categories


def test_counts_match_arguments():
    """Every category appears exactly as often as requested."""
    for ok, oop in [(0, 0), (1, 1), (3, 2), (5, 0), (0, 5), (2, 3)]:
        mask = build_mask("motus", ok, oop)
        counts = count_categories(mask)
        assert len(mask) == 5
        assert counts[FeedbackCategory.CORRECT] == ok
        assert counts[FeedbackCategory.MISPLACED] == oop
        assert counts[FeedbackCategory.ABSENT] == 5 - ok - oop


def test_abc_has_one_of_each():
    for _ in range(20):
        mask = build_mask("abc", 1, 1)
        assert sorted(c.value for c in mask) == ["absent", "correct", "misplaced"]


def test_counts_exceeding_length_raise():
    with pytest.raises(InvalidArgument):
        build_mask("cat", 2, 2)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        build_mask("a", 1, 1)


def test_negative_counts_are_clamped():
    mask = build_mask("cat", -1, -1)
    assert mask == [FeedbackCategory.ABSENT] * 3


def test_negative_ok_count_does_not_hide_overflow():
    with pytest.raises(InvalidArgument):
        build_mask("cat", -5, 4)


def test_empty_text_gives_empty_mask():
    assert build_mask("", 0, 0) == []
    assert build_mask("", 3, 3) == []


def test_shuffle_moves_first_position():
    """Position 0 is shuffled like any other."""
    rng = random.Random(1234)
    firsts = {build_mask("abcd", 1, 0, rng=rng)[0] for _ in range(200)}
    assert firsts == {FeedbackCategory.CORRECT, FeedbackCategory.ABSENT}


def test_seeded_rng_is_reproducible():
    a = build_mask("lingo", 2, 1, rng=random.Random(7))
    b = build_mask("lingo", 2, 1, rng=random.Random(7))
    assert a == b
