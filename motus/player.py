"""Reveal player — animates a guess one colored character at a time."""

from __future__ import annotations

import functools
import logging
import sys
import time
from dataclasses import dataclass
from typing import TextIO

from motus.config import AppConfig
from motus.errors import NoSoundError
from motus.mask import FeedbackCategory, build_mask
from motus.renderer import render_char, render_preview
from motus.sound import SoundBank, Speaker, clip_for, load_clip

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 1.0
DEFAULT_DELAY = 0.05


@dataclass
class RevealResult:
    sound_enabled: bool
    error: NoSoundError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Displayer:
    """Displays text motus (lingo) style.

    max_timeout is the longest wait for a single sound. Once a sound fails or
    times out, this displayer stays muted.
    """

    def __init__(
        self,
        max_timeout: float = DEFAULT_TIMEOUT,
        with_sound: bool = True,
        bank: SoundBank | None = None,
        speaker: Speaker | None = None,
        stream: TextIO | None = None,
        delay: float = DEFAULT_DELAY,
    ):
        self.max_timeout = max_timeout
        self.with_sound = with_sound
        self.bank = bank or SoundBank()
        self.speaker = speaker or Speaker()
        self.stream = stream
        self.delay = delay

    @classmethod
    def muted(cls, **kwargs) -> Displayer:
        return cls(with_sound=False, **kwargs)

    @classmethod
    def from_config(cls, config: AppConfig, **kwargs) -> Displayer:
        loader = functools.partial(load_clip, sounds_dir=config.sound.dir)
        kwargs.setdefault("bank", SoundBank(loader))
        kwargs.setdefault("speaker", Speaker(volume=config.sound.volume))
        return cls(
            max_timeout=config.reveal.max_timeout,
            with_sound=config.reveal.sound,
            delay=config.reveal.delay_ms / 1000,
            **kwargs,
        )

    def is_muted(self) -> bool:
        return not self.with_sound

    def display_text(self, text: str, ok_count: int, misplaced_count: int) -> RevealResult:
        """Shuffle the feedback over text and reveal it.

        Raises InvalidArgument or ClipLoadError before writing anything.
        """
        if not text:
            return RevealResult(self.with_sound)

        mask = build_mask(text, ok_count, misplaced_count)
        return self.reveal(text, mask)

    def reveal(self, text: str, mask: list[FeedbackCategory]) -> RevealResult:
        """Write text with mask[i] as the feedback of character i."""
        if not text:
            return RevealResult(self.with_sound)

        self.bank.load()

        out = self.stream or sys.stdout
        error = None

        out.write(render_preview(text))
        out.flush()

        for char, category in zip(text, mask):
            if self.with_sound:
                try:
                    self._play(category)
                except NoSoundError as err:
                    log.info("sound disabled: %s", err)
                    self.with_sound = False
                    error = err

            out.write(render_char(char, category))
            out.flush()
            if self.delay:
                time.sleep(self.delay)

        out.write("\n")
        out.flush()

        return RevealResult(self.with_sound, error)

    def _play(self, category: FeedbackCategory) -> None:
        self.speaker.open(self.bank.sample_rate)
        self.speaker.play(self.bank.get(clip_for(category)), self.max_timeout)


def display_text(
    text: str,
    ok_count: int,
    misplaced_count: int,
    max_timeout: float | None = None,
) -> RevealResult:
    """One-shot reveal with a fresh Displayer."""
    displayer = Displayer(max_timeout=DEFAULT_TIMEOUT if max_timeout is None else max_timeout)
    return displayer.display_text(text, ok_count, misplaced_count)
