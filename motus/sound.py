"""Sound cues — clip loading, the bundled 8-bit tones, and mixer playback."""

from __future__ import annotations

import io
import logging
import os
import struct
import time
import wave
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from motus.errors import ClipLoadError, NoSoundError  # noqa: E402
from motus.mask import FeedbackCategory  # noqa: E402

log = logging.getLogger(__name__)

SAMPLE_RATE = 22050
CLIP_NAMES = ("ok", "oop", "ko")

CATEGORY_CLIPS = {
    FeedbackCategory.CORRECT: "ok",
    FeedbackCategory.MISPLACED: "oop",
    FeedbackCategory.ABSENT: "ko",
}


@dataclass(frozen=True)
class Clip:
    name: str
    data: bytes  # complete WAV file
    sample_rate: int


def clip_for(category: FeedbackCategory) -> str:
    """Name of the clip played for a category."""
    return CATEGORY_CLIPS[category]


# ── 8-bit tones ──────────────────────────────────────────────────────

def _square(freq: float, dur: float, vol: float = 1.0) -> list[float]:
    samples = []
    n = int(SAMPLE_RATE * dur)
    for i in range(n):
        t = i / SAMPLE_RATE
        val = vol if (t * freq) % 1.0 < 0.5 else -vol
        # short fade-out so notes don't click
        tail = max(0.0, 1.0 - (i / n) * 0.7)
        samples.append(val * tail)
    return samples


def _triangle(freq: float, dur: float, vol: float = 1.0) -> list[float]:
    samples = []
    n = int(SAMPLE_RATE * dur)
    for i in range(n):
        t = i / SAMPLE_RATE
        phase = (t * freq) % 1.0
        val = (4 * abs(phase - 0.5) - 1) * vol
        env = min(1.0, i / (SAMPLE_RATE * 0.003))
        tail = max(0.0, 1.0 - (i / n) * 0.5)
        samples.append(val * env * tail)
    return samples


TONES: dict[str, Callable[[], list[float]]] = {
    "ok": lambda: _square(880, 0.07, 0.5) + _square(1320, 0.1, 0.5),
    "oop": lambda: _triangle(660, 0.12),
    "ko": lambda: _triangle(196, 0.15),
}


def _write_wav(samples: list[float]) -> bytes:
    buf = io.BytesIO()
    with wave.open(buf, "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(SAMPLE_RATE)
        w.writeframes(
            b"".join(struct.pack("<h", int(max(-1.0, min(1.0, s)) * 32767)) for s in samples)
        )
    return buf.getvalue()


def synth_clip(name: str) -> Clip:
    """Build one of the bundled clips in memory."""
    if name not in TONES:
        raise ClipLoadError(name, "no such bundled clip")
    return Clip(name=name, data=_write_wav(TONES[name]()), sample_rate=SAMPLE_RATE)


def load_clip(name: str, sounds_dir: str | Path | None = None) -> Clip:
    """Load a clip by name.

    Without sounds_dir the bundled tone is used, otherwise <sounds_dir>/<name>.wav.
    """
    if sounds_dir is None:
        return synth_clip(name)

    path = Path(sounds_dir).expanduser() / f"{name}.wav"
    try:
        data = path.read_bytes()
        with wave.open(io.BytesIO(data), "rb") as w:
            rate = w.getframerate()
    except (OSError, wave.Error, EOFError) as err:
        raise ClipLoadError(name, f"{path}: {err}") from err
    return Clip(name=name, data=data, sample_rate=rate)


class SoundBank:
    """The three clips a reveal needs, loaded once and kept."""

    def __init__(self, loader: Callable[[str], Clip] = load_clip):
        self.loader = loader
        self._clips: dict[str, Clip] = {}

    @property
    def loaded(self) -> bool:
        return len(self._clips) == len(CLIP_NAMES)

    @property
    def sample_rate(self) -> int:
        """Rate of the first clip; the mixer is opened with it."""
        return self._clips[CLIP_NAMES[0]].sample_rate

    def load(self) -> None:
        if self.loaded:
            return
        clips = {}
        for name in CLIP_NAMES:
            try:
                clips[name] = self.loader(name)
            except ClipLoadError:
                raise
            except Exception as err:
                raise ClipLoadError(name, str(err)) from err
            log.debug("loaded clip %s (%d Hz)", name, clips[name].sample_rate)
        self._clips = clips

    def get(self, name: str) -> Clip:
        return self._clips[name]


class Speaker:
    """Plays clips through pygame.mixer and waits for them, up to a timeout."""

    def __init__(self, volume: float = 0.3, poll_interval: float = 0.005):
        self.volume = volume
        self.poll_interval = poll_interval
        self._sounds: dict[str, pygame.mixer.Sound] = {}

    def open(self, sample_rate: int) -> None:
        """Initialize the mixer once; later calls keep the first rate."""
        if pygame.mixer.get_init():
            return
        try:
            pygame.mixer.init(frequency=sample_rate, size=-16, channels=2, buffer=512)
        except pygame.error as err:
            raise NoSoundError(f"audio device unavailable: {err}") from err
        log.debug("mixer opened at %d Hz", sample_rate)

    def play(self, clip: Clip, timeout: float) -> None:
        """Play clip and block until it ends.

        Raises NoSoundError if it fails to start or outlasts timeout. A timed
        out sound is left playing.
        """
        try:
            sound = self._sounds.get(clip.name)
            if sound is None:
                sound = pygame.mixer.Sound(file=io.BytesIO(clip.data))
                sound.set_volume(self.volume)
                self._sounds[clip.name] = sound
            channel = sound.play()
        except pygame.error as err:
            raise NoSoundError(f"cannot play {clip.name}: {err}") from err
        if channel is None:
            raise NoSoundError(f"no free channel for {clip.name}")

        deadline = time.monotonic() + timeout
        while channel.get_busy():
            if time.monotonic() >= deadline:
                raise NoSoundError(f"{clip.name} did not finish within {timeout}s")
            time.sleep(self.poll_interval)
