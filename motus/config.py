"""Config loader — YAML to dataclasses."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class RevealConfig:
    delay_ms: int = 50
    max_timeout: float = 1.0  # seconds to wait for one clip
    sound: bool = True


@dataclass
class SoundConfig:
    dir: str | None = None  # ok.wav / oop.wav / ko.wav; None = bundled tones
    volume: float = 0.3


@dataclass
class AppConfig:
    reveal: RevealConfig = field(default_factory=RevealConfig)
    sound: SoundConfig = field(default_factory=SoundConfig)


def load_config(path: Path) -> AppConfig:
    """Load config from YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    reveal = RevealConfig(**{k: v for k, v in (raw.get("reveal") or {}).items()})
    sound = SoundConfig(**{k: v for k, v in (raw.get("sound") or {}).items()})

    return AppConfig(reveal=reveal, sound=sound)
