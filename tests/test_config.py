"""Tests for config loader — YAML to dataclasses."""

import tempfile
from pathlib import Path

import yaml


def test_load_config_parses_sections():
    """load_config should parse YAML into the reveal and sound sections."""
    raw = {
        "reveal": {"delay_ms": 20, "max_timeout": 0.5, "sound": False},
        "sound": {"dir": "~/motus-sounds", "volume": 0.8},
    }
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(raw, f)
        path = f.name

    from motus.config import load_config

    cfg = load_config(Path(path))
    assert cfg.reveal.delay_ms == 20
    assert cfg.reveal.max_timeout == 0.5
    assert cfg.reveal.sound is False
    assert cfg.sound.dir == "~/motus-sounds"
    assert cfg.sound.volume == 0.8


def test_load_config_defaults():
    """Missing optional fields should get defaults."""
    raw = {"reveal": {"max_timeout": 2.0}}
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(raw, f)
        path = f.name

    from motus.config import load_config

    cfg = load_config(Path(path))
    assert cfg.reveal.max_timeout == 2.0
    assert cfg.reveal.delay_ms == 50
    assert cfg.reveal.sound is True
    assert cfg.sound.dir is None
    assert cfg.sound.volume == 0.3


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    from motus.config import load_config

    cfg = load_config(path)
    assert cfg.reveal.delay_ms == 50
    assert cfg.sound.dir is None


def test_repo_config_loads():
    from motus.config import load_config

    cfg = load_config(Path(__file__).parent.parent / "config.yaml")
    assert cfg.reveal.sound is True
    assert cfg.sound.dir is None
