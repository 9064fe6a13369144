"""Shared fixtures."""

import random

import pytest

from namewheel import config
from namewheel.config import WheelConfig
from namewheel.entries import Entry
from namewheel.wheel import Wheel

NAMES = ["Alpha", "Bravo", "Charlie", "Delta", "Echo"]


@pytest.fixture
def entries() -> list[Entry]:
    return [Entry(name) for name in NAMES]


@pytest.fixture
def make_wheel(entries):
    """Build a seeded wheel loaded with the five test entries."""

    def _make(spin_time: float = 2, seed: int = 0, **config_kwargs) -> Wheel:
        cfg = WheelConfig(spin_time=spin_time, **config_kwargs)
        wheel = Wheel(cfg, rng=random.Random(seed))
        wheel.set_entries(entries, cfg.max_slices, cfg.allow_duplicates)
        return wheel

    return _make


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the config module at a fresh file."""
    path = tmp_path / "namewheel.yaml"
    monkeypatch.setattr(config, "CONFIG_PATH", path)
    monkeypatch.setattr(config, "_config", {})
    monkeypatch.setattr(config, "_loaded", False)
    return path


@pytest.fixture
def spin_to_end():
    """Tick a wheel until it stops. Returns the number of ticks taken."""

    def _spin(wheel: Wheel, limit: int = 10_000) -> int:
        ticks = 0
        while wheel.is_spinning():
            wheel.tick()
            ticks += 1
            assert ticks < limit, "wheel never stopped"
        return ticks

    return _spin
