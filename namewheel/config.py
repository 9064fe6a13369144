"""Configuration management for namewheel via ~/.config/namewheel.yaml."""

import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

import yaml

log = logging.getLogger(__name__)

CONFIG_PATH = Path(
    os.environ.get("NAMEWHEEL_CONFIG", Path.home() / ".config" / "namewheel.yaml")
)

DEFAULTS = {
    "spin_time": 10,
    "slow_spin": False,
    "max_slices": 1000,
    "allow_duplicates": True,
    "dark_mode": False,
    "exact_landing": False,
}

MIN_SPIN_TIME = 1
MAX_SPIN_TIME = 60

_config: dict = {}
_loaded: bool = False


@dataclass
class WheelConfig:
    """Settings the wheel reads while spinning."""

    spin_time: float = DEFAULTS["spin_time"]  # seconds
    slow_spin: bool = DEFAULTS["slow_spin"]
    max_slices: int = DEFAULTS["max_slices"]
    allow_duplicates: bool = DEFAULTS["allow_duplicates"]
    dark_mode: bool = DEFAULTS["dark_mode"]
    # Stop on the target itself instead of just passing it at the jump
    exact_landing: bool = DEFAULTS["exact_landing"]

    def __post_init__(self) -> None:
        spin_time = float(self.spin_time)
        clamped = min(MAX_SPIN_TIME, max(MIN_SPIN_TIME, spin_time))
        if clamped != spin_time:
            log.warning(f"spin_time {spin_time} out of range, using {clamped}")
        self.spin_time = clamped
        if self.max_slices < 1:
            log.warning(f"max_slices {self.max_slices} out of range, using 1")
            self.max_slices = 1


def _load_config() -> dict:
    """Load config from disk, creating with defaults if missing."""
    global _config, _loaded
    if _loaded:
        return _config

    if CONFIG_PATH.exists():
        with open(CONFIG_PATH) as f:
            _config = yaml.safe_load(f) or {}
    else:
        _config = {}

    # Ensure wheel section with defaults
    if "wheel" not in _config:
        _config["wheel"] = {}
    missing = [k for k in DEFAULTS if k not in _config["wheel"]]
    for key in missing:
        _config["wheel"][key] = DEFAULTS[key]
    if missing:
        _save_config()

    _loaded = True
    return _config


def _save_config() -> None:
    """Write config to disk."""
    if not _config:
        return
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_PATH, "w") as f:
        yaml.dump(_config, f, default_flow_style=False)


def get_wheel_config() -> WheelConfig:
    """Return the wheel settings, ignoring unknown keys."""
    section = _load_config()["wheel"]
    return WheelConfig(**{k: section[k] for k in DEFAULTS})


def save_wheel_config(config: WheelConfig) -> None:
    """Persist wheel settings."""
    _load_config()["wheel"] = asdict(config)
    _save_config()
