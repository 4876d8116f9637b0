"""
Benchmark configuration: YAML file values layered over defaults.
"""

from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Dict, Optional

import yaml


PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / 'experiments' / 'configs' / 'default.yaml'


@dataclass
class BenchmarkConfig:
    """
    Settings for one benchmark run.

    Values are coerced and checked on construction, so every copy made with
    ``override`` or ``dataclasses.replace`` is validated too.
    """
    signal_length: int = 1024
    frequency: float = 5.0
    head: int = 10  # Number of leading bins to print
    repeats: int = 1
    log_file: Optional[str] = None

    def __post_init__(self):
        self.signal_length = _coerce_number('signal_length', self.signal_length, int)
        self.frequency = _coerce_number('frequency', self.frequency, float)
        self.head = _coerce_number('head', self.head, int)
        self.repeats = _coerce_number('repeats', self.repeats, int)

        if self.head < 0:
            raise ValueError(f"head must be non-negative, got {self.head}")
        if self.repeats < 1:
            raise ValueError(f"repeats must be at least 1, got {self.repeats}")
        if self.log_file is not None:
            self.log_file = str(self.log_file)

    def to_dict(self) -> Dict:
        return asdict(self)

    def override(self, **kwargs) -> 'BenchmarkConfig':
        """Return a validated copy with every non-None keyword applied."""
        updates = {k: v for k, v in kwargs.items() if v is not None}
        return replace(self, **updates)


def _coerce_number(key: str, value, kind: type):
    """Convert a config value to int or float, raising ValueError naming the key."""
    if value is None or isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        number = float(value) if kind is float else int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None

    # int() would silently truncate 2.5 to 2
    if kind is int and isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return number


def config_from_dict(raw: Optional[Dict]) -> BenchmarkConfig:
    """Build a config from a parsed YAML mapping, validating keys and values."""
    if raw is None:
        return BenchmarkConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(BenchmarkConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    return BenchmarkConfig(**raw)


def load_config(config_path: Optional[str] = None) -> BenchmarkConfig:
    """
    Load a benchmark configuration.

    Args:
        config_path: YAML file to read. If None, the bundled default file is
            used when present, otherwise the dataclass defaults.

    Returns:
        BenchmarkConfig
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return BenchmarkConfig()
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, 'r') as f:
        return config_from_dict(yaml.safe_load(f))
