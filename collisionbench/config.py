"""The benchmark's run configuration, read from JSON."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from os import PathLike
from pathlib import Path
from typing import Any

_I32 = (-(2**31), 2**31 - 1)
_U32 = (0, 2**32 - 1)


class ConfigError(ValueError):
    """Raised when a run configuration cannot be read."""


@dataclass(frozen=True)
class RunConfig:
    bottom_left_x: int
    bottom_left_y: int
    top_right_x: int
    top_right_y: int
    sensor_radius: float
    body_radius: float
    rng_seed: int
    num_frames_to_test: int
    use_gpu: bool
    path_to_output_json: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _integer(data: Mapping[str, Any], name: str, bounds: tuple[int, int]) -> int:
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    low, high = bounds
    if not low <= value <= high:
        raise ConfigError(f"{name} is out of range: {value}")
    return value


def _number(data: Mapping[str, Any], name: str) -> float:
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    return float(value)


def _typed(data: Mapping[str, Any], name: str, kind: type) -> Any:
    value = data[name]
    if not isinstance(value, kind):
        raise ConfigError(f"{name} must be of type {kind.__name__}, got {value!r}")
    return value


def _from_mapping(data: Any) -> RunConfig:
    if not isinstance(data, Mapping):
        raise ConfigError("run configuration must be a JSON object")
    missing = [f.name for f in fields(RunConfig) if f.name not in data]
    if missing:
        raise ConfigError(f"missing field(s): {', '.join(missing)}")
    return RunConfig(
        bottom_left_x=_integer(data, "bottom_left_x", _I32),
        bottom_left_y=_integer(data, "bottom_left_y", _I32),
        top_right_x=_integer(data, "top_right_x", _I32),
        top_right_y=_integer(data, "top_right_y", _I32),
        sensor_radius=_number(data, "sensor_radius"),
        body_radius=_number(data, "body_radius"),
        rng_seed=_integer(data, "rng_seed", _U32),
        num_frames_to_test=_integer(data, "num_frames_to_test", _U32),
        use_gpu=_typed(data, "use_gpu", bool),
        path_to_output_json=_typed(data, "path_to_output_json", str),
    )


def parse_run_config(text: str) -> RunConfig:
    """Parse a run configuration from JSON text; unknown keys are ignored."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON: {exc}") from exc
    return _from_mapping(data)


def load_run_config(path: str | PathLike[str]) -> RunConfig:
    return parse_run_config(Path(path).read_text(encoding="utf-8"))