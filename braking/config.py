"""Configuration loader for the braking simulation."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from braking.camera import make_camera
from braking.params import BrakeParams, ViewParams

_SECTIONS: tuple[str, ...] = ("brake", "view", "camera")


@dataclass
class SimulationConfig:
    """Parameters plus the chosen camera policy"""

    params: BrakeParams = field(default_factory=BrakeParams)
    view: ViewParams = field(default_factory=ViewParams)
    camera: str = "midpoint"

    def make_camera(self):
        return make_camera(self.camera, self.view.lead_pixels)


def _numeric_overrides(section: str, entry: Any, allowed: tuple[str, ...]) -> dict[str, Any]:
    if entry is None:
        return {}
    if not isinstance(entry, dict):
        raise ValueError(f"Section '{section}' must be a mapping, got {type(entry).__name__}")

    values: dict[str, Any] = {}
    for key, val in entry.items():
        if key not in allowed:
            raise ValueError(f"Section '{section}' has unknown field '{key}'")
        if key == "label_offset":
            if not (isinstance(val, (list, tuple)) and len(val) == 2):
                raise ValueError(f"'{section}.{key}' must be a pair of numbers, got {val!r}")
            values[key] = (float(val[0]), float(val[1]))
            continue
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise ValueError(
                f"'{section}.{key}' must be numeric, got {type(val).__name__}"
            )
        values[key] = val
    return values


def load_config(path: Path | str | None = None) -> SimulationConfig:
    """Load simulation parameters from a YAML file.

    Missing sections and fields keep their defaults, so an empty file (or no
    path at all) gives the stock 240 km/h dry asphalt run.

    Args:
        path: Optional YAML file with ``brake``, ``view`` and ``camera`` keys.

    Returns:
        The validated :class:`SimulationConfig`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a section or field is unknown, a value is not
            numeric, or a constant is out of range.
    """
    if path is None:
        return SimulationConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    for key in data:
        if key not in _SECTIONS:
            raise ValueError(f"Unknown config section '{key}', expected one of {_SECTIONS}")

    brake_fields = tuple(f.name for f in fields(BrakeParams))
    view_fields = tuple(f.name for f in fields(ViewParams))

    params = BrakeParams(**_numeric_overrides("brake", data.get("brake"), brake_fields))
    view = ViewParams(**_numeric_overrides("view", data.get("view"), view_fields))
    camera = str(data.get("camera", "midpoint"))

    config = SimulationConfig(params=params, view=view, camera=camera)
    config.make_camera()  # validates the policy name
    return config
