"""
Simulation state representation
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Phase(str, Enum):
    """Stage of a simulation run"""

    IDLE = "idle"
    ROLLING = "rolling"
    BRAKING = "braking"
    STOPPED = "stopped"

    @property
    def running(self) -> bool:
        return self in (Phase.ROLLING, Phase.BRAKING)


@dataclass
class SimulationState:
    """Mutable state of the braking run"""

    speed: float = 0.0  # m/s
    position: float = 0.0  # m travelled since start
    phase: Phase = Phase.IDLE
    brake_start_position: Optional[float] = None  # m
    camera_offset: float = 0.0  # px, last offset used for drawing

    @property
    def braking_started(self) -> bool:
        return self.brake_start_position is not None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation (for the browser-side store)"""
        return {
            "speed": self.speed,
            "position": self.position,
            "phase": self.phase.value,
            "brake_start_position": self.brake_start_position,
            "camera_offset": self.camera_offset,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SimulationState":
        """Rebuild a state from :meth:`to_dict` output; ``None`` gives a fresh state"""
        if not data:
            return cls()
        brake_start = data.get("brake_start_position")
        return cls(
            speed=float(data.get("speed", 0.0)),
            position=float(data.get("position", 0.0)),
            phase=Phase(data.get("phase", Phase.IDLE.value)),
            brake_start_position=None if brake_start is None else float(brake_start),
            camera_offset=float(data.get("camera_offset", 0.0)),
        )
