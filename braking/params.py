"""
Physical and visual parameters of the braking simulation
"""

from dataclasses import dataclass
from typing import Tuple

KMH_PER_MS = 3.6


@dataclass(frozen=True)
class BrakeParams:
    """Physical constants of one simulation run"""

    friction_coefficient: float = 0.7811  # tire/road (dry asphalt)
    gravity: float = 9.81  # m/s²
    mass: float = 1300.0  # kg (display only, deceleration is mass independent)
    initial_speed_kmh: float = 240.0  # km/h
    max_distance: float = 1500.0  # m, simulation ends here even without braking
    stop_threshold: float = 0.1  # m/s, speeds at or below this snap to zero

    def __post_init__(self) -> None:
        """Reject constants that would make the run meaningless"""
        for name in ("friction_coefficient", "gravity", "initial_speed_kmh", "max_distance"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.mass < 0 or self.stop_threshold < 0:
            raise ValueError("mass and stop_threshold must not be negative")

    @property
    def initial_speed(self) -> float:
        """Initial speed in m/s"""
        return self.initial_speed_kmh / KMH_PER_MS

    @property
    def deceleration(self) -> float:
        """Braking deceleration a = mu * g (m/s²)"""
        return self.friction_coefficient * self.gravity

    @property
    def theoretical_braking_distance(self) -> float:
        """Closed-form stopping distance v0² / (2a) (m)"""
        return self.initial_speed**2 / (2 * self.deceleration)


@dataclass(frozen=True)
class ViewParams:
    """Canvas layout of the visualization (pixels unless noted)"""

    pixels_per_meter: float = 3.0
    surface_width: int = 900
    surface_height: int = 250
    # Car
    car_width: float = 50.0
    car_height: float = 25.0
    # Road band
    road_top: float = 150.0
    road_height: float = 100.0
    road_buffer: float = 500.0  # m drawn past max_distance
    # Skid mark
    skid_top: float = 170.0
    skid_height: float = 5.0
    # Markers (triangle tip points down at the road)
    marker_tip: float = 140.0
    marker_base: float = 130.0
    marker_half_width: float = 5.0
    label_offset: Tuple[float, float] = (-20.0, 125.0)  # (dx from marker, absolute y)
    # Follow-with-lead camera
    lead_pixels: float = 100.0
    # Text overlay
    text_size: int = 13
    text_x: float = 10.0
    text_line_height: float = 20.0
