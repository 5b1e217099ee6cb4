"""
World-to-screen projection and per-frame draw instructions
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from braking.camera import ClampToMidpoint
from braking.engine import displayed_braking_distance
from braking.params import KMH_PER_MS, BrakeParams, ViewParams
from braking.state import Phase, SimulationState

Color = Tuple[int, int, int, int]  # RGBA, 0-255
Point = Tuple[float, float]

BACKGROUND: Color = (240, 240, 240, 255)
ROAD: Color = (80, 80, 80, 255)
SKID: Color = (0, 0, 0, 150)
CAR: Color = (0, 150, 250, 255)
BRAKE_MARKER: Color = (255, 0, 0, 255)
STOP_MARKER: Color = (0, 128, 0, 255)
TEXT: Color = (0, 0, 0, 255)


@dataclass(frozen=True)
class Background:
    color: Color


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class Triangle:
    points: Tuple[Point, Point, Point]
    color: Color


@dataclass(frozen=True)
class Text:
    """Text drawn from a label key; the host resolves it for its locale"""

    key: str
    x: float
    y: float
    size: int
    color: Color
    values: Dict[str, Any] = field(default_factory=dict)

    def resolve(self, labels) -> str:
        return labels.format(self.key, **self.values)


Instruction = Union[Background, Rect, Triangle, Text]


@dataclass
class Frame:
    """Everything needed to draw one frame"""

    width: float
    height: float
    camera_offset: float
    car_x: float
    instructions: List[Instruction]


class Projector:
    """Maps simulation space (m) to screen space (px) and builds draw lists"""

    def __init__(
        self,
        params: BrakeParams,
        view: Optional[ViewParams] = None,
        camera=None,
    ) -> None:
        """
        Initialize projector

        Args:
            params: Physical constants (road length, readout values)
            view: Canvas layout, defaults to ViewParams()
            camera: Camera policy, defaults to ClampToMidpoint()
        """
        self.params = params
        self.view = view or ViewParams()
        self.camera = camera or ClampToMidpoint()

    def to_screen_x(self, position: float, camera_offset: float) -> float:
        """Screen x (px) of a world position (m)"""
        return position * self.view.pixels_per_meter - camera_offset

    def render(
        self,
        state: SimulationState,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> Frame:
        """
        Build the ordered draw instructions for the current state

        Args:
            state: Current simulation state (read only)
            width: Surface width (px), defaults to the view's width
            height: Surface height (px), defaults to the view's height

        Returns:
            Frame with camera offset, car screen x and instructions
        """
        view = self.view
        width = view.surface_width if width is None else width
        height = view.surface_height if height is None else height

        offset = self.camera.offset(state, view.pixels_per_meter, width)
        car_x = self.to_screen_x(state.position, offset)

        instructions: List[Instruction] = [Background(BACKGROUND)]

        road_length = (self.params.max_distance + view.road_buffer) * view.pixels_per_meter
        instructions.append(Rect(-offset, view.road_top, road_length, view.road_height, ROAD))

        if state.brake_start_position is not None:
            start_x = self.to_screen_x(state.brake_start_position, offset)
            instructions.append(
                Rect(start_x, view.skid_top, car_x - start_x, view.skid_height, SKID)
            )
            instructions.extend(self._marker(start_x, "brake_start", BRAKE_MARKER))

        instructions.append(
            Rect(
                car_x,
                view.road_top - view.car_height / 2,
                view.car_width,
                view.car_height,
                CAR,
            )
        )

        # Not drawn when the run ended at the distance cap without braking
        if state.phase is Phase.STOPPED and state.brake_start_position is not None:
            instructions.extend(self._marker(car_x, "car_stopped", STOP_MARKER))

        instructions.extend(self._readout(state))

        return Frame(width, height, offset, car_x, instructions)

    def _marker(self, x: float, key: str, color: Color) -> List[Instruction]:
        view = self.view
        dx, label_y = view.label_offset
        triangle = Triangle(
            (
                (x, view.marker_tip),
                (x - view.marker_half_width, view.marker_base),
                (x + view.marker_half_width, view.marker_base),
            ),
            color,
        )
        return [triangle, Text(key, x + dx, label_y, view.text_size, color)]

    def _readout(self, state: SimulationState) -> List[Instruction]:
        lines = [
            ("speed", {"speed": state.speed, "speed_kmh": state.speed * KMH_PER_MS}),
            ("position", {"position": state.position}),
            ("friction", {"friction": self.params.friction_coefficient}),
            ("mass", {"mass": self.params.mass}),
            ("braking_distance", {"distance": displayed_braking_distance(self.params, state)}),
        ]
        view = self.view
        return [
            Text(key, view.text_x, view.text_line_height * (i + 1), view.text_size, TEXT, values)
            for i, (key, values) in enumerate(lines)
        ]
