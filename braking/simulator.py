"""
Main braking simulator class: frame driver and command interface
"""

import logging
from typing import Dict, Optional

from braking.camera import ClampToMidpoint
from braking.engine import DEFAULT_DT, Controls, KinematicsEngine, controls
from braking.locale import DEFAULT_LOCALE, Labels, get_labels
from braking.params import BrakeParams, ViewParams
from braking.projector import Frame, Projector, Text
from braking.state import Phase, SimulationState

logger = logging.getLogger(__name__)

READOUT_KEYS = ("speed", "position", "friction", "mass", "braking_distance")


class BrakeSimulator:
    """Owns one SimulationState and drives it frame by frame"""

    def __init__(
        self,
        params: Optional[BrakeParams] = None,
        view: Optional[ViewParams] = None,
        camera=None,
        locale: str = DEFAULT_LOCALE,
        state: Optional[SimulationState] = None,
    ) -> None:
        """
        Initialize simulator

        Args:
            params: Physical constants, defaults to BrakeParams()
            view: Canvas layout, defaults to ViewParams()
            camera: Camera policy, defaults to ClampToMidpoint()
            locale: Locale tag for resolving text ("en" or "de")
            state: Existing state to continue from (e.g. restored from a store)
        """
        self.params = params or BrakeParams()
        self.view = view or ViewParams()
        self.engine = KinematicsEngine(self.params)
        self.projector = Projector(self.params, self.view, camera or ClampToMidpoint())
        self.labels: Labels = get_labels(locale)
        self.state = state if state is not None else SimulationState()
        logger.debug(
            "simulator ready: mu=%s, camera=%s, locale=%s",
            self.params.friction_coefficient,
            type(self.projector.camera).__name__,
            locale,
        )

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def start(self) -> bool:
        return self.engine.start(self.state)

    def brake(self) -> bool:
        return self.engine.brake(self.state)

    def restart(self) -> bool:
        return self.engine.restart(self.state)

    def controls(self) -> Controls:
        return controls(self.state.phase)

    def step(
        self,
        dt: float = DEFAULT_DT,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> Frame:
        """
        Advance one frame and draw it

        Args:
            dt: Time step (s)
            width: Surface width (px)
            height: Surface height (px)

        Returns:
            The rendered frame
        """
        self.engine.tick(self.state, dt)
        return self.draw(width, height)

    def draw(self, width: Optional[float] = None, height: Optional[float] = None) -> Frame:
        """Render the current state without advancing it"""
        frame = self.projector.render(self.state, width, height)
        self.state.camera_offset = frame.camera_offset
        return frame

    def readout(self) -> Dict[str, str]:
        """Localized text overlay lines keyed by label"""
        frame = self.projector.render(self.state)
        return {
            text.key: text.resolve(self.labels)
            for text in frame.instructions
            if isinstance(text, Text) and text.key in READOUT_KEYS
        }

