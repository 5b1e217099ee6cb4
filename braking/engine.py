"""
Kinematics engine: per-frame speed/position update and run events
"""

import logging
import math
from dataclasses import dataclass

from braking.params import BrakeParams
from braking.state import Phase, SimulationState

logger = logging.getLogger(__name__)

DEFAULT_DT = 1 / 60  # s, one frame at 60 Hz


@dataclass(frozen=True)
class Controls:
    """Which UI triggers are shown and enabled for a phase"""

    show_start: bool
    show_brake: bool
    brake_enabled: bool
    show_restart: bool


def controls(phase: Phase) -> Controls:
    """
    Button visibility for the current phase

    Start only before the run, Brake while the car moves (greyed out once
    braking), Restart as soon as the run has started.
    """
    return Controls(
        show_start=phase is Phase.IDLE,
        show_brake=phase.running,
        brake_enabled=phase is Phase.ROLLING,
        show_restart=phase is not Phase.IDLE,
    )


def displayed_braking_distance(params: BrakeParams, state: SimulationState) -> float:
    """
    Braking distance shown to the user

    Before braking this is the closed-form stopping distance; afterwards
    the distance actually covered since the brake was applied.
    """
    if state.brake_start_position is None:
        return params.theoretical_braking_distance
    return state.position - state.brake_start_position


class KinematicsEngine:
    """Advances a SimulationState under free-roll or braking"""

    def __init__(self, params: BrakeParams) -> None:
        """
        Initialize engine

        Args:
            params: Physical constants of the run
        """
        self.params = params

    @property
    def deceleration(self) -> float:
        return self.params.deceleration

    @property
    def theoretical_braking_distance(self) -> float:
        return self.params.theoretical_braking_distance

    def braking_distance(self, state: SimulationState) -> float:
        return displayed_braking_distance(self.params, state)

    def start(self, state: SimulationState) -> bool:
        """Start rolling at the initial speed (only from IDLE)"""
        if state.phase is not Phase.IDLE:
            logger.debug("start ignored in phase %s", state.phase.value)
            return False
        state.speed = self.params.initial_speed
        state.phase = Phase.ROLLING
        logger.info("run started at %.2f m/s", state.speed)
        self._check_invariants(state)
        return True

    def brake(self, state: SimulationState) -> bool:
        """Apply the brake at the current position (only while ROLLING)"""
        if state.phase is not Phase.ROLLING:
            logger.debug("brake ignored in phase %s", state.phase.value)
            return False
        state.brake_start_position = state.position
        state.phase = Phase.BRAKING
        logger.info("braking from %.2f m/s at %.2f m", state.speed, state.position)
        self._check_invariants(state)
        return True

    def restart(self, state: SimulationState) -> bool:
        """Reset every field to the freshly constructed IDLE state"""
        fresh = SimulationState()
        changed = state != fresh
        previous = state.phase
        state.speed = fresh.speed
        state.position = fresh.position
        state.phase = fresh.phase
        state.brake_start_position = fresh.brake_start_position
        state.camera_offset = fresh.camera_offset
        logger.debug("run reset from phase %s", previous.value)
        return changed

    def tick(self, state: SimulationState, dt: float = DEFAULT_DT) -> None:
        """
        Advance the state by one time step

        Args:
            state: State to mutate in place
            dt: Time step (s), must be positive
        """
        if not (dt > 0 and math.isfinite(dt)):
            raise ValueError(f"dt must be a positive finite number, got {dt}")
        if not state.phase.running:
            return

        previous_position = state.position

        if state.phase is Phase.ROLLING:
            state.position += state.speed * dt
        elif state.speed > 0:
            state.position += state.speed * dt
            state.speed = max(state.speed - self.deceleration * dt, 0.0)
            # Stop test uses the speed after this step's decrement
            if state.speed <= self.params.stop_threshold:
                state.speed = 0.0
                state.phase = Phase.STOPPED
                logger.info(
                    "car stopped after %.2f m of braking",
                    state.position - state.brake_start_position,
                )

        if state.phase.running and state.position >= self.params.max_distance:
            state.speed = 0.0
            state.phase = Phase.STOPPED
            logger.info("maximum distance of %.0f m reached", self.params.max_distance)

        assert state.position >= previous_position, "position moved backwards"
        self._check_invariants(state)

    def _check_invariants(self, state: SimulationState) -> None:
        assert state.speed >= 0, f"negative speed {state.speed}"
        assert state.position >= 0, f"negative position {state.position}"
        if state.phase is Phase.IDLE:
            assert state.speed == 0 and state.position == 0
            assert state.brake_start_position is None
        elif state.phase is Phase.BRAKING:
            assert state.brake_start_position is not None
            assert state.brake_start_position <= state.position
        elif state.phase is Phase.STOPPED:
            assert state.speed == 0
