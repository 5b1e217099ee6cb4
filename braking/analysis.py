"""
Headless runs and friction (road surface) analysis
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

import numpy as np

from braking.engine import DEFAULT_DT, KinematicsEngine
from braking.params import BrakeParams
from braking.state import Phase, SimulationState

logger = logging.getLogger(__name__)

# Typical tire/road friction coefficients
SURFACES: Dict[str, float] = {
    "dry_asphalt": 0.7811,
    "wet_asphalt": 0.5,
    "gravel": 0.35,
    "snow": 0.2,
}


@dataclass
class RunResult:
    """Frame-by-frame history of one run"""

    params: BrakeParams
    time: np.ndarray  # s
    position: np.ndarray  # m
    speed: np.ndarray  # m/s
    phases: List[Phase]
    brake_start_position: Optional[float]

    @property
    def stop_position(self) -> float:
        return float(self.position[-1])

    @property
    def stopping_time(self) -> float:
        return float(self.time[-1])

    @property
    def braking_distance(self) -> Optional[float]:
        """Distance covered with the brake applied, None if never braked"""
        if self.brake_start_position is None:
            return None
        return self.stop_position - self.brake_start_position

    @property
    def theoretical_braking_distance(self) -> float:
        return self.params.theoretical_braking_distance

    @property
    def error(self) -> Optional[float]:
        """Simulated minus closed-form braking distance (m)"""
        if self.braking_distance is None:
            return None
        return self.braking_distance - self.theoretical_braking_distance


def simulate_run(
    params: Optional[BrakeParams] = None,
    brake_at: Optional[float] = 0.0,
    dt: float = DEFAULT_DT,
    max_steps: Optional[int] = None,
) -> RunResult:
    """
    Run one simulation from start until the car stops

    Args:
        params: Physical constants, defaults to BrakeParams()
        brake_at: Position (m) at which to brake, None to never brake
        dt: Time step (s)
        max_steps: Safety limit on the number of frames

    Returns:
        RunResult with time, position and speed histories

    Raises:
        RuntimeError: If the run has not stopped after max_steps frames
    """
    params = params or BrakeParams()
    engine = KinematicsEngine(params)
    state = SimulationState()

    if max_steps is None:
        # Rolling to the distance cap plus a full stop, with margin
        roll_time = params.max_distance / params.initial_speed
        stop_time = params.initial_speed / params.deceleration
        max_steps = int(2 * (roll_time + stop_time) / dt) + 10

    engine.start(state)
    times = [0.0]
    positions = [state.position]
    speeds = [state.speed]
    phases = [state.phase]

    step = 0
    while state.phase.running:
        if step >= max_steps:
            raise RuntimeError(f"Run did not stop within {max_steps} frames")
        if brake_at is not None and state.position >= brake_at:
            engine.brake(state)
        engine.tick(state, dt)
        step += 1
        times.append(step * dt)
        positions.append(state.position)
        speeds.append(state.speed)
        phases.append(state.phase)

    logger.debug(
        "run mu=%s finished after %d frames at %.2f m", params.friction_coefficient, step, state.position
    )
    return RunResult(
        params=params,
        time=np.array(times),
        position=np.array(positions),
        speed=np.array(speeds),
        phases=phases,
        brake_start_position=state.brake_start_position,
    )


def run_friction_analysis(
    friction_coefficients: List[float],
    base_params: Optional[BrakeParams] = None,
    brake_at: Optional[float] = 0.0,
    dt: float = DEFAULT_DT,
) -> Dict[float, Dict[str, Any]]:
    """
    Run the braking simulation for several friction coefficients

    Args:
        friction_coefficients: Coefficients to compare
        base_params: Remaining constants, defaults to BrakeParams()
        brake_at: Position (m) at which every run brakes
        dt: Time step (s)

    Returns:
        Dictionary keyed by coefficient with the params and RunResult
    """
    base_params = base_params or BrakeParams()
    results: Dict[float, Dict[str, Any]] = {}

    for mu in friction_coefficients:
        params = replace(base_params, friction_coefficient=mu)
        results[mu] = {
            "params": params,
            "result": simulate_run(params, brake_at=brake_at, dt=dt),
        }

    return results
