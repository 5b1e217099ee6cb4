"""
Braking Distance Simulation

This package simulates a car braking from a fixed initial speed: per-frame
kinematics, a camera-following projector producing draw instructions, and
English/German labels for the readout.
"""

from braking.params import BrakeParams, ViewParams
from braking.state import Phase, SimulationState
from braking.engine import KinematicsEngine, controls
from braking.camera import ClampToMidpoint, FollowWithLead
from braking.projector import Projector
from braking.simulator import BrakeSimulator
from braking.analysis import run_friction_analysis, simulate_run

__all__ = [
    "BrakeParams",
    "ViewParams",
    "Phase",
    "SimulationState",
    "KinematicsEngine",
    "controls",
    "ClampToMidpoint",
    "FollowWithLead",
    "Projector",
    "BrakeSimulator",
    "run_friction_analysis",
    "simulate_run",
]
