"""
Unit tests for the camera policies.

Tests the clamp-to-midpoint and follow-with-lead offsets.
"""

import pytest

from braking.camera import ClampToMidpoint, FollowWithLead, make_camera
from braking.state import Phase, SimulationState


class TestClampToMidpoint:
    """Test suite for the canonical camera"""

    @pytest.fixture
    def camera(self) -> ClampToMidpoint:
        return ClampToMidpoint()

    def test_no_offset_before_midpoint(self, camera: ClampToMidpoint) -> None:
        """Test that the camera stays put while the car is left of the midline"""
        state = SimulationState(speed=10.0, position=100.0, phase=Phase.ROLLING)

        assert camera.offset(state, 3.0, 900) == 0.0

    def test_offset_exactly_at_midpoint(self, camera: ClampToMidpoint) -> None:
        """Test that reaching the midline does not scroll yet"""
        state = SimulationState(speed=10.0, position=150.0, phase=Phase.ROLLING)

        assert camera.offset(state, 3.0, 900) == 0.0

    def test_car_pinned_at_midline(self, camera: ClampToMidpoint) -> None:
        """Test that past the midline the offset keeps the car centred"""
        state = SimulationState(speed=10.0, position=200.0, phase=Phase.ROLLING)

        offset = camera.offset(state, 3.0, 900)

        assert offset == pytest.approx(150.0)
        assert 200.0 * 3.0 - offset == pytest.approx(450.0)

    def test_offset_depends_on_surface_width(self, camera: ClampToMidpoint) -> None:
        """Test that a narrower surface scrolls earlier"""
        state = SimulationState(speed=10.0, position=200.0, phase=Phase.ROLLING)

        assert camera.offset(state, 3.0, 600) == pytest.approx(300.0)

    def test_offset_recomputed_when_stopped(self, camera: ClampToMidpoint) -> None:
        """Test that the offset is a function of position, not of the cache"""
        state = SimulationState(position=300.0, phase=Phase.STOPPED, camera_offset=1.0)

        assert camera.offset(state, 3.0, 900) == pytest.approx(450.0)


class TestFollowWithLead:
    """Test suite for the follow-with-lead camera"""

    @pytest.fixture
    def camera(self) -> FollowWithLead:
        return FollowWithLead(lead_pixels=100.0)

    def test_zero_offset_near_start(self, camera: FollowWithLead) -> None:
        state = SimulationState(speed=10.0, position=10.0, phase=Phase.ROLLING)

        assert camera.offset(state, 3.0, 900) == 0.0

    def test_trails_car_by_lead(self, camera: FollowWithLead) -> None:
        state = SimulationState(speed=10.0, position=100.0, phase=Phase.BRAKING, brake_start_position=0.0)

        assert camera.offset(state, 3.0, 900) == pytest.approx(200.0)

    def test_freezes_when_stopped(self, camera: FollowWithLead) -> None:
        """Test that the last offset is kept once the run has ended"""
        state = SimulationState(position=500.0, phase=Phase.STOPPED, camera_offset=123.0)

        assert camera.offset(state, 3.0, 900) == 123.0


class TestMakeCamera:
    """Test suite for building cameras by name"""

    def test_known_names(self) -> None:
        assert isinstance(make_camera("midpoint"), ClampToMidpoint)
        lead = make_camera("lead", lead_pixels=50.0)
        assert isinstance(lead, FollowWithLead)
        assert lead.lead_pixels == 50.0

    def test_unknown_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            make_camera("orbit")
