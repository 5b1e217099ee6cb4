"""
Camera policies: horizontal scroll applied to the world-to-screen mapping
"""

from braking.state import Phase, SimulationState


class ClampToMidpoint:
    """Car moves freely until the canvas midline, then stays pinned there"""

    name = "midpoint"

    def offset(self, state: SimulationState, pixels_per_meter: float, surface_width: float) -> float:
        """
        Camera offset for the current frame

        Args:
            state: Current simulation state
            pixels_per_meter: World-to-screen scale
            surface_width: Canvas width (px)

        Returns:
            Offset in pixels, zero while the car is left of the midline
        """
        raw_x = state.position * pixels_per_meter
        midpoint = surface_width / 2
        return raw_x - midpoint if raw_x > midpoint else 0.0


class FollowWithLead:
    """Camera trails the car by a fixed lead and freezes when the run ends"""

    name = "lead"

    def __init__(self, lead_pixels: float = 100.0) -> None:
        self.lead_pixels = lead_pixels

    def offset(self, state: SimulationState, pixels_per_meter: float, surface_width: float) -> float:
        if state.phase is Phase.STOPPED:
            return state.camera_offset
        return max(0.0, state.position * pixels_per_meter - self.lead_pixels)


def make_camera(name: str, lead_pixels: float = 100.0):
    """Build a camera policy from its short name ("midpoint" or "lead")"""
    if name == ClampToMidpoint.name:
        return ClampToMidpoint()
    if name == FollowWithLead.name:
        return FollowWithLead(lead_pixels)
    raise ValueError(f"Unknown camera policy '{name}', expected 'midpoint' or 'lead'")
