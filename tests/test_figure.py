"""
Unit tests for the plotly figures.
"""

import plotly.graph_objects as go
import pytest

from braking.analysis import SURFACES, simulate_run
from braking.figure import figure_from_frame, rgba, surfaces_figure
from braking.locale import get_labels
from braking.params import BrakeParams
from braking.projector import Projector, Text
from braking.state import Phase, SimulationState


class TestCanvasFigure:
    """Test suite for drawing frames onto a plotly figure"""

    @pytest.fixture
    def frame(self):
        """Frame of a car that stopped after braking"""
        state = SimulationState(speed=0.0, position=290.0, phase=Phase.STOPPED, brake_start_position=0.0)
        return Projector(BrakeParams()).render(state)

    def test_rgba(self) -> None:
        assert rgba((0, 0, 0, 150)) == "rgba(0,0,0,0.588)"
        assert rgba((0, 150, 250, 255)) == "rgba(0,150,250,1.000)"

    def test_shapes_and_annotations(self, frame) -> None:
        """Test that every rect/triangle becomes a shape and every text an annotation"""
        fig = figure_from_frame(frame, get_labels("en"))
        texts = [i for i in frame.instructions if isinstance(i, Text)]

        assert isinstance(fig, go.Figure)
        # road, skid, car + two marker triangles
        assert len(fig.layout.shapes) == 5
        assert len(fig.layout.annotations) == len(texts)
        assert [s.type for s in fig.layout.shapes].count("path") == 2

    def test_canvas_coordinates(self, frame) -> None:
        """Test pixel axes with the origin top-left"""
        fig = figure_from_frame(frame, get_labels("en"))

        assert tuple(fig.layout.xaxis.range) == (0, 900)
        assert tuple(fig.layout.yaxis.range) == (250, 0)
        assert fig.layout.width == 900
        assert fig.layout.height == 250
        assert fig.layout.plot_bgcolor == "rgba(240,240,240,1.000)"

    def test_labels_resolved_per_locale(self, frame) -> None:
        en = {a.text for a in figure_from_frame(frame, get_labels("en")).layout.annotations}
        de = {a.text for a in figure_from_frame(frame, get_labels("de")).layout.annotations}

        assert "Car Stopped" in en
        assert "Brake Start" in en
        assert "Auto gestoppt" in de
        assert "Bremsbeginn" in de
        assert any(text.startswith("Braking Dist:") for text in en)


class TestSurfacesFigure:
    """Test suite for the road surface comparison chart"""

    def test_one_bar_per_surface(self) -> None:
        runs = {name: simulate_run(BrakeParams(friction_coefficient=mu)) for name, mu in SURFACES.items()}

        fig = surfaces_figure(runs, get_labels("de"), BrakeParams().initial_speed)

        assert len(fig.data) == 1
        assert list(fig.data[0].x) == ["Asphalt, trocken", "Asphalt, nass", "Schotter", "Schnee"]
        assert fig.layout.title.text == "Bremsweg aus 240 km/h nach Fahrbahnbelag"
