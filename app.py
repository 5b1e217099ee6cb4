"""
Web application for the Braking Distance Simulation

Interactive page: start the car, hit the brake, watch it stop. English is
served at "/", German at "/de".
"""

import argparse
import logging
import os
from dataclasses import replace
from typing import Any, Dict, List, Optional

import dash
from dash import Input, Output, State, ctx, dcc, html
from dash.exceptions import PreventUpdate

from braking.analysis import RunResult, SURFACES, simulate_run
from braking.config import SimulationConfig, load_config
from braking.figure import figure_from_frame, surfaces_figure
from braking.locale import LOCALE_PATHS, get_labels, locale_from_path
from braking.simulator import BrakeSimulator
from braking.state import SimulationState

logger = logging.getLogger(__name__)

CONFIG_ENV = "BRAKE_SIM_CONFIG"
FRAME_INTERVAL_MS = 1000 / 60
FRAME_TRIGGER = "frame-driver"

# Button events in the order they are applied when several are pending
EVENTS = ("restart", "start", "brake")
CLICKS_KEY = "clicks"

VISIBLE = {"display": "inline-block"}
HIDDEN = {"display": "none"}

BUTTON_STYLE = {
    "padding": "8px 16px",
    "marginRight": "8px",
    "marginBottom": "16px",
    "color": "white",
    "border": "none",
    "borderRadius": "4px",
    "cursor": "pointer",
}
START_COLOR = "#3b82f6"
BRAKE_COLOR = "#ef4444"
RESTART_COLOR = "#6b7280"


def _button_style(color: str, shown: bool, enabled: bool = True) -> Dict[str, Any]:
    return {
        **BUTTON_STYLE,
        "backgroundColor": color,
        "opacity": 1.0 if enabled else 0.5,
        **(VISIBLE if shown else HIDDEN),
    }


def pending_events(
    n_clicks: Dict[str, Optional[int]], applied: Optional[Dict[str, int]]
) -> List[str]:
    """
    Button events clicked since the stored state was written

    Args:
        n_clicks: Current click count per event, None before the first click
        applied: Click counts already applied to the stored state

    Returns:
        Events to apply, in EVENTS order
    """
    applied = applied or {}
    return [event for event in EVENTS if (n_clicks.get(event) or 0) > applied.get(event, 0)]


def advance_frame(
    config: SimulationConfig,
    trigger: Optional[str],
    n_clicks: Dict[str, Optional[int]],
    surface: Optional[Dict[str, float]],
    store: Optional[Dict[str, Any]],
    pathname: Optional[str],
) -> tuple[Any, ...]:
    """
    Apply pending button events, advance one frame on a tick, then redraw

    Clicks are matched against the counts kept in the store rather than the
    trigger, so a click that lands while an earlier update is in flight is
    applied on the next invocation instead of being lost.

    Raises:
        PreventUpdate: On a frame tick with the car at rest and no pending click
    """
    store = store or {}
    state = SimulationState.from_dict(store)
    events = pending_events(n_clicks, store.get(CLICKS_KEY))
    is_frame = trigger == FRAME_TRIGGER

    # Nothing moves between frames unless the car is running
    if is_frame and not events and not state.phase.running:
        raise PreventUpdate

    view = config.view
    sim = BrakeSimulator(
        config.params,
        view,
        config.make_camera(),
        locale=locale_from_path(pathname),
        state=state,
    )
    surface = surface or {}
    width = surface.get("width", view.surface_width)
    height = surface.get("height", view.surface_height)

    for event in events:
        getattr(sim, event)()
        logger.debug("applied %s click", event)

    if is_frame:
        frame = sim.step(width=width, height=height)
    else:
        frame = sim.draw(width, height)

    data = sim.state.to_dict()
    data[CLICKS_KEY] = {event: n_clicks.get(event) or 0 for event in EVENTS}
    controls = sim.controls()
    return (
        data,
        figure_from_frame(frame, sim.labels),
        _button_style(START_COLOR, controls.show_start),
        _button_style(BRAKE_COLOR, controls.show_brake, controls.brake_enabled),
        not controls.brake_enabled,
        _button_style(RESTART_COLOR, controls.show_restart),
    )


def localize_page(
    pathname: Optional[str], surface_runs: Dict[str, RunResult], initial_speed: float
) -> tuple[Any, ...]:
    """Labels of the current route's locale, plus the link to the other one"""
    locale = locale_from_path(pathname)
    labels = get_labels(locale)
    other = "de" if locale == "en" else "en"
    return (
        labels["title"],
        labels["start"],
        labels["brake"],
        labels["restart"],
        labels["other_locale"],
        LOCALE_PATHS[other],
        surfaces_figure(surface_runs, labels, initial_speed),
    )


def create_app(config: SimulationConfig) -> dash.Dash:
    """Build the Dash app around one simulation configuration"""
    app = dash.Dash(__name__)
    app.title = get_labels("en")["title"]

    view = config.view
    surface_runs = {
        name: simulate_run(replace(config.params, friction_coefficient=mu))
        for name, mu in SURFACES.items()
    }

    app.layout = html.Div([
        dcc.Location(id="url"),
        dcc.Store(id="sim-state", data=SimulationState().to_dict()),
        dcc.Store(id="surface-size", data={"width": view.surface_width, "height": view.surface_height}),
        dcc.Interval(id=FRAME_TRIGGER, interval=FRAME_INTERVAL_MS, n_intervals=0),
        html.Div([
            html.H1(id="title", style={"marginBottom": "10px"}),
            dcc.Link(id="locale-link", href="/de", style={"fontSize": "14px"}),
        ], style={"marginBottom": "20px"}),
        html.Div([
            html.Button(id="start-button", n_clicks=0, style=_button_style(START_COLOR, True)),
            html.Button(id="brake-button", n_clicks=0, style=_button_style(BRAKE_COLOR, False)),
            html.Button(id="restart-button", n_clicks=0, style=_button_style(RESTART_COLOR, False)),
        ]),
        dcc.Graph(id="canvas", config={"staticPlot": True}),
        dcc.Graph(id="surfaces", config={"displayModeBar": False}, style={"marginTop": "30px"}),
    ], style={"maxWidth": "1000px", "margin": "0 auto", "padding": "16px", "overflowX": "auto"})

    # Runs in the browser every frame, so window resizes reach the projector
    app.clientside_callback(
        """
        function(pathname, frames, current) {
            var width = Math.max(Math.min(window.innerWidth - 32, %d), 300);
            if (current && current.width === width) {
                return window.dash_clientside.no_update;
            }
            return {"width": width, "height": %d};
        }
        """ % (view.surface_width, view.surface_height),
        Output("surface-size", "data"),
        [Input("url", "pathname"), Input(FRAME_TRIGGER, "n_intervals")],
        State("surface-size", "data"),
    )

    @app.callback(
        [
            Output("sim-state", "data"),
            Output("canvas", "figure"),
            Output("start-button", "style"),
            Output("brake-button", "style"),
            Output("brake-button", "disabled"),
            Output("restart-button", "style"),
        ],
        [
            Input("start-button", "n_clicks"),
            Input("brake-button", "n_clicks"),
            Input("restart-button", "n_clicks"),
            Input(FRAME_TRIGGER, "n_intervals"),
            Input("surface-size", "data"),
        ],
        [State("sim-state", "data"), State("url", "pathname")],
    )
    def advance(start, brake, restart, _frames, surface, store, pathname):
        n_clicks = {"start": start, "brake": brake, "restart": restart}
        return advance_frame(config, ctx.triggered_id, n_clicks, surface, store, pathname)

    @app.callback(
        [
            Output("title", "children"),
            Output("start-button", "children"),
            Output("brake-button", "children"),
            Output("restart-button", "children"),
            Output("locale-link", "children"),
            Output("locale-link", "href"),
            Output("surfaces", "figure"),
        ],
        [Input("url", "pathname")],
    )
    def localize(pathname):
        return localize_page(pathname, surface_runs, config.params.initial_speed)

    return app


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the braking distance simulation web app")
    parser.add_argument("--config", default=os.environ.get(CONFIG_ENV), help="YAML parameter file")
    parser.add_argument("--port", type=int, default=8050)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(load_config(args.config))
    logger.info("serving on port %d", args.port)
    app.run(debug=args.debug, port=args.port)


if __name__ == "__main__":
    main()
