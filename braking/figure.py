"""
Plotly figures: the simulation canvas and the road surface comparison
"""

from typing import Any, Dict, List

import plotly.graph_objects as go

from braking.locale import Labels
from braking.params import KMH_PER_MS
from braking.projector import Background, Color, Frame, Rect, Text, Triangle


def rgba(color: Color) -> str:
    """CSS colour string for an RGBA tuple with 0-255 alpha"""
    r, g, b, a = color
    return f"rgba({r},{g},{b},{a / 255:.3f})"


def figure_from_frame(frame: Frame, labels: Labels) -> go.Figure:
    """
    Draw a frame onto a plotly figure used as a canvas

    The axes are in screen pixels with the origin top-left and y pointing
    down, so draw instructions map one to one onto layout shapes.

    Args:
        frame: Rendered frame from the projector
        labels: Label table used to resolve text instructions

    Returns:
        Figure without axes, sized to the frame surface
    """
    shapes: List[Dict[str, Any]] = []
    annotations: List[Dict[str, Any]] = []
    background = "white"

    for instruction in frame.instructions:
        if isinstance(instruction, Background):
            background = rgba(instruction.color)
        elif isinstance(instruction, Rect):
            shapes.append(dict(
                type="rect",
                x0=instruction.x,
                y0=instruction.y,
                x1=instruction.x + instruction.width,
                y1=instruction.y + instruction.height,
                fillcolor=rgba(instruction.color),
                line=dict(width=0),
                layer="above",
            ))
        elif isinstance(instruction, Triangle):
            (x1, y1), (x2, y2), (x3, y3) = instruction.points
            shapes.append(dict(
                type="path",
                path=f"M {x1},{y1} L {x2},{y2} L {x3},{y3} Z",
                fillcolor=rgba(instruction.color),
                line=dict(width=0),
                layer="above",
            ))
        elif isinstance(instruction, Text):
            annotations.append(dict(
                x=instruction.x,
                y=instruction.y,
                text=instruction.resolve(labels),
                showarrow=False,
                xanchor="left",
                yanchor="bottom",
                font=dict(size=instruction.size, color=rgba(instruction.color)),
            ))

    fig = go.Figure()
    fig.update_layout(
        width=frame.width,
        height=frame.height,
        margin=dict(l=0, r=0, t=0, b=0),
        plot_bgcolor=background,
        paper_bgcolor=background,
        shapes=shapes,
        annotations=annotations,
        showlegend=False,
        xaxis=dict(range=[0, frame.width], visible=False, fixedrange=True),
        yaxis=dict(range=[frame.height, 0], visible=False, fixedrange=True),
    )
    return fig


def surfaces_figure(results: Dict[str, Any], labels: Labels, initial_speed: float) -> go.Figure:
    """
    Bar chart of simulated braking distance per road surface

    Args:
        results: Mapping of surface name to RunResult
        labels: Label table for titles and surface names
        initial_speed: Initial speed (m/s) shown in the title
    """
    names = list(results)
    distances = [results[name].braking_distance for name in names]
    surface_labels = [labels[f"surface_{name}"] for name in names]
    unit = labels["unit_m"]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=surface_labels,
            y=distances,
            marker_color=["green" if i == 0 else "orange" for i in range(len(names))],
            text=[f"{d:.1f} {unit}" for d in distances],
            textposition="outside",
            hovertemplate=f"%{{x}}<br>%{{y:.2f}} {unit}<extra></extra>",
        )
    )

    fig.update_layout(
        title=labels.format("surfaces_title", speed_kmh=initial_speed * KMH_PER_MS),
        xaxis_title=labels["surfaces_x"],
        yaxis_title=labels.format("surfaces_y"),
        height=400,
        template="plotly_white",
    )
    return fig
