"""Figuras plotly para el dashboard de motocompresores"""

from typing import Dict, List

import plotly.graph_objs as go

from .aggregation import SiteCounts, StatusRow

FONT_COLOR = "#e0e0e0"
GRID_COLOR = "#3a3a3a"
PAPER_COLOR = "#1f1f1f"
ACTIVE_COLOR = "#4caf50"
INACTIVE_COLOR = "#f44336"


def _base_layout(title: str, **kwargs) -> go.Layout:
    return go.Layout(
        title={"text": title, "font": {"size": 16, "color": FONT_COLOR}},
        paper_bgcolor=PAPER_COLOR,
        plot_bgcolor=PAPER_COLOR,
        font={"color": FONT_COLOR},
        height=400,
        **kwargs
    )


def status_count_figure(rows: List[StatusRow]) -> go.Figure:
    """Barras horizontales: cantidad de MTC por estado administrativo"""
    bar = go.Bar(
        x=[row.count for row in rows],
        y=[row.label for row in rows],
        orientation="h",
        marker_color=[row.color for row in rows],
        customdata=[row.percentage for row in rows],
        hovertemplate="%{x} MTC (%{customdata}%)<extra></extra>",
        name="Cantidad de MTC"
    )
    layout = _base_layout(
        "Cantidad de MTC por Estado Administrativo",
        showlegend=False,
        xaxis={"gridcolor": GRID_COLOR, "dtick": 1, "rangemode": "tozero"},
        yaxis={"autorange": "reversed"}
    )
    return go.Figure(data=[bar], layout=layout)


def status_share_figure(rows: List[StatusRow]) -> go.Figure:
    """Dona: distribución porcentual de estados MTC"""
    pie = go.Pie(
        labels=[row.label for row in rows],
        values=[row.count for row in rows],
        marker={"colors": [row.color for row in rows]},
        hole=0.5,
        sort=False,
        customdata=[row.percentage for row in rows],
        hovertemplate="%{label}: %{value} (%{customdata}%)<extra></extra>"
    )
    layout = _base_layout(
        "Distribución Porcentual de Estados MTC",
        legend={"orientation": "h", "y": -0.1}
    )
    return go.Figure(data=[pie], layout=layout)


def wells_by_site_figure(counts: Dict[str, SiteCounts]) -> go.Figure:
    """Barras agrupadas: pozos activos e inactivos por activo"""
    labels = list(counts.keys())
    traces = [
        go.Bar(
            x=labels,
            y=[counts[label].active_count for label in labels],
            name="Pozos Activos",
            marker_color=ACTIVE_COLOR
        ),
        go.Bar(
            x=labels,
            y=[counts[label].inactive_count for label in labels],
            name="Pozos Inactivos",
            marker_color=INACTIVE_COLOR
        ),
    ]
    layout = _base_layout(
        "Pozos Activos e Inactivos por Activo",
        barmode="group",
        legend={"orientation": "h", "y": 1.1},
        yaxis={"gridcolor": GRID_COLOR, "dtick": 1, "rangemode": "tozero"}
    )
    return go.Figure(data=traces, layout=layout)
