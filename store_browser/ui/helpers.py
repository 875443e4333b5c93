from __future__ import annotations

from typing import Optional

import dash_bootstrap_components as dbc
import plotly.graph_objs as go
from dash import html


def message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def error_figure(details: str) -> go.Figure:
    return message_figure("Something went wrong while rendering this view.", details)


def load_error_alert(details: str) -> dbc.Alert:
    return dbc.Alert(
        [
            html.H5("Store data could not be loaded", className="alert-heading"),
            html.P(details, className="mb-0"),
        ],
        color="danger",
    )


def status_text(n_filtered: int, n_total: int, n_shown: int) -> str:
    if n_filtered == n_shown:
        return f"{n_filtered:,} of {n_total:,} stores"
    return f"{n_filtered:,} of {n_total:,} stores (table shows first {n_shown:,})"
