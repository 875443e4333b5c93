from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from store_browser.core.filter_state import ALL, ownership_options
from store_browser.ui.ids import IDs


def build_filter_panel() -> dbc.Row:
    # Country options are filled in by the load callback once the dataset is available
    return dbc.Row(
        [
            dbc.Col(
                [
                    html.Label("Select Country:", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.COUNTRY_SELECT,
                        options=[{"label": ALL, "value": ALL}],
                        value=ALL,
                        clearable=False,
                    ),
                ],
                md=4,
            ),
            dbc.Col(
                [
                    html.Label("Select Ownership Type:", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.OWNERSHIP_SELECT,
                        options=ownership_options(),
                        value=ALL,
                        clearable=False,
                    ),
                ],
                md=4,
            ),
            dbc.Col(
                html.Div(id=IDs.Control.STATUS_BAR, className="text-muted small mt-4"),
                md=4,
            ),
        ],
        className="mt-3 mb-2",
    )
