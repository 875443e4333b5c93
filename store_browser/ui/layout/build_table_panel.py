from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from store_browser.ui.ids import IDs


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Stores"), className="p-2"),
            dbc.CardBody(
                dcc.Loading(
                    type="default",
                    children=html.Div(id=IDs.Control.STORE_TABLE),
                ),
            ),
        ],
        className="sb-tablecard mb-3",
    )
