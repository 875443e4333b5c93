from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from store_browser.core.filter_state import FilterState
from store_browser.services.session_service import DashboardSession
from store_browser.ui.ids import IDs
from store_browser.ui.layout.build_filter_panel import build_filter_panel
from store_browser.ui.layout.build_map_panel import build_map_panel
from store_browser.ui.layout.build_navbar import build_navbar
from store_browser.ui.layout.build_table_panel import build_table_panel


def build_layout(ctx: DashboardSession):
    """
    Dashboard shell. Nothing here touches the dataset: the shell renders
    immediately and the panels fill in once the load callback resolves.
    """
    return dbc.Container(
        fluid=True,
        className="sb-root",
        children=[
            build_navbar(ctx.config),

            # App-level stores
            dcc.Store(id=IDs.Store.FILTER_STATE, data=FilterState().to_dict()),
            dcc.Store(id=IDs.Store.DATASET_STATUS),

            html.Div(id=IDs.Control.LOAD_ERROR, className="mt-3"),

            html.Div(
                id=IDs.Control.DASHBOARD_BODY,
                children=[
                    build_filter_panel(),
                    build_map_panel(),
                    build_table_panel(),
                ],
            ),
        ],
    )
