from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from store_browser.ui.ids import IDs
from store_browser.views.choropleth_view import ChoroplethView
from store_browser.views.point_map_view import PointMapView

MAP_STYLE = {"height": "450px"}


def _map_graph(graph_id: str) -> dcc.Loading:
    return dcc.Loading(
        type="default",
        children=dcc.Graph(
            id=graph_id,
            style=MAP_STYLE,
            config={"responsive": True, "scrollZoom": True},
        ),
    )


def build_map_panel() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            dcc.Tabs(
                id=IDs.Control.MAP_TABS,
                value=PointMapView.id,
                children=[
                    dcc.Tab(
                        label=PointMapView.label,
                        value=PointMapView.id,
                        children=[_map_graph(IDs.Control.POINT_MAP)],
                    ),
                    dcc.Tab(
                        label=ChoroplethView.label,
                        value=ChoroplethView.id,
                        children=[_map_graph(IDs.Control.CHOROPLETH_MAP)],
                    ),
                ],
            ),
            className="p-2",
        ),
        className="sb-maincard mb-3",
    )
