"""
Explicit recomputation pipeline.

Every input-changing event calls `recompute` with a snapshot of the inputs
(the loaded dataset and the FilterState). The filtered view is derived once
and the same frame feeds both the point map and the table, so the two views
can never disagree about which stores are selected.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import pandas as pd
import plotly.graph_objects as go

from store_browser.core.derivations import filtered_view
from store_browser.core.filter_state import FilterState
from store_browser.services.session_service import DashboardSession
from store_browser.views.choropleth_view import ChoroplethView
from store_browser.views.point_map_view import PointMapView
from store_browser.views.store_table_view import StoreTableView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSnapshot:
    state: FilterState
    filtered: pd.DataFrame
    table_rows: pd.DataFrame
    point_map: go.Figure
    table: Any

    @property
    def n_stores(self) -> int:
        return len(self.filtered)


def recompute(session: DashboardSession, state: FilterState) -> DashboardSnapshot:
    dataset = session.dataset()
    cfg = session.config

    view = filtered_view(dataset, state)

    point_map = session.registry.create(
        PointMapView.id, dataset, framing=session.framing(), map_style=cfg.map_style
    )
    table = session.registry.create(StoreTableView.id, dataset, row_limit=cfg.table_row_limit)

    table_rows = table.project(view)

    logger.info(
        "recompute",
        extra={
            "country": state.country,
            "ownership_type": state.ownership_type,
            "n_filtered": len(view),
            "n_table_rows": len(table_rows),
        },
    )

    return DashboardSnapshot(
        state=state,
        filtered=view,
        table_rows=table_rows,
        point_map=point_map.render(view, state),
        table=table.render(table_rows, state),
    )


def render_choropleth(session: DashboardSession) -> go.Figure:
    """Global per-country choropleth; depends on the dataset only, never on the FilterState"""
    cfg = session.config
    view = session.registry.create(
        ChoroplethView.id,
        session.dataset(),
        boundaries=session.boundaries(),
        map_style=cfg.map_style,
        color_scale=cfg.color_scale,
        na_color=cfg.na_color,
    )
    state = FilterState()
    return view.render(view.compute_data(state), state)
