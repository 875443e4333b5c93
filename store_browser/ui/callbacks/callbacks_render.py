from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output
from dash.exceptions import PreventUpdate

from store_browser.core.exceptions import BoundaryFetchError, StoreBrowserError
from store_browser.core.filter_state import FilterState
from store_browser.services.pipeline import recompute, render_choropleth
from store_browser.ui.helpers import error_figure, message_figure, status_text
from store_browser.ui.ids import IDs

if TYPE_CHECKING:
    from store_browser.services.session_service import DashboardSession

logger = logging.getLogger(__name__)


def _is_loaded(status: Optional[dict[str, Any]]) -> bool:
    return bool(status and status.get("loaded"))


def register_render_callbacks(app: dash.Dash, ctx: DashboardSession) -> None:
    # ---------------------------------------------------------
    # FilterState -> point map + table (one derivation feeds both)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.POINT_MAP, "figure"),
        Output(IDs.Control.STORE_TABLE, "children"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Store.DATASET_STATUS, "data"),
    )
    def update_filtered_views(fs_data: dict[str, Any] | None, status: dict[str, Any] | None):
        if not _is_loaded(status):
            raise PreventUpdate

        try:
            state = FilterState.from_dict(fs_data)
        except ValueError:
            logger.exception("Invalid filter state in render callback: %r", fs_data)
            return error_figure("Internal error: invalid filter state."), None, ""

        try:
            snapshot = recompute(ctx, state)
        except StoreBrowserError as e:
            logger.exception("Error in update_filtered_views", extra={"filter_state": fs_data})
            return error_figure(str(e)), None, ""

        return (
            snapshot.point_map,
            snapshot.table,
            status_text(snapshot.n_stores, len(ctx.dataset()), len(snapshot.table_rows)),
        )

    # ---------------------------------------------------------
    # Dataset -> choropleth (independent of the FilterState)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.CHOROPLETH_MAP, "figure"),
        Input(IDs.Store.DATASET_STATUS, "data"),
    )
    def update_choropleth(status: dict[str, Any] | None):
        if not _is_loaded(status):
            raise PreventUpdate

        try:
            return render_choropleth(ctx)
        except BoundaryFetchError as e:
            logger.error("Country boundaries unavailable", extra={"error": str(e)})
            return message_figure("Country boundaries could not be loaded.", str(e))
        except StoreBrowserError as e:
            logger.exception("Error in update_choropleth")
            return error_figure(str(e))
