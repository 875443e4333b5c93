from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from store_browser.core.filter_state import FilterState
from store_browser.ui.ids import IDs

if TYPE_CHECKING:
    from store_browser.services.session_service import DashboardSession

logger = logging.getLogger(__name__)


def register_sync_callbacks(app: dash.Dash, ctx: DashboardSession) -> None:
    # ---------------------------------------------------------
    # Dropdowns -> FilterState store (the store's only writer)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.COUNTRY_SELECT, "value"),
        Input(IDs.Control.OWNERSHIP_SELECT, "value"),
    )
    def sync_filter_state(country: str | None, ownership: str | None):
        try:
            state = FilterState.from_dict({"country": country, "ownership_type": ownership})
        except ValueError:
            logger.warning(
                "Ignoring invalid filter selection",
                extra={"country": country, "ownership_type": ownership},
            )
            return dash.no_update
        return state.to_dict()
