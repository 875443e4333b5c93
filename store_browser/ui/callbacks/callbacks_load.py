from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from store_browser.core.derivations import country_options
from store_browser.core.exceptions import DataFetchError
from store_browser.ui.helpers import load_error_alert
from store_browser.ui.ids import IDs

if TYPE_CHECKING:
    from store_browser.services.session_service import DashboardSession

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}


def register_load_callbacks(app: dash.Dash, ctx: DashboardSession) -> None:
    # ---------------------------------------------------------
    # Initial dataset load (fires once per page load, after the shell renders)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.DATASET_STATUS, "data"),
        Output(IDs.Control.COUNTRY_SELECT, "options"),
        Output(IDs.Control.LOAD_ERROR, "children"),
        Output(IDs.Control.DASHBOARD_BODY, "style"),
        Input(IDs.Control.LOAD_ERROR, "id"),
    )
    def load_dataset(_trigger: Any):
        try:
            dataset = ctx.dataset()
        except DataFetchError as e:
            logger.error("Store dataset unavailable", extra={"error": str(e)})
            return {"loaded": False, "error": str(e)}, dash.no_update, load_error_alert(str(e)), HIDDEN

        status = {"loaded": True, "n_stores": len(dataset), "n_rejected": dataset.n_rejected}
        return status, country_options(dataset), None, {}
