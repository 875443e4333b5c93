from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from store_browser.config.io import load_global_config
from store_browser.core.view_registry import ViewRegistry
from store_browser.services.session_service import DashboardSession
from store_browser.ui.callbacks.callbacks_load import register_load_callbacks
from store_browser.ui.callbacks.callbacks_render import register_render_callbacks
from store_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from store_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from store_browser.views import ChoroplethView, PointMapView, StoreTableView

    registry = ViewRegistry()
    registry.register(PointMapView)
    registry.register(ChoroplethView)
    registry.register(StoreTableView)
    return registry


def create_dash_app(
    config_root: Path | str = Path("config"),
    session: Optional[DashboardSession] = None,
) -> Dash:
    # 1) Session context: config + lazily-loaded resources.
    # The dataset is NOT fetched here; the first page load triggers it.
    if session is None:
        global_config = load_global_config(Path(config_root))
        session = DashboardSession(global_config, build_view_registry())

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = session.config.ui_title
    app.layout = build_layout(session)

    # Register callbacks
    register_load_callbacks(app, session)
    register_sync_callbacks(app, session)
    register_render_callbacks(app, session)

    logger.info("Dash app created", extra={"data_url": session.config.data_url})
    return app
