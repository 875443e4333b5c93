from __future__ import annotations

import dash
import dash_bootstrap_components as dbc
import pandas as pd
import plotly.graph_objs as go
import pytest
from dash.exceptions import PreventUpdate

from store_browser.config.model import GlobalConfig
from store_browser.core.boundaries import CountryBoundaries
from store_browser.core.dataset import StoreDataset
from store_browser.core.exceptions import BoundaryFetchError, DataFetchError
from store_browser.services.session_service import DashboardSession
from store_browser.ui.dash_app import build_view_registry, create_dash_app
from store_browser.ui.ids import IDs


def _make_dataset() -> StoreDataset:
    df = pd.DataFrame(
        {
            "storeNumber": ["s1", "s2", "s3"],
            "countryCode": ["US", "US", "KR"],
            "ownershipTypeCode": ["CO", "LS", "CO"],
            "latitude": [47.6, 40.7, 37.5],
            "longitude": [-122.3, -74.0, 127.0],
            "address": ["a", "b", "c"],
        }
    )
    return StoreDataset(df, source="test")


def _make_boundaries() -> CountryBoundaries:
    square = {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]]}
    features = [
        {"type": "Feature", "properties": {"ISO_A2": "US", "NAME": "United States"}, "geometry": square},
    ]
    return CountryBoundaries.from_geojson({"type": "FeatureCollection", "features": features})


def _failing(exc: Exception):
    def loader():
        raise exc
    return loader


def _make_app(dataset_loader=_make_dataset, boundaries_loader=_make_boundaries) -> dash.Dash:
    session = DashboardSession(
        GlobalConfig(),
        build_view_registry(),
        dataset_loader=dataset_loader,
        boundaries_loader=boundaries_loader,
    )
    return create_dash_app(session=session)


def _callback(app: dash.Dash, output: str):
    """
    The undecorated function registered for the callback writing `output`
    ("component-id.property").
    """
    for key, entry in app.callback_map.items():
        if output in key:
            return entry["callback"].__wrapped__
    raise KeyError(f"No callback writes {output}")


def test_load_callback_populates_country_options():
    app = _make_app()
    load = _callback(app, f"{IDs.Control.DASHBOARD_BODY}.style")

    status, options, alert, style = load(IDs.Control.LOAD_ERROR)

    assert status == {"loaded": True, "n_stores": 3, "n_rejected": 0}
    assert [o["value"] for o in options] == ["ALL", "KR", "US"]
    assert alert is None
    assert style == {}


def test_load_callback_surfaces_fetch_failure():
    app = _make_app(dataset_loader=_failing(DataFetchError("unreachable")))
    load = _callback(app, f"{IDs.Control.DASHBOARD_BODY}.style")

    status, options, alert, style = load(IDs.Control.LOAD_ERROR)

    assert status == {"loaded": False, "error": "unreachable"}
    assert options is dash.no_update
    assert isinstance(alert, dbc.Alert)
    assert alert.color == "danger"
    assert style == {"display": "none"}


def test_filtered_views_wait_for_dataset():
    app = _make_app(dataset_loader=_failing(DataFetchError("unreachable")))
    render = _callback(app, f"{IDs.Control.POINT_MAP}.figure")

    with pytest.raises(PreventUpdate):
        render({"country": "ALL", "ownership_type": "ALL"}, {"loaded": False, "error": "unreachable"})


def test_filtered_views_render_after_load():
    app = _make_app()
    render = _callback(app, f"{IDs.Control.POINT_MAP}.figure")

    fig, table, status = render({"country": "US", "ownership_type": "ALL"}, {"loaded": True})

    assert len(fig.data[0].lat) == 2
    assert len(table.data) == 2
    assert status == "2 of 3 stores"


def test_choropleth_shows_message_when_boundaries_fail():
    app = _make_app(boundaries_loader=_failing(BoundaryFetchError("no geojson")))
    update = _callback(app, f"{IDs.Control.CHOROPLETH_MAP}.figure")

    fig = update({"loaded": True})

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0
    text = fig.layout.annotations[0].text
    assert text.startswith("Country boundaries could not be loaded.")
    assert "no geojson" in text


def test_choropleth_renders_after_load():
    app = _make_app()
    update = _callback(app, f"{IDs.Control.CHOROPLETH_MAP}.figure")

    fig = update({"loaded": True})

    assert fig.data[0].type == "choroplethmap"
    assert list(fig.data[0].z) == [2]
