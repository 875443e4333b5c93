import pandas as pd
import plotly.graph_objs as go

from store_browser.core.dataset import MapFraming, StoreDataset
from store_browser.core.filter_state import FilterState
from store_browser.views.point_map_view import PointMapView


def _make_dataset() -> StoreDataset:
    df = pd.DataFrame(
        {
            "storeNumber": ["s1", "s2", "s3"],
            "countryCode": ["US", "US", "KR"],
            "ownershipTypeCode": ["CO", "LS", "CO"],
            "latitude": [47.6, 40.7, 37.5],
            "longitude": [-122.3, -74.0, 127.0],
            "address": ["1 Pike St", "5 Main St", "9 Gangnam-daero"],
        }
    )
    return StoreDataset(df, source="test")


def test_point_map_one_marker_per_filtered_store():
    view = PointMapView(_make_dataset())
    state = FilterState(country="US")

    data = view.compute_data(state)
    fig = view.render(data, state)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    trace = fig.data[0]
    assert trace.type == "scattermap"
    assert list(trace.lat) == [47.6, 40.7]
    assert list(trace.lon) == [-122.3, -74.0]
    assert list(trace.text) == ["📍 Address: 1 Pike St", "📍 Address: 5 Main St"]


def test_point_map_framing_uses_full_dataset():
    ds = _make_dataset()
    view = PointMapView(ds)
    expected = MapFraming.from_bounds(ds.bounds())

    unfiltered = view.render(view.compute_data(FilterState()), FilterState())
    korea_state = FilterState(country="KR")
    korea = view.render(view.compute_data(korea_state), korea_state)

    for fig in (unfiltered, korea):
        assert fig.layout.map.center.lat == expected.center_lat
        assert fig.layout.map.center.lon == expected.center_lon
        assert fig.layout.map.zoom == expected.zoom
    assert unfiltered.layout.uirevision == korea.layout.uirevision


def test_point_map_explicit_framing_and_style():
    framing = MapFraming(center_lat=1.0, center_lon=2.0, zoom=3.0)
    view = PointMapView(_make_dataset(), framing=framing, map_style="open-street-map")

    fig = view.render(view.compute_data(FilterState()), FilterState())

    assert fig.layout.map.center.lat == 1.0
    assert fig.layout.map.zoom == 3.0
    assert fig.layout.map.style == "open-street-map"


def test_point_map_empty_view_has_no_markers():
    view = PointMapView(_make_dataset())
    state = FilterState(country="KR", ownership_type="LS")

    data = view.compute_data(state)
    fig = view.render(data, state)

    assert data.empty
    assert isinstance(fig, go.Figure)
    assert len(fig.data[0].lat or ()) == 0
