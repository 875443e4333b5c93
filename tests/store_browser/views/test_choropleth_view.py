import pandas as pd
import plotly.graph_objs as go
import pytest

from store_browser.core.boundaries import CountryBoundaries
from store_browser.core.dataset import StoreDataset
from store_browser.core.filter_state import FilterState
from store_browser.views.choropleth_view import ChoroplethView


def _square(x: float) -> dict:
    return {"type": "Polygon", "coordinates": [[[x, 0], [x + 1, 0], [x + 1, 1], [x, 1], [x, 0]]]}


def _make_boundaries() -> CountryBoundaries:
    features = [
        {"type": "Feature", "properties": {"ISO_A2": "US", "NAME": "United States"}, "geometry": _square(0)},
        {"type": "Feature", "properties": {"ISO_A2": "KR", "NAME": "South Korea"}, "geometry": _square(2)},
        {"type": "Feature", "properties": {"ISO_A2": "IS", "NAME": "Iceland"}, "geometry": _square(4)},
    ]
    return CountryBoundaries.from_geojson({"type": "FeatureCollection", "features": features})


def _make_dataset() -> StoreDataset:
    df = pd.DataFrame(
        {
            "storeNumber": ["s1", "s2", "s3", "s4"],
            "countryCode": ["US", "US", "KR", "SG"],
            "ownershipTypeCode": ["CO", "LS", "CO", "LS"],
            "latitude": [47.6, 40.7, 37.5, 1.3],
            "longitude": [-122.3, -74.0, 127.0, 103.8],
            "address": ["a", "b", "c", "d"],
        }
    )
    return StoreDataset(df, source="test")


def test_choropleth_compute_data_joins_global_counts():
    view = ChoroplethView(_make_dataset(), boundaries=_make_boundaries())

    data = view.compute_data(FilterState())

    assert dict(zip(data["iso_a2"], data["store_count"])) == {"US": 2, "KR": 1, "IS": 0}


def test_choropleth_ignores_filter_state():
    view = ChoroplethView(_make_dataset(), boundaries=_make_boundaries())

    a = view.compute_data(FilterState(country="KR"))
    b = view.compute_data(FilterState(country="US", ownership_type="LS"))

    pd.testing.assert_frame_equal(a, b)


def test_choropleth_render_figure():
    view = ChoroplethView(_make_dataset(), boundaries=_make_boundaries())
    state = FilterState()

    fig = view.render(view.compute_data(state), state)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    trace = fig.data[0]
    assert trace.type == "choroplethmap"
    assert list(trace.locations) == ["0", "1", "2"]
    assert list(trace.z) == [2, 1, 0]
    assert (trace.zmin, trace.zmax) == (0, 2)
    assert list(trace.customdata) == ["United States", "South Korea", "Iceland"]
    assert trace.colorbar.title.text == ChoroplethView.LEGEND_TITLE


def test_choropleth_missing_counts_render_in_neutral_trace():
    view = ChoroplethView(_make_dataset(), boundaries=_make_boundaries(), na_color="lightgray")
    data = view.compute_data(FilterState())
    data["store_count"] = data["store_count"].astype(float)
    data.loc[2, "store_count"] = float("nan")

    fig = view.render(data, FilterState())

    assert len(fig.data) == 2
    na_trace = fig.data[1]
    assert list(na_trace.locations) == ["2"]
    assert na_trace.showscale is False
    assert {color for _, color in na_trace.colorscale} == {"lightgray"}


def test_choropleth_requires_boundaries():
    view = ChoroplethView(_make_dataset())

    with pytest.raises(ValueError):
        view.compute_data(FilterState())


def test_choropleth_single_value_domain_keeps_valid_range():
    features = [
        {"type": "Feature", "properties": {"ISO_A2": "US", "NAME": "United States"}, "geometry": _square(0)},
    ]
    boundaries = CountryBoundaries.from_geojson({"type": "FeatureCollection", "features": features})
    view = ChoroplethView(_make_dataset(), boundaries=boundaries)

    fig = view.render(view.compute_data(FilterState()), FilterState())

    trace = fig.data[0]
    assert (trace.zmin, trace.zmax) == (2, 3)
    assert trace.colorscale[0][1] != trace.colorscale[-1][1]
