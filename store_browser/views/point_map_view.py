from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from store_browser.core.base_view import BaseView
from store_browser.core.dataset import ADDRESS_COL, LAT_COL, LON_COL, STORE_ID_COL, MapFraming
from store_browser.core.filter_state import FilterState


class PointMapView(BaseView):
    """
    One marker per filtered store on a tile map.

    - markers are rebuilt from scratch on every render
    - viewport framing comes from the full dataset, never the filtered one
    - a constant uirevision keeps the user's pan/zoom across filter changes
    """

    id = "point_map"
    label = "📍 Store Location Map"

    UIREVISION = "store-point-map"

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        return self.filtered_view(state)

    def framing(self) -> MapFraming:
        framing = self.options.get("framing")
        if framing is None:
            framing = MapFraming.from_bounds(self.dataset.bounds())
        return framing

    def render(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        framing = self.framing()
        map_style = self.options.get("map_style", "carto-positron")

        fig = go.Figure(
            go.Scattermap(
                lat=data[LAT_COL].tolist(),
                lon=data[LON_COL].tolist(),
                mode="markers",
                marker=dict(size=6, color="blue", opacity=0.7),
                text=("📍 Address: " + data[ADDRESS_COL].astype(str)).tolist(),
                customdata=data[STORE_ID_COL].tolist(),
                hovertemplate="%{text}<br>Store #%{customdata}<extra></extra>",
                name="Stores",
            )
        )
        fig.update_layout(
            map=dict(
                style=map_style,
                center=dict(lat=framing.center_lat, lon=framing.center_lon),
                zoom=framing.zoom,
            ),
            uirevision=self.UIREVISION,
            margin=dict(l=0, r=0, t=0, b=0),
            showlegend=False,
        )
        return fig
