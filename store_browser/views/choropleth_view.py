from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from store_browser.core.base_view import BaseView
from store_browser.core.boundaries import NAME_COL, POLYGON_ID_COL
from store_browser.core.choropleth import ColorScale, join_country_counts
from store_browser.core.derivations import STORE_COUNT_COL, country_aggregate
from store_browser.core.filter_state import FilterState


class ChoroplethView(BaseView):
    """
    Countries shaded by their global store count.

    The counts come from the full dataset: the FilterState is accepted to honour
    the view contract and otherwise ignored.
    """

    id = "choropleth"
    label = "🌎 Choropleth Map"

    LEGEND_TITLE = "Starbucks Stores per Country"

    def compute_data(self, state: FilterState) -> pd.DataFrame:
        if self.boundaries is None:
            raise ValueError("ChoroplethView requires country boundaries")
        return join_country_counts(self.boundaries, country_aggregate(self.dataset))

    def color_scale(self, data: pd.DataFrame) -> ColorScale:
        return ColorScale.for_values(
            data[STORE_COUNT_COL].tolist(),
            palette=self.options.get("color_scale", "Blues"),
            na_color=self.options.get("na_color", "lightgray"),
        )

    def render(self, data: pd.DataFrame, state: FilterState) -> go.Figure:
        if data.empty:
            return self.empty_figure("No country boundaries to display")

        scale = self.color_scale(data)
        zmin, zmax = scale.zrange
        valued = data[data[STORE_COUNT_COL].notna()]
        missing = data[data[STORE_COUNT_COL].isna()]

        fig = go.Figure()
        fig.add_trace(
            go.Choroplethmap(
                geojson=self.boundaries.geojson,
                locations=valued[POLYGON_ID_COL].tolist(),
                z=valued[STORE_COUNT_COL].tolist(),
                zmin=zmin,
                zmax=zmax,
                colorscale=scale.palette,
                marker=dict(opacity=0.7, line=dict(color="white", width=1)),
                customdata=valued[NAME_COL].tolist(),
                hovertemplate="<b>%{customdata}</b><br>☕ Stores: %{z}<extra></extra>",
                colorbar=dict(title=dict(text=self.LEGEND_TITLE)),
                name="Stores",
            )
        )

        if not missing.empty:
            fig.add_trace(
                go.Choroplethmap(
                    geojson=self.boundaries.geojson,
                    locations=missing[POLYGON_ID_COL].tolist(),
                    z=[0] * len(missing),
                    colorscale=scale.na_colorscale,
                    showscale=False,
                    marker=dict(opacity=0.7, line=dict(color="white", width=1)),
                    customdata=missing[NAME_COL].tolist(),
                    hovertemplate="<b>%{customdata}</b><br>☕ Stores: n/a<extra></extra>",
                    name="No data",
                )
            )

        fig.update_layout(
            map=dict(
                style=self.options.get("map_style", "carto-positron"),
                center=dict(lat=20, lon=0),
                zoom=1,
            ),
            margin=dict(l=0, r=0, t=0, b=0),
        )
        return fig
