from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import pandas as pd
import plotly.graph_objs as go

from .boundaries import CountryBoundaries
from .dataset import StoreDataset
from .derivations import filtered_view
from .filter_state import FilterState


class BaseView(ABC):
    """
    Abstract base class for all dashboard views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - used to compute the data given the current FilterState
    - implement 'render' - used to render a Plotly figure or Dash component from that data

    Views are stateless: a fresh render is produced on every relevant change.
    """

    id: str = None
    label: str = None

    def __init__(self, dataset: StoreDataset, boundaries: Optional[CountryBoundaries] = None, **options: Any):
        self.dataset = dataset
        self.boundaries = boundaries
        self.options = options

    @abstractmethod
    def compute_data(self, state: FilterState) -> Any:
        """
        Compute the data given the current FilterState
        :param state: the current {@link FilterState} - what filters the user has selected
        :return: data: the derived data this view renders
        """
        raise NotImplementedError()

    @abstractmethod
    def render(self, data: Any, state: FilterState) -> Any:
        """
        Render the view given the computed data
        :param data: the data provided by {@link compute_data()}
        :param state: the current {@link FilterState}
        :return: a Plotly figure or Dash component
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def filtered_view(self, state: FilterState) -> pd.DataFrame:
        """
        Return this view's dataset filtered according to the given FilterState.

        Views call this instead of filtering the frame themselves, so the
        filtering behaviour lives in one place.
        """
        return filtered_view(self.dataset, state)

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
