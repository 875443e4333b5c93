"""
Pure derivations over the loaded StoreDataset.

None of these functions mutate their inputs or hold state: the same
(dataset, FilterState) snapshot always yields the same output.
"""
from __future__ import annotations

import logging
from typing import Dict, List

import pandas as pd

from store_browser.core.dataset import COUNTRY_COL, OWNERSHIP_COL, StoreDataset
from store_browser.core.filter_state import ALL, FilterState

logger = logging.getLogger(__name__)

STORE_COUNT_COL = "store_count"


def country_choices(dataset: StoreDataset) -> List[str]:
    """Country dropdown values: "ALL" first, then the distinct codes in the dataset"""
    return [ALL] + dataset.country_codes()


def country_options(dataset: StoreDataset) -> List[Dict[str, str]]:
    return [{"label": c, "value": c} for c in country_choices(dataset)]


def filtered_view(dataset: StoreDataset, state: FilterState) -> pd.DataFrame:
    """
    Records matching the state, in dataset order. Country and ownership
    predicates are conjunctive; "ALL" disables a predicate. An empty result is
    an empty frame with the dataset's columns.
    """
    df = dataset.frame

    mask = pd.Series(True, index=df.index)
    if state.country != ALL:
        mask &= df[COUNTRY_COL] == state.country
    if state.ownership_type != ALL:
        mask &= df[OWNERSHIP_COL] == state.ownership_type

    view = df.loc[mask].reset_index(drop=True)
    logger.debug(
        "filtered_view",
        extra={"country": state.country, "ownership_type": state.ownership_type, "n_rows": len(view)},
    )
    return view


def country_aggregate(dataset: StoreDataset) -> pd.Series:
    """
    Store count per country over the full dataset.

    Deliberately takes no FilterState: the choropleth shows the global
    distribution whatever the point map and table are filtered to.
    """
    counts = dataset.frame.groupby(COUNTRY_COL).size().astype(int)
    counts.name = STORE_COUNT_COL
    return counts
