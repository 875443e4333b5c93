from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pandas as pd

from store_browser.core.boundaries import ISO_COL, CountryBoundaries
from store_browser.core.derivations import STORE_COUNT_COL

logger = logging.getLogger(__name__)


def join_country_counts(boundaries: CountryBoundaries, aggregate: pd.Series) -> pd.DataFrame:
    """
    Left join of per-country counts onto the polygons (polygons drive).

    - every polygon appears exactly once
    - polygons without a matching count get store_count = 0
    - counts for codes without a polygon are dropped
    """
    counts = aggregate.rename(STORE_COUNT_COL).rename_axis(ISO_COL).reset_index()
    counts[ISO_COL] = counts[ISO_COL].astype(str)
    joined = boundaries.frame.merge(counts, on=ISO_COL, how="left", validate="many_to_one")
    joined[STORE_COUNT_COL] = joined[STORE_COUNT_COL].fillna(0).astype(int)

    dropped = unmatched_country_codes(boundaries, aggregate)
    if dropped:
        logger.info(
            "Country counts without a boundary polygon were dropped",
            extra={"country_codes": dropped},
        )
    return joined


def unmatched_country_codes(boundaries: CountryBoundaries, aggregate: pd.Series) -> List[str]:
    """Country codes that have stores but no polygon to draw them on"""
    known = set(boundaries.frame[ISO_COL].dropna())
    return sorted(str(code) for code in aggregate.index if code not in known)


@dataclass(frozen=True)
class ColorScale:
    """
    Sequential colour scale over the present values.

    Plotly clamps z to [zmin, zmax] and interpolates the named palette; missing
    values are drawn in na_color, which is never part of the palette.
    """
    palette: str
    domain: Tuple[float, float]
    na_color: str = "lightgray"

    @classmethod
    def for_values(cls, values: Sequence[float], palette: str = "Blues", na_color: str = "lightgray") -> ColorScale:
        present = [float(v) for v in values if not _is_missing(v)]
        if not present:
            return cls(palette=palette, domain=(0.0, 0.0), na_color=na_color)
        return cls(palette=palette, domain=(min(present), max(present)), na_color=na_color)

    @property
    def zrange(self) -> Tuple[float, float]:
        """(zmin, zmax) for the trace; a single-valued domain is widened by one"""
        low, high = self.domain
        return (low, high) if high > low else (low, low + 1.0)

    @property
    def na_colorscale(self) -> List[List]:
        """Flat colorscale for the trace holding polygons without a value"""
        return [[0, self.na_color], [1, self.na_color]]


def _is_missing(value) -> bool:
    if value is None:
        return True
    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return True
