from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pandas as pd

from store_browser.core.dataset_loader import fetch_text, is_remote_source
from store_browser.core.exceptions import BoundaryFetchError

logger = logging.getLogger(__name__)

POLYGON_ID_COL = "polygon_id"
ISO_COL = "iso_a2"
NAME_COL = "name"

# Natural Earth marks countries without an official ISO code as "-99"
NE_MISSING_CODE = "-99"


class CountryBoundaries:
    """
    Country polygons keyed by two-letter ISO code.

    Holds the GeoJSON FeatureCollection (each feature re-keyed with a stable
    string 'id') and a frame with one row per polygon: polygon_id, iso_a2, name.
    iso_a2 is None for polygons without a usable code.
    """

    def __init__(self, geojson: Dict[str, Any], frame: pd.DataFrame) -> None:
        self.geojson = geojson
        self._frame = frame.reset_index(drop=True)

    def __len__(self) -> int:
        return len(self._frame)

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame.copy()

    @classmethod
    def from_geojson(
        cls,
        geojson: Dict[str, Any],
        iso_key: str = "ISO_A2",
        fallback_iso_key: Optional[str] = "ISO_A2_EH",
        name_key: str = "NAME",
    ) -> CountryBoundaries:
        if not isinstance(geojson, dict) or geojson.get("type") != "FeatureCollection":
            raise BoundaryFetchError("Boundary data is not a GeoJSON FeatureCollection")

        features = []
        rows = []
        for idx, feature in enumerate(geojson.get("features") or []):
            props = feature.get("properties") or {}
            polygon_id = str(idx)

            iso = _usable_code(props.get(iso_key))
            if iso is None and fallback_iso_key:
                iso = _usable_code(props.get(fallback_iso_key))

            features.append({**feature, "id": polygon_id})
            rows.append(
                {
                    POLYGON_ID_COL: polygon_id,
                    ISO_COL: iso,
                    NAME_COL: str(props.get(name_key) or iso or polygon_id),
                }
            )

        if not rows:
            raise BoundaryFetchError("Boundary GeoJSON contains no features")

        frame = pd.DataFrame(rows, columns=[POLYGON_ID_COL, ISO_COL, NAME_COL])
        return cls({"type": "FeatureCollection", "features": features}, frame)


def _usable_code(value: Any) -> Optional[str]:
    if value is None:
        return None
    code = str(value).strip().upper()
    if not code or code == NE_MISSING_CODE:
        return None
    return code


def load_country_boundaries(source: Union[str, Path], timeout: float = 30.0) -> CountryBoundaries:
    """
    Load an admin-0 country GeoJSON from an http(s) URL or local path.

    :raises BoundaryFetchError: unreachable, not JSON, or not a FeatureCollection
    """
    source_str = str(source)

    if is_remote_source(source_str):
        text = fetch_text(source_str, timeout=timeout, error_cls=BoundaryFetchError)
    else:
        path = Path(source_str)
        if not path.is_file():
            raise BoundaryFetchError(f"Boundary GeoJSON not found at {path}")
        text = path.read_text(encoding="utf-8")

    try:
        geojson = json.loads(text)
    except json.JSONDecodeError as e:
        raise BoundaryFetchError(f"Boundary data at {source_str} is not valid JSON: {e}") from e

    boundaries = CountryBoundaries.from_geojson(geojson)
    logger.info(
        "Country boundaries loaded",
        extra={"source": source_str, "n_polygons": len(boundaries)},
    )
    return boundaries
