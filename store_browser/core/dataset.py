from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import pandas as pd

STORE_ID_COL = "storeNumber"
COUNTRY_COL = "countryCode"
OWNERSHIP_COL = "ownershipTypeCode"
LAT_COL = "latitude"
LON_COL = "longitude"
ADDRESS_COL = "address"

STORE_COLUMNS: List[str] = [STORE_ID_COL, COUNTRY_COL, OWNERSHIP_COL, LAT_COL, LON_COL, ADDRESS_COL]


class OwnershipType(str, Enum):
    """
    Store operation model. Only CO and LS are selectable in the UI; any
    other code in the source data classifies as OTHER.
    """
    COMPANY_OWNED = "CO"
    LICENSED = "LS"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        return _OWNERSHIP_LABELS[self]

    @classmethod
    def from_code(cls, code: str) -> OwnershipType:
        for member in (cls.COMPANY_OWNED, cls.LICENSED):
            if member.value == code:
                return member
        return cls.OTHER


_OWNERSHIP_LABELS = {
    OwnershipType.COMPANY_OWNED: "Company Owned (CO)",
    OwnershipType.LICENSED: "Licensed Store (LS)",
    OwnershipType.OTHER: "Other",
}


@dataclass(frozen=True)
class StoreRecord:
    store_id: str
    country_code: str
    ownership_code: str
    latitude: float
    longitude: float
    address: str

    @property
    def ownership_type(self) -> OwnershipType:
        return OwnershipType.from_code(self.ownership_code)


@dataclass(frozen=True)
class Bounds:
    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    @property
    def center(self) -> Tuple[float, float]:
        """(lat, lon) midpoint"""
        return (self.min_lat + self.max_lat) / 2.0, (self.min_lon + self.max_lon) / 2.0


@dataclass(frozen=True)
class MapFraming:
    center_lat: float
    center_lon: float
    zoom: float

    @classmethod
    def from_bounds(cls, bounds: Optional[Bounds], max_zoom: float = 15.0) -> MapFraming:
        """
        Approximate a web-mercator viewport that fits the bounding box.

        Plotly tile maps take a center + zoom rather than a bbox, so the zoom
        is the largest level at which both spans still fit a ~512px tile.
        """
        if bounds is None:
            return cls(center_lat=20.0, center_lon=0.0, zoom=1.0)

        lat, lon = bounds.center
        lon_span = max(bounds.max_lon - bounds.min_lon, 1e-6)
        lat_span = max(bounds.max_lat - bounds.min_lat, 1e-6)

        zoom = min(math.log2(360.0 / lon_span), math.log2(180.0 / lat_span))
        zoom = max(0.0, min(max_zoom, zoom))
        return cls(center_lat=lat, center_lon=lon, zoom=round(zoom, 2))


class StoreDataset:
    """
    Immutable in-memory store dataset.

    Wraps the normalised frame produced by the loader. The frame is never handed
    out directly: `frame` returns a copy, so derivations cannot mutate the
    shared session data.
    """

    def __init__(self, frame: pd.DataFrame, source: str = "<memory>", n_rejected: int = 0) -> None:
        missing = [c for c in STORE_COLUMNS if c not in frame.columns]
        if missing:
            raise ValueError(f"StoreDataset frame is missing columns: {missing}")

        self._frame = frame[STORE_COLUMNS].reset_index(drop=True).copy()
        self.source = source
        self.n_rejected = n_rejected
        self._records: Optional[Tuple[StoreRecord, ...]] = None
        self._bounds: Optional[Bounds] = None

    def __len__(self) -> int:
        return len(self._frame)

    def __repr__(self) -> str:
        return f"StoreDataset(source={self.source!r}, n_stores={len(self)}, n_rejected={self.n_rejected})"

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame.copy()

    @property
    def is_empty(self) -> bool:
        return self._frame.empty

    def records(self) -> Tuple[StoreRecord, ...]:
        if self._records is None:
            self._records = tuple(
                StoreRecord(
                    store_id=str(row[STORE_ID_COL]),
                    country_code=str(row[COUNTRY_COL]),
                    ownership_code=str(row[OWNERSHIP_COL]),
                    latitude=float(row[LAT_COL]),
                    longitude=float(row[LON_COL]),
                    address=str(row[ADDRESS_COL]),
                )
                for row in self._frame.to_dict("records")
            )
        return self._records

    def country_codes(self) -> List[str]:
        """Distinct country codes, sorted"""
        return sorted(self._frame[COUNTRY_COL].astype(str).unique())

    def bounds(self) -> Optional[Bounds]:
        """Bounding box over the full dataset, or None when empty"""
        if self._frame.empty:
            return None
        if self._bounds is None:
            self._bounds = Bounds(
                min_lon=float(self._frame[LON_COL].min()),
                min_lat=float(self._frame[LAT_COL].min()),
                max_lon=float(self._frame[LON_COL].max()),
                max_lat=float(self._frame[LAT_COL].max()),
            )
        return self._bounds
