from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd
import requests

from store_browser.core.dataset import (
    ADDRESS_COL,
    COUNTRY_COL,
    LAT_COL,
    LON_COL,
    OWNERSHIP_COL,
    STORE_COLUMNS,
    STORE_ID_COL,
    StoreDataset,
)
from store_browser.core.exceptions import DataFetchError

logger = logging.getLogger(__name__)

ADDRESS_LINE1_COL = "streetAddressLine1"
ADDRESS_LINE2_COL = "streetAddressLine2"
ADDRESS_SEPARATOR = ", "

RAW_COLUMNS = [
    STORE_ID_COL,
    COUNTRY_COL,
    OWNERSHIP_COL,
    LAT_COL,
    LON_COL,
    ADDRESS_LINE1_COL,
    ADDRESS_LINE2_COL,
]


def is_remote_source(source: Union[str, Path]) -> bool:
    return str(source).startswith(("http://", "https://"))


def fetch_text(url: str, timeout: float, error_cls: type[Exception] = DataFetchError) -> str:
    """
    Single GET of a remote text resource. No retries: one attempt per session.
    """
    logger.info("Fetching remote resource", extra={"url": url})
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise error_cls(f"Could not fetch {url}: {e}") from e
    return response.text


def _clean_str(series: pd.Series) -> pd.Series:
    """Strip strings; blank strings become NA"""
    cleaned = series.astype("string").str.strip()
    return cleaned.mask(cleaned == "")


def _derive_address(line1: pd.Series, line2: pd.Series) -> pd.Series:
    has_line2 = line2.notna()
    joined = line1 + ADDRESS_SEPARATOR + line2
    return joined.where(has_line2, line1)


def normalize_store_frame(raw: pd.DataFrame) -> tuple[pd.DataFrame, int]:
    """
    Project the raw CSV onto the store columns and drop unusable rows.

    - address: "line1, line2" when line2 is present and non-blank, else line1
    - latitude/longitude coerced to float; out-of-range values count as missing
    - any row missing a required field is rejected

    :return: (normalised frame, number of rejected rows)
    :raises DataFetchError: if a required column is absent
    """
    missing = [c for c in RAW_COLUMNS if c not in raw.columns]
    if missing:
        raise DataFetchError(f"Store CSV is missing required columns: {missing}")

    df = pd.DataFrame(
        {
            STORE_ID_COL: _clean_str(raw[STORE_ID_COL]),
            COUNTRY_COL: _clean_str(raw[COUNTRY_COL]),
            OWNERSHIP_COL: _clean_str(raw[OWNERSHIP_COL]),
            LAT_COL: pd.to_numeric(raw[LAT_COL], errors="coerce"),
            LON_COL: pd.to_numeric(raw[LON_COL], errors="coerce"),
        }
    )
    df[ADDRESS_COL] = _derive_address(
        _clean_str(raw[ADDRESS_LINE1_COL]),
        _clean_str(raw[ADDRESS_LINE2_COL]),
    )

    df.loc[~df[LAT_COL].between(-90.0, 90.0), LAT_COL] = np.nan
    df.loc[~df[LON_COL].between(-180.0, 180.0), LON_COL] = np.nan

    n_raw = len(df)
    df = df.dropna(subset=STORE_COLUMNS).reset_index(drop=True)
    n_rejected = n_raw - len(df)

    for col in (STORE_ID_COL, COUNTRY_COL, OWNERSHIP_COL, ADDRESS_COL):
        df[col] = df[col].astype(str)
    df[LAT_COL] = df[LAT_COL].astype(float)
    df[LON_COL] = df[LON_COL].astype(float)

    return df[STORE_COLUMNS], n_rejected


def load_store_dataset(source: Union[str, Path], timeout: float = 30.0) -> StoreDataset:
    """
    Materialise a StoreDataset from a CSV (http(s) URL or local path).

    :raises DataFetchError: fetch failure, unparseable CSV, missing columns or
        no usable records. No partial dataset is ever returned.
    """
    source_str = str(source)

    if is_remote_source(source_str):
        text = fetch_text(source_str, timeout=timeout)
        buffer: Union[io.StringIO, Path] = io.StringIO(text)
    else:
        path = Path(source_str)
        if not path.is_file():
            raise DataFetchError(f"Store CSV not found at {path}")
        buffer = path

    try:
        raw = pd.read_csv(buffer, dtype=str)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataFetchError(f"Store CSV at {source_str} could not be parsed: {e}") from e

    df, n_rejected = normalize_store_frame(raw)

    if df.empty:
        raise DataFetchError(f"Store CSV at {source_str} contains no usable store records")

    logger.info(
        "Store dataset loaded",
        extra={"source": source_str, "n_stores": len(df), "n_rejected": n_rejected},
    )
    return StoreDataset(df, source=source_str, n_rejected=n_rejected)
