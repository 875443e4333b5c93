from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

from store_browser.core.exceptions import ConfigError

DEFAULT_DATA_URL = "https://raw.githubusercontent.com/JIHONGKING/Min/main/startbucks.csv"
DEFAULT_BOUNDARIES_URL = (
    "https://raw.githubusercontent.com/nvkelso/natural-earth-vector/master/"
    "geojson/ne_50m_admin_0_countries.geojson"
)


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json.

    - data_url: CSV of store locations (http(s) URL or local path)
    - boundaries_url: admin-0 country GeoJSON (http(s) URL or local path)
    - table_row_limit: rows shown in the store table
    """
    ui_title: str = "Starbucks Global Store Analysis"
    subtitle: str = "Store locations by country and ownership type"
    data_url: str = DEFAULT_DATA_URL
    boundaries_url: str = DEFAULT_BOUNDARIES_URL
    request_timeout: float = 30.0
    table_row_limit: int = 100
    map_style: str = "carto-positron"
    color_scale: str = "Blues"
    na_color: str = "lightgray"

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> GlobalConfig:
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in raw.items() if k in known}

        try:
            cfg = cls(**values)
        except TypeError as e:
            raise ConfigError(f"Invalid global config: {e}") from e

        if cfg.table_row_limit <= 0:
            raise ConfigError(f"table_row_limit must be positive, got {cfg.table_row_limit}")
        if cfg.request_timeout <= 0:
            raise ConfigError(f"request_timeout must be positive, got {cfg.request_timeout}")
        return cfg
