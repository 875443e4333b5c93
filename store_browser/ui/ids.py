from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        DATASET_STATUS = "dataset-status"

    class Control:
        COUNTRY_SELECT = "country-select"
        OWNERSHIP_SELECT = "ownership-select"

        MAP_TABS = "map-tabs"
        POINT_MAP = "point-map"
        CHOROPLETH_MAP = "choropleth-map"
        STORE_TABLE = "store-table"

        STATUS_BAR = "status-bar"
        LOAD_ERROR = "load-error"
        DASHBOARD_BODY = "dashboard-body"
