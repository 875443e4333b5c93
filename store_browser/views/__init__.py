from .point_map_view import PointMapView
from .choropleth_view import ChoroplethView
from .store_table_view import StoreTableView

__all__ = ["PointMapView", "ChoroplethView", "StoreTableView"]
