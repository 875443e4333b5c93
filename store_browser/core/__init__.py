"""
Core domain layer: store dataset, filter state, derivations, choropleth join,
view base class and the view registry
"""

from .dataset import StoreDataset, StoreRecord, OwnershipType
from .filter_state import FilterState
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = ["StoreDataset", "StoreRecord", "OwnershipType", "FilterState", "BaseView", "ViewRegistry"]
