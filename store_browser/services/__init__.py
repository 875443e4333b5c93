"""
Service layer: the session-scoped resource cache and the recomputation pipeline.
"""

from .session_service import DashboardSession, LazyResource
from .pipeline import DashboardSnapshot, recompute, render_choropleth

__all__ = ["DashboardSession", "LazyResource", "DashboardSnapshot", "recompute", "render_choropleth"]
