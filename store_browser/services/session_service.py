from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Optional, TypeVar

from store_browser.config.model import GlobalConfig
from store_browser.core.boundaries import CountryBoundaries, load_country_boundaries
from store_browser.core.dataset import MapFraming, StoreDataset
from store_browser.core.dataset_loader import load_store_dataset
from store_browser.core.exceptions import StoreBrowserError
from store_browser.core.view_registry import ViewRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LazyResource(Generic[T]):
    """
    Load-once resource.

    The factory runs on first `get()`; later calls return the cached value.
    A failed load caches the error too, so a session makes exactly one attempt
    and keeps reporting the same failure. `invalidate()` drops both.

    Callbacks run on server threads; concurrent first calls block on the
    lock and share the single load.
    """

    def __init__(self, name: str, factory: Callable[[], T]):
        self.name = name
        self._factory = factory
        self._value: Optional[T] = None
        self._error: Optional[StoreBrowserError] = None
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def error(self) -> Optional[StoreBrowserError]:
        return self._error

    def get(self) -> T:
        if self._loaded:
            return self._value

        with self._lock:
            if self._loaded:
                return self._value
            if self._error is not None:
                raise self._error

            try:
                logger.info("Lazy-loading resource", extra={"resource": self.name})
                value = self._factory()
            except StoreBrowserError as e:
                logger.error("Resource failed to load", extra={"resource": self.name, "error": str(e)})
                self._error = e
                raise

            self._value = value
            self._loaded = True
            return value

    def invalidate(self) -> None:
        with self._lock:
            self._value = None
            self._error = None
            self._loaded = False


class DashboardSession:
    """
    Session-scoped context handed to every callback.

    Holds the memoised store dataset, country boundaries and initial map
    framing, plus the config and view registry. Nothing here is mutated by
    the derivations; `close()` is the only invalidation point.
    """

    def __init__(
        self,
        config: GlobalConfig,
        registry: ViewRegistry,
        dataset_loader: Optional[Callable[[], StoreDataset]] = None,
        boundaries_loader: Optional[Callable[[], CountryBoundaries]] = None,
    ):
        self.config = config
        self.registry = registry

        self._dataset = LazyResource(
            "store_dataset",
            dataset_loader or (lambda: load_store_dataset(config.data_url, timeout=config.request_timeout)),
        )
        self._boundaries = LazyResource(
            "country_boundaries",
            boundaries_loader
            or (lambda: load_country_boundaries(config.boundaries_url, timeout=config.request_timeout)),
        )
        self._framing = LazyResource(
            "map_framing",
            lambda: MapFraming.from_bounds(self.dataset().bounds()),
        )

    def dataset(self) -> StoreDataset:
        return self._dataset.get()

    def boundaries(self) -> CountryBoundaries:
        return self._boundaries.get()

    def framing(self) -> MapFraming:
        """Initial point-map viewport, from the full dataset and computed once"""
        return self._framing.get()

    @property
    def is_loaded(self) -> bool:
        return self._dataset.is_loaded

    def close(self) -> None:
        logger.info("Closing dashboard session")
        self._dataset.invalidate()
        self._boundaries.invalidate()
        self._framing.invalidate()
