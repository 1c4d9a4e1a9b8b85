"""Directory core services."""

from .geo_service import GeoService
from .location_service import (
    FixedLocationSource,
    LocationPermissionDenied,
    LocationProvider,
    LocationUnavailable,
)
from .ranking_service import RankingEngine
from .category_service import CategoryGrouper, GroupingResult
from .storage_service import KeyValueStore, MemoryKeyValueStore, SqlKeyValueStore
from .state_service import PersistentState
from .directory_service import Directory, DirectoryView, ServiceNotFoundError

__all__ = [
    "GeoService",
    "FixedLocationSource",
    "LocationPermissionDenied",
    "LocationProvider",
    "LocationUnavailable",
    "RankingEngine",
    "CategoryGrouper",
    "GroupingResult",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SqlKeyValueStore",
    "PersistentState",
    "Directory",
    "DirectoryView",
    "ServiceNotFoundError",
]
