"""Plain data types shared by the directory pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

# Sorts after every finite distance and is never shown to the user.
UNKNOWN_DISTANCE = math.inf


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Service:
    """Immutable catalog entry."""

    id: int
    title: str
    subtitle: str
    number: str
    category: str
    icon: str = ""
    coordinate: Optional[Coordinate] = None
    is_favorite: bool = False


@dataclass(frozen=True)
class RankedService:
    """A service annotated with its distance from the user."""

    service: Service
    distance: float = UNKNOWN_DISTANCE

    @property
    def has_distance(self) -> bool:
        return not math.isinf(self.distance)

    @property
    def distance_km(self) -> Optional[float]:
        return self.distance if self.has_distance else None


@dataclass
class Group:
    """A labelled display section."""

    category: str
    services: List[RankedService]
    nearest_first: bool = False


@dataclass(frozen=True)
class HistoryEntry:
    title: str
    number: str
    time: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "number": self.number, "time": self.time}


@dataclass
class PersistedState:
    """Durable user state: counters, call history and favorites."""

    hearts: int = 0
    copies: int = 0
    history: List[HistoryEntry] = field(default_factory=list)
    favorite_ids: Set[int] = field(default_factory=set)

    def to_payload(self) -> Dict[str, Any]:
        """Return the stored representation; catalog data is never included."""
        return {
            "hearts": self.hearts,
            "copies": self.copies,
            "history": [entry.to_dict() for entry in self.history],
            "favoriteIds": {str(service_id): True for service_id in sorted(self.favorite_ids)},
        }
