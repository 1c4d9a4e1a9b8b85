"""Best-effort, time-bounded acquisition of the user's location."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

from ..config import settings
from ..domain import Coordinate

logger = logging.getLogger(__name__)


class LocationUnavailable(Exception):
    """Raised by a location source that cannot produce a fix."""


class LocationPermissionDenied(LocationUnavailable):
    """Raised when the user refused to share their location."""


class LocationSource(Protocol):
    """Host capability able to produce the current coordinate."""

    async def locate(self) -> Coordinate:
        ...


class FixedLocationSource:
    """Location source returning a coordinate already known to the host."""

    def __init__(self, coordinate: Coordinate):
        self._coordinate = coordinate

    async def locate(self) -> Coordinate:
        return self._coordinate


class LocationProvider:
    """
    Wraps a `LocationSource` so that acquisition never fails.

    Permission denial, timeout and a missing source all resolve to ``None``.
    Each call makes exactly one attempt; nothing is cached.
    """

    def __init__(
        self,
        source: Optional[LocationSource] = None,
        timeout: Optional[float] = None,
    ):
        self._source = source
        self.timeout = settings.location_timeout_seconds if timeout is None else timeout

    @property
    def available(self) -> bool:
        return self._source is not None

    async def acquire_location(self) -> Optional[Coordinate]:
        """Return the user's coordinate, or ``None`` when it cannot be known."""
        if self._source is None:
            logger.debug("No location capability on this host")
            return None

        try:
            coordinate = await asyncio.wait_for(self._source.locate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.info("Location request timed out after %.1fs", self.timeout)
            return None
        except LocationPermissionDenied:
            logger.info("Location permission denied")
            return None
        except LocationUnavailable as exc:
            logger.info("Location unavailable: %s", exc)
            return None
        except Exception:
            logger.warning("Location source failed", exc_info=True)
            return None

        logger.debug("Location obtained")
        return coordinate
