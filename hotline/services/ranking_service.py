"""Nearest-first ranking of catalog services."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..domain import UNKNOWN_DISTANCE, Coordinate, RankedService, Service
from .geo_service import GeoService


class RankingEngine:
    """Attaches a distance to each service and orders them nearest first."""

    def __init__(self, geo_service: Optional[GeoService] = None):
        self._geo = geo_service or GeoService()

    def rank(
        self,
        services: Iterable[Service],
        user_location: Optional[Coordinate],
    ) -> List[RankedService]:
        """
        Rank services by distance from the user.

        Args:
            services: Services in catalog (or filtered) order
            user_location: The user's coordinate, or None when unknown

        Returns:
            New list of `RankedService`. Without a location the input order is
            kept and every distance is unknown. With a location, services are
            sorted ascending by distance (rounded to 0.1 km); services without
            coordinates come last in their original relative order.
        """
        if user_location is None:
            return [RankedService(service) for service in services]

        ranked = [
            RankedService(service, self._distance_to(user_location, service))
            for service in services
        ]
        # list.sort is stable, equal and unknown distances keep input order
        ranked.sort(key=lambda item: item.distance)
        return ranked

    def _distance_to(self, user_location: Coordinate, service: Service) -> float:
        if service.coordinate is None:
            return UNKNOWN_DISTANCE
        return round(self._geo.distance(user_location, service.coordinate), 1)
