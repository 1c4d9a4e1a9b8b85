"""Great-circle distance helpers."""

from math import radians, cos, sin, asin, sqrt

from ..domain import Coordinate

# Radius of earth in kilometers
EARTH_RADIUS_KM = 6371


class GeoService:
    """Service for geolocation calculations."""

    @staticmethod
    def haversine_distance(
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float
    ) -> float:
        """
        Calculate the great circle distance between two points
        on the earth (specified in decimal degrees).

        Returns distance in kilometers.
        """
        # Convert decimal degrees to radians
        lon1, lat1, lon2, lat2 = map(radians, [lon1, lat1, lon2, lat2])

        # Haversine formula
        dlon = lon2 - lon1
        dlat = lat2 - lat1
        a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
        c = 2 * asin(min(1.0, sqrt(a)))

        return c * EARTH_RADIUS_KM

    @staticmethod
    def distance(a: Coordinate, b: Coordinate) -> float:
        """Distance in kilometers between two coordinates."""
        return GeoService.haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
