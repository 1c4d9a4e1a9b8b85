"""Shared FastAPI dependencies."""

from typing import Optional

from fastapi import HTTPException, Request

from ..domain import Coordinate
from ..services.directory_service import Directory
from ..services.location_service import FixedLocationSource, LocationProvider


def get_directory(request: Request) -> Directory:
    """Return the session `Directory` created at startup."""
    directory = getattr(request.app.state, "directory", None)
    if directory is None:
        raise HTTPException(status_code=503, detail="Directory is not initialised")
    return directory


def location_provider_for(lat: Optional[float], lng: Optional[float]) -> LocationProvider:
    """Provider for the fix reported by the browser; no fix means no capability."""
    if lat is None or lng is None:
        return LocationProvider()
    return LocationProvider(FixedLocationSource(Coordinate(lat, lng)))
