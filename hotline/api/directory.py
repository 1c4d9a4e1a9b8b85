"""API routes for the ranked, grouped directory."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..services.directory_service import Directory
from .deps import get_directory, location_provider_for

router = APIRouter()


@router.get("")
async def get_directory_view(
    search: Optional[str] = Query(None, description="Free-text filter"),
    lat: Optional[float] = Query(None, ge=-90, le=90, description="User latitude from the browser"),
    lng: Optional[float] = Query(None, ge=-180, le=180, description="User longitude from the browser"),
    directory: Directory = Depends(get_directory),
):
    """
    Return the directory grouped into sections.

    When both ``lat`` and ``lng`` are given, services are ordered nearest first
    and carry a distance label.
    """
    view = await directory.refresh(search, location_provider_for(lat, lng))
    if view is None:
        raise HTTPException(status_code=409, detail="Superseded by a newer request")
    return view.to_dict()
