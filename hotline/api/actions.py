"""API routes for per-service actions."""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from ..services.action_service import ClipboardError, ClipboardFailure, MapLocationUnavailable
from ..services.directory_service import Directory, ServiceNotFoundError
from .deps import get_directory

router = APIRouter()


class CopyReport(BaseModel):
    """Outcome of the clipboard write performed by the browser."""
    success: bool = True


class ReportedClipboard:
    """Clipboard whose write already happened client-side."""

    def __init__(self, success: bool):
        self.success = success

    async def write_text(self, text: str) -> None:
        if not self.success:
            raise ClipboardError(f"Browser clipboard refused {text}")


@router.post("/{service_id}/favorite")
async def toggle_favorite(service_id: int, directory: Directory = Depends(get_directory)):
    """Toggle a favorite and return the updated heart counter."""
    try:
        service = await directory.toggle_favorite(service_id)
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"id": service.id, "is_favorite": service.is_favorite, "hearts": directory.state.hearts}


@router.post("/{service_id}/copy")
async def copy_number(
    service_id: int,
    report: CopyReport,
    directory: Directory = Depends(get_directory),
):
    """Count a successful copy, or return the manual-copy message."""
    try:
        copies = await directory.copy_number(service_id, ReportedClipboard(report.success))
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ClipboardFailure as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return {"copies": copies}


@router.post("/{service_id}/call")
async def call_service(service_id: int, directory: Directory = Depends(get_directory)):
    """Record the call and return the ``tel:`` link for the browser to open."""
    try:
        tel_link = await directory.call(service_id)
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {
        "tel_link": tel_link,
        "history": [entry.to_dict() for entry in directory.state.history],
    }


@router.get("/{service_id}/map")
async def map_link(service_id: int, directory: Directory = Depends(get_directory)):
    """Maps deep link, or a notice when the location is not known."""
    try:
        return {"map_url": directory.map_link(service_id)}
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MapLocationUnavailable as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
