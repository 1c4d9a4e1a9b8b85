"""API routes for call history and counters."""

from fastapi import APIRouter, Depends, HTTPException, status

from ..services.directory_service import Directory
from .deps import get_directory

router = APIRouter()


@router.get("/history")
async def get_history(directory: Directory = Depends(get_directory)):
    history = [entry.to_dict() for entry in directory.state.history]
    return {"history": history, "count": len(history)}


@router.delete("/history")
async def clear_history(directory: Directory = Depends(get_directory)):
    await directory.clear_history()
    return {"history": [], "count": 0}


@router.get("/history/{index}/call")
async def call_from_history(index: int, directory: Directory = Depends(get_directory)):
    """Redial a history entry without recording it again."""
    try:
        return {"tel_link": directory.history_call_link(index)}
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/state")
async def get_counters(directory: Directory = Depends(get_directory)):
    return {"hearts": directory.state.hearts, "copies": directory.state.copies}
