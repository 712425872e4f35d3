"""API route handlers."""
from fastapi import APIRouter, Depends, status

from api.deps import get_store
from fishlog_core.store import LocationStore
from schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(store: LocationStore = Depends(get_store)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(locations=store.total_locations)


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
def reset_all_data(store: LocationStore = Depends(get_store)) -> None:
    """Erase every location and visit, in memory and on disk."""
    store.reset_all_data()
