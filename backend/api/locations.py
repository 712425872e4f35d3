"""Location and visit API routes."""
from fastapi import APIRouter, Depends, HTTPException, status

from api.deps import get_store
from fishlog_core.location import Location, Visit, new_location, new_visit
from fishlog_core.store import LocationStore
from schemas.locations import (
    LocationCreate,
    LocationResponse,
    LocationUpdate,
    VisitCreate,
    VisitResponse,
    VisitUpdate,
)

router = APIRouter(prefix="/locations", tags=["locations"])


def _require_location(store: LocationStore, location_id: str) -> Location:
    loc = store.get_location(location_id)
    if loc is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return loc


@router.get("", response_model=list[LocationResponse])
def list_locations(q: str = "", store: LocationStore = Depends(get_store)) -> list[LocationResponse]:
    """List locations, optionally filtered by a case-insensitive name search."""
    return [LocationResponse.from_location(loc) for loc in store.filtered_locations(q)]


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(body: LocationCreate, store: LocationStore = Depends(get_store)) -> LocationResponse:
    """Create a location with no visits."""
    try:
        loc = new_location(body.name, body.water_type, body.season, body.notes)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    store.add_location(loc)
    return LocationResponse.from_location(loc)


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(location_id: str, store: LocationStore = Depends(get_store)) -> LocationResponse:
    return LocationResponse.from_location(_require_location(store, location_id))


@router.patch("/{location_id}", response_model=LocationResponse)
def update_location(
    location_id: str,
    body: LocationUpdate,
    store: LocationStore = Depends(get_store),
) -> LocationResponse:
    """Update provided fields of a location."""
    _require_location(store, location_id)
    updates = body.model_dump(exclude_unset=True)
    if updates.get("name") is not None:
        name = updates["name"].strip()
        if not name:
            raise HTTPException(status_code=422, detail="Location name must not be empty")
        updates["name"] = name
    if updates.get("notes") is not None:
        updates["notes"] = updates["notes"].strip()

    def apply(loc: Location) -> None:
        for field_name, value in updates.items():
            if value is not None:
                setattr(loc, field_name, value)

    store.update_location(location_id, apply)
    return LocationResponse.from_location(_require_location(store, location_id))


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(location_id: str, store: LocationStore = Depends(get_store)) -> None:
    """Delete a location and all of its visits."""
    _require_location(store, location_id)
    store.delete_location(location_id)


@router.post("/{location_id}/visits", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
def add_visit(
    location_id: str,
    body: VisitCreate,
    store: LocationStore = Depends(get_store),
) -> VisitResponse:
    """Log a visit to a location."""
    _require_location(store, location_id)
    visit = new_visit(body.date, body.fish_types, body.result, body.notes)
    store.add_visit(location_id, visit)
    return VisitResponse.from_visit(visit)


@router.patch("/{location_id}/visits/{visit_id}", response_model=VisitResponse)
def update_visit(
    location_id: str,
    visit_id: str,
    body: VisitUpdate,
    store: LocationStore = Depends(get_store),
) -> VisitResponse:
    if store.get_visit(location_id, visit_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visit not found")
    updates = body.model_dump(exclude_unset=True)
    if updates.get("notes") is not None:
        updates["notes"] = updates["notes"].strip()

    def apply(visit: Visit) -> None:
        for field_name, value in updates.items():
            if value is not None:
                setattr(visit, field_name, value)

    store.update_visit(location_id, visit_id, apply)
    visit = store.get_visit(location_id, visit_id)
    assert visit is not None
    return VisitResponse.from_visit(visit)


@router.delete("/{location_id}/visits/{visit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_visit(location_id: str, visit_id: str, store: LocationStore = Depends(get_store)) -> None:
    if store.get_visit(location_id, visit_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Visit not found")
    store.delete_visit(location_id, visit_id)
