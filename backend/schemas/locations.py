"""Pydantic schemas for location and visit API."""
import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fishlog_core.location import FishType, Location, ResultType, Season, Visit, WaterType


class LocationCreate(BaseModel):
    """Payload for creating a location."""

    name: str = Field(..., min_length=1)
    water_type: WaterType
    season: Season
    notes: str = ""


class LocationUpdate(BaseModel):
    """Payload for updating a location (all fields optional). Id is not editable."""

    name: str | None = Field(default=None, min_length=1)
    water_type: WaterType | None = None
    season: Season | None = None
    notes: str | None = None


class VisitCreate(BaseModel):
    """Payload for logging a visit."""

    date: datetime.date
    fish_types: list[FishType] = Field(default_factory=list)
    result: ResultType = ResultType.normal
    notes: str = ""


class VisitUpdate(BaseModel):
    """Payload for updating a visit (all fields optional)."""

    date: Optional[datetime.date] = None
    fish_types: list[FishType] | None = None
    result: ResultType | None = None
    notes: str | None = None


class VisitResponse(BaseModel):
    """Visit in API responses."""

    id: str
    date: datetime.date
    fish_types: list[FishType]
    result: ResultType
    notes: str

    @classmethod
    def from_visit(cls, visit: Visit) -> "VisitResponse":
        return cls(
            id=visit.id,
            date=visit.date,
            fish_types=list(visit.fish_types),
            result=visit.result,
            notes=visit.notes,
        )


class LocationResponse(BaseModel):
    """Location in API responses; visits newest first."""

    id: str
    name: str
    water_type: WaterType
    season: Season
    notes: str
    visits_count: int = 0
    last_visit_date: Optional[datetime.date] = None
    visits: list[VisitResponse] = Field(default_factory=list)

    @classmethod
    def from_location(cls, location: Location) -> "LocationResponse":
        return cls(
            id=location.id,
            name=location.name,
            water_type=location.water_type,
            season=location.season,
            notes=location.notes,
            visits_count=location.visits_count,
            last_visit_date=location.last_visit_date,
            visits=[VisitResponse.from_visit(v) for v in location.sorted_visits()],
        )


class VisitLogEntry(BaseModel):
    """One row of the visit log: a visit with the name of its location."""

    location_id: str
    location_name: str
    visit: VisitResponse
