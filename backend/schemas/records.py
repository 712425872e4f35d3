"""Persisted blob format: JSON array of locations with nested visits.

Field names and enum labels are the stored contract; ids are persisted so they
survive a reload. Records written without an id get a fresh one on decode.
"""
import datetime

from pydantic import BaseModel, Field, TypeAdapter

from fishlog_core.location import FishType, Location, ResultType, Season, Visit, WaterType, new_id


class VisitRecord(BaseModel):
    """Stored visit."""

    id: str = Field(default_factory=new_id)
    date: datetime.date
    fishTypes: list[FishType] = Field(default_factory=list)
    result: ResultType
    notes: str = ""

    @classmethod
    def from_visit(cls, visit: Visit) -> "VisitRecord":
        return cls(
            id=visit.id,
            date=visit.date,
            fishTypes=list(visit.fish_types),
            result=visit.result,
            notes=visit.notes,
        )

    def to_visit(self) -> Visit:
        return Visit(
            id=self.id,
            date=self.date,
            fish_types=list(self.fishTypes),
            result=self.result,
            notes=self.notes,
        )


class LocationRecord(BaseModel):
    """Stored location with its visits."""

    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1)
    waterType: WaterType
    season: Season
    notes: str = ""
    visits: list[VisitRecord] = Field(default_factory=list)

    @classmethod
    def from_location(cls, location: Location) -> "LocationRecord":
        return cls(
            id=location.id,
            name=location.name,
            waterType=location.water_type,
            season=location.season,
            notes=location.notes,
            visits=[VisitRecord.from_visit(v) for v in location.visits],
        )

    def to_location(self) -> Location:
        return Location(
            id=self.id,
            name=self.name,
            water_type=self.waterType,
            season=self.season,
            notes=self.notes,
            visits=[v.to_visit() for v in self.visits],
        )


LOCATION_LIST = TypeAdapter(list[LocationRecord])


def encode_locations(locations: list[Location]) -> str:
    """Serialize the whole collection to a JSON string."""
    records = [LocationRecord.from_location(loc) for loc in locations]
    return LOCATION_LIST.dump_json(records).decode("utf-8")


def _check_unique(ids: list[str], what: str) -> None:
    seen: set[str] = set()
    for record_id in ids:
        if record_id in seen:
            raise ValueError(f"duplicate {what} id {record_id!r}")
        seen.add(record_id)


def decode_locations(raw: str) -> list[Location]:
    """
    Parse a JSON string into locations.
    Raises pydantic.ValidationError on any bad record, ValueError on a blank name
    or a repeated location id (or visit id within one location).
    """
    records = LOCATION_LIST.validate_json(raw)
    _check_unique([r.id for r in records], "location")
    for record in records:
        if not record.name.strip():
            raise ValueError(f"blank name for location {record.id!r}")
        _check_unique([v.id for v in record.visits], "visit")
    return [record.to_location() for record in records]
