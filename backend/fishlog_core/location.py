"""Fishing log domain model: locations, visits and their closed enumerations."""
import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class WaterType(str, Enum):
    """Kind of water body a location sits on."""
    river = "River"
    lake = "Lake"
    pond = "Pond"
    sea = "Sea"


class Season(str, Enum):
    """Preferred season of a location (independent of visit dates)."""
    spring = "Spring"
    summer = "Summer"
    autumn = "Autumn"
    winter = "Winter"


class FishType(str, Enum):
    """Species that can be logged on a visit."""
    perch = "Perch"
    pike = "Pike"
    carp = "Carp"
    trout = "Trout"
    catfish = "Catfish"


class ResultType(str, Enum):
    """Subjective outcome of a visit."""
    poor = "Poor"
    normal = "Normal"
    good = "Good"


def new_id() -> str:
    """Fresh identifier for a location or visit."""
    return str(uuid.uuid4())


@dataclass
class Visit:
    """One dated trip to a location."""

    date: date
    fish_types: list[FishType] = field(default_factory=list)
    result: ResultType = ResultType.normal
    notes: str = ""
    id: str = field(default_factory=new_id)


@dataclass
class Location:
    """
    A fishing spot with its water type, typical season and visit history.
    visits_count and last_visit_date are derived from visits on every access.
    """

    name: str
    water_type: WaterType
    season: Season
    notes: str = ""
    visits: list[Visit] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    @property
    def visits_count(self) -> int:
        return len(self.visits)

    @property
    def last_visit_date(self) -> Optional[date]:
        """Latest visit date, or None when there are no visits."""
        if not self.visits:
            return None
        return max(v.date for v in self.visits)

    def sorted_visits(self) -> list[Visit]:
        """Visits newest first (display order)."""
        return sorted(self.visits, key=lambda v: v.date, reverse=True)

    def find_visit(self, visit_id: str) -> Optional[Visit]:
        for visit in self.visits:
            if visit.id == visit_id:
                return visit
        return None


def new_location(
    name: str,
    water_type: WaterType,
    season: Season,
    notes: str = "",
) -> Location:
    """Build a location with no visits. Name and notes are trimmed; an empty name is rejected."""
    cleaned = name.strip()
    if not cleaned:
        raise ValueError("Location name must not be empty")
    return Location(
        name=cleaned,
        water_type=WaterType(water_type),
        season=Season(season),
        notes=notes.strip(),
    )


def new_visit(
    visit_date: date,
    fish_types: Optional[list[FishType]] = None,
    result: ResultType = ResultType.normal,
    notes: str = "",
) -> Visit:
    """Build a visit with a fresh id; notes are trimmed."""
    return Visit(
        date=visit_date,
        fish_types=[FishType(f) for f in fish_types] if fish_types else [],
        result=ResultType(result),
        notes=notes.strip(),
    )
