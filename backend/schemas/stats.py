"""Statistics response schema."""
from pydantic import BaseModel

from fishlog_core.location import FishType, Season


class FishCount(BaseModel):
    fish_type: FishType
    count: int


class StatsResponse(BaseModel):
    """Response for GET /stats. Count maps are keyed by enum label and omit zero counts."""

    total_locations: int
    total_visits: int
    best_season: Season
    most_common_fish: FishType
    season_stats: dict[str, int]
    fish_stats: dict[str, int]
    result_stats: dict[str, int]
    top_fish: list[FishCount]
