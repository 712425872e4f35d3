"""Visit log and statistics API routes."""
from fastapi import APIRouter, Depends

from api.deps import get_store
from fishlog_core.store import LocationStore
from schemas.locations import VisitLogEntry, VisitResponse
from schemas.stats import FishCount, StatsResponse

router = APIRouter(tags=["stats"])


@router.get("/visits", response_model=list[VisitLogEntry])
def list_visits(store: LocationStore = Depends(get_store)) -> list[VisitLogEntry]:
    """All visits across locations, newest first."""
    return [
        VisitLogEntry(
            location_id=loc.id,
            location_name=loc.name,
            visit=VisitResponse.from_visit(visit),
        )
        for loc, visit in store.all_visits()
    ]


@router.get("/stats", response_model=StatsResponse)
def get_stats(store: LocationStore = Depends(get_store)) -> StatsResponse:
    """Totals, per-season/fish/result counts and the best season and fish."""
    data = store.summary()
    return StatsResponse(
        total_locations=data["total_locations"],
        total_visits=data["total_visits"],
        best_season=data["best_season"],
        most_common_fish=data["most_common_fish"],
        season_stats={k.value: v for k, v in data["season_stats"].items()},
        fish_stats={k.value: v for k, v in data["fish_stats"].items()},
        result_stats={k.value: v for k, v in data["result_stats"].items()},
        top_fish=[FishCount(fish_type=f, count=c) for f, c in data["top_fish"]],
    )
