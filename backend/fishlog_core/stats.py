"""Aggregation over a location collection: counts, groupings and maxima.

Every function is pure and recomputes from the locations it is given; nothing is cached.
"""
from collections import Counter
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, TypeVar

from fishlog_core.location import FishType, Location, ResultType, Season, Visit

E = TypeVar("E", bound=Enum)

DEFAULT_SEASON = Season.summer
DEFAULT_FISH = FishType.perch
TOP_FISH_LIMIT = 5


def _counts_in_declaration_order(counter: Counter, enum_cls: type[E]) -> dict[E, int]:
    """Counter -> dict keyed in enum declaration order, zero counts dropped."""
    return {member: counter[member] for member in enum_cls if counter[member] > 0}


def _max_by_count(counts: dict[E, int], enum_cls: type[E], default: E) -> E:
    # Ties go to the member declared first.
    best = default
    best_count = 0
    for member in enum_cls:
        count = counts.get(member, 0)
        if count > best_count:
            best, best_count = member, count
    return best


def total_locations(locations: Sequence[Location]) -> int:
    return len(locations)


def total_visits(locations: Iterable[Location]) -> int:
    return sum(loc.visits_count for loc in locations)


def season_stats(locations: Iterable[Location]) -> dict[Season, int]:
    """Number of locations per preferred season (each location counted once)."""
    return _counts_in_declaration_order(Counter(loc.season for loc in locations), Season)


def fish_stats(locations: Iterable[Location]) -> dict[FishType, int]:
    """Occurrences of each species across all visits. Repeats inside one visit count each time."""
    counter: Counter = Counter()
    for loc in locations:
        for visit in loc.visits:
            counter.update(visit.fish_types)
    return _counts_in_declaration_order(counter, FishType)


def result_stats(locations: Iterable[Location]) -> dict[ResultType, int]:
    """Number of visits per outcome."""
    counter = Counter(visit.result for loc in locations for visit in loc.visits)
    return _counts_in_declaration_order(counter, ResultType)


def best_season(locations: Iterable[Location]) -> Season:
    """Season with the most locations; summer when there are none."""
    return _max_by_count(season_stats(locations), Season, DEFAULT_SEASON)


def most_common_fish(locations: Iterable[Location]) -> FishType:
    """Species caught most often; perch when nothing has been caught."""
    return _max_by_count(fish_stats(locations), FishType, DEFAULT_FISH)


def top_fish(locations: Iterable[Location], limit: int = TOP_FISH_LIMIT) -> list[tuple[FishType, int]]:
    """Most caught species, count descending, ties in declaration order."""
    counts = fish_stats(locations)
    order = {member: i for i, member in enumerate(FishType)}
    ranked = sorted(counts.items(), key=lambda item: (-item[1], order[item[0]]))
    return ranked[:limit]


def all_visits(locations: Iterable[Location]) -> list[tuple[Location, Visit]]:
    """Every visit paired with its location, newest first."""
    pairs = [(loc, visit) for loc in locations for visit in loc.visits]
    pairs.sort(key=lambda pair: pair[1].date, reverse=True)
    return pairs


def summary(locations: Sequence[Location]) -> dict[str, Any]:
    """All figures shown on the statistics screen."""
    return {
        "total_locations": total_locations(locations),
        "total_visits": total_visits(locations),
        "best_season": best_season(locations),
        "most_common_fish": most_common_fish(locations),
        "season_stats": season_stats(locations),
        "fish_stats": fish_stats(locations),
        "result_stats": result_stats(locations),
        "top_fish": top_fish(locations),
    }
