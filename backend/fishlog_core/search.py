"""Name search over locations."""
from collections.abc import Sequence

from fishlog_core.location import Location


def name_matches(name: str, query: str) -> bool:
    """Case-insensitive substring match using Unicode case folding."""
    return query.casefold() in name.casefold()


def filter_locations(locations: Sequence[Location], query: str) -> list[Location]:
    """Locations whose name contains query, in their original order. Empty query returns all."""
    if not query:
        return list(locations)
    return [loc for loc in locations if name_matches(loc.name, query)]
