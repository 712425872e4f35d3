"""In-memory location store: single source of truth for the fishing log.

Every mutation rewrites the whole collection through the persistence adapter.
A lookup miss is a silent no-op, never an error.
"""
import copy
import logging
import threading
from collections.abc import Callable
from typing import Optional, Protocol

from fishlog_core import stats
from fishlog_core.location import FishType, Location, ResultType, Season, Visit
from fishlog_core.search import filter_locations

LOG = logging.getLogger(__name__)

LocationMutator = Callable[[Location], None]
VisitMutator = Callable[[Visit], None]
Listener = Callable[["LocationStore"], None]


class Persistence(Protocol):
    def load(self) -> list[Location]: ...

    def save(self, locations: list[Location]) -> bool: ...

    def erase(self) -> None: ...


class LocationStore:
    """
    Owns the ordered location list. Added objects are copied in and reads hand
    out copies, so callers cannot change state except through the mutation methods.
    """

    def __init__(self, persistence: Optional[Persistence] = None) -> None:
        self._persistence = persistence
        self._locations: list[Location] = []
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()
        self.search_query = ""

    # -- lifecycle -----------------------------------------------------------

    def load(self) -> None:
        """Replace the in-memory collection with the persisted one."""
        if self._persistence is None:
            return
        loaded = self._persistence.load()
        with self._lock:
            self._locations = loaded
        LOG.info("Loaded %d locations", len(loaded))

    def close(self) -> None:
        """Drop all subscribers."""
        self._listeners.clear()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener after every mutation. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self) -> None:
        """Persist the whole collection, then notify listeners. Caller holds the lock."""
        if self._persistence is not None:
            self._persistence.save(self._locations)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                LOG.exception("Store listener %r failed: %s", listener, e)

    def _index_of(self, location_id: str) -> Optional[int]:
        for i, loc in enumerate(self._locations):
            if loc.id == location_id:
                return i
        return None

    # -- reads ---------------------------------------------------------------

    @property
    def locations(self) -> list[Location]:
        with self._lock:
            return copy.deepcopy(self._locations)

    def get_location(self, location_id: str) -> Optional[Location]:
        with self._lock:
            i = self._index_of(location_id)
            return copy.deepcopy(self._locations[i]) if i is not None else None

    def get_visit(self, location_id: str, visit_id: str) -> Optional[Visit]:
        with self._lock:
            i = self._index_of(location_id)
            if i is None:
                return None
            visit = self._locations[i].find_visit(visit_id)
            return copy.deepcopy(visit) if visit is not None else None

    def filtered_locations(self, query: Optional[str] = None) -> list[Location]:
        """Locations matching query (or the current search_query when query is None)."""
        with self._lock:
            return copy.deepcopy(filter_locations(self._locations, self.search_query if query is None else query))

    # -- location mutations --------------------------------------------------

    def add_location(self, location: Location) -> None:
        """Append a copy of location; duplicate names are allowed."""
        with self._lock:
            self._locations.append(copy.deepcopy(location))
            self._commit()

    def update_location(self, location_id: str, mutator: LocationMutator) -> None:
        """Apply mutator to the matching location in place. The id cannot be changed."""
        with self._lock:
            i = self._index_of(location_id)
            if i is None:
                return
            location = self._locations[i]
            mutator(location)
            location.id = location_id
            self._commit()

    def delete_location(self, location_id: str) -> None:
        """Remove every location with this id, together with its visits."""
        with self._lock:
            self._locations = [loc for loc in self._locations if loc.id != location_id]
            self._commit()

    # -- visit mutations -----------------------------------------------------

    def add_visit(self, location_id: str, visit: Visit) -> None:
        """Append a copy of visit to the matching location; no-op if the location is unknown."""
        with self._lock:
            i = self._index_of(location_id)
            if i is None:
                return
            self._locations[i].visits.append(copy.deepcopy(visit))
            self._commit()

    def update_visit(self, location_id: str, visit_id: str, mutator: VisitMutator) -> None:
        """Apply mutator to the matching visit in place; no-op if either id is unknown."""
        with self._lock:
            i = self._index_of(location_id)
            if i is None:
                return
            visit = self._locations[i].find_visit(visit_id)
            if visit is None:
                return
            mutator(visit)
            visit.id = visit_id
            self._commit()

    def delete_visit(self, location_id: str, visit_id: str) -> None:
        with self._lock:
            i = self._index_of(location_id)
            if i is None:
                return
            location = self._locations[i]
            location.visits = [v for v in location.visits if v.id != visit_id]
            self._commit()

    def reset_all_data(self) -> None:
        """Clear every location and erase the persisted blob. Irreversible."""
        with self._lock:
            self._locations = []
            if self._persistence is not None:
                self._persistence.erase()
            self._notify()
        LOG.info("All fishing log data reset")

    # -- aggregation ---------------------------------------------------------

    @property
    def total_locations(self) -> int:
        with self._lock:
            return stats.total_locations(self._locations)

    @property
    def total_visits(self) -> int:
        with self._lock:
            return stats.total_visits(self._locations)

    @property
    def best_season(self) -> Season:
        with self._lock:
            return stats.best_season(self._locations)

    @property
    def most_common_fish(self) -> FishType:
        with self._lock:
            return stats.most_common_fish(self._locations)

    def season_stats(self) -> dict[Season, int]:
        with self._lock:
            return stats.season_stats(self._locations)

    def fish_stats(self) -> dict[FishType, int]:
        with self._lock:
            return stats.fish_stats(self._locations)

    def result_stats(self) -> dict[ResultType, int]:
        with self._lock:
            return stats.result_stats(self._locations)

    def top_fish(self, limit: int = stats.TOP_FISH_LIMIT) -> list[tuple[FishType, int]]:
        with self._lock:
            return stats.top_fish(self._locations, limit)

    def all_visits(self) -> list[tuple[Location, Visit]]:
        """Every (location, visit) pair, newest visit first."""
        with self._lock:
            return copy.deepcopy(stats.all_visits(self._locations))

    def summary(self) -> dict:
        with self._lock:
            return stats.summary(self._locations)
