# Fishing log core: domain model, store, aggregation, search, persistence
from fishlog_core.location import FishType, Location, ResultType, Season, Visit, WaterType, new_location, new_visit
from fishlog_core.search import filter_locations
from fishlog_core.store import LocationStore

__all__ = [
    "FishType",
    "Location",
    "LocationStore",
    "ResultType",
    "Season",
    "Visit",
    "WaterType",
    "filter_locations",
    "new_location",
    "new_visit",
]
