# Schemas package
from .health import HealthResponse
from .locations import LocationCreate, LocationResponse, LocationUpdate, VisitCreate, VisitResponse, VisitUpdate
from .stats import StatsResponse

__all__ = [
    "HealthResponse",
    "LocationCreate",
    "LocationResponse",
    "LocationUpdate",
    "StatsResponse",
    "VisitCreate",
    "VisitResponse",
    "VisitUpdate",
]
