"""FastAPI dependencies."""
from fastapi import Request

from fishlog_core.store import LocationStore


def get_store(request: Request) -> LocationStore:
    """FastAPI dependency: the store created at startup."""
    return request.app.state.store
