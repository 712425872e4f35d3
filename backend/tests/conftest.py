# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api.deps import get_store
from fishlog_core.location import FishType, Location, ResultType, Season, Visit, WaterType
from fishlog_core.persistence import BlobPersistence
from fishlog_core.store import LocationStore
from main import app
from models import Base
from models.blob import Blob  # noqa: F401 - register with Base

TEST_KEY = "savedLocations"


@pytest.fixture
def session_factory():
    """Fresh in-memory blob store per test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield factory
    finally:
        engine.dispose()


@pytest.fixture
def persistence(session_factory):
    return BlobPersistence(session_factory, TEST_KEY)


@pytest.fixture
def store(persistence):
    """Store backed by the test blob store, closed on teardown."""
    s = LocationStore(persistence)
    s.load()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client(store):
    """API test client; overrides get_store to use the test store, cleared on teardown."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


def make_visit(day: date, fish=None, result=ResultType.normal, notes="", visit_id=None) -> Visit:
    visit = Visit(date=day, fish_types=list(fish or []), result=result, notes=notes)
    if visit_id:
        visit.id = visit_id
    return visit


def make_location(
    name: str,
    water_type=WaterType.lake,
    season=Season.summer,
    visits=None,
    notes="",
    location_id=None,
) -> Location:
    loc = Location(name=name, water_type=water_type, season=season, notes=notes, visits=list(visits or []))
    if location_id:
        loc.id = location_id
    return loc


@pytest.fixture
def sample_locations():
    """Three locations with a mix of visits."""
    return [
        make_location(
            "Forest Lake",
            WaterType.lake,
            Season.summer,
            visits=[
                make_visit(date(2024, 6, 1), [FishType.pike], ResultType.good),
                make_visit(date(2024, 7, 15), [FishType.perch, FishType.pike], ResultType.normal),
            ],
            location_id="loc-forest",
        ),
        make_location(
            "River Bend",
            WaterType.river,
            Season.autumn,
            visits=[make_visit(date(2023, 10, 2), [FishType.trout], ResultType.poor)],
            location_id="loc-river",
        ),
        make_location("forest pond", WaterType.pond, Season.summer, location_id="loc-pond"),
    ]
