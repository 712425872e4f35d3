"""Integration tests: blob persistence with an in-memory SQLite blob store."""
import json
from datetime import date
from unittest.mock import patch

import pytest

from conftest import TEST_KEY, make_location, make_visit
from fishlog_core.location import FishType, ResultType, Season, WaterType
from fishlog_core.store import LocationStore
from repositories.blob_repository import get_blob, put_blob

pytestmark = pytest.mark.integration


def _write_raw(session_factory, value):
    db = session_factory()
    try:
        put_blob(db, TEST_KEY, value)
    finally:
        db.close()


def _read_raw(session_factory):
    db = session_factory()
    try:
        return get_blob(db, TEST_KEY)
    finally:
        db.close()


def test_round_trip(persistence, sample_locations):
    """save then load returns an equal collection, ids included."""
    assert persistence.save(sample_locations) is True
    assert persistence.load() == sample_locations


def test_load_missing_blob_is_empty(persistence):
    assert persistence.load() == []


def test_blob_format(persistence, session_factory):
    """Stored JSON uses the documented field names, labels and ISO dates."""
    loc = make_location(
        "Blue Lake",
        WaterType.lake,
        Season.summer,
        visits=[make_visit(date(2024, 6, 1), [FishType.pike], ResultType.good, "sunny", visit_id="v-1")],
        location_id="loc-blue",
    )
    persistence.save([loc])
    data = json.loads(_read_raw(session_factory))
    assert data == [
        {
            "id": "loc-blue",
            "name": "Blue Lake",
            "waterType": "Lake",
            "season": "Summer",
            "notes": "",
            "visits": [
                {"id": "v-1", "date": "2024-06-01", "fishTypes": ["Pike"], "result": "Good", "notes": "sunny"},
            ],
        }
    ]


def test_load_corrupt_blob_is_empty(persistence, session_factory):
    _write_raw(session_factory, "{not json")
    assert persistence.load() == []


def test_load_unknown_enum_discards_everything(persistence, session_factory):
    """One bad label anywhere fails the whole blob; nothing is partially recovered."""
    good = {"id": "a", "name": "Good", "waterType": "Lake", "season": "Summer", "notes": "", "visits": []}
    bad = {
        "id": "b",
        "name": "Bad",
        "waterType": "River",
        "season": "Spring",
        "notes": "",
        "visits": [{"id": "v", "date": "2024-01-01", "fishTypes": ["Salmon"], "result": "Good", "notes": ""}],
    }
    _write_raw(session_factory, json.dumps([good, bad]))
    assert persistence.load() == []


def test_load_wrong_shape_is_empty(persistence, session_factory):
    _write_raw(session_factory, json.dumps({"locations": []}))
    assert persistence.load() == []


def test_load_without_ids_assigns_fresh_ids(persistence, session_factory):
    """Records stored without ids decode with new unique ids."""
    raw = [
        {"name": "A", "waterType": "Pond", "season": "Autumn", "notes": "", "visits": [
            {"date": "2024-03-03", "fishTypes": [], "result": "Poor", "notes": ""},
        ]},
        {"name": "B", "waterType": "Sea", "season": "Winter", "notes": "", "visits": []},
    ]
    _write_raw(session_factory, json.dumps(raw))
    loaded = persistence.load()
    assert [loc.name for loc in loaded] == ["A", "B"]
    assert loaded[0].id and loaded[1].id and loaded[0].id != loaded[1].id
    assert loaded[0].visits[0].id


def test_save_write_failure_is_swallowed(persistence):
    """A failing write is logged and reported as skipped, not raised."""
    with patch("fishlog_core.persistence.put_blob", side_effect=RuntimeError("disk full")):
        assert persistence.save([make_location("A")]) is False


def test_save_encode_failure_is_swallowed(persistence):
    with patch("fishlog_core.persistence.encode_locations", side_effect=ValueError("bad data")):
        assert persistence.save([make_location("A")]) is False
    assert persistence.load() == []


def test_erase(persistence, session_factory, sample_locations):
    persistence.save(sample_locations)
    persistence.erase()
    assert _read_raw(session_factory) is None
    assert persistence.load() == []
    persistence.erase()


def test_store_survives_reload(persistence):
    """Mutations made through one store are visible to a fresh store on the same blob."""
    first = LocationStore(persistence)
    first.load()
    first.add_location(make_location("Blue Lake", location_id="loc-blue"))
    first.add_visit("loc-blue", make_visit(date(2024, 6, 1), [FishType.pike], ResultType.good, visit_id="v-1"))
    first.update_visit("loc-blue", "v-1", lambda v: setattr(v, "notes", "big one"))

    second = LocationStore(persistence)
    second.load()
    assert second.locations == first.locations
    assert second.get_visit("loc-blue", "v-1").notes == "big one"


def test_store_reset_erases_blob(persistence, session_factory):
    store = LocationStore(persistence)
    store.add_location(make_location("A"))
    store.reset_all_data()
    assert _read_raw(session_factory) is None
    reloaded = LocationStore(persistence)
    reloaded.load()
    assert reloaded.locations == []


def test_store_keeps_memory_when_write_fails(persistence):
    store = LocationStore(persistence)
    with patch("fishlog_core.persistence.put_blob", side_effect=RuntimeError("locked")):
        store.add_location(make_location("A", location_id="loc-a"))
    assert [loc.id for loc in store.locations] == ["loc-a"]
    store.add_location(make_location("B", location_id="loc-b"))
    assert [loc.id for loc in persistence.load()] == ["loc-a", "loc-b"]


def _record(record_id, name="A", visits=None):
    return {"id": record_id, "name": name, "waterType": "Lake", "season": "Summer", "notes": "", "visits": visits or []}


def test_load_duplicate_location_ids_is_empty(persistence, session_factory):
    """Two locations sharing an id fail the whole blob."""
    _write_raw(session_factory, json.dumps([_record("dup", "A"), _record("dup", "B")]))
    assert persistence.load() == []


def test_load_duplicate_visit_ids_is_empty(persistence, session_factory):
    visit = {"id": "v-dup", "date": "2024-01-01", "fishTypes": [], "result": "Good", "notes": ""}
    _write_raw(session_factory, json.dumps([_record("loc-a", visits=[visit, dict(visit)])]))
    assert persistence.load() == []


def test_load_same_visit_id_in_different_locations(persistence, session_factory):
    """Visit ids only need to be unique within their location."""
    visit = {"id": "v-1", "date": "2024-01-01", "fishTypes": [], "result": "Good", "notes": ""}
    _write_raw(session_factory, json.dumps([_record("loc-a", visits=[visit]), _record("loc-b", visits=[dict(visit)])]))
    assert [loc.id for loc in persistence.load()] == ["loc-a", "loc-b"]


@pytest.mark.parametrize("name", ["", "   "])
def test_load_blank_name_is_empty(persistence, session_factory, name):
    _write_raw(session_factory, json.dumps([_record("loc-a", name)]))
    assert persistence.load() == []
