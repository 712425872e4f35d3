"""Whole-collection persistence of locations to a single blob in the key-value table."""
import logging
from collections.abc import Callable

from pydantic import ValidationError
from sqlalchemy.orm import Session

from fishlog_core.location import Location
from repositories.blob_repository import delete_blob, get_blob, put_blob
from schemas.records import decode_locations, encode_locations

LOG = logging.getLogger(__name__)


class BlobPersistence:
    """
    Reads and writes the full location list under one fixed key.
    Failures never reach the caller: a bad or missing blob loads as an empty list,
    and a failed save is logged and skipped.
    """

    def __init__(self, session_factory: Callable[[], Session], key: str) -> None:
        self._session_factory = session_factory
        self.key = key

    def load(self) -> list[Location]:
        """Return the stored collection, or [] if absent or undecodable."""
        db = self._session_factory()
        try:
            raw = get_blob(db, self.key)
        except Exception as e:
            LOG.exception("load: reading blob %s failed: %s", self.key, e)
            return []
        finally:
            db.close()
        if raw is None:
            return []
        try:
            return decode_locations(raw)
        except (ValidationError, ValueError) as e:
            LOG.warning("load: discarding undecodable blob %s: %s", self.key, e)
            return []

    def save(self, locations: list[Location]) -> bool:
        """Overwrite the stored collection. Returns False (after logging) when the write is skipped."""
        try:
            raw = encode_locations(locations)
        except Exception as e:
            LOG.exception("save: encoding %d locations failed: %s", len(locations), e)
            return False
        db = self._session_factory()
        try:
            put_blob(db, self.key, raw)
            return True
        except Exception as e:
            LOG.exception("save: writing blob %s failed: %s", self.key, e)
            return False
        finally:
            db.close()

    def erase(self) -> None:
        """Remove the stored blob."""
        db = self._session_factory()
        try:
            delete_blob(db, self.key)
        except Exception as e:
            LOG.exception("erase: deleting blob %s failed: %s", self.key, e)
        finally:
            db.close()
