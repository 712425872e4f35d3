"""Blob repository: get, put, delete a value by key."""
from typing import Optional

from sqlalchemy.orm import Session

from models.blob import Blob


def get_blob(session: Session, key: str) -> Optional[str]:
    """Return the stored value for key or None."""
    row = session.get(Blob, key)
    return row.value if row is not None else None


def put_blob(session: Session, key: str, value: str) -> None:
    """Insert or overwrite the value for key and commit."""
    row = session.get(Blob, key)
    if row is None:
        session.add(Blob(key=key, value=value))
    else:
        row.value = value
    session.commit()


def delete_blob(session: Session, key: str) -> bool:
    """Delete the value for key. Returns True if deleted, False if not found."""
    row = session.get(Blob, key)
    if row is None:
        return False
    session.delete(row)
    session.commit()
    return True
