"""Key-value blob table: one opaque text value per fixed key."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Blob(Base):
    """Blob table: key, value."""

    __tablename__ = "blob"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
