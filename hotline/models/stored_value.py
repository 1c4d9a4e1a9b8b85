"""Key-value rows backing the durable user state."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class StoredValue(Base, TimestampMixin):
    """A serialized value stored under a fixed key."""

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<StoredValue(key={self.key}, size={len(self.value)})>"
