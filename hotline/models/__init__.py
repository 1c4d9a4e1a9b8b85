"""Database models for the emergency hotline directory."""

from .base import Base
from .stored_value import StoredValue

__all__ = [
    "Base",
    "StoredValue",
]
