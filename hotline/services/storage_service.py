"""Key-value storage backends for the persisted user state."""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..database import AsyncSessionLocal, get_db
from ..models.stored_value import StoredValue


class KeyValueStore(Protocol):
    """Durable string storage addressed by key."""

    async def get(self, key: str) -> Optional[str]:
        ...

    async def set(self, key: str, value: str) -> None:
        ...


class MemoryKeyValueStore:
    """In-process store; contents are lost with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqlKeyValueStore:
    """Store backed by the ``kv_store`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal):
        self._session_factory = session_factory

    async def get(self, key: str) -> Optional[str]:
        async with get_db(self._session_factory) as session:
            row = await session.get(StoredValue, key)
            return row.value if row is not None else None

    async def set(self, key: str, value: str) -> None:
        async with get_db(self._session_factory) as session:
            row = await session.get(StoredValue, key)
            if row is None:
                session.add(StoredValue(key=key, value=value))
            else:
                row.value = value
