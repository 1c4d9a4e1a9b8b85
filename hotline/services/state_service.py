"""Durable favorites, call history and counters."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from ..config import settings
from ..domain import HistoryEntry, PersistedState
from .storage_service import KeyValueStore

logger = logging.getLogger(__name__)

TIME_LABEL_FORMAT = "%I:%M:%S %p"


class HistoryEntryPayload(BaseModel):
    title: str
    number: str
    time: str


class PersistedStatePayload(BaseModel):
    """Schema of the stored state record."""

    hearts: int = Field(0, ge=0)
    copies: int = Field(0, ge=0)
    history: List[HistoryEntryPayload] = Field(default_factory=list)
    favoriteIds: Dict[str, bool] = Field(default_factory=dict)


def _parse_state(raw: str, history_limit: int) -> PersistedState:
    payload = PersistedStatePayload.model_validate(json.loads(raw))
    favorite_ids = {int(key) for key, marked in payload.favoriteIds.items() if marked}
    history = [
        HistoryEntry(title=entry.title, number=entry.number, time=entry.time)
        for entry in payload.history[:history_limit]
    ]
    return PersistedState(
        hearts=payload.hearts,
        copies=payload.copies,
        history=history,
        favorite_ids=favorite_ids,
    )


class PersistentState:
    """
    Owner of the session's `PersistedState`.

    Every mutator updates the in-memory record and then writes it back to the
    store. Storage failures are logged and never propagate; the in-memory state
    stays authoritative for the rest of the session.
    """

    def __init__(
        self,
        store: KeyValueStore,
        state: Optional[PersistedState] = None,
        storage_key: Optional[str] = None,
        history_limit: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self.state = state or PersistedState()
        self.storage_key = storage_key or settings.storage_key
        self.history_limit = settings.history_limit if history_limit is None else history_limit
        self._clock = clock

    @classmethod
    async def load(
        cls,
        store: KeyValueStore,
        storage_key: Optional[str] = None,
        history_limit: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "PersistentState":
        """Read the stored record, falling back to a zeroed state."""
        instance = cls(store, storage_key=storage_key, history_limit=history_limit, clock=clock)

        try:
            raw = await store.get(instance.storage_key)
        except (SQLAlchemyError, OSError):
            logger.exception("Error loading state from storage")
            return instance

        if raw is None:
            return instance

        try:
            instance.state = _parse_state(raw, instance.history_limit)
        except (ValueError, TypeError, ValidationError) as exc:
            logger.warning("Discarding malformed stored state: %s", exc)
        return instance

    @property
    def hearts(self) -> int:
        return self.state.hearts

    @property
    def copies(self) -> int:
        return self.state.copies

    @property
    def history(self) -> List[HistoryEntry]:
        return list(self.state.history)

    def is_favorite(self, service_id: int) -> bool:
        return service_id in self.state.favorite_ids

    async def save(self) -> bool:
        """Persist the current state. Returns False if the write failed."""
        try:
            await self._store.set(self.storage_key, json.dumps(self.state.to_payload(), ensure_ascii=False))
        except (SQLAlchemyError, OSError):
            logger.exception("Error saving state to storage")
            return False
        return True

    async def toggle_favorite(self, service_id: int) -> bool:
        """Flip favorite membership. Returns the new favorite flag."""
        if service_id in self.state.favorite_ids:
            self.state.favorite_ids.discard(service_id)
            self.state.hearts = max(0, self.state.hearts - 1)
            favorite = False
        else:
            self.state.favorite_ids.add(service_id)
            self.state.hearts += 1
            favorite = True
        await self.save()
        return favorite

    async def record_copy(self) -> int:
        self.state.copies += 1
        await self.save()
        return self.state.copies

    async def record_call(self, title: str, number: str) -> HistoryEntry:
        """Prepend a call to the history, keeping only the most recent entries."""
        entry = HistoryEntry(title=title, number=number, time=self._clock().strftime(TIME_LABEL_FORMAT))
        self.state.history.insert(0, entry)
        del self.state.history[self.history_limit:]
        await self.save()
        return entry

    async def clear_history(self) -> None:
        self.state.history = []
        await self.save()
