"""Session context tying ranking, grouping and user state together."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Protocol, Sequence

from ..catalog import build_services
from ..domain import Group, HistoryEntry, Service
from .action_service import Clipboard, build_map_link, build_tel_link, copy_to_clipboard
from .category_service import CategoryGrouper, badge_text, distance_label, section_title
from .location_service import LocationProvider
from .ranking_service import RankingEngine
from .search_service import filter_services, is_search_active
from .state_service import PersistentState
from .storage_service import KeyValueStore

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "আপনার সার্চ করা তথ্যের সাথে কোনো সার্ভিস মেলেনি।"


class ServiceNotFoundError(Exception):
    """Raised when a service id is not in the catalog."""


@dataclass
class DirectoryView:
    """Plain structure handed to the renderer."""

    groups: List[Group]
    search_active: bool
    hearts: int
    copies: int
    history: List[HistoryEntry]
    dropped_ids: List[int] = field(default_factory=list)
    empty_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "search_active": self.search_active,
            "empty_message": self.empty_message,
            "groups": [
                {
                    "category": group.category,
                    "title": section_title(group),
                    "nearest_first": group.nearest_first,
                    "services": [
                        {
                            "id": ranked.service.id,
                            "title": ranked.service.title,
                            "subtitle": ranked.service.subtitle,
                            "number": ranked.service.number,
                            "category": ranked.service.category,
                            "badge": badge_text(ranked.service.category),
                            "icon": ranked.service.icon,
                            "is_favorite": ranked.service.is_favorite,
                            "has_location": ranked.service.coordinate is not None,
                            "distance_km": ranked.distance_km,
                            "distance_label": distance_label(ranked),
                        }
                        for ranked in group.services
                    ],
                }
                for group in self.groups
            ],
            "dropped_ids": list(self.dropped_ids),
            "counters": {"hearts": self.hearts, "copies": self.copies},
            "history": [entry.to_dict() for entry in self.history],
        }


class Renderer(Protocol):
    def render(self, view: DirectoryView) -> None:
        ...


class Directory:
    """
    Explicitly owned session state for one user.

    Holds the catalog services, the `PersistentState` and a default
    `LocationProvider`. Only the latest `refresh` call produces output: a
    refresh that finishes after a newer one has started is discarded.
    """

    def __init__(
        self,
        services: Sequence[Service],
        state: PersistentState,
        location_provider: Optional[LocationProvider] = None,
        ranking_engine: Optional[RankingEngine] = None,
        grouper: Optional[CategoryGrouper] = None,
    ):
        self.state = state
        self.location_provider = location_provider or LocationProvider()
        self._ranking = ranking_engine or RankingEngine()
        self._grouper = grouper or CategoryGrouper()
        self._services: List[Service] = [
            replace(service, is_favorite=state.is_favorite(service.id))
            for service in services
        ]
        self._generation = 0
        self._search_text = ""
        self._last_provider: Optional[LocationProvider] = None
        self._last_renderer: Optional[Renderer] = None

    @classmethod
    async def create(
        cls,
        store: KeyValueStore,
        location_provider: Optional[LocationProvider] = None,
        entries: Optional[List[Dict[str, Any]]] = None,
    ) -> "Directory":
        """Load persisted state and build the catalog for a new session."""
        state = await PersistentState.load(store)
        services = build_services(state.state.favorite_ids, entries)
        return cls(services, state, location_provider)

    @property
    def services(self) -> List[Service]:
        return list(self._services)

    @property
    def search_text(self) -> str:
        return self._search_text

    def get_service(self, service_id: int) -> Service:
        for service in self._services:
            if service.id == service_id:
                return service
        raise ServiceNotFoundError(f"Unknown service id: {service_id}")

    async def refresh(
        self,
        search_text: Optional[str] = None,
        location_provider: Optional[LocationProvider] = None,
        renderer: Optional[Renderer] = None,
    ) -> Optional[DirectoryView]:
        """
        Run the filter, rank and group pipeline.

        Args:
            search_text: Free-text filter; blank renders every section
            location_provider: Overrides the default provider for this pass
            renderer: Receives the view if this pass is still the latest

        Returns:
            The rendered view, or None when a newer refresh superseded this one.
        """
        self._generation += 1
        generation = self._generation
        self._search_text = search_text or ""
        provider = location_provider or self.location_provider
        self._last_provider = location_provider
        self._last_renderer = renderer

        search_active = is_search_active(search_text)
        candidates = filter_services(self._services, search_text)

        user_location = await provider.acquire_location()

        if generation != self._generation:
            logger.debug("Discarding stale render %s (latest is %s)", generation, self._generation)
            return None

        ranked = self._ranking.rank(candidates, user_location)
        grouping = self._grouper.group(ranked, search_active)

        view = DirectoryView(
            groups=grouping.groups,
            search_active=search_active,
            hearts=self.state.hearts,
            copies=self.state.copies,
            history=self.state.history,
            dropped_ids=grouping.dropped_ids,
            empty_message=NO_RESULTS_MESSAGE if not candidates else None,
        )
        if renderer is not None:
            renderer.render(view)
        return view

    async def toggle_favorite(self, service_id: int) -> Service:
        """Flip a favorite and re-render when a search is showing on a renderer."""
        service = self.get_service(service_id)
        favorite = await self.state.toggle_favorite(service_id)
        updated = replace(service, is_favorite=favorite)
        self._services = [updated if s.id == service_id else s for s in self._services]

        if self._last_renderer is not None and is_search_active(self._search_text):
            await self.refresh(self._search_text, self._last_provider, self._last_renderer)
        return updated

    async def copy_number(self, service_id: int, clipboard: Clipboard) -> int:
        """Copy a service number. Raises `ClipboardFailure` if the clipboard refuses."""
        service = self.get_service(service_id)
        await copy_to_clipboard(clipboard, service.number)
        return await self.state.record_copy()

    async def call(self, service_id: int) -> str:
        """Record a call in the history and return the ``tel:`` link to open."""
        service = self.get_service(service_id)
        await self.state.record_call(service.title, service.number)
        return build_tel_link(service.number)

    def map_link(self, service_id: int) -> str:
        return build_map_link(self.get_service(service_id))

    def history_call_link(self, index: int) -> str:
        """``tel:`` link for a history entry; redialing is not recorded again."""
        history = self.state.history
        if index < 0 or index >= len(history):
            raise IndexError(f"No history entry at position {index}")
        return build_tel_link(history[index].number)

    async def clear_history(self) -> None:
        await self.state.clear_history()
