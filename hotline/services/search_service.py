"""Free-text filtering of the service list."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..domain import Service


def normalise_query(text: Optional[str]) -> str:
    return (text or "").strip().lower()


def is_search_active(text: Optional[str]) -> bool:
    return normalise_query(text) != ""


def matches(service: Service, query: str) -> bool:
    """Case-insensitive match on title, subtitle and category; raw match on the number."""
    return (
        query in service.title.lower()
        or query in service.subtitle.lower()
        or query in service.number
        or query in service.category.lower()
    )


def filter_services(services: Sequence[Service], text: Optional[str]) -> List[Service]:
    """Return services matching ``text``; every service when it is blank."""
    query = normalise_query(text)
    if not query:
        return list(services)
    return [service for service in services if matches(service, query)]
