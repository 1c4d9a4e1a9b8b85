"""Call, copy and map actions offered on each rendered card."""

from __future__ import annotations

from typing import Protocol

from ..domain import Service

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query={lat},{lng}"
MAP_UNAVAILABLE_NOTICE = 'দুঃখিত, "{title}" এর লোকেশন ডেটা এখন যোগ করা হয়নি।'
COPY_FAILED_MESSAGE = "Copy failed. Please copy manually: {number}"


class MapLocationUnavailable(Exception):
    """Raised when a service has no coordinate to open on a map."""

    def __init__(self, service: Service):
        self.service = service
        super().__init__(MAP_UNAVAILABLE_NOTICE.format(title=service.title))


class ClipboardError(Exception):
    """Raised by a clipboard backend that could not write."""


class ClipboardFailure(Exception):
    """User-facing copy failure carrying the number to copy by hand."""

    def __init__(self, number: str):
        self.number = number
        super().__init__(COPY_FAILED_MESSAGE.format(number=number))


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None:
        ...


def build_tel_link(number: str) -> str:
    return f"tel:{number}"


def build_map_link(service: Service) -> str:
    """Maps search deep link for the service location."""
    if service.coordinate is None:
        raise MapLocationUnavailable(service)
    return MAPS_SEARCH_URL.format(lat=service.coordinate.latitude, lng=service.coordinate.longitude)


async def copy_to_clipboard(clipboard: Clipboard, number: str) -> None:
    """Write ``number`` to the clipboard, translating backend errors."""
    try:
        await clipboard.write_text(number)
    except ClipboardError as exc:
        raise ClipboardFailure(number) from exc
