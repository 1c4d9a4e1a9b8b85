"""Shared fixtures for the directory tests."""

from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hotline.catalog import build_services
from hotline.domain import Coordinate
from hotline.main import app
from hotline.services.directory_service import Directory
from hotline.services.location_service import FixedLocationSource, LocationProvider
from hotline.services.state_service import PersistentState
from hotline.services.storage_service import MemoryKeyValueStore

# RMP control room, the reference point used across the tests
RAJSHAHI_CENTER = Coordinate(24.3686, 88.6300)


def make_entry(service_id, category="All", lat=None, lng=None, title=None, number=None):
    entry = {
        "id": service_id,
        "title": title or f"Service {service_id}",
        "subtitle": f"Subtitle {service_id}",
        "number": number or f"0721-{service_id:06d}",
        "category": category,
        "icon": "./assets/emergency.png",
    }
    if lat is not None and lng is not None:
        entry["lat"] = lat
        entry["lng"] = lng
    return entry


class RecordingRenderer:
    """Renderer that keeps every view it is given."""

    def __init__(self):
        self.views = []

    def render(self, view):
        self.views.append(view)


class FixedClock:
    def __init__(self, moment=None):
        self.moment = moment or datetime(2024, 1, 1, 14, 5, 9)

    def __call__(self):
        return self.moment


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def located():
    """Provider that always reports the reference point."""
    return LocationProvider(FixedLocationSource(RAJSHAHI_CENTER))


@pytest_asyncio.fixture
async def state(store):
    return await PersistentState.load(store, clock=FixedClock())


@pytest_asyncio.fixture
async def directory(store):
    """Directory over the full static catalog with no location capability."""
    return await Directory.create(store)


@pytest_asyncio.fixture
async def client(store):
    app.state.directory = Directory(build_services(), await PersistentState.load(store))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.state.directory = None
