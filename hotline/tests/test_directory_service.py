"""End-to-end tests for the directory pipeline."""

import asyncio
import json

import pytest

from conftest import RAJSHAHI_CENTER, FixedClock, RecordingRenderer, make_entry

from hotline.catalog import SERVICE_CATALOG, build_services
from hotline.domain import Coordinate
from hotline.services.action_service import ClipboardError, ClipboardFailure, MapLocationUnavailable
from hotline.services.directory_service import NO_RESULTS_MESSAGE, Directory, ServiceNotFoundError
from hotline.services.location_service import FixedLocationSource, LocationProvider
from hotline.services.state_service import PersistentState


class SlowSource:
    async def locate(self):
        await asyncio.sleep(10)
        return RAJSHAHI_CENTER


class GatedSource:
    """Location source that answers only once released."""

    def __init__(self, coordinate):
        self.coordinate = coordinate
        self.released = asyncio.Event()

    async def locate(self):
        await self.released.wait()
        return self.coordinate


class MemoryClipboard:
    def __init__(self, fail=False):
        self.fail = fail

    async def write_text(self, text):
        if self.fail:
            raise ClipboardError("denied")


async def _directory(store, *entries, provider=None):
    state = await PersistentState.load(store, clock=FixedClock())
    return Directory(build_services(state.state.favorite_ids, list(entries)), state, provider)


@pytest.mark.asyncio
async def test_located_service_at_user_position(store, located):
    directory = await _directory(
        store,
        make_entry(10, category="Rajshahi Police", lat=24.3686, lng=88.6300),
    )

    view = await directory.refresh(location_provider=located)

    assert [g.category for g in view.groups] == ["Rajshahi Police"]
    ranked = view.groups[0].services[0]
    assert ranked.distance == 0.0
    assert "Help" not in [g.category for g in view.groups]
    card = view.to_dict()["groups"][0]["services"][0]
    assert card["distance_label"] == "(0.0 km)"


@pytest.mark.asyncio
async def test_location_timeout_keeps_catalog_order(store):
    directory = await _directory(
        store,
        make_entry(3, category="All", lat=24.50, lng=88.70),
        make_entry(1, category="All", lat=24.3686, lng=88.6300),
        make_entry(2, category="All"),
    )

    view = await directory.refresh(location_provider=LocationProvider(SlowSource(), timeout=0.05))

    services = view.groups[0].services
    assert [r.service.id for r in services] == [3, 1, 2]
    cards = view.to_dict()["groups"][0]["services"]
    assert all(card["distance_label"] is None for card in cards)
    assert all(card["distance_km"] is None for card in cards)


@pytest.mark.asyncio
async def test_search_puts_nearest_first(store, located):
    directory = await _directory(
        store,
        make_entry(14, category="Rajshahi Govt.", title="Blood donation desk"),
        make_entry(205, category="Rajshahi Blood", title="Shah Makhdum Blood Bank", lat=24.3974, lng=88.6300),
        make_entry(203, category="Rajshahi Blood", title="Blood Bank, RMC", lat=24.4500, lng=88.6300),
    )

    view = await directory.refresh("blood", located)

    assert view.search_active is True
    assert len(view.groups) == 1
    group = view.groups[0]
    assert group.category == "SearchResults"
    assert group.nearest_first is True
    assert [r.service.id for r in group.services] == [205, 203, 14]
    assert group.services[0].distance == 3.2
    title = view.to_dict()["groups"][0]["title"]
    assert title.endswith("(নিকটতম সার্ভিস সবার আগে)")


@pytest.mark.asyncio
async def test_favorite_round_trip_persists(store):
    directory = await _directory(store, make_entry(205, category="Rajshahi Blood"))

    service = await directory.toggle_favorite(205)

    stored = json.loads(await store.get("emergencyHotlineState"))
    assert service.is_favorite is True
    assert stored["favoriteIds"]["205"] is True
    assert stored["hearts"] == 1

    service = await directory.toggle_favorite(205)

    stored = json.loads(await store.get("emergencyHotlineState"))
    assert service.is_favorite is False
    assert stored["hearts"] == 0
    assert "205" not in stored["favoriteIds"]


@pytest.mark.asyncio
async def test_favorites_restored_on_new_session(store):
    first = await Directory.create(store)
    await first.toggle_favorite(12)

    second = await Directory.create(store)

    assert second.get_service(12).is_favorite is True
    assert second.get_service(10).is_favorite is False


@pytest.mark.asyncio
async def test_full_catalog_drops_unmapped_category(directory):
    view = await directory.refresh()

    # Rajshahi Palli Bidyut is tagged "Rajshahi Electricity"
    assert view.dropped_ids == [15]
    rendered = {r.service.id for g in view.groups for r in g.services}
    assert rendered == {entry["id"] for entry in SERVICE_CATALOG} - {15}
    assert [g.category for g in view.groups] == [
        "All",
        "Rajshahi Police",
        "Rajshahi Fire",
        "Rajshahi Ambulance",
        "Rajshahi Hospital",
        "Rajshahi Blood",
        "Rajshahi Bank",
        "Rajshahi Education",
        "Govt.",
        "Help",
    ]


@pytest.mark.asyncio
async def test_search_without_matches(directory):
    view = await directory.refresh("zzzz-no-such-service")

    assert view.groups == []
    assert view.empty_message == NO_RESULTS_MESSAGE


@pytest.mark.asyncio
async def test_search_matches_number_and_category(directory):
    by_number = await directory.refresh("999")
    by_category = await directory.refresh("ambulance")

    assert [r.service.id for r in by_number.groups[0].services][0] == 1
    ids = {r.service.id for r in by_category.groups[0].services}
    assert {401, 402, 403, 404, 405, 406}.issubset(ids)


@pytest.mark.asyncio
async def test_last_render_wins(store):
    directory = await _directory(
        store,
        make_entry(1, category="All", lat=24.3686, lng=88.6300),
        make_entry(2, category="All", lat=24.4500, lng=88.6300),
    )
    renderer = RecordingRenderer()
    gated = GatedSource(Coordinate(24.4500, 88.6300))

    stale = asyncio.create_task(directory.refresh("", LocationProvider(gated), renderer))
    await asyncio.sleep(0)
    latest = await directory.refresh(
        "", LocationProvider(FixedLocationSource(RAJSHAHI_CENTER)), renderer
    )
    gated.released.set()

    assert await stale is None
    assert renderer.views == [latest]
    assert [r.service.id for r in latest.groups[0].services] == [1, 2]


@pytest.mark.asyncio
async def test_toggle_favorite_rerenders_active_search(store, located):
    directory = await _directory(store, make_entry(4, category="Help", title="Women & Child Helpline"))
    renderer = RecordingRenderer()
    await directory.refresh("helpline", located, renderer)

    await directory.toggle_favorite(4)

    assert len(renderer.views) == 2
    card = renderer.views[-1].to_dict()["groups"][0]["services"][0]
    assert card["is_favorite"] is True
    assert renderer.views[-1].hearts == 1


@pytest.mark.asyncio
async def test_toggle_favorite_without_search_does_not_rerender(store):
    directory = await _directory(store, make_entry(4, category="Help"))
    renderer = RecordingRenderer()
    await directory.refresh("", renderer=renderer)

    await directory.toggle_favorite(4)

    assert len(renderer.views) == 1


@pytest.mark.asyncio
async def test_copy_number_counts_only_success(store):
    directory = await _directory(store, make_entry(10, number="0721-774476"))

    copies = await directory.copy_number(10, MemoryClipboard())
    with pytest.raises(ClipboardFailure):
        await directory.copy_number(10, MemoryClipboard(fail=True))

    assert copies == 1
    assert directory.state.copies == 1


@pytest.mark.asyncio
async def test_call_records_history(store):
    directory = await _directory(store, make_entry(10, title="RMP Control Room", number="0721-774476"))

    link = await directory.call(10)

    assert link == "tel:0721-774476"
    assert directory.state.history[0].title == "RMP Control Room"
    assert directory.history_call_link(0) == "tel:0721-774476"
    assert len(directory.state.history) == 1


@pytest.mark.asyncio
async def test_clear_history(store):
    directory = await _directory(store, make_entry(10))
    await directory.call(10)

    await directory.clear_history()

    assert directory.state.history == []
    with pytest.raises(IndexError):
        directory.history_call_link(0)


@pytest.mark.asyncio
async def test_map_link(store):
    directory = await _directory(
        store,
        make_entry(10, lat=24.3686, lng=88.63),
        make_entry(13, title="Civil Surgeon Office"),
    )

    assert directory.map_link(10).endswith("query=24.3686,88.63")
    with pytest.raises(MapLocationUnavailable):
        directory.map_link(13)


@pytest.mark.asyncio
async def test_unknown_service(store):
    directory = await _directory(store, make_entry(10))

    with pytest.raises(ServiceNotFoundError):
        await directory.toggle_favorite(999)
    assert directory.state.hearts == 0


@pytest.mark.asyncio
async def test_toggle_favorite_without_renderer_skips_rerender(store):
    class CountingSource:
        calls = 0

        async def locate(self):
            CountingSource.calls += 1
            return RAJSHAHI_CENTER

    directory = await _directory(store, make_entry(4, category="Help", title="Women & Child Helpline"))
    await directory.refresh("helpline", LocationProvider(CountingSource()))

    service = await directory.toggle_favorite(4)

    assert service.is_favorite is True
    assert directory.state.hearts == 1
    # No renderer is waiting, so location is not requested again
    assert CountingSource.calls == 1


@pytest.mark.asyncio
async def test_refresh_survives_broken_location_source(store):
    class BrokenSource:
        async def locate(self):
            raise OSError("gps device unplugged")

    directory = await _directory(store, make_entry(1, category="All", lat=24.3686, lng=88.6300))

    view = await directory.refresh(location_provider=LocationProvider(BrokenSource()))

    assert [r.service.id for r in view.groups[0].services] == [1]
    assert view.groups[0].services[0].has_distance is False
