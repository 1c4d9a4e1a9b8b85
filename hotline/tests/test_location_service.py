"""Tests for the fail-open location provider."""

import asyncio

import pytest

from hotline.domain import Coordinate
from hotline.services.location_service import (
    FixedLocationSource,
    LocationPermissionDenied,
    LocationProvider,
    LocationUnavailable,
)


class FailingSource:
    def __init__(self, exc):
        self.exc = exc
        self.calls = 0

    async def locate(self):
        self.calls += 1
        raise self.exc


class SlowSource:
    async def locate(self):
        await asyncio.sleep(10)
        return Coordinate(0.0, 0.0)


@pytest.mark.asyncio
async def test_acquire_location_returns_fix():
    provider = LocationProvider(FixedLocationSource(Coordinate(24.3686, 88.63)))

    assert await provider.acquire_location() == Coordinate(24.3686, 88.63)


@pytest.mark.asyncio
async def test_acquire_location_without_capability():
    provider = LocationProvider()

    assert provider.available is False
    assert await provider.acquire_location() is None


@pytest.mark.asyncio
async def test_acquire_location_permission_denied():
    source = FailingSource(LocationPermissionDenied("User denied Geolocation"))
    provider = LocationProvider(source)

    assert await provider.acquire_location() is None
    # Single attempt, no retry
    assert source.calls == 1


@pytest.mark.asyncio
async def test_acquire_location_position_unavailable():
    provider = LocationProvider(FailingSource(LocationUnavailable("no fix")))

    assert await provider.acquire_location() is None


@pytest.mark.asyncio
async def test_acquire_location_times_out():
    provider = LocationProvider(SlowSource(), timeout=0.05)

    assert await provider.acquire_location() is None


def test_default_timeout_is_five_seconds():
    assert LocationProvider().timeout == 5


@pytest.mark.asyncio
async def test_acquire_location_source_error():
    """A failing device-backed source degrades to no location."""
    source = FailingSource(OSError("gps device unplugged"))
    provider = LocationProvider(source)

    assert await provider.acquire_location() is None
    assert source.calls == 1
