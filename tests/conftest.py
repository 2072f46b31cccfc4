"""Shared pytest fixtures: a throwaway history store and fake lookups."""

from __future__ import annotations

import pytest

from errors import LocationNotFound, WeatherLookupFailed
from models import Coordinates, WeatherSnapshot
from store import HistoryStore


LONDON = Coordinates(lat=51.5073, lon=-0.1277)

CLOUDY = WeatherSnapshot(
    condition="Clouds",
    description="overcast clouds",
    temp_min=10.0,
    temp_max=14.0,
    humidity=80.0,
)


class FakeLookups:
    """Records calls; `known` maps geocoding queries to coordinates."""

    def __init__(self, known=None, snapshot=CLOUDY, weather_fails=False):
        self.known = known if known is not None else {"London": LONDON}
        self.snapshot = snapshot
        self.weather_fails = weather_fails
        self.geocode_calls: list[str] = []
        self.weather_calls: list[Coordinates] = []

    def geocode(self, query: str) -> Coordinates:
        self.geocode_calls.append(query)
        if query not in self.known:
            raise LocationNotFound()
        return self.known[query]

    def fetch_weather(self, coords: Coordinates) -> WeatherSnapshot:
        self.weather_calls.append(coords)
        if self.weather_fails:
            raise WeatherLookupFailed()
        return self.snapshot

    @property
    def network_calls(self) -> int:
        return len(self.geocode_calls) + len(self.weather_calls)


@pytest.fixture
def history_store(tmp_path):
    store = HistoryStore(str(tmp_path / "weather.db"))
    try:
        yield store
    finally:
        store.close()


@pytest.fixture
def lookups():
    return FakeLookups()
