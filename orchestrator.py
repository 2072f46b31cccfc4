"""
Orchestrator — runs weather searches and owns the display state.

A search is two sequential lookups (geocode, then current weather)
followed by a history append. The orchestrator holds the in-progress
location, the latest snapshot, and the error message; the history list
is owned by the HistoryStore and mirrored here after every change.

Front ends (Telegram bot, dashboard) call the four entry points:
  - search(location)
  - search_from_history(entry)
  - clear()
  - delete_history(index)
and render from state().
"""

from __future__ import annotations
import asyncio
import logging
import threading
from typing import Callable, Optional

from abilities.geocoder import resolve
from abilities.weather import fetch_current
from errors import LocationNotFound, ValidationError, WeatherLookupFailed, WeatherAppError
from models import (
    Coordinates,
    DisplayState,
    HistoryEntry,
    Location,
    SearchResult,
    WeatherSnapshot,
)
from store import HistoryStore

log = logging.getLogger(__name__)


class Orchestrator:
    def __init__(
        self,
        history_store: Optional[HistoryStore] = None,
        geocode: Callable[[str], Coordinates] = resolve,
        fetch_weather: Callable[[Coordinates], WeatherSnapshot] = fetch_current,
    ):
        self.history_store = history_store or HistoryStore()
        self._geocode = geocode
        self._fetch_weather = fetch_weather
        # Held around every state change; the bot loop and the dashboard
        # thread share one orchestrator. Never held across an await.
        self._lock = threading.RLock()
        self.location = Location()
        self.snapshot: Optional[WeatherSnapshot] = None
        self.error_message = ""
        self.history: list[HistoryEntry] = self.history_store.get_history()
        log.info(f"Loaded {len(self.history)} history entries")

    # ── Searches ────────────────────────────────────────────────

    async def search(self, location: Location) -> SearchResult:
        """
        Look up current weather for `location`.

        The history entry is built from the location as it was when the
        search started, not from whatever self.location holds afterwards.
        """
        location = location.normalized()
        with self._lock:
            self.location = Location(city=location.city, country=location.country)

        try:
            self._validate(location)
            coords = await asyncio.to_thread(self._geocode, location.query)
            snapshot = await asyncio.to_thread(self._fetch_weather, coords)
        except (ValidationError, LocationNotFound, WeatherLookupFailed) as e:
            return self._fail(e)

        entry = HistoryEntry(city=location.city, country=location.country)
        with self._lock:
            # store call and mirror update as one step
            self.history = self.history_store.append(entry)
            self.snapshot = snapshot
            self.error_message = ""
        log.info(f"Weather for {location.query}: {snapshot.condition}")
        return SearchResult(snapshot=snapshot, location=location)

    async def search_from_history(self, entry: HistoryEntry) -> SearchResult:
        """Re-run a past search live; nothing cached is restored."""
        return await self.search(Location(city=entry.city, country=entry.country))

    @staticmethod
    def _validate(location: Location):
        if not location.city:
            raise ValidationError()
        if location.country and len(location.country) != 2:
            raise ValidationError("Please input a 2-letter country code")

    def _fail(self, error: WeatherAppError) -> SearchResult:
        log.info(f"Search failed: {error.message}")
        with self._lock:
            self.error_message = error.message
            self.clear()
        return SearchResult(error_message=error.message)

    # ── Display state ───────────────────────────────────────────

    def clear(self) -> DisplayState:
        """Blank the display and forget the in-progress location."""
        with self._lock:
            self.location = Location()
            self.snapshot = None
            return self.state()

    def delete_history(self, index: int) -> DisplayState:
        with self._lock:
            self.history = self.history_store.remove_at(index)
            return self.state()

    def history_entry(self, index: int) -> Optional[HistoryEntry]:
        with self._lock:
            if 0 <= index < len(self.history):
                return self.history[index]
            return None

    def state(self) -> DisplayState:
        with self._lock:
            return DisplayState(
                location=self.location,
                weather=self.snapshot,
                error_message=self.error_message,
                history=self.history,
            ).copy()
