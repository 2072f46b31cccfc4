"""
Text helpers shared by the Telegram bot and the dashboard.
"""

from __future__ import annotations
import re
from datetime import datetime
from typing import Optional

from models import HistoryEntry, Location, WeatherSnapshot


def format_location(city: str, country: str) -> str:
    if city and country:
        return f"{city}, {country.upper()}"
    return city or ""


def _clock(ts: datetime) -> str:
    """12-hour time without a leading zero, e.g. "9:30:05 AM"."""
    return ts.strftime("%I:%M:%S %p").lstrip("0")


def format_snapshot(
    location: Location,
    snapshot: WeatherSnapshot,
    now: Optional[datetime] = None,
) -> str:
    now = now or datetime.now()
    return (
        f"{format_location(location.city, location.country)}\n"
        f"{snapshot.condition}\n"
        f"Description: {snapshot.description}\n"
        f"Temperature: {snapshot.temp_min:g}°C ~ {snapshot.temp_max:g}°C\n"
        f"Humidity: {snapshot.humidity:g}%\n"
        f"Time: {now:%Y-%m-%d} {_clock(now)}"
    )


def _searched_time(searched_at: str) -> str:
    try:
        # Older entries may use a trailing "Z"
        ts = datetime.fromisoformat(searched_at.replace("Z", "+00:00"))
    except ValueError:
        return searched_at
    if ts.tzinfo is not None:
        ts = ts.astimezone()
    return _clock(ts)


def format_history(entries: list[HistoryEntry]) -> str:
    if not entries:
        return "No search history."
    lines = ["Search history:"]
    for i, e in enumerate(entries, start=1):
        lines.append(
            f"{i}. {format_location(e.city, e.country)}  ({_searched_time(e.searched_at)})"
        )
    return "\n".join(lines)


def parse_history_number(text: str) -> Optional[int]:
    """1-based position as typed ("2") to a 0-based index; None if not a number."""
    text = text.strip()
    if not text.isascii() or not text.isdecimal():
        return None
    return int(text) - 1


def parse_location_text(text: str) -> Location:
    """
    Split user text into city and country.

    "London" -> London / ""
    "London, gb" -> London / GB
    "New York US" -> New York / US

    Without a comma, only an upper-case trailing two-letter word is taken
    as the country, so "Xi An" stays a city.
    """
    text = text.strip()
    if "," in text:
        city, _, country = text.rpartition(",")
        return Location(city=city.strip(), country=country.strip()).normalized()
    m = re.match(r"^(.+?)\s+([A-Z]{2})$", text)
    if m:
        return Location(city=m.group(1), country=m.group(2)).normalized()
    return Location(city=text)
