"""
Data models for locations, weather snapshots, and search history.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict, replace
from datetime import datetime, timezone
from typing import Optional


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Location:
    city: str = ""
    country: str = ""  # empty or ISO 3166 alpha-2

    def normalized(self) -> Location:
        return Location(city=self.city.strip(), country=self.country.strip().upper())

    @property
    def query(self) -> str:
        """Geocoding query text: "city,country", or just "city"."""
        if self.country:
            return f"{self.city},{self.country}"
        return self.city

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float

    @classmethod
    def from_candidate(cls, candidate: dict) -> Coordinates:
        return cls(lat=float(candidate["lat"]), lon=float(candidate["lon"]))


@dataclass
class WeatherSnapshot:
    condition: str
    description: str
    temp_min: float
    temp_max: float
    humidity: float

    @classmethod
    def from_api(cls, payload: dict) -> WeatherSnapshot:
        """
        Flatten a current-weather response: the first element of
        ``weather`` plus the ``main`` measurements.
        """
        conditions = payload["weather"][0]
        main = payload["main"]
        return cls(
            condition=str(conditions["main"]),
            description=str(conditions["description"]),
            temp_min=float(main["temp_min"]),
            temp_max=float(main["temp_max"]),
            humidity=float(main["humidity"]),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class HistoryEntry:
    city: str = ""
    country: str = ""
    searched_at: str = field(default_factory=_now)

    def to_dict(self) -> dict:
        return {"city": self.city, "country": self.country, "date": self.searched_at}

    @classmethod
    def from_dict(cls, data: dict) -> HistoryEntry:
        return cls(
            city=str(data["city"]),
            country=str(data.get("country") or ""),
            searched_at=str(data["date"]),
        )


@dataclass
class SearchResult:
    snapshot: Optional[WeatherSnapshot] = None
    error_message: str = ""
    location: Location = field(default_factory=Location)  # what was searched, on success

    @property
    def ok(self) -> bool:
        return self.snapshot is not None


@dataclass
class DisplayState:
    location: Location = field(default_factory=Location)
    weather: Optional[WeatherSnapshot] = None
    error_message: str = ""
    history: list[HistoryEntry] = field(default_factory=list)

    def copy(self) -> DisplayState:
        return replace(
            self,
            location=replace(self.location),
            weather=replace(self.weather) if self.weather else None,
            history=[replace(e) for e in self.history],
        )

    def to_dict(self) -> dict:
        return {
            "location": self.location.to_dict(),
            "weather": self.weather.to_dict() if self.weather else None,
            "errorMessage": self.error_message,
            "history": [e.to_dict() for e in self.history],
        }
