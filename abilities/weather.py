"""
Weather ability — current conditions for a pair of coordinates.

Uses the OpenWeatherMap current weather API, metric units.
"""

import logging

import requests

from config import HTTP_TIMEOUT, OPEN_WEATHER_KEY, WEATHER_URL
from errors import WeatherLookupFailed
from models import Coordinates, WeatherSnapshot

log = logging.getLogger(__name__)


def fetch_current(coords: Coordinates, api_key: str = OPEN_WEATHER_KEY) -> WeatherSnapshot:
    try:
        resp = requests.get(
            WEATHER_URL,
            params={
                "lat": coords.lat,
                "lon": coords.lon,
                "units": "metric",
                "appid": api_key,
            },
            timeout=HTTP_TIMEOUT,
        )
        resp.raise_for_status()
        return WeatherSnapshot.from_api(resp.json())
    except (requests.RequestException, LookupError, ValueError, TypeError) as e:
        log.warning(f"Weather lookup failed for ({coords.lat}, {coords.lon}): {e}")
        raise WeatherLookupFailed() from e
