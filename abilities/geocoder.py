"""
Geocoder — free-text location to coordinates.

Uses the OpenWeatherMap direct geocoding API.
"""

import logging

import requests

from config import GEOCODE_URL, HTTP_TIMEOUT, OPEN_WEATHER_KEY
from errors import LocationNotFound
from models import Coordinates

log = logging.getLogger(__name__)


def resolve(query: str, api_key: str = OPEN_WEATHER_KEY) -> Coordinates:
    """Coordinates of the best match for `query` ("city" or "city,CC")."""
    try:
        resp = requests.get(
            GEOCODE_URL,
            params={"q": query, "limit": 5, "appid": api_key},
            timeout=HTTP_TIMEOUT,
        )
        resp.raise_for_status()
        candidates = resp.json()
        if not candidates:
            raise LookupError("no candidates")
        return Coordinates.from_candidate(candidates[0])
    except (requests.RequestException, LookupError, ValueError, TypeError) as e:
        log.warning(f"Geocoding failed for {query!r}: {e}")
        raise LocationNotFound() from e
