"""Unit tests for text helpers."""

from datetime import datetime

import pytest

from formatting import (
    format_history,
    format_location,
    format_snapshot,
    parse_history_number,
    parse_location_text,
)
from models import HistoryEntry, Location, WeatherSnapshot


@pytest.mark.parametrize('city,country,expected', [
    ('London', 'gb', 'London, GB'),
    ('London', '', 'London'),
    ('', '', ''),
])
def test_format_location(city, country, expected):
    assert format_location(city, country) == expected


def test_format_snapshot():
    snapshot = WeatherSnapshot('Clouds', 'overcast clouds', 10.0, 14.0, 80.0)

    text = format_snapshot(Location('London', 'GB'), snapshot, now=datetime(2024, 5, 1, 9, 30, 5))

    assert text.splitlines() == [
        'London, GB',
        'Clouds',
        'Description: overcast clouds',
        'Temperature: 10°C ~ 14°C',
        'Humidity: 80%',
        'Time: 2024-05-01 9:30:05 AM',
    ]


def test_format_history_empty():
    assert format_history([]) == 'No search history.'


def test_format_history_numbers_entries():
    text = format_history([
        HistoryEntry('London', '', '2024-05-01T09:30:05'),
        HistoryEntry('Paris', 'FR', 'garbage'),
    ])

    assert text.splitlines() == [
        'Search history:',
        '1. London  (9:30:05 AM)',
        '2. Paris, FR  (garbage)',
    ]


@pytest.mark.parametrize('text,expected', [
    ('London', Location('London', '')),
    ('  London , gb ', Location('London', 'GB')),
    ('New York US', Location('New York', 'US')),
    ('New York us', Location('New York us', '')),
    ('Xi An', Location('Xi An', '')),
    ('Rio de Janeiro', Location('Rio de Janeiro', '')),
    ('', Location('', '')),
])
def test_parse_location_text(text, expected):
    assert parse_location_text(text) == expected


def test_format_snapshot_keeps_fractional_values_and_afternoon_time():
    snapshot = WeatherSnapshot('Rain', 'light rain', 10.5, 14.25, 91.0)

    text = format_snapshot(Location('Oslo', ''), snapshot, now=datetime(2024, 5, 1, 15, 4, 9))

    assert 'Temperature: 10.5°C ~ 14.25°C' in text
    assert text.endswith('Time: 2024-05-01 3:04:09 PM')


@pytest.mark.parametrize('text,expected', [
    ('1', 0),
    (' 12 ', 11),
    ('0', -1),
    ('²', None),
    ('١', None),
    ('-1', None),
    ('two', None),
    ('', None),
])
def test_parse_history_number(text, expected):
    assert parse_history_number(text) == expected
