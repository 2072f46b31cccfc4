"""
Configuration — loads from .env, provides defaults.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# OpenWeatherMap (missing key is not checked; requests just fail)
OPEN_WEATHER_KEY = os.getenv("OPEN_WEATHER_KEY", "")
GEOCODE_URL = os.getenv("GEOCODE_URL", "http://api.openweathermap.org/geo/1.0/direct")
WEATHER_URL = os.getenv("WEATHER_URL", "https://api.openweathermap.org/data/2.5/weather")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

# Search history
DB_PATH = os.getenv("DB_PATH", "weather.db")

# Telegram
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
OWNER_CHAT_ID = int(os.environ.get("OWNER_CHAT_ID", "0"))

# Dashboard
DASHBOARD_HOST = os.getenv("DASHBOARD_HOST", "127.0.0.1")
DASHBOARD_PORT = int(os.getenv("DASHBOARD_PORT", "8080"))
DASHBOARD_SECRET = os.getenv("DASHBOARD_SECRET", "change-me-in-production")
