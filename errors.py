"""
Error taxonomy for weather searches and the history slot.

Lookup errors carry the short message shown to the user; the underlying
cause stays on ``__cause__`` and in the logs.
"""


class WeatherAppError(Exception):
    message = "Something went wrong"

    def __init__(self, message: str = ""):
        if message:
            self.message = message
        super().__init__(self.message)


class ValidationError(WeatherAppError):
    message = "Please input city"


class LocationNotFound(WeatherAppError):
    message = "Not Found"


class WeatherLookupFailed(WeatherAppError):
    message = "Invalid Weather"


class CorruptHistoryError(WeatherAppError):
    """The persisted history slot holds something that is not a history list."""

    message = "Search history is corrupted"
