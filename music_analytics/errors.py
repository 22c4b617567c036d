# music_analytics/errors.py

class MusicAnalyticsError(Exception):
    """Base class for failures raised by the services layer."""


class AuthenticationError(MusicAnalyticsError):
    """Client-credentials exchange was rejected or never reached Spotify."""


class UpstreamRequestError(MusicAnalyticsError):
    """A Spotify resource call came back with a non-2xx status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Spotify API error: {status_code} {reason}".rstrip())
