# music_analytics/config.py
"""
Environment-backed configuration.
- Loads a local `.env` once (python-dotenv), without overriding real env vars.
- Default credentials and the HTTP timeout are read at call time so a
  changed environment is picked up without a restart.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

SPOTIFY_API_BASE = "https://api.spotify.com/v1"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

# Spotify rejects more ids than this in one audio-features call
AUDIO_FEATURES_CHUNK = 100

TIME_RANGES = ("short_term", "medium_term", "long_term")
DEFAULT_TIME_RANGE = "medium_term"
MIN_LIMIT = 1
MAX_LIMIT = 50

# Seconds shaved off `expires_in` so a token never expires mid-request
TOKEN_EXPIRY_MARGIN = 60

def default_credentials() -> Tuple[Optional[str], Optional[str]]:
    """
    Process-wide (client_id, client_secret). Empty strings count as missing.
    """
    return (
        os.getenv("SPOTIFY_CLIENT_ID") or None,
        os.getenv("SPOTIFY_CLIENT_SECRET") or None,
    )

def http_timeout() -> Optional[float]:
    """
    Optional request timeout in seconds. Unset means requests waits forever.
    """
    raw = os.getenv("SPOTIFY_HTTP_TIMEOUT")
    if not raw:
        return None
    return float(raw)
