# music_analytics/clients/spotify.py
'''
Client layer for Spotify Web API interactions.
 - Provides functions to perform GET and form POST requests with the necessary authentication headers.
 - Centralizes transport so services never build URLs or headers themselves.
'''

import requests

from ..config import SPOTIFY_API_BASE, http_timeout

def _to_url(path_or_url: str) -> str:
    return path_or_url if path_or_url.startswith("http") else f"{SPOTIFY_API_BASE}/{path_or_url.lstrip('/')}"

def sp_get(access_token: str, path_or_url: str, *, params=None, timeout=None):
    return requests.get(
        _to_url(path_or_url),
        headers={
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        },
        params=params or {},
        timeout=timeout if timeout is not None else http_timeout(),
    )

def sp_post_form(url: str, *, data: dict, headers: dict, timeout=None):
    return requests.post(
        url,
        data=data,
        headers=headers,
        timeout=timeout if timeout is not None else http_timeout(),
    )
