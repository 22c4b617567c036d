# music_analytics/services/music.py
'''
Read-only Spotify resources used by the dashboard.
 - fetch_top_artists / fetch_top_tracks: a single page of the user's top items.
 - fetch_audio_features: batch audio features, chunked to the per-request id ceiling.
 - search_artists: artist search.
Every function falls back to canned mock data when no credentials resolve.
Results are returned as the raw Spotify JSON.
'''

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence

from .. import config, mock_data
from ..clients.spotify import sp_get
from ..errors import UpstreamRequestError
from .auth import CredentialPair, TokenCache, resolve_credentials, token_cache

logger = logging.getLogger(__name__)

def _get(token: str, path: str, *, params=None) -> Dict[str, Any]:
    """
    One authenticated GET; non-2xx becomes UpstreamRequestError.
    """
    r = sp_get(token, path, params=params)
    if not r.ok:
        raise UpstreamRequestError(r.status_code, r.reason)
    return r.json()

def _token(pair: CredentialPair, cache: Optional[TokenCache]) -> str:
    return (cache or token_cache).token_for(pair)

def fetch_top_artists(
    limit: int = 20,
    time_range: str = config.DEFAULT_TIME_RANGE,
    credentials: Optional[CredentialPair] = None,
    *,
    cache: Optional[TokenCache] = None,
) -> Dict[str, Any]:
    resolved = resolve_credentials(credentials)
    if resolved.is_mock:
        logger.info("no Spotify credentials configured; serving mock top artists")
        return mock_data.top_artists()

    token = _token(resolved.pair, cache)
    return _get(token, "me/top/artists", params={"limit": limit, "time_range": time_range})

def fetch_top_tracks(
    limit: int = 50,
    time_range: str = config.DEFAULT_TIME_RANGE,
    credentials: Optional[CredentialPair] = None,
    *,
    cache: Optional[TokenCache] = None,
) -> Dict[str, Any]:
    resolved = resolve_credentials(credentials)
    if resolved.is_mock:
        logger.info("no Spotify credentials configured; serving mock top tracks")
        return mock_data.top_tracks()

    token = _token(resolved.pair, cache)
    return _get(token, "me/top/tracks", params={"limit": limit, "time_range": time_range})

def chunked(items: Sequence[str], size: int = config.AUDIO_FEATURES_CHUNK) -> List[List[str]]:
    return [list(items[i:i + size]) for i in range(0, len(items), size)]

def fetch_audio_features(
    track_ids: Sequence[str],
    credentials: Optional[CredentialPair] = None,
    *,
    cache: Optional[TokenCache] = None,
) -> Dict[str, Any]:
    """
    Audio features for every id, in input order.
    Ids Spotify cannot analyze come back as None and are left in place.
    Chunks are requested concurrently; the first failing chunk's error is raised
    after all chunks have finished.
    """
    if not track_ids:
        return {"audio_features": []}

    resolved = resolve_credentials(credentials)
    if resolved.is_mock:
        logger.info("no Spotify credentials configured; serving mock audio features")
        return mock_data.audio_features()

    token = _token(resolved.pair, cache)
    chunks = chunked(track_ids)
    logger.debug("requesting audio features for %d ids in %d chunk(s)", len(track_ids), len(chunks))

    def fetch(chunk: List[str]) -> List[Optional[Dict[str, Any]]]:
        data = _get(token, "audio-features", params={"ids": ",".join(chunk)})
        return data.get("audio_features") or []

    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        futures = [pool.submit(fetch, chunk) for chunk in chunks]
        results = [f.result() for f in futures]

    features: List[Optional[Dict[str, Any]]] = []
    for part in results:
        features.extend(part)
    return {"audio_features": features}

def search_artists(
    query: str,
    limit: int = 20,
    credentials: Optional[CredentialPair] = None,
    *,
    cache: Optional[TokenCache] = None,
) -> Dict[str, Any]:
    resolved = resolve_credentials(credentials)
    if resolved.is_mock:
        logger.info("no Spotify credentials configured; searching mock artists")
        return mock_data.search_artists(query, limit)

    token = _token(resolved.pair, cache)
    return _get(token, "search", params={"q": query, "type": "artist", "limit": limit})
