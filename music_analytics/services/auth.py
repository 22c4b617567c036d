# music_analytics/services/auth.py
"""
Auth/service layer for the Spotify client-credentials flow.
- Resolves which credentials a call should use (explicit > env default > none).
- Exchanges a credential pair for a bearer token.
- Caches tokens per credential pair until shortly before they expire.
"""

from __future__ import annotations

import base64
import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, MutableMapping, NamedTuple, Optional

import requests

from .. import config
from ..clients.spotify import sp_post_form
from ..errors import AuthenticationError

logger = logging.getLogger(__name__)

# ---- Credential resolution --------------------------------------------------

class CredentialPair(NamedTuple):
    client_id: str
    client_secret: str

    @property
    def cache_key(self) -> str:
        return f"{self.client_id}:{self.client_secret}"

    def basic_auth(self) -> str:
        return base64.b64encode(self.cache_key.encode()).decode()

    @property
    def complete(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret)


class CredentialSource(enum.Enum):
    EXPLICIT = "explicit"
    DEFAULT = "default"
    NONE = "none"


class ResolvedCredentials(NamedTuple):
    source: CredentialSource
    pair: Optional[CredentialPair] = None

    @property
    def is_mock(self) -> bool:
        return self.source is CredentialSource.NONE


def resolve_credentials(credentials: Optional[CredentialPair] = None) -> ResolvedCredentials:
    """
    Pick the credentials a call should run with.
    A half-filled explicit pair is ignored in favour of the env default.
    """
    if credentials is not None and credentials.complete:
        return ResolvedCredentials(CredentialSource.EXPLICIT, credentials)

    default = CredentialPair(*config.default_credentials())
    if default.complete:
        return ResolvedCredentials(CredentialSource.DEFAULT, default)

    return ResolvedCredentials(CredentialSource.NONE)

# ---- Token exchange ---------------------------------------------------------

@dataclass
class CachedToken:
    access_token: str
    expires_at: float  # epoch seconds


def exchange_client_credentials(pair: CredentialPair) -> dict:
    """
    POST grant_type=client_credentials to the accounts service.
    Returns { access_token, expires_in, token_type }.
    Raises AuthenticationError for any failure; the cause is chained.
    """
    headers = {
        "Authorization": f"Basic {pair.basic_auth()}",
        "Content-Type": "application/x-www-form-urlencoded",
    }
    try:
        r = sp_post_form(
            config.SPOTIFY_TOKEN_URL,
            data={"grant_type": "client_credentials"},
            headers=headers,
        )
    except requests.RequestException as exc:
        raise AuthenticationError(f"Failed to authenticate with Spotify: {exc}") from exc

    if not r.ok:
        raise AuthenticationError(
            f"Failed to authenticate with Spotify: Spotify token request failed: {r.reason}"
        )

    try:
        data = r.json()
        return {
            "access_token": data["access_token"],
            "expires_in": int(data.get("expires_in", 3600)),
            "token_type": data.get("token_type", "Bearer"),
        }
    except (ValueError, KeyError, TypeError) as exc:
        raise AuthenticationError(f"Failed to authenticate with Spotify: malformed token response ({exc})") from exc

# ---- Cache ------------------------------------------------------------------

class TokenCache:
    """
    Bearer tokens keyed by "client_id:client_secret".

    `storage` may be any mutable mapping; `clock` returns epoch seconds.
    With `max_entries` set, the least recently used pair is evicted once the
    cache is full. Concurrent misses on the same pair may each exchange; the
    last writer wins.
    """

    def __init__(
        self,
        storage: Optional[MutableMapping[str, CachedToken]] = None,
        clock: Callable[[], float] = time.time,
        max_entries: Optional[int] = None,
    ):
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self._storage = {} if storage is None else storage
        self._clock = clock
        self._max_entries = max_entries

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, pair: CredentialPair) -> bool:
        return pair.cache_key in self._storage

    def clear(self) -> None:
        self._storage.clear()

    def acquire_token(self, credentials: Optional[CredentialPair] = None) -> str:
        resolved = resolve_credentials(credentials)
        if resolved.is_mock:
            # placeholder only; never sent upstream
            return f"mock-token-{int(self._clock() * 1000)}"
        return self.token_for(resolved.pair)

    def token_for(self, pair: CredentialPair) -> str:
        key = pair.cache_key
        now = self._clock()

        cached = self._storage.get(key)
        if cached is not None and now < cached.expires_at:
            logger.debug("token cache hit for client %s", pair.client_id)
            self._touch(key)
            return cached.access_token

        logger.info("exchanging client credentials for client %s", pair.client_id)
        token_data = exchange_client_credentials(pair)
        self._store(key, CachedToken(
            access_token=token_data["access_token"],
            expires_at=now + token_data["expires_in"] - config.TOKEN_EXPIRY_MARGIN,
        ))
        return token_data["access_token"]

    def _touch(self, key: str) -> None:
        # re-insert so iteration order is least recently used first
        if self._max_entries is not None:
            self._storage[key] = self._storage.pop(key)

    def _store(self, key: str, token: CachedToken) -> None:
        self._storage.pop(key, None)
        self._storage[key] = token
        if self._max_entries is not None:
            while len(self._storage) > self._max_entries:
                oldest = next(iter(self._storage))
                del self._storage[oldest]


token_cache = TokenCache()
