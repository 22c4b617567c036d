"""Test configuration and fixtures"""

import django
import pytest
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY="test-secret",
            ALLOWED_HOSTS=["testserver"],
            ROOT_URLCONF="music_analytics.urls",
            INSTALLED_APPS=[],
            DATABASES={},
        )
        django.setup()


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK"):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self.reason = reason

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return self._payload


class FakeClock:
    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """No default credentials unless a test sets them"""
    monkeypatch.delenv("SPOTIFY_CLIENT_ID", raising=False)
    monkeypatch.delenv("SPOTIFY_CLIENT_SECRET", raising=False)
    monkeypatch.delenv("SPOTIFY_HTTP_TIMEOUT", raising=False)


@pytest.fixture(autouse=True)
def empty_token_cache():
    from music_analytics.services.auth import token_cache
    token_cache.clear()
    yield
    token_cache.clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_posts(monkeypatch):
    """Record token exchanges; each returns a fresh token valid for an hour"""
    calls = []

    def fake_post(url, data=None, headers=None, timeout=None):
        calls.append({"url": url, "data": data, "headers": headers})
        return FakeResponse(200, {
            "access_token": f"token-{len(calls)}",
            "expires_in": 3600,
            "token_type": "Bearer",
        })

    monkeypatch.setattr("music_analytics.clients.spotify.requests.post", fake_post)
    return calls


@pytest.fixture
def api_gets(monkeypatch):
    """
    Record GETs. Responses are produced by `api_gets.handler(url, params)`,
    which tests may replace.
    """
    class Recorder(list):
        def handler(self, url, params):
            return FakeResponse(200, {"items": []})

    calls = Recorder()

    def fake_get(url, headers=None, params=None, timeout=None):
        calls.append({"url": url, "headers": headers, "params": params})
        return calls.handler(url, params)

    monkeypatch.setattr("music_analytics.clients.spotify.requests.get", fake_get)
    return calls


@pytest.fixture
def no_network(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("network access attempted")

    monkeypatch.setattr("music_analytics.clients.spotify.requests.get", boom)
    monkeypatch.setattr("music_analytics.clients.spotify.requests.post", boom)
