# music_analytics/views/music.py
'''
This module handles the analytics endpoints for the dashboard.
- Top artists with their genre distribution.
- Genre distribution alone, over a larger artist sample.
- Averaged audio features of the user's top tracks.
Credentials arrive per request in X-Spotify-Client-Id / X-Spotify-Client-Secret;
without them the services fall back to env defaults, then to mock data.
'''

import logging

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from .. import config
from ..services import music as svc
from ..services.auth import CredentialPair
from ..services.transformers import (
    average_audio_features,
    genre_distribution,
    project_artists,
    to_error_response,
)

logger = logging.getLogger(__name__)

CACHE_CONTROL = "public, s-maxage=3600, stale-while-revalidate=86400"


class BadRequest(ValueError):
    pass


def _credentials(request):
    client_id = request.headers.get("X-Spotify-Client-Id") or ""
    client_secret = request.headers.get("X-Spotify-Client-Secret") or ""
    if not client_id and not client_secret:
        return None
    return CredentialPair(client_id, client_secret)


def _params(request, default_limit):
    raw_limit = request.GET.get("limit", str(default_limit))
    try:
        limit = min(int(raw_limit), config.MAX_LIMIT)
    except ValueError:
        raise BadRequest(f"limit must be between {config.MIN_LIMIT} and {config.MAX_LIMIT}") from None
    if limit < config.MIN_LIMIT:
        raise BadRequest(f"limit must be between {config.MIN_LIMIT} and {config.MAX_LIMIT}")

    time_range = request.GET.get("timeRange", config.DEFAULT_TIME_RANGE)
    if time_range not in config.TIME_RANGES:
        raise BadRequest("timeRange must be short_term, medium_term, or long_term")
    return limit, time_range


def _ok(payload):
    resp = JsonResponse(payload, status=200)
    resp["Cache-Control"] = CACHE_CONTROL
    return resp


def _error(exc):
    if isinstance(exc, BadRequest):
        return JsonResponse({"error": str(exc)}, status=400)
    logger.exception("music analytics request failed")
    err = to_error_response(exc)
    return JsonResponse({"error": err["message"]}, status=err["status"])


@require_GET
def top_artists(request):
    try:
        limit, time_range = _params(request, 20)
        raw = svc.fetch_top_artists(limit, time_range, _credentials(request))
        artists = project_artists(raw)
        return _ok({
            "artists": artists,
            "genreDistribution": genre_distribution(artists),
            "count": len(artists),
            "timeRange": time_range,
        })
    except Exception as exc:
        return _error(exc)


@require_GET
def genres(request):
    try:
        limit, time_range = _params(request, 50)
        artists = project_artists(svc.fetch_top_artists(limit, time_range, _credentials(request)))
        dist = genre_distribution(artists)
        return _ok({
            "genres": dist,
            "totalGenres": len(dist),
            "totalArtists": len(artists),
            "timeRange": time_range,
        })
    except Exception as exc:
        return _error(exc)


@require_GET
def audio_features(request):
    try:
        limit, time_range = _params(request, 50)
        creds = _credentials(request)
        tracks = svc.fetch_top_tracks(limit, time_range, creds)
        track_ids = [t["id"] for t in tracks.get("items", [])]

        if not track_ids:
            return JsonResponse({
                "features": average_audio_features({"audio_features": []}),
                "tracksAnalyzed": 0,
                "timeRange": time_range,
            })

        features = average_audio_features(svc.fetch_audio_features(track_ids, creds))
        return _ok({
            "features": features,
            "tracksAnalyzed": len(track_ids),
            "timeRange": time_range,
        })
    except Exception as exc:
        return _error(exc)
