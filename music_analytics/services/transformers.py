# music_analytics/services/transformers.py
'''
Normalize raw Spotify payloads into the shapes the dashboard renders.
 - project_artists: raw /me/top/artists page -> TopArtist list.
 - genre_distribution: genre counts across artists, top N.
 - average_audio_features: mean energy/danceability/tempo/valence/acousticness.
 - to_error_response: any failure -> { message, status }.
All functions are pure.
'''

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional, TypedDict

GENRE_LIMIT = 15
UNEXPECTED_ERROR = "An unexpected error occurred"

_UNIT_FIELDS = ("energy", "danceability", "valence", "acousticness")
_CENTS = Decimal("0.01")
_WHOLE = Decimal("1")


def _round_half_up(value: float, step: Decimal) -> Decimal:
    # ties go up (0.625 -> 0.63, 110.5 -> 111), not to even like round()
    return Decimal(repr(value)).quantize(step, rounding=ROUND_HALF_UP)


class TopArtist(TypedDict):
    id: str
    name: str
    popularity: int
    genres: List[str]
    imageUrl: Optional[str]


class GenreItem(TypedDict):
    genre: str
    count: int


class AudioFeaturesStats(TypedDict):
    energy: float
    danceability: float
    tempo: int
    valence: float
    acousticness: float


def project_artists(raw: Dict[str, Any]) -> List[TopArtist]:
    def lite(a: Dict[str, Any]) -> TopArtist:
        imgs = a.get("images") or []
        return {
            "id": a["id"],
            "name": a["name"],
            "popularity": a.get("popularity", 0),
            "genres": list(a.get("genres") or []),
            "imageUrl": imgs[0]["url"] if imgs else None,
        }

    return [lite(a) for a in raw.get("items", [])]


def genre_distribution(artists: Iterable[TopArtist], top: int = GENRE_LIMIT) -> List[GenreItem]:
    """
    Count every genre an artist lists, most frequent first.
    Ties keep the order in which genres were first seen.
    """
    counts: Dict[str, int] = {}
    for artist in artists:
        for genre in artist["genres"]:
            counts[genre] = counts.get(genre, 0) + 1

    ranked = sorted(counts.items(), key=lambda kv: -kv[1])
    return [{"genre": g, "count": c} for g, c in ranked[:top]]


def average_audio_features(raw: Dict[str, Any]) -> AudioFeaturesStats:
    features = [f for f in raw.get("audio_features", []) if f is not None]
    if not features:
        return {"energy": 0, "danceability": 0, "tempo": 0, "valence": 0, "acousticness": 0}

    n = len(features)

    def mean(field: str) -> float:
        return sum(f[field] for f in features) / n

    stats = {field: float(_round_half_up(mean(field), _CENTS)) for field in _UNIT_FIELDS}
    return {
        "energy": stats["energy"],
        "danceability": stats["danceability"],
        "tempo": int(_round_half_up(mean("tempo"), _WHOLE)),
        "valence": stats["valence"],
        "acousticness": stats["acousticness"],
    }


def to_error_response(error: object) -> Dict[str, Any]:
    # Every failure maps to 500; input validation is answered before this point.
    if isinstance(error, Exception):
        return {"message": str(error) or error.__class__.__name__, "status": 500}
    return {"message": UNEXPECTED_ERROR, "status": 500}
