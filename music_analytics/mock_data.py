# music_analytics/mock_data.py
'''
Canned Spotify-shaped responses served when no credentials are configured.
Shapes mirror /me/top/artists, /me/top/tracks and /audio-features.
Use the getters; they hand out deep copies so callers may mutate freely.
'''

import copy

def _artist(artist_id, name, popularity, genres):
    return {
        "id": artist_id,
        "name": name,
        "popularity": popularity,
        "genres": genres,
        "images": [
            {
                "url": f"https://via.placeholder.com/640x640?text={name.replace(' ', '+')}",
                "height": 640,
                "width": 640,
            },
        ],
    }

MOCK_TOP_ARTISTS = {
    "items": [
        _artist("74ASZWbe4lXaubB0NYbqNm", "Arctic Monkeys", 88, ["alternative rock", "indie rock", "british indie rock"]),
        _artist("1Xyo4u8uTS0ZA9x08aBgX5", "The Weeknd", 92, ["canadian contemporary r&b", "pop", "synthwave"]),
        _artist("3TVXtAsR1InumggscjfW6o", "Drake", 90, ["canadian hip hop", "hip hop", "pop rap", "toronto rap"]),
        _artist("6deJr65NQTVQvO3dCJ5dP6", "Dua Lipa", 87, ["british pop", "dance pop", "pop"]),
        _artist("7qiZfU4dY1lsylvNFQuFOp", "Olivia Rodrigo", 85, ["pop", "gen z pop"]),
        _artist("246dkjvS1V8By7TP1RZpSR", "Harry Styles", 84, ["pop", "british pop"]),
        _artist("4q3ewBCX7sLccsSLwLclGQ", "Bad Bunny", 89, ["latin trap", "reggaeton", "trap latino"]),
        _artist("2takcwFFEiYzcJeFDxPZdw", "Post Malone", 86, ["hip hop", "pop rap", "rap"]),
        _artist("0EmeFodog0BqHMVEHl2Ym3", "The Beatles", 87, ["british invasion", "classic rock", "rock"]),
        _artist("0diZqB94uDHlA6USUkaLeO", "Billie Eilish", 88, ["alt z", "electropop", "pop"]),
    ],
}

MOCK_TOP_TRACKS = {
    "items": [
        {"id": "track1", "name": "Blinding Lights"},
        {"id": "track2", "name": "As It Was"},
        {"id": "track3", "name": "Levitating"},
        {"id": "track4", "name": "Good 4 U"},
        {"id": "track5", "name": "Sunroof"},
        {"id": "track6", "name": "Anti-Hero"},
        {"id": "track7", "name": "One Dance"},
        {"id": "track8", "name": "Heat Waves"},
        {"id": "track9", "name": "Industry Baby"},
        {"id": "track10", "name": "Paint The Town Red"},
        {"id": "track11", "name": "Flowers"},
        {"id": "track12", "name": "Vampire"},
        {"id": "track13", "name": "I Had Some Help"},
        {"id": "track14", "name": "Cruel Summer"},
        {"id": "track15", "name": "Bad Habit"},
        {"id": "track16", "name": "That's So True"},
        {"id": "track17", "name": "Running Up That Hill"},
        {"id": "track18", "name": "Starlight"},
        {"id": "track19", "name": "Golden"},
        {"id": "track20", "name": "Drivers License"},
    ],
}

# (id, energy, danceability, tempo, valence, acousticness)
_FEATURE_ROWS = [
    ("track1", 0.73, 0.81, 103, 0.33, 0.18),
    ("track2", 0.62, 0.75, 174, 0.68, 0.09),
    ("track3", 0.76, 0.87, 128, 0.88, 0.12),
    ("track4", 0.54, 0.69, 117, 0.45, 0.21),
    ("track5", 0.82, 0.91, 120, 0.79, 0.08),
    ("track6", 0.59, 0.66, 100, 0.35, 0.14),
    ("track7", 0.71, 0.79, 104, 0.61, 0.11),
    ("track8", 0.68, 0.83, 99, 0.69, 0.19),
    ("track9", 0.85, 0.88, 143, 0.82, 0.06),
    ("track10", 0.77, 0.84, 92, 0.75, 0.05),
    ("track11", 0.64, 0.77, 104, 0.74, 0.16),
    ("track12", 0.42, 0.44, 133, 0.31, 0.08),
    ("track13", 0.80, 0.85, 96, 0.73, 0.13),
    ("track14", 0.71, 0.80, 120, 0.71, 0.17),
    ("track15", 0.73, 0.76, 94, 0.51, 0.12),
    ("track16", 0.68, 0.82, 110, 0.76, 0.14),
    ("track17", 0.61, 0.54, 92, 0.47, 0.34),
    ("track18", 0.75, 0.84, 128, 0.84, 0.09),
    ("track19", 0.69, 0.81, 107, 0.77, 0.15),
    ("track20", 0.48, 0.58, 178, 0.29, 0.52),
]

MOCK_AUDIO_FEATURES = {
    "audio_features": [
        {
            "id": tid,
            "energy": energy,
            "danceability": danceability,
            "tempo": tempo,
            "valence": valence,
            "acousticness": acousticness,
        }
        for tid, energy, danceability, tempo, valence, acousticness in _FEATURE_ROWS
    ],
}

def top_artists():
    return copy.deepcopy(MOCK_TOP_ARTISTS)

def top_tracks():
    return copy.deepcopy(MOCK_TOP_TRACKS)

def audio_features():
    return copy.deepcopy(MOCK_AUDIO_FEATURES)

def search_artists(query: str, limit: int = 20):
    needle = query.lower()
    items = [a for a in top_artists()["items"] if needle in a["name"].lower()]
    return {"artists": {"items": items[:limit]}}
