from music_analytics import mock_data
from music_analytics.errors import AuthenticationError
from music_analytics.services.transformers import (
    average_audio_features,
    genre_distribution,
    project_artists,
    to_error_response,
)

ZERO = {"energy": 0, "danceability": 0, "tempo": 0, "valence": 0, "acousticness": 0}


def artist(genres, **extra):
    return {"id": "x", "name": "X", "popularity": 50, "genres": genres, **extra}


class TestProjectArtists:
    def test_projects_first_image(self):
        raw = {"items": [artist(["pop"], images=[{"url": "a.jpg"}, {"url": "b.jpg"}])]}
        assert project_artists(raw) == [{
            "id": "x",
            "name": "X",
            "popularity": 50,
            "genres": ["pop"],
            "imageUrl": "a.jpg",
        }]

    def test_empty_image_list(self):
        raw = {"items": [artist([], images=[])]}
        assert project_artists(raw)[0]["imageUrl"] is None

    def test_keeps_order(self):
        raw = mock_data.top_artists()
        names = [a["name"] for a in project_artists(raw)]
        assert names == [a["name"] for a in mock_data.MOCK_TOP_ARTISTS["items"]]


class TestGenreDistribution:
    def test_counts_and_orders(self):
        artists = [artist(["rock", "pop"]), artist(["pop"]), artist(["pop", "rock", "jazz"])]
        assert genre_distribution(artists) == [
            {"genre": "pop", "count": 3},
            {"genre": "rock", "count": 2},
            {"genre": "jazz", "count": 1},
        ]

    def test_ties_keep_first_seen_order(self):
        artists = [artist(["b", "a"]), artist(["c"])]
        assert [g["genre"] for g in genre_distribution(artists)] == ["b", "a", "c"]

    def test_truncates_to_fifteen(self):
        artists = [artist([f"g{i}" for i in range(20)])]
        result = genre_distribution(artists)
        assert len(result) == 15
        assert result[-1]["genre"] == "g14"

    def test_mock_artists(self):
        result = genre_distribution(project_artists(mock_data.top_artists()))
        assert result[0] == {"genre": "pop", "count": 5}

    def test_no_artists(self):
        assert genre_distribution([]) == []


class TestAverageAudioFeatures:
    def test_ties_round_half_up(self):
        raw = {"audio_features": [
            {"energy": 0.5, "danceability": 0.25, "tempo": 100, "valence": 0.0, "acousticness": 0.125},
            {"energy": 0.75, "danceability": 0.0, "tempo": 121, "valence": 0.25, "acousticness": 0.0},
        ]}
        stats = average_audio_features(raw)
        assert stats["energy"] == 0.63
        assert stats["danceability"] == 0.13
        assert stats["valence"] == 0.13
        assert stats["acousticness"] == 0.06
        assert stats["tempo"] == 111

    def test_empty(self):
        assert average_audio_features({"audio_features": []}) == ZERO

    def test_only_nulls(self):
        assert average_audio_features({"audio_features": [None, None]}) == ZERO

    def test_mean_and_rounding(self):
        raw = {"audio_features": [
            {"energy": 0.5, "danceability": 0.2, "tempo": 100, "valence": 0.1, "acousticness": 0.333},
            {"energy": 0.7, "danceability": 0.2, "tempo": 120, "valence": 0.1, "acousticness": 0.333},
            None,
        ]}
        stats = average_audio_features(raw)
        assert stats["energy"] == 0.6
        assert stats["danceability"] == 0.2
        assert stats["acousticness"] == 0.33
        assert stats["tempo"] == 110
        assert isinstance(stats["tempo"], int)

    def test_mock_features(self):
        stats = average_audio_features(mock_data.audio_features())
        assert 0 <= stats["energy"] <= 1
        assert stats["tempo"] == 117


class TestErrorResponse:
    def test_exception(self):
        err = AuthenticationError("Failed to authenticate with Spotify: boom")
        assert to_error_response(err) == {
            "message": "Failed to authenticate with Spotify: boom",
            "status": 500,
        }

    def test_non_exception(self):
        assert to_error_response("oops") == {"message": "An unexpected error occurred", "status": 500}

    def test_exception_without_message(self):
        assert to_error_response(KeyError()) == {"message": "KeyError", "status": 500}
