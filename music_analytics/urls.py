# music_analytics/urls.py
from django.urls import path
from .views import music, root

urlpatterns = [
    # Root + health
    path("", root.root),
    path("health", root.health),

    # Analytics
    path("api/music/top-artists", music.top_artists),
    path("api/music/genre-distribution", music.genres),
    path("api/music/audio-features", music.audio_features),
]
