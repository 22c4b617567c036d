# music_analytics/views/root.py
'''
This module provides the root and health check views.
- The root view serves a simple HTML page linking the analytics endpoints.
- The health view returns a JSON response indicating the service is operational.
'''

from django.http import HttpResponse, JsonResponse

def root(_request):
    return HttpResponse("""
      <html>
        <head><title>Music Analytics</title></head>
        <body style="font-family: sans-serif; padding: 24px;">
          <h1>Music Analytics Dashboard</h1>
          <p>Listening stats from your Spotify account.</p>
          <ul>
            <li><a href="/api/music/top-artists">Top artists</a></li>
            <li><a href="/api/music/genre-distribution">Genre distribution</a></li>
            <li><a href="/api/music/audio-features">Audio features</a></li>
          </ul>
        </body>
      </html>
    """)

def health(_request):
    return JsonResponse({"ok": True})
