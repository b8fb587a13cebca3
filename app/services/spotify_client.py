# app/services/spotify_client.py
from app.services.spotify_search_service import SpotifyApi
from app.services.spotify_token_service import SpotifyAuth

# 整個 process 共用同一份 token cache
spotify_auth = SpotifyAuth()
spotify_api = SpotifyApi(auth=spotify_auth)


def get_spotify_api() -> SpotifyApi:
    return spotify_api
