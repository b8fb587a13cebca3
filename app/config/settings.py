import os
import logging
from dotenv import load_dotenv

def load_env():
    if os.getenv("ENVIRONMENT") == "production":
        return

    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    env_path = os.path.join(base_dir, ".env")

    if os.path.exists(env_path):
        load_dotenv(env_path)

# Load env now
load_env()

# Spotify (client credentials)
SPOTIFY_API_KEY = os.getenv("SPOTIFY_API_KEY")
SPOTIFY_API_SECRET = os.getenv("SPOTIFY_API_SECRET")

if not SPOTIFY_API_KEY or not SPOTIFY_API_SECRET:
    logging.warning("SPOTIFY_API_KEY / SPOTIFY_API_SECRET 未設定，Spotify 搜尋會驗證失敗")

# Spotify endpoints
SPOTIFY_AUTH_URL = os.getenv("SPOTIFY_AUTH_URL", "https://accounts.spotify.com/api/token")
SPOTIFY_API_BASE = os.getenv("SPOTIFY_API_BASE", "https://api.spotify.com/v1")

# Token cache：從 expires_in 扣掉的安全緩衝（毫秒）
TOKEN_EXPIRATION_BUFFER_MS = int(os.getenv("TOKEN_EXPIRATION_BUFFER_MS", "300"))

# Search
DEFAULT_EPISODE_MARKET = os.getenv("DEFAULT_EPISODE_MARKET", "SK")
DEFAULT_SEARCH_LIMIT = int(os.getenv("DEFAULT_SEARCH_LIMIT", "40"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
