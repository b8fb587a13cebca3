# app/services/spotify_token_service.py
import base64
import logging
import time
from typing import Callable, Optional, Protocol

import requests
from pydantic import ValidationError

from app.config.settings import (
    SPOTIFY_API_KEY,
    SPOTIFY_API_SECRET,
    SPOTIFY_AUTH_URL,
    TOKEN_EXPIRATION_BUFFER_MS,
)
from app.models.token_model import CachedToken, SpotifyAuthResponse

logger = logging.getLogger(__name__)


def now_ms() -> float:
    return time.time() * 1000


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class ClientAuthProvider(Protocol):
    def get_access_token(self) -> Optional[str]:
        ...


class TokenCache:
    """
    只存一份 access token 的記憶體快取。

    - store() 每次都整個換掉 CachedToken
    - get() 只讀一次 slot，再用同一份 snapshot 判斷是否過期，
      所以同時有多個 request 讀取時，也不會拿到已經進入緩衝區的 token
    """

    def __init__(
        self,
        buffer_ms: int = TOKEN_EXPIRATION_BUFFER_MS,
        clock: Callable[[], float] = now_ms,
    ):
        self.buffer_ms = buffer_ms
        self._clock = clock
        self._token: Optional[CachedToken] = None

    @property
    def token(self) -> Optional[CachedToken]:
        return self._token

    def _is_valid(self, token: Optional[CachedToken]) -> bool:
        return token is not None and self._clock() < token.expires_at

    def is_active(self) -> bool:
        return self._is_valid(self._token)

    def store(self, access_token: str, ttl_seconds: int) -> CachedToken:
        token = CachedToken(
            access_token=access_token,
            expires_at=self._clock() + ttl_seconds * 1000 - self.buffer_ms,
        )
        self._token = token
        return token

    def get(self) -> Optional[str]:
        token = self._token
        if not self._is_valid(token):
            return None
        return token.access_token


class SpotifyAuth:
    """Client credentials flow，token 會記在 TokenCache 裡避免重複打 Spotify。"""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        auth_url: str = SPOTIFY_AUTH_URL,
        cache: Optional[TokenCache] = None,
        session: Optional[requests.Session] = None,
    ):
        self.client_id = client_id if client_id is not None else SPOTIFY_API_KEY
        self.client_secret = client_secret if client_secret is not None else SPOTIFY_API_SECRET
        self.auth_url = auth_url
        self.cache = cache if cache is not None else TokenCache()
        # 沒給 session 就直接用 requests.get / requests.post，不共用連線
        self.session = session if session is not None else requests

    def _basic_credentials(self) -> str:
        raw = f"{self.client_id}:{self.client_secret}".encode()
        return base64.b64encode(raw).decode()

    def get_access_token(self) -> Optional[str]:
        """
        取得 access token：
        1. cache 還有效 → 直接回傳，不打 Spotify
        2. 否則做一次 client credentials 交換並寫回 cache
        失敗一律回傳 None（不 raise、不寫 cache），下一次呼叫會重新交換。
        """
        cached = self.cache.get()
        if cached:
            return cached

        headers = {
            "Authorization": f"Basic {self._basic_credentials()}",
            "Content-Type": "application/x-www-form-urlencoded",
        }
        payload = {"grant_type": "client_credentials"}

        try:
            r = self.session.post(self.auth_url, headers=headers, data=payload)
        except requests.RequestException as e:
            logger.error(f"Spotify auth request failed: {e}")
            return None

        if not is_success(r.status_code):
            logger.error(f"Spotify auth failed with {r.status_code}: {r.text}")
            return None

        try:
            auth = SpotifyAuthResponse.model_validate(r.json())
        except ValidationError as e:
            logger.error(f"Spotify auth response missing token fields: {e}")
            return None

        self.cache.store(auth.access_token, auth.expires_in)
        logger.info(f"Spotify access token refreshed, expires in {auth.expires_in}s")

        return auth.access_token
