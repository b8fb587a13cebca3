# app/models/api_result.py
from dataclasses import dataclass
from typing import Generic, Literal, Optional, TypeVar, Union

from app.models.spotify_search_models import SpotifyError

T = TypeVar("T")


class SpotifyApiError(Exception):
    """
    Spotify 呼叫失敗。不會被 raise 到 SpotifyApi 外面，
    而是包在 ApiFailure 裡當作值回傳。
    """

    def __init__(self, message: str, cause: Optional[SpotifyError] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class SpotifyAuthError(SpotifyApiError):
    """client credentials 交換失敗，沒有 HTTP status 可以給"""


class SpotifyUpstreamError(SpotifyApiError):
    """Spotify 回了非 2xx"""


class SpotifyTransportError(SpotifyApiError):
    """連不到 Spotify（DNS / connection / SSL ...）"""


@dataclass(frozen=True)
class ApiSuccess(Generic[T]):
    data: T
    ok: Literal[True] = True


@dataclass(frozen=True)
class ApiFailure:
    error: SpotifyApiError
    ok: Literal[False] = False


ApiResult = Union[ApiSuccess[T], ApiFailure]
