# app/services/spotify_search_service.py
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

import requests

from app.config.settings import DEFAULT_EPISODE_MARKET, SPOTIFY_API_BASE
from app.models.api_result import (
    ApiFailure,
    ApiResult,
    ApiSuccess,
    SpotifyAuthError,
    SpotifyTransportError,
    SpotifyUpstreamError,
)
from app.models.spotify_search_models import (
    SearchFilter,
    SearchParams,
    SearchType,
    SpotifyError,
)
from app.services.spotify_token_service import ClientAuthProvider, is_success

logger = logging.getLogger(__name__)

SearchResponse = Dict[str, Any]   # {"tracks": {"items": [...], "total": 5, ...}}


def _to_api_error(r: requests.Response) -> ApiFailure:
    text = r.text
    error = SpotifyUpstreamError(
        f"Spotify request failed with {r.status_code}: {text}",
        cause=SpotifyError(status=r.status_code, message=text),
    )
    logger.error(str(error))
    return ApiFailure(error=error)


class SpotifyApi:
    def __init__(
        self,
        auth: ClientAuthProvider,
        base_url: str = SPOTIFY_API_BASE,
        session: Optional[requests.Session] = None,
        default_episode_market: str = DEFAULT_EPISODE_MARKET,
    ):
        self.auth = auth
        self.base_url = base_url.rstrip("/")
        # 沒給 session 就直接用 requests.get / requests.post，不共用連線
        self.session = session if session is not None else requests
        self.default_episode_market = default_episode_market

    # --------------------------
    # 帶 Bearer token 的 GET
    # --------------------------
    def _request(self, url: str) -> ApiResult[SearchResponse]:
        token = self.auth.get_access_token()
        if not token:
            return ApiFailure(error=SpotifyAuthError("Failed spotify authentication"))

        headers = {"Authorization": f"Bearer {token}"}

        try:
            r = self.session.get(url, headers=headers)
        except requests.RequestException as e:
            error = SpotifyTransportError(
                f"Spotify request failed: {e}",
                cause=SpotifyError(status=None, message=str(e)),
            )
            logger.error(str(error))
            return ApiFailure(error=error)

        if not is_success(r.status_code):
            return _to_api_error(r)

        return ApiSuccess(data=r.json())

    @staticmethod
    def _to_query_string(term: str, filters: SearchFilter) -> str:
        return " ".join([term, *filters.as_query_terms()])

    @staticmethod
    def _set_pagination(query: Dict[str, str], offset: Optional[int], limit: Optional[int]) -> None:
        # 0 跟沒給一樣，不會送出
        if offset:
            query["offset"] = str(offset)
        if limit:
            query["limit"] = str(limit)

    def _resolve_market(self, market: Optional[str], search_type: SearchType) -> Optional[str]:
        if not market and search_type == SearchType.episode:
            return self.default_episode_market
        return market or None

    def build_search_url(self, params: SearchParams) -> str:
        query = {
            "q": self._to_query_string(params.term, params.filters),
            "type": params.type.value,
        }

        self._set_pagination(query, params.offset, params.limit)

        market = self._resolve_market(params.market, params.type)
        if market:
            query["market"] = market

        return f"{self.base_url}/search?{urlencode(query, quote_via=quote)}"

    def search(self, params: SearchParams) -> ApiResult[SearchResponse]:
        """
        呼叫 Spotify search endpoint
        (https://developer.spotify.com/documentation/web-api/reference/search)。

        回傳 ApiSuccess / ApiFailure，呼叫端用 result.ok 判斷，不需要 try/except。
        """
        url = self.build_search_url(params)
        return self._request(url)
