# app/api/search_api.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.config.settings import DEFAULT_SEARCH_LIMIT
from app.models.spotify_search_models import (
    SearchFilter,
    SearchPageResponse,
    SearchParams,
    SearchType,
    Tag,
)
from app.services.image_utils import get_best_image, item_images
from app.services.spotify_client import get_spotify_api
from app.services.spotify_search_service import SpotifyApi

router = APIRouter()

logger = logging.getLogger(__name__)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    return value or None


@router.get(
    "/search",
    summary="Spotify Search",
    description=(
        "以 client credentials 代為呼叫 Spotify search，"
        "支援 album / artist / track / year / upc / isrc / tag 篩選與分頁。"
    ),
    response_model=SearchPageResponse,
)
def search_spotify(
    search: Optional[str] = Query(None, description="搜尋字串"),
    type: SearchType = Query(SearchType.track),
    market: Optional[str] = Query(None, description="國家代碼，例如 US"),
    offset: Optional[int] = Query(None, ge=0),
    limit: Optional[int] = Query(None, ge=0),
    album: Optional[str] = Query(None),
    artist: Optional[str] = Query(None),
    track: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    upc: Optional[str] = Query(None),
    isrc: Optional[str] = Query(None),
    tag: Optional[Tag] = Query(None),
    image_size: Optional[int] = Query(None, gt=0, description="每個 item 附上寬度最接近的圖片"),
    spotify_api: SpotifyApi = Depends(get_spotify_api),
):
    market = _blank_to_none(market)
    filters = SearchFilter(
        album=_blank_to_none(album),
        artist=_blank_to_none(artist),
        track=_blank_to_none(track),
        year=_blank_to_none(year),
        upc=_blank_to_none(upc),
        isrc=_blank_to_none(isrc),
        tag=tag,
    )
    limit = limit or DEFAULT_SEARCH_LIMIT

    page = SearchPageResponse(
        search=search,
        type=type,
        market=market,
        filters=filters,
        offset=0,
        limit=limit,
    )

    # 沒有搜尋字串 → 不打 Spotify
    if not search:
        return page

    result = spotify_api.search(
        SearchParams(
            term=search,
            filters=filters,
            type=type,
            market=market,
            offset=offset,
            limit=limit,
        )
    )

    if not result.ok:
        cause = result.error.cause
        raise HTTPException(
            status_code=(cause.status if cause and cause.status is not None else 500),
            detail=(cause.message if cause and cause.message is not None else "Internal Server error"),
        )

    data = result.data.get(f"{type.value}s") or {}
    logger.debug(f'Search for "{search}" yielded {data}')

    items = data.get("items") or []
    if image_size:
        for item in items:
            # playlist 搜尋時 Spotify 可能回 null item
            if item is None:
                continue
            best = get_best_image(item_images(item), image_size)
            item["best_image"] = best.model_dump() if best else None

    page.items = items
    page.total = data.get("total", 0)
    page.offset = data.get("offset") or offset or 0
    return page
