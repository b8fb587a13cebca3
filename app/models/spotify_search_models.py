# app/models/spotify_search_models.py
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class SearchType(str, Enum):
    album = "album"
    artist = "artist"
    playlist = "playlist"
    track = "track"
    show = "show"
    episode = "episode"
    audiobook = "audiobook"


class Tag(str, Enum):
    hipster = "hipster"
    new = "new"


class SearchFilter(BaseModel):
    album: Optional[str] = None
    artist: Optional[str] = None
    track: Optional[str] = None
    year: Optional[str] = None
    upc: Optional[str] = None
    isrc: Optional[str] = None
    tag: Optional[Tag] = None

    def as_query_terms(self) -> List[str]:
        """依欄位順序轉成 ["artist:xxx", "year:1990", ...]"""
        filters = self.model_dump(exclude_none=True, mode="json")
        return [f"{key}:{value}" for key, value in filters.items()]


class SearchParams(BaseModel):
    term: str
    filters: SearchFilter = Field(default_factory=SearchFilter)
    type: SearchType = SearchType.track
    market: Optional[str] = None   # country code, e.g. "US"
    offset: Optional[int] = None
    limit: Optional[int] = None


# 失敗結果附帶的 cause
class SpotifyError(BaseModel):
    status: Optional[int] = None
    message: str


class Image(BaseModel):
    url: str
    height: Optional[int] = None
    width: Optional[int] = None


# /api/search 回給前端的頁面狀態
class SearchPageResponse(BaseModel):
    items: List[Optional[Dict[str, Any]]] = []   # playlist 可能有 null
    total: int = 0
    search: Optional[str] = None
    type: SearchType
    market: Optional[str] = None
    filters: SearchFilter
    offset: int = 0
    limit: int
