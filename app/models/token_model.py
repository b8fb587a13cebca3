# app/models/token_model.py
from pydantic import BaseModel, ConfigDict

# Spotify /api/token 回傳（client credentials 沒有 refresh_token）
class SpotifyAuthResponse(BaseModel):
    access_token: str
    expires_in: int   # 秒
    token_type: str = "Bearer"

# 記憶體裡唯一的一份 token，整個物件替換、不改欄位
class CachedToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: str
    expires_at: float   # epoch 毫秒，已扣掉安全緩衝
