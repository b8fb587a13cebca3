# app/main.py
import logging
from fastapi import FastAPI

from app.config.settings import LOG_LEVEL
from app.api.search_api import router as search_router
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Spotify Search Proxy",
    description=(
        "Backend for: "
        "• Spotify client credentials (token cache) "
        "• Search with filters / pagination / market"
    ),
    version="1.0.0"
)

# === CORS Middleware ===
origins = [
    "http://localhost:3000",
    "http://localhost:5173",
    "*"
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# === Spotify 搜尋 API ===
app.include_router(search_router, prefix="/api", tags=["Spotify Search"])

@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Spotify Search Proxy running with client credentials token cache"
    }
