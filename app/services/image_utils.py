# app/services/image_utils.py
from typing import Any, Dict, List, Optional

from app.models.spotify_search_models import Image


def get_best_image(images: List[Image], target_size: int) -> Optional[Image]:
    """寬度最接近 target_size 的那張；同樣接近時取第一張"""
    if not images:
        return None

    best = images[0]
    current_delta = abs(target_size - (best.width or 0))

    for image in images:
        delta = abs(target_size - (image.width or 0))
        if delta < current_delta:
            best = image
            current_delta = delta

    return best


def item_images(item: Dict[str, Any]) -> List[Image]:
    # track 本身沒有 images，要從 album 拿
    raw = item.get("images") or (item.get("album") or {}).get("images") or []
    return [Image.model_validate(img) for img in raw]
