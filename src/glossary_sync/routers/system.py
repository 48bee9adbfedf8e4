"""System endpoints: health checks, cache management."""

from fastapi import APIRouter
from ..schemas.system import HealthResponse
from ..config import get_settings
from ..cache import get_cache

router = APIRouter(prefix="", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Check API status and whether DeepL is configured."""
    return HealthResponse(
        status="healthy",
        version="1.0.0",
        deepl_configured=bool(get_settings().deepl_api_key)
    )


@router.post("/system/clear-cache", summary="Clear Server-Side Cache")
async def clear_cache():
    """
    Clears the server-side cache. The supported glossary language pairs are
    cached without expiry, call this after DeepL adds or removes a pair so
    the next sync fetches them again.
    """
    cache = get_cache()
    cleared_count = cache.clear()
    return {"status": "cache_cleared", "cleared_items": cleared_count}
