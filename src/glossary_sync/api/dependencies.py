"""Common dependencies for FastAPI routes."""

from typing import Optional

from fastapi import HTTPException
from fastapi_throttle import RateLimiter

from ..cache import get_cache
from ..client import DeeplClient
from ..config import get_settings
from ..factory import GlossaryFactory
from ..repository import InMemoryRecordStore
from ..services.glossary_service import DeeplGlossaryService
from ..services.language_pairs import LanguagePairsListProvider
from ..site import StaticSiteResolver

# Rate limiter instance for routes
router_limiter = RateLimiter(times=5, seconds=30)

_records: Optional[InMemoryRecordStore] = None
_service: Optional[DeeplGlossaryService] = None


def get_record_store() -> InMemoryRecordStore:
    """Get the process wide record store, seeded from RECORDS_FILE when set."""
    global _records
    if _records is None:
        settings = get_settings()
        if settings.records_file:
            _records = InMemoryRecordStore.from_json_file(settings.records_file)
        else:
            _records = InMemoryRecordStore()
    return _records


def get_glossary_service() -> DeeplGlossaryService:
    """Wire the glossary service from the application settings."""
    global _service
    if _service is None:
        settings = get_settings()
        records = get_record_store()
        try:
            client = DeeplClient(settings)
        except ValueError as e:
            raise HTTPException(status_code=503, detail=str(e))
        language_pairs = LanguagePairsListProvider(get_cache(), client)
        factory = GlossaryFactory(
            StaticSiteResolver(settings.site_languages, records),
            records,
            language_pairs,
        )
        _service = DeeplGlossaryService(client, records, factory)
    return _service
