"""DeepL glossary endpoints."""

import httpx
from fastapi import APIRouter, HTTPException, Depends
from ..schemas.glossary import GlossaryListResponse, GlossaryEntriesResponse, LanguagePairsResponse, SyncResponse
from ..models.glossary import GlossaryInfo
from ..services.glossary_service import DeeplGlossaryService
from ..exceptions import InvalidGlossaryPage, GlossaryCreationFailed, EntriesRequired
from ..api.dependencies import router_limiter, get_glossary_service

router = APIRouter(prefix="/glossaries", tags=["Glossary"])


def _upstream_error(e: httpx.HTTPError) -> HTTPException:
    if isinstance(e, httpx.HTTPStatusError):
        return HTTPException(status_code=e.response.status_code, detail=e.response.text)
    return HTTPException(status_code=502, detail=f"DeepL is unreachable: {str(e)}")


@router.get("", response_model=GlossaryListResponse)
def list_glossaries(service: DeeplGlossaryService = Depends(get_glossary_service)):
    """List all glossaries registered with DeepL."""
    try:
        return GlossaryListResponse(glossaries=service.list_glossaries())
    except httpx.HTTPError as he:
        raise _upstream_error(he)


@router.get("/language-pairs", response_model=LanguagePairsResponse)
def language_pairs(service: DeeplGlossaryService = Depends(get_glossary_service)):
    """Language pairs DeepL supports for glossaries (cached)."""
    try:
        pairs = service.factory.language_pairs.get_supported_pairs()
    except httpx.HTTPError as he:
        raise _upstream_error(he)
    return LanguagePairsResponse(supported_pairs=pairs)


@router.get("/{glossary_id}", response_model=GlossaryInfo)
def glossary_information(glossary_id: str, service: DeeplGlossaryService = Depends(get_glossary_service)):
    try:
        info = service.glossary_information(glossary_id)
    except httpx.HTTPError as he:
        raise _upstream_error(he)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Glossary '{glossary_id}' not found")
    return info


@router.get("/{glossary_id}/entries", response_model=GlossaryEntriesResponse)
def glossary_entries(glossary_id: str, service: DeeplGlossaryService = Depends(get_glossary_service)):
    try:
        entries = service.glossary_entries(glossary_id)
    except httpx.HTTPError as he:
        raise _upstream_error(he)
    if entries is None:
        raise HTTPException(status_code=404, detail=f"Glossary '{glossary_id}' not found")
    return GlossaryEntriesResponse(glossary_id=glossary_id, entries=entries)


@router.delete("/{glossary_id}", dependencies=[Depends(router_limiter)])
def delete_glossary(glossary_id: str, service: DeeplGlossaryService = Depends(get_glossary_service)):
    try:
        service.delete_glossary(glossary_id)
    except httpx.HTTPError as he:
        raise _upstream_error(he)
    return {"status": "deleted", "glossary_id": glossary_id}


@router.post(
    "/sync/{page_id}",
    response_model=SyncResponse,
    dependencies=[Depends(router_limiter)],
    responses={
        200: {
            "description": "Glossaries created on DeepL for the page.",
            "content": {
                "application/json": {
                    "example": {
                        "page_id": 12,
                        "created": [
                            {
                                "glossary_id": "def3a26b-3e84-45b3-84ae-0c0aaf3525f7",
                                "name": "Glossary de <> en",
                                "ready": False,
                                "source_lang": "de",
                                "target_lang": "en",
                                "creation_time": "2024-05-24T10:00:00Z",
                                "entry_count": 2
                            }
                        ]
                    }
                }
            }
        }
    }
)
def sync_glossaries(page_id: int, service: DeeplGlossaryService = Depends(get_glossary_service)):
    """
    Rebuild all glossaries of a glossary folder page on DeepL.

    Existing ready glossaries are replaced and the new DeepL ids are stored
    in the glossary records of the page.
    """
    try:
        created = service.sync_glossaries(page_id)
    except InvalidGlossaryPage as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (GlossaryCreationFailed, EntriesRequired) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except httpx.HTTPError as he:
        raise _upstream_error(he)
    return SyncResponse(page_id=page_id, created=created)
