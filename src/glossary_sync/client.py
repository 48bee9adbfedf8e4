"""DeepL glossary API client."""

from typing import List, Optional, Protocol

import httpx

from .config import Settings, get_settings
from .models.glossary import (
    GlossaryEntry,
    GlossaryInfo,
    GlossaryLanguagePair,
    entries_from_tsv,
    entries_to_tsv,
)

DEEPL_SERVER_URL = "https://api.deepl.com"
DEEPL_SERVER_URL_FREE = "https://api-free.deepl.com"


class GlossaryClient(Protocol):
    """The glossary operations the services need from the translation provider."""

    def list_glossary_language_pairs(self) -> List[GlossaryLanguagePair]:
        ...

    def create_glossary(self, name: str, source_lang: str, target_lang: str, entries: List[GlossaryEntry]) -> GlossaryInfo:
        ...

    def delete_glossary(self, glossary_id: str) -> None:
        ...

    def get_glossary(self, glossary_id: str) -> Optional[GlossaryInfo]:
        ...

    def get_glossary_entries(self, glossary_id: str) -> Optional[List[GlossaryEntry]]:
        ...

    def list_glossaries(self) -> List[GlossaryInfo]:
        ...


def server_url_for_key(api_key: str) -> str:
    """Free-plan keys end with ':fx' and must use the free endpoint."""
    if api_key.endswith(":fx"):
        return DEEPL_SERVER_URL_FREE
    return DEEPL_SERVER_URL


class DeeplClient:
    """
    Blocking client for the DeepL v2 glossary endpoints.

    An injected ``http_client`` is used as given: it must already point at
    the DeepL base URL. The auth header is sent with every request and never
    written into the injected client.
    """

    def __init__(self, settings: Optional[Settings] = None, http_client: Optional[httpx.Client] = None):
        self.settings = settings or get_settings()
        api_key = self.settings.deepl_api_key
        if not api_key:
            raise ValueError("DEEPL_API_KEY is required for the DeepL glossary client")

        base_url = self.settings.deepl_server_url or server_url_for_key(api_key)
        self._http = http_client or httpx.Client(base_url=base_url, timeout=self.settings.deepl_timeout)
        self._headers = {"Authorization": f"DeepL-Auth-Key {api_key}"}

    def close(self):
        self._http.close()

    def list_glossary_language_pairs(self) -> List[GlossaryLanguagePair]:
        resp = self._http.get("/v2/glossary-language-pairs", headers=self._headers)
        resp.raise_for_status()
        return [GlossaryLanguagePair(**pair) for pair in resp.json().get("supported_languages", [])]

    def create_glossary(self, name: str, source_lang: str, target_lang: str, entries: List[GlossaryEntry]) -> GlossaryInfo:
        resp = self._http.post("/v2/glossaries", data={
            "name": name,
            "source_lang": source_lang,
            "target_lang": target_lang,
            "entries": entries_to_tsv(entries),
            "entries_format": "tsv",
        }, headers=self._headers)
        resp.raise_for_status()
        return GlossaryInfo(**resp.json())

    def delete_glossary(self, glossary_id: str) -> None:
        resp = self._http.delete(f"/v2/glossaries/{glossary_id}", headers=self._headers)
        resp.raise_for_status()

    def get_glossary(self, glossary_id: str) -> Optional[GlossaryInfo]:
        resp = self._http.get(f"/v2/glossaries/{glossary_id}", headers=self._headers)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return GlossaryInfo(**resp.json())

    def get_glossary_entries(self, glossary_id: str) -> Optional[List[GlossaryEntry]]:
        resp = self._http.get(
            f"/v2/glossaries/{glossary_id}/entries",
            headers={**self._headers, "Accept": "text/tab-separated-values"},
        )
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return entries_from_tsv(resp.text)

    def list_glossaries(self) -> List[GlossaryInfo]:
        resp = self._http.get("/v2/glossaries", headers=self._headers)
        resp.raise_for_status()
        return [GlossaryInfo(**info) for info in resp.json().get("glossaries", [])]
