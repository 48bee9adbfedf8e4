"""Site language resolution for glossary pages."""

from typing import Dict, List, Protocol

from .repository import InMemoryRecordStore


class SiteLanguageResolver(Protocol):
    def default_language_code(self, page_id: int) -> str:
        ...

    def available_localization_ids(self, page_id: int) -> List[int]:
        ...

    def language_code_for(self, page_id: int, language_id: int) -> str:
        ...


class StaticSiteResolver:
    """
    Resolves languages from a fixed language table.

    Language id 0 is the site default. Localizations of a page are the page
    overlays present in the record store.
    """

    def __init__(self, languages: Dict[int, str], records: InMemoryRecordStore):
        if 0 not in languages:
            raise ValueError("The language table needs a default language with id 0")
        self.languages = {int(k): v.lower() for k, v in languages.items()}
        self.records = records

    def default_language_code(self, page_id: int) -> str:
        return self.languages[0]

    def available_localization_ids(self, page_id: int) -> List[int]:
        return self.records.get_page_translation_language_ids(page_id)

    def language_code_for(self, page_id: int, language_id: int) -> str:
        if language_id not in self.languages:
            raise KeyError(f"Language {language_id} is not configured for page {page_id}")
        return self.languages[language_id]
