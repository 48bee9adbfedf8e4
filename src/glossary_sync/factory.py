"""
Builds DeepL glossary drafts from the glossary records of a page.

Only language combinations DeepL advertises through
``/v2/glossary-language-pairs`` produce a glossary.
"""

import logging
from typing import Any, Dict, List, Optional

from .exceptions import InvalidGlossaryPage
from .models.glossary import Glossary, GlossaryEntry, GlossaryInfo, entries_to_tsv, is_valid_term
from .repository import PAGES_TABLE, GlossaryRepository
from .services.language_pairs import LanguagePairsListProvider
from .site import SiteLanguageResolver


logger = logging.getLogger("glossary_sync.factory")

GLOSSARY_MODULE = "glossary"
DOKTYPE_SYSFOLDER = 254


def is_glossary_page(page: Dict[str, Any]) -> bool:
    return page.get("module") == GLOSSARY_MODULE and page.get("doktype") == DOKTYPE_SYSFOLDER


def build_entry(source_term: str, target_term: str) -> Optional[GlossaryEntry]:
    """Strip both terms, ``None`` when either cannot be sent to DeepL."""
    source_term = (source_term or "").strip()
    target_term = (target_term or "").strip()
    if not is_valid_term(source_term) or not is_valid_term(target_term):
        return None
    return GlossaryEntry(source=source_term, target=target_term)


def deduplicate_entries(entries: List[GlossaryEntry]) -> List[GlossaryEntry]:
    """Keep the first entry of every source term, in order."""
    seen = set()
    unique = []
    for entry in entries:
        if entry.source in seen:
            continue
        seen.add(entry.source)
        unique.append(entry)
    return unique


class GlossaryFactory:
    def __init__(
        self,
        site_resolver: SiteLanguageResolver,
        repository: GlossaryRepository,
        language_pairs: LanguagePairsListProvider,
    ):
        self.site_resolver = site_resolver
        self.repository = repository
        self.language_pairs = language_pairs

    def build_glossaries(self, page_id: int) -> List[Glossary]:
        """
        Build one glossary per supported language pair found on the page.

        Args:
            page_id: Id of the glossary folder page

        Returns:
            Glossary drafts carrying the local metadata uid, the existing
            DeepL id (if any) and the deduplicated entries

        Raises:
            InvalidGlossaryPage: If the page is not a glossary folder
        """
        page = self.repository.get_record(PAGES_TABLE, page_id)
        if page is None or not is_glossary_page(page):
            raise InvalidGlossaryPage(f"Glossary module not found for page {page_id}")

        source_lang_code = self.site_resolver.default_language_code(page_id)
        localizations: Dict[str, Dict[int, Dict[str, Any]]] = {
            source_lang_code: self.repository.get_original_entries(page_id),
        }
        for language_id in self.site_resolver.available_localization_ids(page_id):
            target_lang_code = self.site_resolver.language_code_for(page_id, language_id)
            localizations[target_lang_code] = self.repository.get_localized_entries(page_id, language_id)

        glossaries = []
        for source_lang, target_langs in self.language_pairs.get_supported_pairs().items():
            if source_lang not in localizations:
                continue

            for target_lang in target_langs:
                if target_lang not in localizations:
                    continue
                # the default language is never a target
                if target_lang == source_lang_code:
                    continue

                row = self.repository.get_glossary_by_source_and_target_for_sync(source_lang, target_lang, page)
                row["source_lang"] = source_lang
                row["target_lang"] = target_lang

                targets = localizations[target_lang]
                entries = []
                for entry_id, source_entry in localizations[source_lang].items():
                    if entry_id not in targets:
                        continue
                    entry = build_entry(source_entry["term"], targets[entry_id]["term"])
                    if entry is None:
                        logger.warning(
                            f"Skipped entry {entry_id} for {source_lang}-{target_lang} on page {page_id}: invalid term"
                        )
                        continue
                    entries.append(entry)
                if not entries:
                    logger.debug(f"No entry pairs for {source_lang}-{target_lang} on page {page_id}")
                    continue

                glossary = Glossary.from_table_row(row)
                glossary.entries = deduplicate_entries(entries)
                glossaries.append(glossary)

        return glossaries

    def to_glossary_info(self, glossary: Glossary) -> GlossaryInfo:
        return glossary.to_info()

    def to_entries_tsv(self, glossary: Glossary) -> str:
        return entries_to_tsv(glossary.entries)
