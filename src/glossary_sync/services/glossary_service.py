"""DeepL glossary operations and the page sync job."""

import logging
from typing import List, Optional

import httpx

from ..client import GlossaryClient
from ..exceptions import EntriesRequired, GlossaryCreationFailed
from ..factory import GlossaryFactory
from ..models.glossary import GlossaryEntry, GlossaryInfo
from ..repository import GlossaryRepository


logger = logging.getLogger("glossary_sync.service")


class DeeplGlossaryService:
    def __init__(self, client: GlossaryClient, repository: GlossaryRepository, factory: GlossaryFactory):
        self.client = client
        self.repository = repository
        self.factory = factory

    def list_glossaries(self) -> List[GlossaryInfo]:
        return self.client.list_glossaries()

    def create_glossary(
        self,
        name: str,
        entries: List[GlossaryEntry],
        source_lang: str = "de",
        target_lang: str = "en",
    ) -> GlossaryInfo:
        """
        Create a glossary on DeepL.

        Raises:
            EntriesRequired: If ``entries`` is empty
        """
        if not entries:
            raise EntriesRequired("Glossary entries are required")

        return self.client.create_glossary(name, source_lang, target_lang, entries)

    def delete_glossary(self, glossary_id: str) -> None:
        self.client.delete_glossary(glossary_id)

    def glossary_information(self, glossary_id: str) -> Optional[GlossaryInfo]:
        return self.client.get_glossary(glossary_id)

    def glossary_entries(self, glossary_id: str) -> Optional[List[GlossaryEntry]]:
        return self.client.get_glossary_entries(glossary_id)

    def sync_glossaries(self, page_id: int) -> List[GlossaryInfo]:
        """
        Rebuild every glossary of a glossary folder on DeepL.

        A ready glossary that already exists remotely is deleted before its
        replacement is created. When the replacement then fails, the local
        metadata is cleared so the next sync starts from a fresh create, and
        the provider error is raised.

        Returns:
            The glossaries created on DeepL
        """
        glossaries = self.factory.build_glossaries(page_id)
        if not glossaries:
            raise GlossaryCreationFailed(f"No glossary could be built from page {page_id}")

        created = []
        for glossary in glossaries:
            deleted = False
            # only a ready glossary is replaced
            if glossary.identifier != "" and glossary.ready:
                try:
                    self.delete_glossary(glossary.identifier)
                    deleted = True
                except httpx.HTTPError as e:
                    logger.warning(f"Could not delete glossary {glossary.identifier}: {e}")

            try:
                info = self.create_glossary(
                    glossary.glossary_name,
                    glossary.entries,
                    glossary.source_language,
                    glossary.target_language,
                )
            except EntriesRequired:
                logger.warning(
                    f"Skipped glossary {glossary.source_language}-{glossary.target_language} "
                    f"on page {page_id}: no entries"
                )
                if deleted:
                    self.repository.clear_local_glossary(glossary.uid)
                continue
            except (httpx.HTTPError, ValueError):
                if deleted:
                    self.repository.clear_local_glossary(glossary.uid)
                raise

            self.repository.update_local_glossary(info, glossary.uid)
            logger.info(
                f"Created glossary {info.glossary_id} ({info.source_lang}-{info.target_lang}, "
                f"{len(glossary.entries)} entries) for page {page_id}"
            )
            created.append(info)

        return created
