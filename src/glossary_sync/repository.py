"""Record store holding pages, glossary entries and glossary sync metadata."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from .models.glossary import GlossaryInfo


logger = logging.getLogger("glossary_sync.repository")

PAGES_TABLE = "pages"
ENTRY_TABLE = "tx_wvdeepltranslate_glossaryentry"
GLOSSARY_TABLE = "tx_wvdeepltranslate_glossary"


class GlossaryRepository(Protocol):
    """Record access the factory and the sync service depend on."""

    def get_record(self, table: str, uid: int) -> Optional[Dict[str, Any]]:
        ...

    def get_original_entries(self, page_id: int) -> Dict[int, Dict[str, Any]]:
        ...

    def get_localized_entries(self, page_id: int, language_id: int) -> Dict[int, Dict[str, Any]]:
        ...

    def get_glossary_by_source_and_target_for_sync(self, source_lang: str, target_lang: str, page: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def update_local_glossary(self, info: GlossaryInfo, uid: int) -> None:
        ...

    def clear_local_glossary(self, uid: int) -> None:
        ...


class InMemoryRecordStore:
    """
    Table based record store kept in memory.

    Entry records use the fields ``uid, pid, sys_language_uid, l10n_parent, term``.
    A localized entry points to its original through ``l10n_parent``, which is
    the record id both sides are matched on.
    """

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = {
            PAGES_TABLE: [],
            ENTRY_TABLE: [],
            GLOSSARY_TABLE: [],
        }
        for table, rows in (tables or {}).items():
            self.tables[table] = [dict(row) for row in rows]

    @classmethod
    def from_json_file(cls, path: str) -> "InMemoryRecordStore":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Loaded records from {path}: {', '.join(f'{t}={len(r)}' for t, r in data.items())}")
        return cls(data)

    def _next_uid(self, table: str) -> int:
        return max((row["uid"] for row in self.tables[table]), default=0) + 1

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        row = dict(row)
        row.setdefault("uid", self._next_uid(table))
        self.tables.setdefault(table, []).append(row)
        return row

    def get_record(self, table: str, uid: int) -> Optional[Dict[str, Any]]:
        for row in self.tables.get(table, []):
            if row["uid"] == uid:
                return row
        return None

    def get_original_entries(self, page_id: int) -> Dict[int, Dict[str, Any]]:
        return {
            row["uid"]: row
            for row in self.tables[ENTRY_TABLE]
            if row["pid"] == page_id and row.get("sys_language_uid", 0) == 0
        }

    def get_localized_entries(self, page_id: int, language_id: int) -> Dict[int, Dict[str, Any]]:
        return {
            row["l10n_parent"]: row
            for row in self.tables[ENTRY_TABLE]
            if row["pid"] == page_id
            and row.get("sys_language_uid") == language_id
            and row.get("l10n_parent")
        }

    def get_page_translation_language_ids(self, page_id: int) -> List[int]:
        """Language ids of the page overlays that exist for ``page_id``."""
        language_ids = []
        for row in self.tables[PAGES_TABLE]:
            if row.get("l10n_parent") == page_id and row.get("sys_language_uid", 0) > 0:
                if row["sys_language_uid"] not in language_ids:
                    language_ids.append(row["sys_language_uid"])
        return language_ids

    def get_glossary_by_source_and_target_for_sync(self, source_lang: str, target_lang: str, page: Dict[str, Any]) -> Dict[str, Any]:
        """Returns the sync metadata of a language pair, creating it on first use."""
        for row in self.tables[GLOSSARY_TABLE]:
            if (
                row["pid"] == page["uid"]
                and row["source_lang"] == source_lang
                and row["target_lang"] == target_lang
            ):
                return dict(row)

        row = self.insert(GLOSSARY_TABLE, {
            "pid": page["uid"],
            "glossary_id": "",
            "glossary_name": "",
            "glossary_ready": 0,
            "glossary_last_sync": 0,
            "source_lang": source_lang,
            "target_lang": target_lang,
        })
        logger.debug(f"Created glossary metadata {row['uid']} for {source_lang}-{target_lang} on page {page['uid']}")
        return dict(row)

    def update_local_glossary(self, info: GlossaryInfo, uid: int) -> None:
        """Store the DeepL id and readiness, stamped with the time of this sync."""
        row = self.get_record(GLOSSARY_TABLE, uid)
        if row is None:
            raise KeyError(f"Glossary record {uid} not found")
        row["glossary_id"] = info.glossary_id
        row["glossary_ready"] = 1 if info.ready else 0
        row["glossary_last_sync"] = int(datetime.now(timezone.utc).timestamp())

    def clear_local_glossary(self, uid: int) -> None:
        row = self.get_record(GLOSSARY_TABLE, uid)
        if row is None:
            raise KeyError(f"Glossary record {uid} not found")
        row["glossary_id"] = ""
        row["glossary_ready"] = 0
