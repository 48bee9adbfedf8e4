from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class GlossaryEntry(BaseModel):
    """A single source term with its target translation."""
    source: str = Field(..., description="The term in the source language.")
    target: str = Field(..., description="The term in the target language.")


class GlossaryLanguagePair(BaseModel):
    """A source/target combination DeepL accepts for glossaries."""
    source_lang: str
    target_lang: str


class GlossaryInfo(BaseModel):
    """Glossary metadata as reported by DeepL."""
    glossary_id: str
    name: str
    ready: bool = False
    source_lang: str
    target_lang: str
    creation_time: Optional[datetime] = None
    entry_count: int = 0


class Glossary(BaseModel):
    """A glossary built from local records, before or after it is synced to DeepL."""
    uid: Optional[int] = Field(None, description="Local metadata record id.")
    pid: Optional[int] = Field(None, description="Page the glossary belongs to.")
    identifier: str = Field("", description="DeepL glossary id, empty until created.")
    name: str = ""
    ready: bool = False
    last_sync: Optional[datetime] = None
    source_language: str = ""
    target_language: str = ""
    entries: List[GlossaryEntry] = Field(default_factory=list)

    @property
    def glossary_name(self) -> str:
        if self.name == "":
            return f"Glossary {self.source_language} <> {self.target_language}"
        return self.name

    @property
    def entries_count(self) -> int:
        return len(self.entries)

    @classmethod
    def from_table_row(cls, row: Dict[str, Any]) -> "Glossary":
        """Parse a raw glossary metadata record into a typed glossary without entries."""
        last_sync = None
        timestamp = int(row.get("glossary_last_sync") or 0)
        if timestamp > 0:
            last_sync = datetime.fromtimestamp(timestamp, tz=timezone.utc)

        return cls(
            uid=row.get("uid"),
            pid=row.get("pid"),
            identifier=row.get("glossary_id") or "",
            name=row.get("glossary_name") or "",
            ready=int(row.get("glossary_ready") or 0) == 1,
            last_sync=last_sync,
            source_language=row.get("source_lang", ""),
            target_language=row.get("target_lang", ""),
        )

    def to_info(self) -> GlossaryInfo:
        return GlossaryInfo(
            glossary_id=self.identifier,
            name=self.glossary_name,
            ready=self.ready,
            source_lang=self.source_language,
            target_lang=self.target_language,
            creation_time=self.last_sync,
            entry_count=self.entries_count,
        )


def is_valid_term(term: str) -> bool:
    """DeepL rejects empty terms and terms containing a tab or line break."""
    return term.strip() != "" and not any(c in term for c in "\t\n\r")


def _check_term(term: str) -> str:
    if not is_valid_term(term):
        raise ValueError(f"Invalid glossary term: {term!r}")
    return term


def entries_to_tsv(entries: List[GlossaryEntry]) -> str:
    """Format entries the way DeepL expects them in 'tsv' format."""
    return "\n".join(
        f"{_check_term(entry.source)}\t{_check_term(entry.target)}" for entry in entries
    )


def entries_from_tsv(text: str) -> List[GlossaryEntry]:
    """Parse DeepL's tab separated entries listing."""
    entries = []
    for line in text.replace("\r\n", "\n").split("\n"):
        if not line.strip():
            continue
        source, _, target = line.partition("\t")
        entries.append(GlossaryEntry(source=source, target=target))
    return entries
