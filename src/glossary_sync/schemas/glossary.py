"""Glossary API schemas."""

from typing import Dict, List
from pydantic import BaseModel, Field
from ..models.glossary import GlossaryEntry, GlossaryInfo


class GlossaryListResponse(BaseModel):
    """Glossaries registered with DeepL."""
    glossaries: List[GlossaryInfo]


class GlossaryEntriesResponse(BaseModel):
    """Entries of a DeepL glossary."""
    glossary_id: str
    entries: List[GlossaryEntry]


class LanguagePairsResponse(BaseModel):
    """Supported glossary targets grouped by source language."""
    supported_pairs: Dict[str, List[str]]


class SyncResponse(BaseModel):
    """Result of syncing a glossary folder."""
    page_id: int
    created: List[GlossaryInfo] = Field(..., description="Glossaries created on DeepL during this sync")
