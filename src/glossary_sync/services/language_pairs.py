"""Supported glossary language pairs, cached."""

import logging
from typing import Dict, List

from ..cache import CachePort
from ..client import GlossaryClient


logger = logging.getLogger("glossary_sync.language_pairs")

GLOSSARY_PAIRS_CACHE_IDENTIFIER = "wv-deepl-glossary-pairs"


class LanguagePairsListProvider:
    """Provides the source -> targets mapping DeepL accepts for glossaries."""

    def __init__(self, cache: CachePort, client: GlossaryClient):
        self.cache = cache
        self.client = client

    def get_supported_pairs(self) -> Dict[str, List[str]]:
        """
        Return the supported pairs grouped by source language.

        The mapping is cached under a fixed key without expiry; it stays until
        the cache is cleared from outside.
        """
        pair_mapping = self.cache.get(GLOSSARY_PAIRS_CACHE_IDENTIFIER)
        if pair_mapping is not None:
            return pair_mapping

        pair_mapping: Dict[str, List[str]] = {}
        for pair in self.client.list_glossary_language_pairs():
            pair_mapping.setdefault(pair.source_lang, []).append(pair.target_lang)

        self.cache.set(GLOSSARY_PAIRS_CACHE_IDENTIFIER, pair_mapping)
        logger.info(f"Cached glossary language pairs for {len(pair_mapping)} source languages")
        return pair_mapping
