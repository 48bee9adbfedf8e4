"""Tests for building glossary drafts from page records."""

import pytest
from unittest.mock import MagicMock

from src.glossary_sync.exceptions import InvalidGlossaryPage
from src.glossary_sync.factory import GlossaryFactory, build_entry, deduplicate_entries, is_glossary_page
from src.glossary_sync.models.glossary import GlossaryEntry
from src.glossary_sync.repository import InMemoryRecordStore, ENTRY_TABLE, GLOSSARY_TABLE, PAGES_TABLE
from src.glossary_sync.site import StaticSiteResolver


LANGUAGES = {0: "de", 1: "en", 2: "fr"}


def entry(uid, term, language=0, parent=0, pid=1):
    return {"uid": uid, "pid": pid, "sys_language_uid": language, "l10n_parent": parent, "term": term}


@pytest.fixture
def records():
    """Glossary folder 1 with English and French overlays."""
    return InMemoryRecordStore({
        PAGES_TABLE: [
            {"uid": 1, "module": "glossary", "doktype": 254, "sys_language_uid": 0},
            {"uid": 2, "l10n_parent": 1, "sys_language_uid": 1},
            {"uid": 3, "l10n_parent": 1, "sys_language_uid": 2},
            {"uid": 4, "module": "", "doktype": 1, "sys_language_uid": 0},
            {"uid": 5, "module": "glossary", "doktype": 1, "sys_language_uid": 0},
        ],
        ENTRY_TABLE: [
            entry(1, "Hallo"),
            entry(2, "Welt"),
            entry(3, "Hello", language=1, parent=1),
            entry(4, "World", language=1, parent=2),
            entry(5, "Bonjour", language=2, parent=1),
        ],
    })


@pytest.fixture
def language_pairs():
    provider = MagicMock()
    provider.get_supported_pairs.return_value = {"de": ["en"]}
    return provider


@pytest.fixture
def factory(records, language_pairs):
    return GlossaryFactory(StaticSiteResolver(LANGUAGES, records), records, language_pairs)


class TestGlossaryPageValidation:
    """Only glossary sys-folders can be used."""

    def test_is_glossary_page(self):
        assert is_glossary_page({"module": "glossary", "doktype": 254})
        assert not is_glossary_page({"module": "glossary", "doktype": 1})
        assert not is_glossary_page({"module": "", "doktype": 254})

    @pytest.mark.parametrize("page_id", [4, 5, 99])
    def test_invalid_page_raises(self, factory, page_id):
        with pytest.raises(InvalidGlossaryPage):
            factory.build_glossaries(page_id)


class TestBuildGlossaries:
    """Test matching of source and target entries."""

    def test_only_supported_pairs_are_built(self, factory):
        glossaries = factory.build_glossaries(1)

        assert len(glossaries) == 1
        glossary = glossaries[0]
        assert glossary.source_language == "de"
        assert glossary.target_language == "en"
        assert [(e.source, e.target) for e in glossary.entries] == [("Hallo", "Hello"), ("Welt", "World")]
        assert glossary.glossary_name == "Glossary de <> en"

    def test_draft_carries_local_metadata(self, factory, records):
        records.insert(GLOSSARY_TABLE, {
            "uid": 7,
            "pid": 1,
            "glossary_id": "remote-1",
            "glossary_name": "Product terms",
            "glossary_ready": 1,
            "glossary_last_sync": 1716556217,
            "source_lang": "de",
            "target_lang": "en",
        })

        glossary = factory.build_glossaries(1)[0]

        assert glossary.uid == 7
        assert glossary.identifier == "remote-1"
        assert glossary.ready is True
        assert glossary.glossary_name == "Product terms"
        assert glossary.last_sync is not None

    def test_metadata_record_created_on_first_sync(self, factory, records):
        glossary = factory.build_glossaries(1)[0]

        row = records.get_record(GLOSSARY_TABLE, glossary.uid)
        assert row["pid"] == 1
        assert row["glossary_id"] == ""
        assert glossary.identifier == ""
        assert glossary.ready is False

    def test_partial_target_uses_intersection(self, factory, language_pairs):
        language_pairs.get_supported_pairs.return_value = {"de": ["en", "fr"]}

        glossaries = factory.build_glossaries(1)

        assert [g.target_language for g in glossaries] == ["en", "fr"]
        assert [(e.source, e.target) for e in glossaries[1].entries] == [("Hallo", "Bonjour")]

    def test_default_language_is_never_a_target(self, factory, language_pairs):
        language_pairs.get_supported_pairs.return_value = {"en": ["de", "fr"], "de": ["de"]}

        glossaries = factory.build_glossaries(1)

        assert [(g.source_language, g.target_language) for g in glossaries] == [("en", "fr")]
        assert [(e.source, e.target) for e in glossaries[0].entries] == [("Hello", "Bonjour")]

    def test_pairs_without_content_are_skipped(self, factory, language_pairs):
        language_pairs.get_supported_pairs.return_value = {"ja": ["en"], "de": ["it", "en"]}

        glossaries = factory.build_glossaries(1)

        assert [(g.source_language, g.target_language) for g in glossaries] == [("de", "en")]

    def test_pair_without_matching_ids_is_dropped(self, factory, records, language_pairs):
        language_pairs.get_supported_pairs.return_value = {"de": ["fr"]}
        records.tables[ENTRY_TABLE] = [
            entry(1, "Hallo"),
            entry(5, "Bonjour", language=2, parent=42),
        ]

        assert factory.build_glossaries(1) == []

    def test_duplicate_source_terms_keep_first(self, factory, records):
        records.tables[ENTRY_TABLE] = [
            entry(1, "A"),
            entry(2, "A"),
            entry(3, "B"),
            entry(4, "X", language=1, parent=1),
            entry(5, "Y", language=1, parent=2),
            entry(6, "Z", language=1, parent=3),
        ]

        glossary = factory.build_glossaries(1)[0]

        assert [(e.source, e.target) for e in glossary.entries] == [("A", "X"), ("B", "Z")]


class TestEntryTerms:
    """Terms DeepL cannot take never reach a draft."""

    @pytest.mark.parametrize("source,target", [("Welt", ""), ("", "World"), ("  ", "World"), ("We\tlt", "World"), ("Welt", "Wor\nld")])
    def test_invalid_pair_is_skipped(self, factory, records, source, target):
        records.tables[ENTRY_TABLE] = [
            entry(1, "Hallo"),
            entry(2, source),
            entry(3, "Hello", language=1, parent=1),
            entry(4, target, language=1, parent=2),
        ]

        glossary = factory.build_glossaries(1)[0]

        assert [(e.source, e.target) for e in glossary.entries] == [("Hallo", "Hello")]

    def test_only_invalid_pairs_drop_the_glossary(self, factory, records):
        records.tables[ENTRY_TABLE] = [
            entry(1, "Hallo"),
            entry(2, "", language=1, parent=1),
        ]

        assert factory.build_glossaries(1) == []

    def test_whitespace_variants_are_one_source_term(self, factory, records):
        records.tables[ENTRY_TABLE] = [
            entry(1, "Hallo"),
            entry(2, "Hallo "),
            entry(3, " Welt"),
            entry(4, "Hello", language=1, parent=1),
            entry(5, "Hi", language=1, parent=2),
            entry(6, "World ", language=1, parent=3),
        ]

        glossary = factory.build_glossaries(1)[0]

        assert [(e.source, e.target) for e in glossary.entries] == [("Hallo", "Hello"), ("Welt", "World")]
        assert factory.to_entries_tsv(glossary) == "Hallo\tHello\nWelt\tWorld"

    def test_build_entry(self):
        assert build_entry(" Hallo ", "Hel\tlo") is None
        assert build_entry(" Hallo ", " Hello ") == GlossaryEntry(source="Hallo", target="Hello")
        assert build_entry(None, "Hello") is None


class TestDeduplicateEntries:

    def test_keeps_first_occurrence(self):
        entries = [GlossaryEntry(source="A", target="X"), GlossaryEntry(source="A", target="Y")]
        assert deduplicate_entries(entries) == [GlossaryEntry(source="A", target="X")]

    def test_preserves_order(self):
        entries = [
            GlossaryEntry(source="b", target="1"),
            GlossaryEntry(source="a", target="2"),
            GlossaryEntry(source="b", target="3"),
            GlossaryEntry(source="c", target="4"),
        ]
        assert [e.source for e in deduplicate_entries(entries)] == ["b", "a", "c"]


class TestConversions:

    def test_to_glossary_info(self, factory):
        glossary = factory.build_glossaries(1)[0]
        info = factory.to_glossary_info(glossary)

        assert info.name == "Glossary de <> en"
        assert info.entry_count == 2
        assert info.source_lang == "de"

    def test_to_entries_tsv(self, factory):
        glossary = factory.build_glossaries(1)[0]
        assert factory.to_entries_tsv(glossary) == "Hallo\tHello\nWelt\tWorld"
