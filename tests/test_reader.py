"""Tests for read-only catalog queries."""

import pytest

from xcstrings_crud.core import XCStringsReader
from xcstrings_crud.errors import KeyNotFound, LanguageNotFound
from xcstrings_crud.persistence import XCStringsFileHandler


def load(path):
    return XCStringsFileHandler(str(path)).load()


class TestListing:
    def test_list_keys_sorted(self, partial_catalog):
        assert XCStringsReader(load(partial_catalog)).list_keys() == ["Goodbye", "Hello", "Welcome"]

    def test_list_languages_includes_source(self, partial_catalog):
        assert XCStringsReader(load(partial_catalog)).list_languages() == ["de", "en", "ja"]

    def test_empty_catalog_lists_source_language_only(self, empty_catalog):
        reader = XCStringsReader(load(empty_catalog))
        assert reader.list_keys() == []
        assert reader.list_languages() == ["en"]

    def test_list_untranslated(self, partial_catalog):
        reader = XCStringsReader(load(partial_catalog))
        assert reader.list_untranslated("ja") == ["Goodbye"]
        assert reader.list_untranslated("de") == ["Goodbye", "Hello"]
        assert reader.list_untranslated("fr") == ["Goodbye", "Hello", "Welcome"]

    def test_variations_count_as_translated(self, rich_catalog):
        untranslated = XCStringsReader(load(rich_catalog)).list_untranslated("en")
        assert "%lld items" not in untranslated
        assert "tap_hint" not in untranslated
        assert untranslated == ["empty_localizations", "no_localizations"]

    def test_list_stale_keys(self, stale_catalog):
        assert XCStringsReader(load(stale_catalog)).list_stale_keys() == ["Old", "Unused"]


class TestGet:
    def test_get_key_info(self, rich_catalog):
        info = XCStringsReader(load(rich_catalog)).get_key("greeting")
        assert info.to_dict() == {
            "key": "greeting",
            "comment": "Shown on launch",
            "extractionState": "manual",
            "languages": ["en", "fr"],
        }

    def test_get_translation_all_languages(self, single_key_catalog):
        result = XCStringsReader(load(single_key_catalog)).get_translation("Hello")
        assert list(result) == ["en", "ja"]
        assert result["ja"].value == "こんにちは"
        assert result["ja"].state == "translated"
        assert result["ja"].has_variations is False

    def test_get_translation_one_language(self, single_key_catalog):
        result = XCStringsReader(load(single_key_catalog)).get_translation("Hello", "en")
        assert list(result) == ["en"]
        assert result["en"].to_dict() == {
            "key": "Hello",
            "language": "en",
            "value": "Hello",
            "state": "translated",
            "hasVariations": False,
        }

    def test_get_translation_with_variations(self, rich_catalog):
        result = XCStringsReader(load(rich_catalog)).get_translation("%lld items", "en")
        assert result["en"].value is None
        assert result["en"].has_variations is True

    def test_get_translation_missing_key(self, single_key_catalog):
        with pytest.raises(KeyNotFound):
            XCStringsReader(load(single_key_catalog)).get_translation("Nope")

    def test_get_translation_missing_language(self, single_key_catalog):
        with pytest.raises(LanguageNotFound) as exc:
            XCStringsReader(load(single_key_catalog)).get_translation("Hello", "de")
        assert str(exc.value) == "Language 'de' not found for key 'Hello'"

    def test_source_language(self, single_key_catalog):
        assert XCStringsReader(load(single_key_catalog)).get_source_language() == "en"


class TestCheck:
    def test_check_key(self, single_key_catalog):
        reader = XCStringsReader(load(single_key_catalog))
        assert reader.check_key("Hello") is True
        assert reader.check_key("Hello", "ja") is True
        assert reader.check_key("Hello", "de") is False
        assert reader.check_key("Missing") is False

    def test_check_keys(self, partial_catalog):
        result = XCStringsReader(load(partial_catalog)).check_keys(["Welcome", "Nope", "Hello"], "de")
        assert result.results == {"Welcome": True, "Nope": False, "Hello": False}
        assert result.existing_keys == ["Welcome"]
        assert result.missing_keys == ["Hello", "Nope"]

    def test_check_coverage(self, partial_catalog):
        coverage = XCStringsReader(load(partial_catalog)).check_coverage("Goodbye")
        assert coverage.translated_languages == ["en"]
        assert coverage.missing_languages == ["de", "ja"]
        assert coverage.coverage_percent == pytest.approx(100 / 3)

    def test_check_coverage_missing_key(self, partial_catalog):
        with pytest.raises(KeyNotFound):
            XCStringsReader(load(partial_catalog)).check_coverage("Nope")
