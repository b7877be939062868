"""Tests for catalog mutations."""

import copy

import pytest

from xcstrings_crud.core import XCStringsWriter
from xcstrings_crud.errors import KeyAlreadyExists, KeyNotFound, LanguageNotFound
from xcstrings_crud.persistence import XCStringsFileHandler


@pytest.fixture
def doc(partial_catalog):
    return XCStringsFileHandler(str(partial_catalog)).load()


def value(xcstrings, key, language):
    return xcstrings.strings[key].localizations[language].string_unit.value


class TestAdd:
    def test_add_new_key(self, doc):
        result = XCStringsWriter.add_translation(doc, "Thanks", "en", "Thanks")
        assert value(result, "Thanks", "en") == "Thanks"
        assert result.strings["Thanks"].localizations["en"].string_unit.state == "translated"
        assert "Thanks" not in doc.strings

    def test_add_language_to_existing_key(self, doc):
        result = XCStringsWriter.add_translation(doc, "Goodbye", "ja", "さようなら")
        assert result.strings["Goodbye"].languages == ["en", "ja"]

    def test_add_existing_language_conflicts(self, doc):
        with pytest.raises(KeyAlreadyExists) as exc:
            XCStringsWriter.add_translation(doc, "Hello", "ja", "やあ")
        assert "Hello:ja" in str(exc.value)

    def test_add_with_overwrite(self, doc):
        result = XCStringsWriter.add_translation(doc, "Hello", "ja", "やあ", allow_overwrite=True)
        assert value(result, "Hello", "ja") == "やあ"
        assert value(doc, "Hello", "ja") == "こんにちは"

    def test_add_many_is_all_or_nothing(self, doc):
        before = copy.deepcopy(doc)
        with pytest.raises(KeyAlreadyExists):
            XCStringsWriter.add_translations(doc, "Hello", {"de": "Hallo", "ja": "やあ"})
        assert doc == before

    def test_add_to_key_without_localizations(self, rich_catalog):
        doc = XCStringsFileHandler(str(rich_catalog)).load()
        result = XCStringsWriter.add_translation(doc, "no_localizations", "en", "Nothing")
        assert result.strings["no_localizations"].comment == "Nothing yet"
        assert value(result, "no_localizations", "en") == "Nothing"


class TestUpdate:
    def test_update(self, doc):
        result = XCStringsWriter.update_translation(doc, "Hello", "ja", "やあ")
        assert value(result, "Hello", "ja") == "やあ"
        assert value(doc, "Hello", "ja") == "こんにちは"

    def test_update_replaces_state(self, rich_catalog):
        doc = XCStringsFileHandler(str(rich_catalog)).load()
        result = XCStringsWriter.update_translation(doc, "greeting", "fr", "Bonjour")
        assert result.strings["greeting"].localizations["fr"].string_unit.state == "translated"

    def test_update_missing_key(self, doc):
        with pytest.raises(KeyNotFound):
            XCStringsWriter.update_translation(doc, "Nope", "en", "x")

    def test_update_missing_language(self, doc):
        with pytest.raises(LanguageNotFound):
            XCStringsWriter.update_translation(doc, "Goodbye", "ja", "さようなら")

    def test_update_many_is_all_or_nothing(self, doc):
        before = copy.deepcopy(doc)
        with pytest.raises(LanguageNotFound):
            XCStringsWriter.update_translations(doc, "Hello", {"en": "Hi", "fr": "Salut"})
        assert doc == before


class TestUpsert:
    def test_upsert_adds(self, doc):
        result = XCStringsWriter.upsert_translation(doc, "Goodbye", "de", "Tschüss")
        assert value(result, "Goodbye", "de") == "Tschüss"

    def test_upsert_replaces(self, doc):
        result = XCStringsWriter.upsert_translation(doc, "Hello", "en", "Hi")
        assert value(result, "Hello", "en") == "Hi"


class TestRename:
    def test_rename(self, doc):
        result = XCStringsWriter.rename_key(doc, "Hello", "Hi")
        assert "Hello" not in result.strings
        assert value(result, "Hi", "ja") == "こんにちは"
        assert "Hello" in doc.strings

    def test_rename_never_clobbers(self, doc):
        before = copy.deepcopy(doc)
        with pytest.raises(KeyAlreadyExists):
            XCStringsWriter.rename_key(doc, "Hello", "Goodbye")
        assert doc == before

    def test_rename_to_itself_conflicts(self, doc):
        with pytest.raises(KeyAlreadyExists):
            XCStringsWriter.rename_key(doc, "Hello", "Hello")

    def test_rename_missing_key(self, doc):
        with pytest.raises(KeyNotFound):
            XCStringsWriter.rename_key(doc, "Nope", "Other")


class TestDelete:
    def test_delete_key(self, doc):
        result = XCStringsWriter.delete_key(doc, "Hello")
        assert sorted(result.strings) == ["Goodbye", "Welcome"]

    def test_delete_missing_key(self, doc):
        with pytest.raises(KeyNotFound):
            XCStringsWriter.delete_key(doc, "Nope")

    def test_delete_translation_keeps_key(self, doc):
        result = XCStringsWriter.delete_translation(doc, "Hello", "ja")
        assert result.strings["Hello"].languages == ["en"]

    def test_delete_translations(self, doc):
        result = XCStringsWriter.delete_translations(doc, "Welcome", ["de", "ja"])
        assert result.strings["Welcome"].languages == ["en"]

    def test_delete_translations_all_or_nothing(self, doc):
        before = copy.deepcopy(doc)
        with pytest.raises(LanguageNotFound):
            XCStringsWriter.delete_translations(doc, "Hello", ["ja", "de"])
        assert doc == before
