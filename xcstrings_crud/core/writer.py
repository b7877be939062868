"""Mutations over a catalog.

Every function takes a document and returns a new one; the input is never
modified, so a raised error always leaves the caller's document as it was.
Multi-language calls apply languages in sorted order to a private copy and
give up on the first failure, leaving nothing applied.
"""

import copy
from typing import Dict, Iterable

from ..errors import KeyAlreadyExists, KeyNotFound, LanguageNotFound
from ..models.string_entry import StringEntry, XCStringsFile


class XCStringsWriter:
    """Pure write operations for .xcstrings documents."""

    @staticmethod
    def add_translation(
        xcstrings: XCStringsFile,
        key: str,
        language: str,
        value: str,
        allow_overwrite: bool = False,
    ) -> XCStringsFile:
        """Add a translation, creating the key if needed."""
        return XCStringsWriter.add_translations(
            xcstrings, key, {language: value}, allow_overwrite=allow_overwrite
        )

    @staticmethod
    def add_translations(
        xcstrings: XCStringsFile,
        key: str,
        translations: Dict[str, str],
        allow_overwrite: bool = False,
    ) -> XCStringsFile:
        result = copy.deepcopy(xcstrings)
        entry = result.strings.setdefault(key, StringEntry(localizations={}))

        for language in sorted(translations):
            if not allow_overwrite and entry.has_localization(language):
                raise KeyAlreadyExists(f"{key}:{language}")
            entry.set_translation(language, translations[language])

        if entry.localizations is None:
            entry.localizations = {}
        return result

    @staticmethod
    def update_translation(
        xcstrings: XCStringsFile,
        key: str,
        language: str,
        value: str,
    ) -> XCStringsFile:
        """Replace an existing translation; prior state and variations are dropped."""
        return XCStringsWriter.update_translations(xcstrings, key, {language: value})

    @staticmethod
    def update_translations(
        xcstrings: XCStringsFile,
        key: str,
        translations: Dict[str, str],
    ) -> XCStringsFile:
        if key not in xcstrings.strings:
            raise KeyNotFound(key)

        result = copy.deepcopy(xcstrings)
        entry = result.strings[key]
        for language in sorted(translations):
            if not entry.has_localization(language):
                raise LanguageNotFound(language, key)
            entry.set_translation(language, translations[language])

        return result

    @staticmethod
    def upsert_translation(
        xcstrings: XCStringsFile,
        key: str,
        language: str,
        value: str,
    ) -> XCStringsFile:
        """Add or overwrite a translation."""
        return XCStringsWriter.add_translation(
            xcstrings, key, language, value, allow_overwrite=True
        )

    @staticmethod
    def rename_key(xcstrings: XCStringsFile, old_key: str, new_key: str) -> XCStringsFile:
        """Move an entry to a new key. Never overwrites an existing key."""
        if old_key not in xcstrings.strings:
            raise KeyNotFound(old_key)
        if new_key in xcstrings.strings:
            raise KeyAlreadyExists(new_key)

        result = copy.deepcopy(xcstrings)
        result.strings[new_key] = result.strings.pop(old_key)
        return result

    @staticmethod
    def delete_key(xcstrings: XCStringsFile, key: str) -> XCStringsFile:
        if key not in xcstrings.strings:
            raise KeyNotFound(key)

        result = copy.deepcopy(xcstrings)
        del result.strings[key]
        return result

    @staticmethod
    def delete_translation(xcstrings: XCStringsFile, key: str, language: str) -> XCStringsFile:
        """Remove one language from a key, keeping the key and other languages."""
        return XCStringsWriter.delete_translations(xcstrings, key, [language])

    @staticmethod
    def delete_translations(
        xcstrings: XCStringsFile, key: str, languages: Iterable[str]
    ) -> XCStringsFile:
        if key not in xcstrings.strings:
            raise KeyNotFound(key)

        result = copy.deepcopy(xcstrings)
        entry = result.strings[key]
        for language in sorted(set(languages)):
            if not entry.has_localization(language):
                raise LanguageNotFound(language, key)
            del entry.localizations[language]

        return result
