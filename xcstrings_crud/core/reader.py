"""Read-only queries over a loaded catalog."""

from typing import Dict, List, Optional

from ..config import config
from ..errors import KeyNotFound, LanguageNotFound
from ..models.string_entry import Localization, XCStringsFile
from ..models.results import BatchCheckKeysResult, CoverageInfo, KeyInfo, TranslationInfo


def _translation_info(key: str, language: str, loc: Localization) -> TranslationInfo:
    return TranslationInfo(
        key=key,
        language=language,
        value=loc.string_unit.value if loc.string_unit else None,
        state=loc.string_unit.state if loc.string_unit else None,
        has_variations=loc.variations is not None,
    )


class XCStringsReader:
    """Side-effect free queries; nothing is cached between calls."""

    def __init__(self, xcstrings: XCStringsFile):
        self.xcstrings = xcstrings

    def list_keys(self) -> List[str]:
        """Get all keys sorted alphabetically."""
        return sorted(self.xcstrings.strings)

    def list_languages(self) -> List[str]:
        """Source language plus every language used by any key."""
        return self.xcstrings.get_languages()

    def list_untranslated(self, language: str) -> List[str]:
        """Keys with no value and no variations for the language."""
        return self.xcstrings.get_untranslated_keys(language)

    def list_stale_keys(self) -> List[str]:
        return sorted(
            key for key, entry in self.xcstrings.strings.items()
            if entry.extraction_state == config.STALE_STATE
        )

    def get_source_language(self) -> str:
        return self.xcstrings.source_language

    def get_key(self, key: str) -> KeyInfo:
        entry = self.xcstrings.strings.get(key)
        if entry is None:
            raise KeyNotFound(key)

        return KeyInfo(
            key=key,
            comment=entry.comment,
            extraction_state=entry.extraction_state,
            languages=entry.languages,
        )

    def get_translation(
        self, key: str, language: Optional[str] = None
    ) -> Dict[str, TranslationInfo]:
        """
        Get translations for a key.

        Args:
            key: The key to look up
            language: Restrict the result to one language

        Returns:
            Mapping of language code to TranslationInfo. A localization with
            neither value nor variations is returned with ``value=None``.

        Raises:
            KeyNotFound: If the key is absent
            LanguageNotFound: If ``language`` has no localization entry for the key
        """
        entry = self.xcstrings.strings.get(key)
        if entry is None:
            raise KeyNotFound(key)

        localizations = entry.localizations or {}
        if language is not None:
            if language not in localizations:
                raise LanguageNotFound(language, key)
            return {language: _translation_info(key, language, localizations[language])}

        return {
            lang: _translation_info(key, lang, loc)
            for lang, loc in sorted(localizations.items())
        }

    def check_key(self, key: str, language: Optional[str] = None) -> bool:
        """Whether the key exists, or has a localization entry for ``language``."""
        entry = self.xcstrings.strings.get(key)
        if entry is None:
            return False
        if language is not None:
            return entry.has_localization(language)
        return True

    def check_keys(self, keys: List[str], language: Optional[str] = None) -> BatchCheckKeysResult:
        return BatchCheckKeysResult.from_results(
            {key: self.check_key(key, language) for key in keys}
        )

    def check_coverage(self, key: str) -> CoverageInfo:
        entry = self.xcstrings.strings.get(key)
        if entry is None:
            raise KeyNotFound(key)

        all_languages = self.list_languages()
        translated = entry.languages
        missing = [lang for lang in all_languages if lang not in translated]
        percent = len(translated) / len(all_languages) * 100 if all_languages else 0.0

        return CoverageInfo(
            key=key,
            translated_languages=translated,
            missing_languages=missing,
            coverage_percent=percent,
        )
