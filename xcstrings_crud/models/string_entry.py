"""Data models for XCStrings file structure."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any


@dataclass
class StringUnit:
    """Represents a single string translation unit."""

    value: str
    state: str = "translated"  # translated, new, needs_review, stale, ...


@dataclass
class Variations:
    """Plural and device variants of a localization.

    Slot payloads are kept exactly as they appear in the file; nothing here
    selects or validates a variant.
    """

    plural: Optional[Dict[str, Any]] = None  # zero, one, two, few, many, other
    device: Optional[Dict[str, Any]] = None  # iphone, ipad, mac, applewatch, appletv
    extra: Dict[str, Any] = field(default_factory=dict)  # other variation kinds, verbatim


@dataclass
class Localization:
    """Represents a localization entry for a specific language."""

    string_unit: Optional[StringUnit] = None
    variations: Optional[Variations] = None

    @property
    def is_translated(self) -> bool:
        """A language counts as translated if it carries a value or any variations."""
        return (
            self.string_unit is not None and self.string_unit.value is not None
        ) or self.variations is not None


@dataclass
class StringEntry:
    """Represents a single localizable string entry."""

    comment: Optional[str] = None
    extraction_state: Optional[str] = None  # new, manual, stale, extracted_with_value
    localizations: Optional[Dict[str, Localization]] = None

    @property
    def languages(self) -> list:
        """Sorted languages this entry has a localization for."""
        return sorted(self.localizations or {})

    def has_localization(self, language: str) -> bool:
        return self.localizations is not None and language in self.localizations

    def has_translation(self, language: str) -> bool:
        """Check if this string has a translation for the given language."""
        if not self.has_localization(language):
            return False
        return self.localizations[language].is_translated

    def set_translation(self, language: str, value: str, state: str = "translated") -> None:
        """Set a translation for the given language."""
        if self.localizations is None:
            self.localizations = {}
        self.localizations[language] = Localization(
            string_unit=StringUnit(value=value, state=state)
        )


@dataclass
class XCStringsFile:
    """Represents a complete .xcstrings file."""

    source_language: str
    strings: Dict[str, StringEntry] = field(default_factory=dict)
    version: str = "1.0"

    def get_untranslated_keys(self, target_language: str) -> list:
        """Get sorted keys that don't have translations for the target language."""
        return sorted(
            key for key, entry in self.strings.items()
            if not entry.has_translation(target_language)
        )

    def get_languages(self) -> list:
        """Source language plus every localized language, sorted."""
        languages = {self.source_language}
        for entry in self.strings.values():
            languages.update(entry.localizations or {})
        return sorted(languages)
