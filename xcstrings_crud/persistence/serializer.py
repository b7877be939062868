"""Serializer for Apple's .xcstrings JSON format (Xcode 15+)."""

import json
from typing import Dict, Any, Optional

from ..config import config
from ..models.string_entry import XCStringsFile, StringEntry, Localization, Variations


class XCStringsSerializer:
    """Turns an XCStringsFile into canonical JSON text.

    Object keys are sorted at every level and the output ends with a newline,
    so serializing an unchanged document always yields the same bytes.
    """

    def __init__(self, indent: Optional[int] = None):
        self.indent = config.indent if indent is None else indent

    def to_string(self, xcstrings: XCStringsFile) -> str:
        """
        Convert an XCStringsFile to a JSON string.

        Args:
            xcstrings: The XCStringsFile to convert

        Returns:
            JSON string representation
        """
        data = self.to_dict(xcstrings)
        return json.dumps(data, indent=self.indent, ensure_ascii=False, sort_keys=True) + "\n"

    def to_dict(self, xcstrings: XCStringsFile) -> Dict[str, Any]:
        """Convert XCStringsFile to dictionary for JSON serialization."""
        return {
            "sourceLanguage": xcstrings.source_language,
            "strings": {
                key: self._entry_to_dict(entry)
                for key, entry in xcstrings.strings.items()
            },
            "version": xcstrings.version,
        }

    def _entry_to_dict(self, entry: StringEntry) -> Dict[str, Any]:
        """Convert a StringEntry to dictionary."""
        entry_dict: Dict[str, Any] = {}

        if entry.comment is not None:
            entry_dict["comment"] = entry.comment

        if entry.extraction_state is not None:
            entry_dict["extractionState"] = entry.extraction_state

        if entry.localizations is not None:
            entry_dict["localizations"] = {
                lang: self._localization_to_dict(loc)
                for lang, loc in entry.localizations.items()
            }

        return entry_dict

    def _localization_to_dict(self, loc: Localization) -> Dict[str, Any]:
        """Convert a Localization to dictionary."""
        loc_dict: Dict[str, Any] = {}

        if loc.string_unit is not None:
            loc_dict["stringUnit"] = {
                "state": loc.string_unit.state,
                "value": loc.string_unit.value,
            }

        if loc.variations is not None:
            loc_dict["variations"] = self._variations_to_dict(loc.variations)

        return loc_dict

    def _variations_to_dict(self, variations: Variations) -> Dict[str, Any]:
        var_dict: Dict[str, Any] = dict(variations.extra)
        if variations.plural is not None:
            var_dict["plural"] = variations.plural
        if variations.device is not None:
            var_dict["device"] = variations.device
        return var_dict
