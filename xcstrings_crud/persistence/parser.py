"""Parser for Apple's .xcstrings JSON format (Xcode 15+)."""

import json
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import config
from ..errors import FileNotFound, InvalidFileFormat
from ..models.string_entry import StringUnit, Variations, Localization, StringEntry, XCStringsFile


class _SchemaError(Exception):
    """Internal: structural mismatch at a location in the document."""


def _expect(value: Any, kind: type, where: str, kind_name: str) -> Any:
    if not isinstance(value, kind):
        raise _SchemaError(f"{where}: expected {kind_name}, got {type(value).__name__}")
    return value


def _optional_str(data: Dict[str, Any], name: str, where: str) -> Optional[str]:
    value = data.get(name)
    if value is None:
        return None
    return _expect(value, str, f"{where}.{name}", "string")


class XCStringsParser:
    """Parser for .xcstrings files.

    Decoding is structural only: required fields and JSON types are checked,
    variation payloads are kept as they are.
    """

    def parse(self, file_path: str) -> XCStringsFile:
        """
        Parse an .xcstrings file and return a structured representation.

        Args:
            file_path: Path to the .xcstrings file

        Returns:
            XCStringsFile object containing all parsed data

        Raises:
            FileNotFound: If the path does not exist
            InvalidFileFormat: If the file cannot be read or decoded
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFound(str(file_path))

        try:
            content = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidFileFormat(str(file_path), str(e)) from e

        return self.parse_string(content, source=str(file_path))

    def parse_string(self, content: str, source: str = "<string>") -> XCStringsFile:
        """
        Parse .xcstrings content from a string.

        Args:
            content: JSON string content
            source: Name used in error messages

        Returns:
            XCStringsFile object
        """
        try:
            data = json.loads(content)
        except (ValueError, RecursionError) as e:
            raise InvalidFileFormat(source, f"malformed JSON: {e}") from e

        try:
            return self._parse_data(data)
        except _SchemaError as e:
            raise InvalidFileFormat(source, str(e)) from e

    def _parse_data(self, data: Any) -> XCStringsFile:
        """Parse the JSON data structure into our model."""
        _expect(data, dict, "document", "object")

        for required in ("sourceLanguage", "strings", "version"):
            if required not in data:
                raise _SchemaError(f"missing required field '{required}'")

        source_language = _expect(data["sourceLanguage"], str, "sourceLanguage", "string")
        if not source_language:
            raise _SchemaError("sourceLanguage: must not be empty")
        version = _expect(data["version"], str, "version", "string")
        strings_data = _expect(data["strings"], dict, "strings", "object")

        strings = {}
        for key, entry_data in strings_data.items():
            strings[key] = self._parse_string_entry(entry_data, f"strings[{key!r}]")

        return XCStringsFile(
            source_language=source_language,
            strings=strings,
            version=version,
        )

    def _parse_string_entry(self, entry_data: Any, where: str) -> StringEntry:
        """Parse a single string entry."""
        _expect(entry_data, dict, where, "object")
        comment = _optional_str(entry_data, "comment", where)
        extraction_state = _optional_str(entry_data, "extractionState", where)

        localizations = None
        if entry_data.get("localizations") is not None:
            loc_where = f"{where}.localizations"
            loc_map = _expect(entry_data["localizations"], dict, loc_where, "object")
            localizations = {
                lang: self._parse_localization(loc_data, f"{loc_where}[{lang!r}]")
                for lang, loc_data in loc_map.items()
            }

        return StringEntry(
            comment=comment,
            extraction_state=extraction_state,
            localizations=localizations,
        )

    def _parse_localization(self, loc_data: Any, where: str) -> Localization:
        """Parse a localization entry."""
        _expect(loc_data, dict, where, "object")
        string_unit = None
        variations = None

        if loc_data.get("stringUnit") is not None:
            string_unit = self._parse_string_unit(loc_data["stringUnit"], f"{where}.stringUnit")

        if loc_data.get("variations") is not None:
            variations = self._parse_variations(loc_data["variations"], f"{where}.variations")

        return Localization(string_unit=string_unit, variations=variations)

    def _parse_string_unit(self, su: Any, where: str) -> StringUnit:
        _expect(su, dict, where, "object")
        if "value" not in su:
            raise _SchemaError(f"{where}: missing required field 'value'")
        value = _expect(su["value"], str, f"{where}.value", "string")
        state = _optional_str(su, "state", where)
        return StringUnit(value=value, state=state if state is not None else "translated")

    def _parse_variations(self, data: Any, where: str) -> Variations:
        _expect(data, dict, where, "object")
        variations = Variations()
        for kind, payload in data.items():
            if kind == "plural":
                variations.plural = self._parse_slots(
                    payload, config.PLURAL_CATEGORIES, f"{where}.plural"
                )
            elif kind == "device":
                variations.device = self._parse_slots(
                    payload, config.DEVICE_CLASSES, f"{where}.device"
                )
            else:
                variations.extra[kind] = payload
        return variations

    def _parse_slots(self, payload: Any, allowed: tuple, where: str) -> Dict[str, Any]:
        """Check known slots are objects; slots outside ``allowed`` pass through untouched."""
        _expect(payload, dict, where, "object")
        for slot, slot_data in payload.items():
            if slot in allowed:
                _expect(slot_data, dict, f"{where}.{slot}", "object")
        return payload
