"""Typed access to the argument object of a tool call."""

from typing import Any, Dict, List, Optional

from ..core.input_parsers import parse_translations_json
from ..errors import InvalidInput
from ..models.results import BatchTranslationEntry


class ToolArguments:
    """Wraps the raw JSON arguments and raises InvalidInput on bad shapes."""

    def __init__(self, raw: Optional[Dict[str, Any]] = None):
        self.raw = raw or {}

    def require_string(self, name: str) -> str:
        value = self.raw.get(name)
        if not isinstance(value, str):
            raise InvalidInput(f"Missing '{name}' parameter")
        return value

    def optional_string(self, name: str) -> Optional[str]:
        value = self.raw.get(name)
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidInput(f"'{name}' must be a string")
        return value

    def optional_bool(self, name: str, default: bool) -> bool:
        value = self.raw.get(name)
        if value is None:
            return default
        if not isinstance(value, bool):
            raise InvalidInput(f"'{name}' must be a boolean")
        return value

    def require_string_list(self, name: str) -> List[str]:
        value = self.raw.get(name)
        if not isinstance(value, list):
            raise InvalidInput(f"Missing '{name}' parameter")
        if not all(isinstance(item, str) for item in value):
            raise InvalidInput(f"'{name}' must be an array of strings")
        return value

    def require_translations(self, name: str) -> Dict[str, str]:
        """A language -> value object."""
        return self._translations(self.raw.get(name), name)

    def require_batch_entries(self, name: str) -> List[BatchTranslationEntry]:
        value = self.raw.get(name)
        if not isinstance(value, list):
            raise InvalidInput(f"Missing '{name}' parameter")

        entries = []
        for index, item in enumerate(value):
            where = f"{name}[{index}]"
            if not isinstance(item, dict) or not isinstance(item.get("key"), str):
                raise InvalidInput(f"Invalid entry format at {where}: expected {{key, translations}}")
            entries.append(
                BatchTranslationEntry(
                    key=item["key"],
                    translations=self._translations(item.get("translations"), f"{where}.translations"),
                )
            )
        return entries

    @staticmethod
    def _translations(value: Any, where: str) -> Dict[str, str]:
        # Some clients send the object JSON-encoded as a string
        if isinstance(value, str):
            return parse_translations_json(value)
        if not isinstance(value, dict):
            raise InvalidInput(f"Missing '{where}' parameter")
        for lang, text in value.items():
            if not isinstance(text, str):
                raise InvalidInput(f"'{where}.{lang}' must be a string")
        return dict(value)
