"""Parsers for the compact translation syntaxes accepted on the command line.

``lang:value`` for a single translation and ``key=lang:value,lang:value`` for
a batch entry. Both split on the first separator only, so values may contain
further colons.
"""

import json
from typing import Dict, Iterable, Tuple

from ..errors import InvalidInput
from ..models.results import BatchTranslationEntry


def parse_translation(item: str) -> Tuple[str, str]:
    """Parse one ``lang:value`` string."""
    lang, sep, value = item.partition(":")
    if not sep:
        raise InvalidInput(f"Invalid translation format: '{item}'. Expected 'lang:value'")
    if not lang:
        raise InvalidInput(f"Empty language code in: '{item}'")
    return lang, value


def parse_translations(items: Iterable[str]) -> Dict[str, str]:
    """Parse several ``lang:value`` strings; a repeated language keeps the last value."""
    translations: Dict[str, str] = {}
    for item in items:
        lang, value = parse_translation(item)
        translations[lang] = value
    return translations


def parse_translations_json(text: str) -> Dict[str, str]:
    """Parse a JSON object of language -> value."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise InvalidInput(
            f"Invalid JSON format: '{text}'. Expected '{{\"lang\": \"value\", ...}}'"
        )
    return data


def parse_batch_entry(text: str) -> BatchTranslationEntry:
    """
    Parse ``key=lang:value,lang:value``.

    Example: ``Hello=ja:こんにちは,en:Hello``
    """
    key, sep, pairs = text.partition("=")
    if not sep:
        raise InvalidInput(
            f"Invalid batch entry format: '{text}'. Expected 'key=lang:value,lang:value'"
        )
    if not key:
        raise InvalidInput(f"Empty key in: '{text}'")
    if not pairs:
        raise InvalidInput(f"No translations specified for: '{text}'")

    return BatchTranslationEntry(key=key, translations=parse_translations(pairs.split(",")))
