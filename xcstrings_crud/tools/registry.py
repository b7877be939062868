"""Tool table for the agent tool-calling server.

Each tool is a plain function taking ToolArguments and returning a string,
registered under its name with a JSON-schema argument declaration. Dispatch
is a single lookup in TOOLS.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..config import config
from ..core.catalog import XCStringsCatalog
from ..errors import XCStringsError
from ..models.results import to_jsonable
from .arguments import ToolArguments

logger = logging.getLogger(__name__)

FILE_PROPERTY = {"type": "string", "description": "Path to the xcstrings file"}
TRANSLATIONS_PROPERTY = {
    "type": "object",
    "description": "Language code -> translation value",
    "additionalProperties": {"type": "string"},
}
ENTRIES_PROPERTY = {
    "type": "array",
    "description": "Entries of {key, translations}",
    "items": {
        "type": "object",
        "properties": {"key": {"type": "string"}, "translations": TRANSLATIONS_PROPERTY},
        "required": ["key", "translations"],
    },
}


@dataclass
class ToolSpec:
    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: Callable[[ToolArguments], str]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


TOOLS: Dict[str, ToolSpec] = {}


def _string(description: str) -> Dict[str, str]:
    return {"type": "string", "description": description}


def _boolean(description: str) -> Dict[str, str]:
    return {"type": "boolean", "description": description}


def _string_array(description: str) -> Dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def tool(
    name: str,
    description: str,
    properties: Optional[Dict[str, Any]] = None,
    required: Optional[List[str]] = None,
):
    """Register a handler under ``name`` with its argument schema.

    ``file`` is added to every tool unless the tool declares ``files``.
    """
    properties = dict(properties or {})
    required = list(required or [])
    if "files" not in properties:
        properties = {"file": FILE_PROPERTY, **properties}
        required = ["file", *required]

    def decorator(func: Callable[[ToolArguments], str]) -> Callable[[ToolArguments], str]:
        TOOLS[name] = ToolSpec(
            name=name,
            description=description,
            input_schema={"type": "object", "properties": properties, "required": required},
            handler=func,
        )
        return func

    return decorator


def encode(value: Any) -> str:
    """Shared JSON encoding for tool results."""
    return json.dumps(to_jsonable(value), indent=2, sort_keys=True, ensure_ascii=False)


def _catalog(args: ToolArguments) -> XCStringsCatalog:
    return XCStringsCatalog(args.require_string("file"))


def _compact(args: ToolArguments) -> bool:
    return args.optional_bool("compact", default=config.compact_stats)


# List tools

@tool("xcstrings_list_keys", "List all keys in the xcstrings file")
def list_keys(args: ToolArguments) -> str:
    return encode(_catalog(args).list_keys())


@tool("xcstrings_list_languages", "List all languages in the xcstrings file")
def list_languages(args: ToolArguments) -> str:
    return encode(_catalog(args).list_languages())


@tool(
    "xcstrings_list_untranslated",
    "List untranslated keys for a specific language",
    {"language": _string("Language code to check")},
    ["language"],
)
def list_untranslated(args: ToolArguments) -> str:
    return encode(_catalog(args).list_untranslated(args.require_string("language")))


@tool(
    "xcstrings_list_stale",
    "List keys with extractionState 'stale' (possibly unused; verify before deleting)",
)
def list_stale(args: ToolArguments) -> str:
    return encode(_catalog(args).list_stale_keys())


@tool(
    "xcstrings_batch_list_stale",
    "List stale keys across multiple xcstrings files",
    {"files": _string_array("Paths to xcstrings files")},
    ["files"],
)
def batch_list_stale(args: ToolArguments) -> str:
    return encode(XCStringsCatalog.get_batch_stale_keys(args.require_string_list("files")))


# Get / check tools

@tool("xcstrings_get_source_language", "Get the source language of the xcstrings file")
def get_source_language(args: ToolArguments) -> str:
    return _catalog(args).get_source_language()


@tool(
    "xcstrings_get_key",
    "Get translations for a specific key",
    {"key": _string("The key to get"), "language": _string("Specific language (optional)")},
    ["key"],
)
def get_key(args: ToolArguments) -> str:
    translations = _catalog(args).get_translation(
        args.require_string("key"), args.optional_string("language")
    )
    return encode(translations)


@tool(
    "xcstrings_get_key_info",
    "Get comment, extraction state and localized languages of a key",
    {"key": _string("The key to describe")},
    ["key"],
)
def get_key_info(args: ToolArguments) -> str:
    return encode(_catalog(args).get_key(args.require_string("key")))


@tool(
    "xcstrings_check_key",
    "Check if a key exists in the xcstrings file",
    {"key": _string("The key to check"), "language": _string("Specific language (optional)")},
    ["key"],
)
def check_key(args: ToolArguments) -> str:
    exists = _catalog(args).check_key(args.require_string("key"), args.optional_string("language"))
    return "true" if exists else "false"


@tool(
    "xcstrings_check_coverage",
    "Get translation coverage for a specific key",
    {"key": _string("The key to check")},
    ["key"],
)
def check_coverage(args: ToolArguments) -> str:
    return encode(_catalog(args).check_coverage(args.require_string("key")))


# Stats tools

@tool(
    "xcstrings_stats_coverage",
    "Get overall translation statistics",
    {"compact": _boolean("Only report languages under 100% (default true)")},
)
def stats_coverage(args: ToolArguments) -> str:
    catalog = _catalog(args)
    return encode(catalog.get_compact_stats() if _compact(args) else catalog.get_stats())


@tool(
    "xcstrings_stats_progress",
    "Get translation progress for a specific language",
    {"language": _string("Language code")},
    ["language"],
)
def stats_progress(args: ToolArguments) -> str:
    return encode(_catalog(args).get_progress(args.require_string("language")))


@tool(
    "xcstrings_batch_stats_coverage",
    "Get coverage summary for multiple xcstrings files",
    {
        "files": _string_array("Paths to xcstrings files"),
        "compact": _boolean("Only report languages under 100% (default true)"),
    },
    ["files"],
)
def batch_stats_coverage(args: ToolArguments) -> str:
    files = args.require_string_list("files")
    if _compact(args):
        return encode(XCStringsCatalog.get_compact_batch_coverage(files))
    return encode(XCStringsCatalog.get_batch_coverage(files))


# Create tool

@tool(
    "xcstrings_create_file",
    "Create a new empty xcstrings file",
    {
        "sourceLanguage": _string("Source language code (default: en)"),
        "overwrite": _boolean("Overwrite an existing file"),
    },
)
def create_file(args: ToolArguments) -> str:
    path = args.require_string("file")
    source_language = args.optional_string("sourceLanguage") or config.source_language
    XCStringsCatalog.create_file(
        path, source_language, overwrite=args.optional_bool("overwrite", default=False)
    )
    return f"Created xcstrings file at '{path}' with source language '{source_language}'"


# Write tools

@tool(
    "xcstrings_add_translation",
    "Add a translation for a key",
    {
        "key": _string("The key"),
        "language": _string("Language code"),
        "value": _string("Translation value"),
        "overwrite": _boolean("Replace an existing translation"),
    },
    ["key", "language", "value"],
)
def add_translation(args: ToolArguments) -> str:
    _catalog(args).add_translation(
        args.require_string("key"),
        args.require_string("language"),
        args.require_string("value"),
        allow_overwrite=args.optional_bool("overwrite", default=False),
    )
    return "Translation added successfully"


@tool(
    "xcstrings_add_translations",
    "Add translations for a key in multiple languages",
    {
        "key": _string("The key"),
        "translations": TRANSLATIONS_PROPERTY,
        "overwrite": _boolean("Replace existing translations"),
    },
    ["key", "translations"],
)
def add_translations(args: ToolArguments) -> str:
    translations = args.require_translations("translations")
    _catalog(args).add_translations(
        args.require_string("key"),
        translations,
        allow_overwrite=args.optional_bool("overwrite", default=False),
    )
    return f"Translations added successfully for {len(translations)} languages"


@tool(
    "xcstrings_update_translation",
    "Update a translation for a key",
    {
        "key": _string("The key"),
        "language": _string("Language code"),
        "value": _string("New translation value"),
    },
    ["key", "language", "value"],
)
def update_translation(args: ToolArguments) -> str:
    _catalog(args).update_translation(
        args.require_string("key"), args.require_string("language"), args.require_string("value")
    )
    return "Translation updated successfully"


@tool(
    "xcstrings_update_translations",
    "Update translations for a key in multiple languages",
    {"key": _string("The key"), "translations": TRANSLATIONS_PROPERTY},
    ["key", "translations"],
)
def update_translations(args: ToolArguments) -> str:
    translations = args.require_translations("translations")
    _catalog(args).update_translations(args.require_string("key"), translations)
    return f"Translations updated successfully for {len(translations)} languages"


@tool(
    "xcstrings_upsert_translation",
    "Add or update a translation (upsert)",
    {
        "key": _string("The key"),
        "language": _string("Language code"),
        "value": _string("Translation value"),
    },
    ["key", "language", "value"],
)
def upsert_translation(args: ToolArguments) -> str:
    _catalog(args).upsert_translation(
        args.require_string("key"), args.require_string("language"), args.require_string("value")
    )
    return "Translation upserted successfully"


@tool(
    "xcstrings_rename_key",
    "Rename a key",
    {"oldKey": _string("Current key"), "newKey": _string("New key")},
    ["oldKey", "newKey"],
)
def rename_key(args: ToolArguments) -> str:
    old_key = args.require_string("oldKey")
    new_key = args.require_string("newKey")
    _catalog(args).rename_key(old_key, new_key)
    return f"Key renamed from '{old_key}' to '{new_key}' successfully"


# Delete tools

@tool(
    "xcstrings_delete_key",
    "Delete a key entirely",
    {"key": _string("The key to delete")},
    ["key"],
)
def delete_key(args: ToolArguments) -> str:
    _catalog(args).delete_key(args.require_string("key"))
    return "Key deleted successfully"


@tool(
    "xcstrings_delete_translation",
    "Delete a specific translation for a key",
    {"key": _string("The key"), "language": _string("Language code to delete")},
    ["key", "language"],
)
def delete_translation(args: ToolArguments) -> str:
    language = args.require_string("language")
    _catalog(args).delete_translation(args.require_string("key"), language)
    return f"Translation for '{language}' deleted successfully"


@tool(
    "xcstrings_delete_translations",
    "Delete translations for multiple languages from a key",
    {"key": _string("The key"), "languages": _string_array("Language codes to delete")},
    ["key", "languages"],
)
def delete_translations(args: ToolArguments) -> str:
    languages = args.require_string_list("languages")
    _catalog(args).delete_translations(args.require_string("key"), languages)
    return f"Translations deleted successfully for {len(languages)} languages"


# Batch tools

@tool(
    "xcstrings_batch_check_keys",
    "Check if multiple keys exist",
    {"keys": _string_array("Keys to check"), "language": _string("Specific language (optional)")},
    ["keys"],
)
def batch_check_keys(args: ToolArguments) -> str:
    result = _catalog(args).check_keys(
        args.require_string_list("keys"), args.optional_string("language")
    )
    return encode(result)


@tool(
    "xcstrings_batch_add_translations",
    "Add translations for multiple keys at once; failing entries are reported, not fatal",
    {"entries": ENTRIES_PROPERTY, "overwrite": _boolean("Replace existing translations")},
    ["entries"],
)
def batch_add_translations(args: ToolArguments) -> str:
    result = _catalog(args).add_translations_batch(
        args.require_batch_entries("entries"),
        allow_overwrite=args.optional_bool("overwrite", default=False),
    )
    return encode(result)


@tool(
    "xcstrings_batch_update_translations",
    "Update translations for multiple keys at once; failing entries are reported, not fatal",
    {"entries": ENTRIES_PROPERTY},
    ["entries"],
)
def batch_update_translations(args: ToolArguments) -> str:
    result = _catalog(args).update_translations_batch(args.require_batch_entries("entries"))
    return encode(result)


def list_tools() -> List[Dict[str, Any]]:
    return [spec.describe() for spec in TOOLS.values()]


def execute_tool(name: str, arguments: Optional[Dict[str, Any]] = None) -> Tuple[str, bool]:
    """
    Run a registered tool.

    Returns:
        Tuple of (result text, is_error). Any exception raised by the tool
        comes back as ``"Error: <description>"``.

    Raises:
        KeyError: If no tool is registered under ``name``
    """
    spec = TOOLS[name]
    try:
        return spec.handler(ToolArguments(arguments)), False
    except XCStringsError as e:
        logger.warning("Tool %s failed: %s", name, e)
        return f"Error: {e}", True
    except Exception as e:
        logger.exception("Tool %s crashed", name)
        return f"Error: {e}", True
