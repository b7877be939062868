"""Command-line interface for xcstrings-crud."""

import functools
import json
from typing import Any, Optional, Tuple

import click
from rich.console import Console

from . import __version__
from .config import config
from .core.catalog import XCStringsCatalog
from .core.input_parsers import parse_batch_entry, parse_translations
from .errors import XCStringsError
from .logging_config import setup_logging
from .models.results import to_jsonable

console = Console()


def _print_json(value: Any, pretty: bool) -> None:
    data = to_jsonable(value)
    if pretty:
        text = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
    else:
        text = json.dumps(data, ensure_ascii=False)
    console.print(text, soft_wrap=True, markup=False, highlight=False, emoji=False)


def _success(message: str, pretty: bool) -> None:
    _print_json({"success": True, "message": message}, pretty)


def handle_errors(func):
    """Turn catalog errors into a JSON failure payload and exit status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except XCStringsError as e:
            _print_json({"success": False, "error": str(e)}, kwargs.get("pretty", False))
            click.get_current_context().exit(1)

    return wrapper


def file_option(func):
    return click.option(
        "--file", "-f",
        "file_path",
        required=True,
        type=click.Path(dir_okay=False),
        help="Path to the xcstrings file",
    )(func)


def files_option(func):
    return click.option(
        "--file", "-f",
        "file_paths",
        required=True,
        multiple=True,
        type=click.Path(dir_okay=False),
        help="Path to an xcstrings file (repeat for several files)",
    )(func)


def pretty_option(func):
    return click.option(
        "--pretty",
        is_flag=True,
        help="Output in pretty-printed JSON format",
    )(func)


def _single_or_multi(
    lang: Optional[str], value: Optional[str], translations: Tuple[str, ...]
) -> dict:
    """Validate -l/-v against -t and return the language -> value map."""
    has_single = lang is not None or value is not None
    if has_single and translations:
        raise click.UsageError("Cannot use both -l/-v and -t options together")
    if not has_single and not translations:
        raise click.UsageError("Either -l and -v, or -t must be specified")
    if (lang is None) != (value is None):
        raise click.UsageError("Both -l and -v must be specified together")
    if translations:
        return parse_translations(translations)
    return {lang: value}


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    default=None,
    help="Log level for diagnostics on stderr (default from XCSTRINGS_LOG_LEVEL)",
)
def cli(log_level: Optional[str]):
    """CRUD operations on Xcode .xcstrings localization catalogs."""
    setup_logging(log_level)


@cli.command()
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.option("--source-language", "-s", default=None, help="Source language code (default: en)")
@click.option("--overwrite", is_flag=True, help="Overwrite existing file if it exists")
@pretty_option
@handle_errors
def create(file_path: str, source_language: Optional[str], overwrite: bool, pretty: bool):
    """Create a new xcstrings file."""
    catalog = XCStringsCatalog.create_file(file_path, source_language, overwrite=overwrite)
    source = catalog.get_source_language()
    _success(f"Created xcstrings file at '{file_path}' with source language '{source}'", pretty)


# List commands

@cli.group("list")
def list_group():
    """List keys, languages, or untranslated items."""


@list_group.command("keys")
@file_option
@pretty_option
@handle_errors
def list_keys(file_path: str, pretty: bool):
    """List all keys in the xcstrings file."""
    _print_json(XCStringsCatalog(file_path).list_keys(), pretty)


@list_group.command("languages")
@file_option
@pretty_option
@handle_errors
def list_languages(file_path: str, pretty: bool):
    """List all languages in the xcstrings file."""
    _print_json(XCStringsCatalog(file_path).list_languages(), pretty)


@list_group.command("untranslated")
@file_option
@click.option("--lang", "-l", required=True, help="Language code to check")
@pretty_option
@handle_errors
def list_untranslated(file_path: str, lang: str, pretty: bool):
    """List untranslated keys for a specific language."""
    _print_json(XCStringsCatalog(file_path).list_untranslated(lang), pretty)


@list_group.command("stale")
@file_option
@pretty_option
@handle_errors
def list_stale(file_path: str, pretty: bool):
    """List keys Xcode marked as stale."""
    _print_json(XCStringsCatalog(file_path).list_stale_keys(), pretty)


# Get commands

@cli.group("get")
def get_group():
    """Get translations or file information."""


@get_group.command("key")
@click.argument("key")
@file_option
@click.option("--lang", "-l", default=None, help="Specific language to get (optional)")
@pretty_option
@handle_errors
def get_key(key: str, file_path: str, lang: Optional[str], pretty: bool):
    """Get translations for a key."""
    _print_json(XCStringsCatalog(file_path).get_translation(key, lang), pretty)


@get_group.command("info")
@click.argument("key")
@file_option
@pretty_option
@handle_errors
def get_info(key: str, file_path: str, pretty: bool):
    """Get comment, extraction state and languages of a key."""
    _print_json(XCStringsCatalog(file_path).get_key(key), pretty)


@get_group.command("source-language")
@file_option
@handle_errors
def get_source_language(file_path: str):
    """Get the source language of the xcstrings file."""
    console.print(XCStringsCatalog(file_path).get_source_language(), markup=False, highlight=False)


# Check commands

@cli.group("check")
def check_group():
    """Check key existence or coverage."""


@check_group.command("key")
@click.argument("key")
@file_option
@click.option("--lang", "-l", default=None, help="Specific language to check (optional)")
@handle_errors
def check_key(key: str, file_path: str, lang: Optional[str]):
    """Check if a key exists."""
    exists = XCStringsCatalog(file_path).check_key(key, lang)
    console.print("true" if exists else "false", highlight=False)


@check_group.command("coverage")
@click.argument("key")
@file_option
@pretty_option
@handle_errors
def check_coverage(key: str, file_path: str, pretty: bool):
    """Check translation coverage for a specific key."""
    _print_json(XCStringsCatalog(file_path).check_coverage(key), pretty)


# Write commands

@cli.group("add")
def add_group():
    """Add new translations."""


@add_group.command("key")
@click.argument("key")
@file_option
@click.option("--lang", "-l", default=None, help="Language code for the translation (use with -v)")
@click.option("--value", "-v", default=None, help="Translation value (use with -l)")
@click.option(
    "--translation", "-t",
    "translations",
    multiple=True,
    help="Translation in lang:value format, repeatable (e.g. -t ja:こんにちは -t en:Hello)",
)
@click.option("--overwrite", is_flag=True, help="Allow overwriting existing translations")
@pretty_option
@handle_errors
def add_key(
    key: str,
    file_path: str,
    lang: Optional[str],
    value: Optional[str],
    translations: Tuple[str, ...],
    overwrite: bool,
    pretty: bool,
):
    """Add a translation for a key."""
    mapping = _single_or_multi(lang, value, translations)
    catalog = XCStringsCatalog(file_path)
    if translations:
        catalog.add_translations(key, mapping, allow_overwrite=overwrite)
    else:
        catalog.add_translation(key, lang, value, allow_overwrite=overwrite)
    _success("Translation added successfully", pretty)


@cli.group("update")
def update_group():
    """Update existing translations."""


@update_group.command("key")
@click.argument("key")
@file_option
@click.option("--lang", "-l", default=None, help="Language code for the translation (use with -v)")
@click.option("--value", "-v", default=None, help="New translation value (use with -l)")
@click.option(
    "--translation", "-t",
    "translations",
    multiple=True,
    help="Translation in lang:value format, repeatable",
)
@pretty_option
@handle_errors
def update_key(
    key: str,
    file_path: str,
    lang: Optional[str],
    value: Optional[str],
    translations: Tuple[str, ...],
    pretty: bool,
):
    """Update translations for an existing key."""
    mapping = _single_or_multi(lang, value, translations)
    catalog = XCStringsCatalog(file_path)
    if translations:
        catalog.update_translations(key, mapping)
    else:
        catalog.update_translation(key, lang, value)
    _success("Translation updated successfully", pretty)


@cli.group("upsert")
def upsert_group():
    """Add or update translations."""


@upsert_group.command("key")
@click.argument("key")
@file_option
@click.option("--lang", "-l", required=True, help="Language code for the translation")
@click.option("--value", "-v", required=True, help="Translation value")
@pretty_option
@handle_errors
def upsert_key(key: str, file_path: str, lang: str, value: str, pretty: bool):
    """Add a translation, or replace it if it exists."""
    XCStringsCatalog(file_path).upsert_translation(key, lang, value)
    _success("Translation upserted successfully", pretty)


@cli.group("rename")
def rename_group():
    """Rename keys."""


@rename_group.command("key")
@click.argument("key")
@file_option
@click.option("--new-name", required=True, help="New name for the key")
@pretty_option
@handle_errors
def rename_key(key: str, file_path: str, new_name: str, pretty: bool):
    """Rename a key, keeping all of its translations."""
    XCStringsCatalog(file_path).rename_key(key, new_name)
    _success(f"Key renamed from '{key}' to '{new_name}' successfully", pretty)


@cli.group("delete")
def delete_group():
    """Delete keys or translations."""


@delete_group.command("key")
@click.argument("key")
@file_option
@click.option(
    "--lang", "-l",
    "languages",
    multiple=True,
    help="Language to delete, repeatable (deletes the entire key if not specified)",
)
@pretty_option
@handle_errors
def delete_key(key: str, file_path: str, languages: Tuple[str, ...], pretty: bool):
    """Delete a key, or some of its translations."""
    catalog = XCStringsCatalog(file_path)
    if not languages:
        catalog.delete_key(key)
        _success("Key deleted successfully", pretty)
    elif len(languages) == 1:
        catalog.delete_translation(key, languages[0])
        _success(f"Translation for '{languages[0]}' deleted successfully", pretty)
    else:
        catalog.delete_translations(key, list(languages))
        _success(f"Translations deleted successfully for {len(languages)} languages", pretty)


# Stats commands

@cli.group("stats")
def stats_group():
    """Show translation statistics."""


@stats_group.command("coverage")
@file_option
@click.option("--compact", is_flag=True, help="Compact output: only show languages under 100%")
@pretty_option
@handle_errors
def stats_coverage(file_path: str, compact: bool, pretty: bool):
    """Show overall translation coverage."""
    catalog = XCStringsCatalog(file_path)
    _print_json(catalog.get_compact_stats() if compact else catalog.get_stats(), pretty)


@stats_group.command("progress")
@file_option
@click.option("--lang", "-l", required=True, help="Language code to check progress for")
@pretty_option
@handle_errors
def stats_progress(file_path: str, lang: str, pretty: bool):
    """Show translation progress for one language."""
    _print_json(XCStringsCatalog(file_path).get_progress(lang), pretty)


@stats_group.command("batch-coverage")
@files_option
@click.option("--compact", is_flag=True, help="Compact output: only show languages under 100%")
@pretty_option
@handle_errors
def stats_batch_coverage(file_paths: Tuple[str, ...], compact: bool, pretty: bool):
    """Show coverage for several files at once."""
    if compact:
        result = XCStringsCatalog.get_compact_batch_coverage(file_paths)
    else:
        result = XCStringsCatalog.get_batch_coverage(file_paths)
    _print_json(result, pretty)


@stats_group.command("batch-stale")
@files_option
@pretty_option
@handle_errors
def stats_batch_stale(file_paths: Tuple[str, ...], pretty: bool):
    """List stale keys across several files."""
    _print_json(XCStringsCatalog.get_batch_stale_keys(file_paths), pretty)


# Batch commands

@cli.group("batch")
def batch_group():
    """Batch operations for multiple keys."""


@batch_group.command("check")
@file_option
@click.option("--key", "-k", "keys", required=True, multiple=True, help="Key to check, repeatable")
@click.option("--lang", "-l", default=None, help="Specific language to check (optional)")
@pretty_option
@handle_errors
def batch_check(file_path: str, keys: Tuple[str, ...], lang: Optional[str], pretty: bool):
    """Check if multiple keys exist."""
    _print_json(XCStringsCatalog(file_path).check_keys(list(keys), lang), pretty)


@batch_group.command("add")
@file_option
@click.option(
    "--entry", "-e",
    "entries",
    required=True,
    multiple=True,
    help="Entry in key=lang:value,lang:value format, repeatable (e.g. -e Hello=ja:こんにちは,en:Hello)",
)
@click.option("--overwrite", is_flag=True, help="Allow overwriting existing translations")
@pretty_option
@handle_errors
def batch_add(file_path: str, entries: Tuple[str, ...], overwrite: bool, pretty: bool):
    """Add translations for multiple keys at once."""
    batch_entries = [parse_batch_entry(e) for e in entries]
    result = XCStringsCatalog(file_path).add_translations_batch(
        batch_entries, allow_overwrite=overwrite
    )
    _print_json(result, pretty)


@batch_group.command("update")
@file_option
@click.option(
    "--entry", "-e",
    "entries",
    required=True,
    multiple=True,
    help="Entry in key=lang:value,lang:value format, repeatable",
)
@pretty_option
@handle_errors
def batch_update(file_path: str, entries: Tuple[str, ...], pretty: bool):
    """Update translations for multiple keys at once."""
    batch_entries = [parse_batch_entry(e) for e in entries]
    _print_json(XCStringsCatalog(file_path).update_translations_batch(batch_entries), pretty)


# Tool server

@cli.command()
@click.option("--host", default=None, help="Host to bind to (default from XCSTRINGS_TOOLS_HOST)")
@click.option("--port", type=int, default=None, help="Port to bind to (default from XCSTRINGS_TOOLS_PORT)")
def serve(host: Optional[str], port: Optional[int]):
    """Start the agent tool-calling server."""
    from .tools.app import run_server

    errors = config.validate()
    if errors:
        err_console = Console(stderr=True)
        err_console.print("[red]Configuration errors:[/red]")
        for error in errors:
            err_console.print(f"  - {error}")
        raise click.Abort()

    run_server(host=host, port=port)


if __name__ == "__main__":
    cli()
