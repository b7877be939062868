"""Shared fixtures: small catalogs written into tmp_path."""

import json
from pathlib import Path

import pytest


def _unit(value, state="translated"):
    return {"stringUnit": {"state": state, "value": value}}


def write_catalog(path: Path, strings: dict, source_language: str = "en") -> Path:
    path.write_text(
        json.dumps(
            {"sourceLanguage": source_language, "strings": strings, "version": "1.0"},
            ensure_ascii=False,
            indent=2,
            sort_keys=True,
        )
        + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def empty_catalog(tmp_path):
    return write_catalog(tmp_path / "Empty.xcstrings", {})


@pytest.fixture
def single_key_catalog(tmp_path):
    return write_catalog(
        tmp_path / "Single.xcstrings",
        {"Hello": {"localizations": {"en": _unit("Hello"), "ja": _unit("こんにちは")}}},
    )


@pytest.fixture
def partial_catalog(tmp_path):
    """Hello has en+ja, Goodbye only en, Welcome en+ja+de."""
    return write_catalog(
        tmp_path / "Partial.xcstrings",
        {
            "Hello": {"localizations": {"en": _unit("Hello"), "ja": _unit("こんにちは")}},
            "Goodbye": {"localizations": {"en": _unit("Goodbye")}},
            "Welcome": {
                "localizations": {
                    "de": _unit("Willkommen"),
                    "en": _unit("Welcome"),
                    "ja": _unit("ようこそ"),
                }
            },
        },
    )


@pytest.fixture
def complete_catalog(tmp_path):
    return write_catalog(
        tmp_path / "Complete.xcstrings",
        {
            "Hello": {"localizations": {"en": _unit("Hello"), "ja": _unit("こんにちは")}},
            "Goodbye": {"localizations": {"en": _unit("Goodbye"), "ja": _unit("さようなら")}},
        },
    )


@pytest.fixture
def stale_catalog(tmp_path):
    return write_catalog(
        tmp_path / "Stale.xcstrings",
        {
            "Active": {"extractionState": "manual", "localizations": {"en": _unit("Active")}},
            "Old": {"extractionState": "stale", "localizations": {"en": _unit("Old")}},
            "Unused": {"extractionState": "stale"},
        },
    )


@pytest.fixture
def rich_catalog(tmp_path):
    """Comments, empty localizations, plural and device variations."""
    return write_catalog(
        tmp_path / "Rich.xcstrings",
        {
            "greeting": {
                "comment": "Shown on launch",
                "extractionState": "manual",
                "localizations": {"en": _unit("Hi"), "fr": _unit("Salut", "needs_review")},
            },
            "no_localizations": {"comment": "Nothing yet"},
            "empty_localizations": {"localizations": {}},
            "%lld items": {
                "localizations": {
                    "en": {
                        "variations": {
                            "plural": {
                                "one": _unit("%lld item"),
                                "other": _unit("%lld items"),
                            }
                        }
                    }
                }
            },
            "tap_hint": {
                "localizations": {
                    "en": {
                        "variations": {
                            "device": {
                                "iphone": _unit("Tap"),
                                "mac": _unit("Click"),
                                "other": _unit("Select"),
                            }
                        }
                    }
                }
            },
        },
    )
