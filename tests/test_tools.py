"""Tests for the tool table and the FastAPI tool server."""

import json

import pytest
from fastapi.testclient import TestClient

from xcstrings_crud.tools import TOOLS, execute_tool
from xcstrings_crud.tools.app import create_app

EXPECTED_TOOLS = {
    "xcstrings_list_keys",
    "xcstrings_list_languages",
    "xcstrings_list_untranslated",
    "xcstrings_list_stale",
    "xcstrings_batch_list_stale",
    "xcstrings_get_source_language",
    "xcstrings_get_key",
    "xcstrings_get_key_info",
    "xcstrings_check_key",
    "xcstrings_check_coverage",
    "xcstrings_stats_coverage",
    "xcstrings_stats_progress",
    "xcstrings_batch_stats_coverage",
    "xcstrings_create_file",
    "xcstrings_add_translation",
    "xcstrings_add_translations",
    "xcstrings_update_translation",
    "xcstrings_update_translations",
    "xcstrings_upsert_translation",
    "xcstrings_rename_key",
    "xcstrings_delete_key",
    "xcstrings_delete_translation",
    "xcstrings_delete_translations",
    "xcstrings_batch_check_keys",
    "xcstrings_batch_add_translations",
    "xcstrings_batch_update_translations",
}


@pytest.fixture
def client():
    return TestClient(create_app())


class TestToolTable:
    def test_all_tools_registered(self):
        assert set(TOOLS) == EXPECTED_TOOLS

    def test_schemas_declare_required_arguments(self):
        for spec in TOOLS.values():
            schema = spec.input_schema
            assert schema["type"] == "object"
            assert set(schema["required"]) <= set(schema["properties"])

    def test_list_keys(self, partial_catalog):
        text, is_error = execute_tool("xcstrings_list_keys", {"file": str(partial_catalog)})
        assert is_error is False
        assert json.loads(text) == ["Goodbye", "Hello", "Welcome"]

    def test_missing_argument(self, partial_catalog):
        text, is_error = execute_tool("xcstrings_list_untranslated", {"file": str(partial_catalog)})
        assert is_error is True
        assert text == "Error: Invalid input: Missing 'language' parameter"

    def test_no_arguments(self):
        text, is_error = execute_tool("xcstrings_list_keys", None)
        assert is_error is True
        assert "Missing 'file' parameter" in text

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.xcstrings"
        text, is_error = execute_tool("xcstrings_list_keys", {"file": str(path)})
        assert is_error is True
        assert text == f"Error: File not found: {path}"

    def test_path_with_nul_byte(self, tmp_path):
        path = str(tmp_path / "bad\x00name.xcstrings")
        text, is_error = execute_tool("xcstrings_create_file", {"file": path})
        assert is_error is True
        assert text.startswith("Error: ")

    def test_unexpected_exception_becomes_error_result(self, monkeypatch):
        def broken(args):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(TOOLS["xcstrings_list_keys"], "handler", broken)
        text, is_error = execute_tool("xcstrings_list_keys", {"file": "x.xcstrings"})
        assert (text, is_error) == ("Error: disk on fire", True)

    def test_check_key_plain_text(self, single_key_catalog):
        text, _ = execute_tool(
            "xcstrings_check_key", {"file": str(single_key_catalog), "key": "Hello", "language": "de"}
        )
        assert text == "false"

    def test_get_source_language_plain_text(self, single_key_catalog):
        text, _ = execute_tool("xcstrings_get_source_language", {"file": str(single_key_catalog)})
        assert text == "en"

    def test_stats_coverage_compact_by_default(self, partial_catalog):
        text, _ = execute_tool("xcstrings_stats_coverage", {"file": str(partial_catalog)})
        data = json.loads(text)
        assert sorted(data["incompleteLanguages"]) == ["de", "ja"]

    def test_stats_coverage_full(self, partial_catalog):
        text, _ = execute_tool(
            "xcstrings_stats_coverage", {"file": str(partial_catalog), "compact": False}
        )
        assert json.loads(text)["coverageByLanguage"]["en"]["coveragePercent"] == 100

    def test_create_file(self, tmp_path):
        path = tmp_path / "New.xcstrings"
        text, is_error = execute_tool(
            "xcstrings_create_file", {"file": str(path), "sourceLanguage": "de"}
        )
        assert is_error is False
        assert text == f"Created xcstrings file at '{path}' with source language 'de'"

    def test_add_translations_from_json_string(self, partial_catalog):
        text, is_error = execute_tool(
            "xcstrings_add_translations",
            {"file": str(partial_catalog), "key": "Thanks", "translations": '{"en": "Thanks"}'},
        )
        assert is_error is False
        assert text == "Translations added successfully for 1 languages"

    def test_rename_key(self, partial_catalog):
        text, _ = execute_tool(
            "xcstrings_rename_key",
            {"file": str(partial_catalog), "oldKey": "Hello", "newKey": "Greeting"},
        )
        assert text == "Key renamed from 'Hello' to 'Greeting' successfully"

    def test_rename_conflict(self, partial_catalog):
        text, is_error = execute_tool(
            "xcstrings_rename_key",
            {"file": str(partial_catalog), "oldKey": "Hello", "newKey": "Goodbye"},
        )
        assert is_error is True
        assert text == "Error: Key already exists: 'Goodbye'"

    def test_batch_add(self, partial_catalog):
        text, is_error = execute_tool(
            "xcstrings_batch_add_translations",
            {
                "file": str(partial_catalog),
                "entries": [
                    {"key": "Thanks", "translations": {"en": "Thanks"}},
                    {"key": "Hello", "translations": {"en": "Hi"}},
                ],
            },
        )
        assert is_error is False
        data = json.loads(text)
        assert data["succeeded"] == ["Thanks"]
        assert data["failedCount"] == 1

    def test_batch_entry_shape_checked(self, partial_catalog):
        text, is_error = execute_tool(
            "xcstrings_batch_update_translations",
            {"file": str(partial_catalog), "entries": [{"translations": {"en": "x"}}]},
        )
        assert is_error is True
        assert "entries[0]" in text

    def test_batch_stats_coverage(self, partial_catalog, complete_catalog):
        text, _ = execute_tool(
            "xcstrings_batch_stats_coverage",
            {"files": [str(partial_catalog), str(complete_catalog)], "compact": False},
        )
        assert json.loads(text)["aggregated"]["totalFiles"] == 2

    def test_delete_translations(self, partial_catalog):
        text, is_error = execute_tool(
            "xcstrings_delete_translations",
            {"file": str(partial_catalog), "key": "Welcome", "languages": ["de", "ja"]},
        )
        assert is_error is False
        text, _ = execute_tool(
            "xcstrings_get_key_info", {"file": str(partial_catalog), "key": "Welcome"}
        )
        assert json.loads(text)["languages"] == ["en"]


class TestToolServer:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_list_tools(self, client):
        response = client.get("/tools")
        assert response.status_code == 200
        tools = response.json()
        assert {t["name"] for t in tools} == EXPECTED_TOOLS
        get_key = next(t for t in tools if t["name"] == "xcstrings_get_key")
        assert get_key["inputSchema"]["required"] == ["file", "key"]

    def test_call_tool(self, client, partial_catalog):
        response = client.post(
            "/tools/xcstrings_list_languages", json={"file": str(partial_catalog)}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["isError"] is False
        assert json.loads(body["content"]) == ["de", "en", "ja"]

    def test_tool_error_is_not_http_error(self, client, partial_catalog):
        response = client.post(
            "/tools/xcstrings_get_key", json={"file": str(partial_catalog), "key": "Nope"}
        )
        assert response.status_code == 200
        assert response.json() == {"content": "Error: Key not found: 'Nope'", "isError": True}

    def test_unexpected_exception_is_not_http_error(self, client, tmp_path):
        response = client.post(
            "/tools/xcstrings_create_file", json={"file": str(tmp_path / "bad\x00name.xcstrings")}
        )
        assert response.status_code == 200
        assert response.json()["isError"] is True

    def test_unknown_tool(self, client):
        response = client.post("/tools/xcstrings_nope", json={})
        assert response.status_code == 404
