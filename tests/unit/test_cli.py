"""Tests for the catdelta command line."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner, Result

from catdelta.cli import cli
from catdelta.cli.main import EXIT_NOT_COMPLIANT, EXIT_NOT_EQUAL
from catdelta.observability.logging import reset_logging

_BASELINE = {
    "environment": "production",
    "resources": [
        {"type": "File", "title": "foo", "tags": ["file"], "parameters": {"mode": "644"}},
        {"type": "Package", "title": "ntp", "parameters": {"ensure": "installed"}},
    ],
    "edges": [{"source": "Package[ntp]", "target": "File[foo]"}],
}


def _write(path: Path, catalog: Any) -> Path:
    path.write_text(json.dumps(catalog), encoding="utf-8")
    return path


def _invoke(args: list[str], monkeypatch: pytest.MonkeyPatch) -> Result:
    for key in ("IGNORE_TAGS", "VERBOSE", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(f"CATDELTA_{key}", raising=False)
    try:
        return CliRunner().invoke(cli, ["diff", "--log-level", "error", *args])
    finally:
        # setup_logging() bound the runner's stderr; restore the library default
        reset_logging()


@pytest.fixture()
def baseline(tmp_path: Path) -> Path:
    return _write(tmp_path / "baseline.json", _BASELINE)


class TestDiffCommand:
    def test_equal_catalogs(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        out = tmp_path / "delta.json"
        result = _invoke([str(baseline), str(baseline), "--output", str(out)], monkeypatch)
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["preview_equal"] is True
        assert data["id"] == 1

    def test_conflict_written_as_json(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        preview_catalog = json.loads(json.dumps(_BASELINE))
        preview_catalog["resources"][0]["parameters"]["mode"] = "755"
        preview = _write(tmp_path / "preview.json", preview_catalog)
        out = tmp_path / "delta.json"
        result = _invoke([str(baseline), str(preview), "-o", str(out)], monkeypatch)
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        conflict = data["conflicting_resources"][0]
        assert conflict["title"] == "foo"
        assert conflict["conflicting_attributes"][0]["name"] == "mode"
        assert data["preview_compliant"] is False

    def test_summary_view(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        preview = _write(tmp_path / "preview.json", {"environment": "future", "resources": _BASELINE["resources"]})
        result = _invoke([str(baseline), str(preview), "--view", "summary"], monkeypatch)
        assert result.exit_code == 0, result.output
        assert "Catalog delta (production -> future): noncompliant" in result.output
        assert "missing=1" in result.output

    def test_summary_lists_conflicts(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        preview_catalog = json.loads(json.dumps(_BASELINE))
        preview_catalog["resources"][0]["parameters"]["mode"] = "755"
        preview = _write(tmp_path / "preview.json", preview_catalog)
        result = _invoke([str(baseline), str(preview), "--view", "summary"], monkeypatch)
        assert "! File[foo] (id 2)" in result.output
        assert "x mode: '644' -> '755'" in result.output

    def test_ignore_tags_flag(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        preview_catalog = json.loads(json.dumps(_BASELINE))
        preview_catalog["resources"][0]["tags"] = ["file", "extra"]
        preview = _write(tmp_path / "preview.json", preview_catalog)
        out = tmp_path / "delta.json"
        result = _invoke([str(baseline), str(preview), "--ignore-tags", "-o", str(out)], monkeypatch)
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["tags_ignored"] is True
        assert data["preview_equal"] is True

    def test_verbose_flag(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        empty = _write(tmp_path / "empty.json", {})
        out = tmp_path / "delta.json"
        result = _invoke([str(baseline), str(empty), "--verbose", "-o", str(out)], monkeypatch)
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [a["name"] for a in data["missing_resources"][0]["attributes"]] == ["tags", "@@", "mode"]


class TestAssertions:
    def test_assert_equal_fails(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        preview_catalog = json.loads(json.dumps(_BASELINE))
        preview_catalog["edges"].append({"source": "File[foo]", "target": "Package[ntp]"})
        preview = _write(tmp_path / "preview.json", preview_catalog)
        result = _invoke([str(baseline), str(preview), "--view", "summary", "--assert", "equal"], monkeypatch)
        assert result.exit_code == EXIT_NOT_EQUAL

    def test_assert_compliant_holds(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        preview_catalog = json.loads(json.dumps(_BASELINE))
        preview_catalog["edges"].append({"source": "File[foo]", "target": "Package[ntp]"})
        preview = _write(tmp_path / "preview.json", preview_catalog)
        result = _invoke([str(baseline), str(preview), "--view", "summary", "--assert", "compliant"], monkeypatch)
        assert result.exit_code == 0

    def test_assert_compliant_fails(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        empty = _write(tmp_path / "empty.json", {})
        result = _invoke([str(baseline), str(empty), "--view", "summary", "--assert", "compliant"], monkeypatch)
        assert result.exit_code == EXIT_NOT_COMPLIANT


class TestErrors:
    def test_unreadable_catalog(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        result = _invoke([str(baseline), str(tmp_path / "absent.json")], monkeypatch)
        assert result.exit_code == 1
        assert "Cannot read catalog" in result.output

    def test_wrong_shape(self, baseline: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        bad = _write(tmp_path / "bad.json", {"resources": [{"type": "File", "title": 7}]})
        result = _invoke([str(baseline), str(bad)], monkeypatch)
        assert result.exit_code == 1
        assert "Invalid preview catalog" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "catdelta" in result.output
