"""Tests for the command line entrypoint."""

import json
from pathlib import Path

import pytest

from npm_duplicates.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "GITHUB_STEP_SUMMARY",
        "NO_COLOR",
        "NPM_DUPLICATES_SILENT",
        "NPM_DUPLICATES_CONFIG",
        "NPM_DUPLICATES_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def project(tmp_path: Path, write_manifest) -> Path:
    write_manifest(tmp_path, "a", {"dependencies": {"mongoose": "^1.3.0", "react": "18.0.0"}})
    write_manifest(tmp_path, "b", {"devDependencies": {"mongoose": "1.10.0", "react": "17.0.2"}})
    return tmp_path


def test_exit_status_is_duplicate_count(project: Path, capsys):
    assert main(["--folder", str(project), "--no-color"]) == 2

    out = capsys.readouterr().out
    assert "mongoose, Unique versions: 2\n" in out
    assert "Total duplicates: 2\n" in out


def test_silent_flag(project: Path):
    assert main(["-f", str(project), "-s", "--no-color"]) == 0


def test_silent_env(project: Path, monkeypatch):
    monkeypatch.setenv("NPM_DUPLICATES_SILENT", "yes")
    assert main(["-f", str(project), "--no-color"]) == 0


def test_no_duplicates(tmp_path: Path, write_manifest, capsys):
    write_manifest(tmp_path, "", {"dependencies": {"react": "18.0.0"}})

    assert main(["-f", str(tmp_path)]) == 0
    assert capsys.readouterr().out == "Total duplicates: 0\n"


def test_json_output(project: Path, capsys):
    assert main(["-f", str(project), "--format", "json", "--ignore", "react"]) == 1

    report = json.loads(capsys.readouterr().out)
    assert [d["name"] for d in report["dependencies"]] == ["mongoose"]
    assert report["dependencies"][0]["highest"] == {
        "version": "1.10.0",
        "origin": "b/package.json",
    }


def test_ignore_path_flag(project: Path, capsys):
    assert main(["-f", str(project), "--ignore-path", "b/", "--format", "json"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["totals"]["ignoredManifests"] == 1


def test_style_from_settings(project: Path, capsys):
    (project / ".duplicates.json").write_text('{"style": "short"}', encoding="utf-8")

    main(["-f", str(project), "--no-color"])

    assert "Locations" not in capsys.readouterr().out


def test_full_style_flag(project: Path, capsys):
    main(["-f", str(project), "--no-color", "--style", "full"])

    assert "Versions:\n1.10.0\n1.3.0\n" in capsys.readouterr().out


def test_summary_file(project: Path, tmp_path: Path):
    summary = tmp_path / "summary.md"

    main(["-f", str(project), "--summary", str(summary), "--no-color"])

    assert "| mongoose | 2 | 1.10.0 |" in summary.read_text(encoding="utf-8")


def test_unreadable_manifest(tmp_path: Path, capsys):
    broken = tmp_path / "package.json"
    broken.write_text("{", encoding="utf-8")

    assert main(["-f", str(tmp_path)]) == 2
    err = capsys.readouterr().err
    assert "ERROR" in err
    assert "package.json" in err


def test_missing_folder(tmp_path: Path, capsys):
    assert main(["-f", str(tmp_path / "nope")]) == 2
    assert "does not exist" in capsys.readouterr().err


def test_invalid_config(project: Path, capsys):
    (project / ".duplicates.json").write_text('{"silent": 1}', encoding="utf-8")

    assert main(["-f", str(project)]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_summary_write_failure(project: Path, tmp_path: Path, capsys):
    target = tmp_path / "summary-dir"
    target.mkdir()

    assert main(["-f", str(project), "--summary", str(target), "--no-color"]) == 2
    assert "Failed to write summary" in capsys.readouterr().err


def test_json_output_is_schema_checked(project: Path, monkeypatch, capsys):
    monkeypatch.setattr("npm_duplicates.cli.build_report", lambda result: {"version": "1"})

    assert main(["-f", str(project), "--format", "json"]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "does not match schema" in captured.err
