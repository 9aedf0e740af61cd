#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

from datetime import datetime
import os
from pathlib import Path

import yaml

from rename_with_date.cli import main

STAMP = 1_700_000_000


def _note(tmp_path: Path, name: str = "Ideas.md") -> Path:
	path = tmp_path / name
	path.write_text("hello")
	os.utime(path, (STAMP, STAMP))
	return path


def _expected_date() -> str:
	return datetime.fromtimestamp(STAMP).strftime("%Y-%m-%d")


def test_cli_renames_with_modified_date(tmp_path: Path):
	note = _note(tmp_path)
	config = tmp_path / "settings.yml"
	code = main([str(note), "-c", str(config), "--date-source", "modified"])
	assert code == 0
	assert (tmp_path / f"{_expected_date()} Ideas.md").exists()
	assert not config.exists()


def test_cli_dry_run(tmp_path: Path, capsys):
	note = _note(tmp_path)
	code = main([str(note), "-c", str(tmp_path / "s.yml"), "--date-source", "modified", "-d"])
	assert code == 0
	assert note.exists()
	assert f"{_expected_date()} Ideas.md" in capsys.readouterr().out


def test_cli_save_persists_overrides(tmp_path: Path):
	note = _note(tmp_path)
	config = tmp_path / "settings.yml"
	code = main([str(note), "-c", str(config), "--position", "append", "-s", "_", "--save", "-d"])
	assert code == 0
	saved = yaml.safe_load(config.read_text(encoding="utf-8"))
	assert saved["position"] == "append"
	assert saved["separator"] == "_"


def test_cli_missing_file_is_unavailable(tmp_path: Path):
	code = main([str(tmp_path / "nope.md"), "-c", str(tmp_path / "s.yml")])
	assert code == 2


def test_cli_bad_settings_file(tmp_path: Path):
	note = _note(tmp_path)
	config = tmp_path / "settings.yml"
	config.write_text("position: middle\n", encoding="utf-8")
	assert main([str(note), "-c", str(config)]) == 1
	assert note.exists()


def test_cli_settings_file_holding_a_list(tmp_path: Path):
	note = _note(tmp_path)
	config = tmp_path / "settings.yml"
	config.write_text("- a\n- b\n", encoding="utf-8")
	assert main([str(note), "-c", str(config)]) == 1
	assert note.exists()


def test_cli_quoted_boolean_rejected(tmp_path: Path):
	note = _note(tmp_path)
	config = tmp_path / "settings.json"
	config.write_text('{"markdown_only": "false"}', encoding="utf-8")
	assert main([str(note), "-c", str(config)]) == 1
