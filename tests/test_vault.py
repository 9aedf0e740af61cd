#!/usr/bin/env python3
"""
Tests for the local directory file store.
"""

import os
import unicodedata
from pathlib import Path

import pytest

from rename_with_date.errors import RenameIOFailure
from rename_with_date.vault import FileDescriptor, LocalVault


def test_descriptor_fields():
	desc = FileDescriptor.from_vault_path("notes/2024/Ideas.md", 1.0, 2.0)
	assert desc.basename == "Ideas"
	assert desc.extension == "md"
	assert desc.directory == "notes/2024"
	root_desc = FileDescriptor.from_vault_path("archive.tar.gz", 1.0, 2.0)
	assert root_desc.basename == "archive.tar"
	assert root_desc.extension == "gz"
	assert root_desc.directory == ""
	assert FileDescriptor.from_vault_path("LICENSE", 1.0, 2.0).extension == ""


def test_active_file_and_timestamps(tmp_path: Path):
	sub = tmp_path / "notes"
	sub.mkdir()
	source = sub / "Ideas.md"
	source.write_text("hello")
	os.utime(source, (1_700_000_000, 1_700_000_000))
	vault = LocalVault(tmp_path)
	assert vault.get_active_file() is None
	vault.set_active(source)
	desc = vault.get_active_file()
	assert desc.path == "notes/Ideas.md"
	assert desc.modified_at == 1_700_000_000
	assert vault.path_exists("notes/Ideas.md")
	assert not vault.path_exists("notes/Other.md")


def test_rename_in_place(tmp_path: Path):
	source = tmp_path / "Ideas.md"
	source.write_text("hello")
	vault = LocalVault(tmp_path)
	vault.set_active(source)
	new_path = vault.rename_atomically(vault.get_active_file(), "2024 Ideas.md")
	assert new_path == "2024 Ideas.md"
	assert (tmp_path / "2024 Ideas.md").read_text() == "hello"
	assert not source.exists()
	assert vault.active_path == "2024 Ideas.md"


def test_rename_refuses_overwrite(tmp_path: Path):
	(tmp_path / "Ideas.md").write_text("mine")
	(tmp_path / "Taken.md").write_text("theirs")
	vault = LocalVault(tmp_path)
	vault.set_active(tmp_path / "Ideas.md")
	with pytest.raises(RenameIOFailure) as info:
		vault.rename_atomically(vault.get_active_file(), "Taken.md")
	assert "exists" in info.value.reason
	assert (tmp_path / "Taken.md").read_text() == "theirs"
	assert (tmp_path / "Ideas.md").exists()


def test_rename_refuses_other_folder(tmp_path: Path):
	(tmp_path / "Ideas.md").write_text("mine")
	vault = LocalVault(tmp_path)
	vault.set_active(tmp_path / "Ideas.md")
	with pytest.raises(RenameIOFailure):
		vault.rename_atomically(vault.get_active_file(), "elsewhere/Ideas.md")


def test_set_active_outside_root(tmp_path: Path):
	inner = tmp_path / "vault"
	inner.mkdir()
	vault = LocalVault(inner)
	with pytest.raises(ValueError):
		vault.set_active(tmp_path / "outside.md")


def test_descriptor_keeps_name_as_on_disk():
	nfd = unicodedata.normalize("NFD", "Café")
	desc = FileDescriptor.from_vault_path(f"notes/{nfd}.md", 1.0, 2.0)
	assert desc.basename == nfd
	nbsp = FileDescriptor.from_vault_path("My\u00a0Ideas.md", 1.0, 2.0)
	assert nbsp.path == "My\u00a0Ideas.md"


def test_active_file_with_nbsp_name(tmp_path: Path):
	source = tmp_path / "My\u00a0Ideas.md"
	source.write_text("hello")
	vault = LocalVault(tmp_path)
	vault.set_active(source)
	desc = vault.get_active_file()
	assert desc is not None
	assert desc.basename == "My\u00a0Ideas"


def test_target_sees_normalized_twin(tmp_path: Path):
	(tmp_path / "2024\u00a0Ideas.md").write_text("twin")
	vault = LocalVault(tmp_path)
	assert vault.path_exists("2024 Ideas.md")
	assert not vault.path_exists("2024 Other.md")
