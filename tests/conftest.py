"""
Shared fixtures for the rename_with_date tests.

Makes the checkout importable without `pip install -e .` and provides an
in-memory file store standing in for LocalVault.
"""

from __future__ import annotations

import sys
from pathlib import Path


_CHECKOUT = str(Path(__file__).resolve().parents[1])
if _CHECKOUT not in sys.path:
	sys.path.insert(0, _CHECKOUT)

from rename_with_date.errors import RenameIOFailure  # noqa: E402
from rename_with_date.vault import FileDescriptor  # noqa: E402


class FakeVault:
	"""
	In-memory stand-in for LocalVault that records existence checks and renames.
	"""

	def __init__(self, paths=(), active: str | None = None, created_at=0.0, modified_at=0.0, fail_with: str = "") -> None:
		self.paths = set(paths)
		self.active = active
		self.created_at = created_at
		self.modified_at = modified_at
		self.fail_with = fail_with
		self.exists_calls: list[str] = []
		self.renames: list[tuple[str, str]] = []
		if active:
			self.paths.add(active)

	def get_active_file(self) -> FileDescriptor | None:
		if not self.active:
			return None
		return FileDescriptor.from_vault_path(self.active, self.created_at, self.modified_at)

	def path_exists(self, path: str) -> bool:
		self.exists_calls.append(path)
		return path in self.paths

	def rename_atomically(self, descriptor: FileDescriptor, new_path: str) -> str:
		if self.fail_with:
			raise RenameIOFailure(descriptor.path, new_path, self.fail_with)
		self.paths.discard(descriptor.path)
		self.paths.add(new_path)
		self.renames.append((descriptor.path, new_path))
		self.active = new_path
		return new_path
