#!/usr/bin/env python3
"""
Local directory file store used as the rename host.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
import logging

# local repo modules
from .errors import RenameIOFailure
from .renamer import normalize_path

logger = logging.getLogger(__name__)

#============================================


@dataclass(slots=True, frozen=True)
class FileDescriptor:
	"""
	Read-only view of one file inside a vault.

	Attributes:
		path: Vault-relative posix path.
		basename: Name without directory or extension.
		extension: Extension without dot, possibly empty.
		directory: Containing directory; "" for the vault root.
		created_at: Creation timestamp (POSIX seconds).
		modified_at: Modification timestamp (POSIX seconds).
	"""
	path: str
	basename: str
	extension: str
	directory: str
	created_at: float
	modified_at: float

	#============================================
	@classmethod
	def from_vault_path(cls, path: str, created_at: float, modified_at: float) -> "FileDescriptor":
		pure = PurePosixPath(path)
		directory = pure.parent.as_posix()
		if directory == ".":
			directory = ""
		return cls(
			path=pure.as_posix(),
			basename=pure.stem,
			extension=pure.suffix.lstrip("."),
			directory=directory,
			created_at=created_at,
			modified_at=modified_at,
		)


#============================================


class LocalVault:
	"""
	A directory on disk addressed with vault-relative paths.
	"""

	#============================================
	def __init__(self, root: Path, active_path: str | None = None) -> None:
		self.root = root.expanduser().resolve()
		self.active_path = active_path

	#============================================
	def _abs(self, path: str) -> Path:
		"""
		Map a vault path onto disk.

		Existing files are found under their own name. A segment that is not
		on disk is matched against the normalized names in its folder, so a
		composed target also sees an NFD or non-breaking-space twin.
		"""
		direct = self.root / path
		if direct.exists():
			return direct
		parts = [part for part in path.split("/") if part]
		current = self.root
		for index, part in enumerate(parts):
			candidate = current / part
			if not candidate.exists():
				match = self._match_normalized(current, part)
				if match is None:
					return current.joinpath(*parts[index:])
				candidate = match
			current = candidate
		return current

	#============================================
	def _match_normalized(self, folder: Path, name: str) -> Path | None:
		if not folder.is_dir():
			return None
		wanted = normalize_path(name)
		for child in folder.iterdir():
			if normalize_path(child.name) == wanted:
				return child
		return None

	#============================================
	def relative_path(self, path: Path) -> str:
		"""
		Convert a filesystem path into a vault path.

		Raises:
			ValueError: path is outside the vault root.
		"""
		return path.expanduser().resolve().relative_to(self.root).as_posix()

	#============================================
	def set_active(self, path: Path) -> None:
		self.active_path = self.relative_path(path)

	#============================================
	def get_active_file(self) -> FileDescriptor | None:
		if not self.active_path:
			return None
		if not self._abs(self.active_path).is_file():
			logger.warning("Active file %s no longer exists", self.active_path)
			return None
		created_at, modified_at = self.read_timestamps(self.active_path)
		return FileDescriptor.from_vault_path(self.active_path, created_at, modified_at)

	#============================================
	def path_exists(self, path: str) -> bool:
		return self._abs(path).exists()

	#============================================
	def read_timestamps(self, path: str) -> tuple[float, float]:
		"""
		Read creation and modification times.

		Birth time is used where the platform records it, else st_ctime.

		Returns:
			(created_at, modified_at)
		"""
		stat = self._abs(path).stat()
		created_at = getattr(stat, "st_birthtime", None)
		if created_at is None:
			created_at = stat.st_ctime
		return (created_at, stat.st_mtime)

	#============================================
	def rename_atomically(self, descriptor: FileDescriptor, new_path: str) -> str:
		"""
		Rename a file in place, refusing to overwrite.

		Args:
			descriptor: File to rename.
			new_path: Vault path of the new name.

		Returns:
			The new vault path.
		"""
		source = self._abs(descriptor.path)
		dest = self._abs(new_path)
		if dest.parent.resolve() != source.parent.resolve():
			raise RenameIOFailure(descriptor.path, new_path, "target is in a different folder")
		if dest.exists():
			raise RenameIOFailure(descriptor.path, new_path, "target already exists")
		try:
			source.rename(dest)
		except OSError as error:
			raise RenameIOFailure(descriptor.path, new_path, error.strerror or str(error)) from error
		renamed = dest.relative_to(self.root).as_posix()
		if self.active_path == descriptor.path:
			self.active_path = renamed
		logger.info("Renamed %s -> %s", descriptor.path, renamed)
		return renamed
