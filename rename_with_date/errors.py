#!/usr/bin/env python3
"""
Error taxonomy for date renames.
"""

#============================================


class RenameError(RuntimeError):
	"""
	Base class for every outcome that stops a rename.
	"""


class NoActiveTarget(RenameError):
	"""
	Raised when no file is selected.
	"""

	def __init__(self, message: str = "No active file to rename.") -> None:
		super().__init__(message)


#============================================


class RenameSkipped(RenameError):
	"""
	A no-op outcome: nothing renamed, nothing broken.
	"""


class FilteredOut(RenameSkipped):
	def __init__(
		self, message: str = "Rename skipped: only Markdown files are enabled in settings."
	) -> None:
		super().__init__(message)


class AlreadyDated(RenameSkipped):
	def __init__(self, position: str) -> None:
		edge = "start" if position == "prepend" else "end"
		super().__init__(f"Date already present at {edge} of name.")
		self.position = position


class ConflictSkip(RenameSkipped):
	def __init__(self, path: str) -> None:
		super().__init__(f"Rename skipped: target already exists ({path}).")
		self.path = path


#============================================


class ResolutionExhausted(RenameError):
	"""
	Raised when the counter bound runs out before a free name turns up.
	"""

	def __init__(self, base_name: str, attempts: int) -> None:
		super().__init__(
			f"Too many conflicting files when generating a unique name for '{base_name}' "
			f"({attempts} attempts)."
		)
		self.base_name = base_name
		self.attempts = attempts


class RenameIOFailure(RenameError):
	"""
	Raised when the file store refuses the rename.
	"""

	def __init__(self, source: str, target: str, reason: str) -> None:
		super().__init__(f"Could not rename '{source}' to '{target}': {reason}")
		self.source = source
		self.target = target
		self.reason = reason


#============================================


class ConfigError(ValueError):
	"""
	Raised for unrecognized configuration values.
	"""
