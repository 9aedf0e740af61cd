#!/usr/bin/env python3
"""
Command boundary: "rename current file by applying date".
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from datetime import datetime
import logging
import sys
from typing import Callable

# local repo modules
from .config import RenameConfig, SettingsStore
from .errors import FilteredOut, NoActiveTarget, RenameError, RenameSkipped
from .renamer import PlannedRename, plan_rename
from .vault import FileDescriptor, LocalVault

logger = logging.getLogger(__name__)

RENAMED = "renamed"
DRY_RUN = "dry-run"
SKIPPED = "skipped"
FAILED = "failed"
UNAVAILABLE = "unavailable"

_TAGS = {
	RENAMED: ("[RENAMED]", "32"),
	DRY_RUN: ("[DRY RUN]", "33"),
	SKIPPED: ("[SKIP]", "36"),
	FAILED: ("[ERROR]", "31"),
	UNAVAILABLE: ("[ERROR]", "31"),
}

#============================================


@dataclass(slots=True)
class RenameOutcome:
	"""
	What one invocation did.
	"""

	status: str
	message: str
	source: str = ""
	target: str = ""
	error: RenameError | None = None

	#============================================
	@property
	def ok(self) -> bool:
		return self.status in (RENAMED, DRY_RUN, SKIPPED)


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def print_notice(outcome: RenameOutcome) -> None:
	tag, code = _TAGS[outcome.status]
	print(f"{_color(tag, code)} {outcome.message}")


#============================================


class RenameCommand:
	"""
	Runs one rename per call against the active file of a vault.
	"""

	#============================================
	def __init__(
		self,
		vault: LocalVault,
		settings: SettingsStore,
		dry_run: bool = False,
		notify: Callable[[RenameOutcome], None] | None = print_notice,
		clock: Callable[[], datetime] | None = None,
	) -> None:
		self.vault = vault
		self.settings = settings
		self.dry_run = dry_run
		self.notify = notify
		self.clock = clock

	#============================================
	def is_available(self) -> bool:
		return self.vault.get_active_file() is not None

	#============================================
	def _plan(self, file: FileDescriptor, config: RenameConfig) -> PlannedRename:
		if config.markdown_only and file.extension != "md":
			raise FilteredOut()
		now = self.clock() if self.clock else None
		return plan_rename(file, config, self.vault.path_exists, now=now)

	#============================================
	def _report(self, outcome: RenameOutcome) -> RenameOutcome:
		if self.notify:
			self.notify(outcome)
		return outcome

	#============================================
	def run(self) -> RenameOutcome:
		"""
		Rename the active file.

		Returns:
			RenameOutcome describing the result.
		"""
		config = self.settings.snapshot()
		file = None
		try:
			file = self.vault.get_active_file()
			if file is None:
				raise NoActiveTarget()
			plan = self._plan(file, config)
			if self.dry_run:
				outcome = RenameOutcome(
					DRY_RUN, f"{file.path} -> {plan.target}", file.path, plan.target
				)
				return self._report(outcome)
			self.vault.rename_atomically(file, plan.target)
		except NoActiveTarget as error:
			logger.warning("%s", error)
			return self._report(RenameOutcome(UNAVAILABLE, str(error), error=error))
		except RenameSkipped as error:
			logger.info("Skipped %s: %s", file.path, error)
			return self._report(RenameOutcome(SKIPPED, str(error), file.path, error=error))
		except RenameError as error:
			logger.error("Failed to rename %s: %s", file.path, error)
			message = f"Failed to rename file. {error}"
			return self._report(RenameOutcome(FAILED, message, file.path, error=error))
		except Exception as error:
			source = file.path if file else ""
			logger.exception("Unexpected error renaming %s", source or "active file")
			message = f"Failed to rename file. {type(error).__name__}: {error}"
			return self._report(RenameOutcome(FAILED, message, source))
		return self._report(
			RenameOutcome(RENAMED, f"Renamed to: {plan.final_name}", file.path, plan.target)
		)
