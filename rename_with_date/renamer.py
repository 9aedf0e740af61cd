#!/usr/bin/env python3
"""
Name composition and collision-safe target resolution.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from datetime import datetime
import logging
import re
import unicodedata
from typing import Callable

# local repo modules
from .config import RenameConfig
from .dates import format_date, resolve_instant
from .errors import AlreadyDated, ConflictSkip, ResolutionExhausted

logger = logging.getLogger(__name__)

MAX_COUNTER = 5000
_SLASH_RUN_RE = re.compile(r"[\\/]+")

#============================================


@dataclass(slots=True)
class PlannedRename:
	"""
	Fully resolved rename, ready to hand to the file store.
	"""

	source: str
	target: str
	formatted_date: str
	candidate_base: str
	final_base: str

	#============================================
	@property
	def final_name(self) -> str:
		return self.target.rsplit("/", 1)[-1]

	#============================================
	@property
	def renumbered(self) -> bool:
		return self.final_base != self.candidate_base


#============================================


def compose_name(
	base_name: str,
	formatted_date: str,
	separator: str,
	position: str,
	avoid_duplicate_date: bool,
) -> str | None:
	"""
	Attach a date to a base name.

	Args:
		base_name: Current name without directory or extension.
		formatted_date: Output of format_date.
		separator: Text between date and name.
		position: "prepend" or "append".
		avoid_duplicate_date: Skip when the date is already at that edge.

	Returns:
		New base name, or None when the name is already dated.
	"""
	if position == "prepend":
		prefix = formatted_date + separator
		if avoid_duplicate_date and base_name.startswith(prefix):
			return None
		return prefix + base_name
	suffix = separator + formatted_date
	if avoid_duplicate_date and base_name.endswith(suffix):
		return None
	return base_name + suffix


#============================================


def normalize_path(path: str) -> str:
	path = _SLASH_RUN_RE.sub("/", path)
	path = path.strip("/")
	path = path.replace("\u00a0", " ").replace("\u202f", " ")
	path = unicodedata.normalize("NFC", path)
	return path or "/"


#============================================


def build_path(directory: str, base_name: str, extension: str) -> str:
	"""
	Join directory, base name and extension into a vault path.

	Args:
		directory: Containing directory; "" or "/" for the root.
		base_name: File name without extension.
		extension: Extension without dot, possibly empty.

	Returns:
		Normalized path.
	"""
	prefix = "" if directory in ("", "/") else directory + "/"
	extension_part = f".{extension}" if extension else ""
	return normalize_path(f"{prefix}{base_name}{extension_part}")


#============================================


def resolve_conflict(
	directory: str,
	extension: str,
	candidate_base_name: str,
	exists: Callable[[str], bool],
	strategy: str,
) -> str:
	"""
	Find a base name whose path is free.

	The taken name counts as "(1)", so numbering starts at "(2)".

	Args:
		directory: Containing directory.
		extension: File extension.
		candidate_base_name: Composed base name.
		exists: Oracle telling whether a path is occupied.
		strategy: "append-counter" or "skip".

	Returns:
		Free base name.

	Raises:
		ConflictSkip: Candidate is taken and strategy is "skip".
		ResolutionExhausted: No free name within MAX_COUNTER attempts.
	"""
	candidate_path = build_path(directory, candidate_base_name, extension)
	if not exists(candidate_path):
		return candidate_base_name
	if strategy == "skip":
		raise ConflictSkip(candidate_path)
	counter = 1
	while True:
		counter += 1
		if counter > MAX_COUNTER:
			raise ResolutionExhausted(candidate_base_name, MAX_COUNTER)
		candidate = f"{candidate_base_name} ({counter})"
		if not exists(build_path(directory, candidate, extension)):
			logger.info("Resolved conflict for %s with counter %d", candidate_path, counter)
			return candidate


#============================================


def plan_rename(
	descriptor,
	config: RenameConfig,
	exists: Callable[[str], bool],
	now: datetime | None = None,
) -> PlannedRename:
	"""
	Work out the final target for a file.

	Args:
		descriptor: FileDescriptor of the file to rename.
		config: Settings snapshot.
		exists: Oracle telling whether a path is occupied.
		now: Optional clock override for the "now" date source.

	Returns:
		PlannedRename.
	"""
	instant = resolve_instant(descriptor, config.date_source, now=now)
	formatted_date = format_date(instant, config.date_format)
	candidate = compose_name(
		descriptor.basename,
		formatted_date,
		config.separator,
		config.position,
		config.avoid_duplicate_date,
	)
	if candidate is None:
		raise AlreadyDated(config.position)
	final_base = resolve_conflict(
		descriptor.directory,
		descriptor.extension,
		candidate,
		exists,
		config.conflict_strategy,
	)
	return PlannedRename(
		source=descriptor.path,
		target=build_path(descriptor.directory, final_base, descriptor.extension),
		formatted_date=formatted_date,
		candidate_base=candidate,
		final_base=final_base,
	)
