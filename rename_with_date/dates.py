#!/usr/bin/env python3
"""
Date source selection and date pattern formatting.
"""

# Standard Library
from datetime import datetime

# local repo modules
from .errors import ConfigError

#============================================


def resolve_instant(descriptor, date_source: str, now: datetime | None = None) -> datetime:
	"""
	Pick the point in time used for the new name.

	Args:
		descriptor: FileDescriptor with created_at and modified_at timestamps.
		date_source: "now", "created" or "modified".
		now: Optional clock override for "now".

	Returns:
		Local datetime.
	"""
	if date_source == "created":
		return datetime.fromtimestamp(descriptor.created_at)
	if date_source == "modified":
		return datetime.fromtimestamp(descriptor.modified_at)
	if date_source == "now":
		return now if now is not None else datetime.now()
	raise ConfigError(f"Invalid date_source {date_source!r}")


#============================================


def _token_values(instant: datetime) -> dict[str, str]:
	return {
		"YYYY": str(instant.year),
		"MM": f"{instant.month:02d}",
		"DD": f"{instant.day:02d}",
		"HH": f"{instant.hour:02d}",
		"mm": f"{instant.minute:02d}",
		"ss": f"{instant.second:02d}",
	}


#============================================


def format_date(instant: datetime, pattern: str) -> str:
	"""
	Substitute date tokens in a pattern.

	Scans left to right; substituted digits are emitted as-is and never
	rescanned. Text that is not a token passes through.

	Args:
		instant: Point in time (local).
		pattern: Pattern with YYYY, MM, DD, HH, mm, ss tokens.

	Returns:
		Formatted string (empty for an empty pattern).
	"""
	values = _token_values(instant)
	parts: list[str] = []
	index = 0
	while index < len(pattern):
		for token, value in values.items():
			if pattern.startswith(token, index):
				parts.append(value)
				index += len(token)
				break
		else:
			parts.append(pattern[index])
			index += 1
	return "".join(parts)
