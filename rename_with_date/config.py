#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
import json
import logging

# PIP3 modules
import yaml

# local repo modules
from .errors import ConfigError

logger = logging.getLogger(__name__)

POSITIONS = ("prepend", "append")
DATE_SOURCES = ("now", "created", "modified")
CONFLICT_STRATEGIES = ("append-counter", "skip")
DEFAULT_DATE_FORMAT = "YYYY-MM-DD"
DEFAULT_SETTINGS_PATH = Path.home() / ".rename_with_date.yml"

# camelCase keys written by the earlier plugin settings file
_KEY_ALIASES = {
	"dateFormat": "date_format",
	"avoidDuplicatePrefix": "avoid_duplicate_date",
	"avoidDuplicateDate": "avoid_duplicate_date",
	"avoid_duplicate_prefix": "avoid_duplicate_date",
	"dateSource": "date_source",
	"conflictStrategy": "conflict_strategy",
	"markdownOnly": "markdown_only",
}

#============================================


@dataclass(slots=True, frozen=True)
class RenameConfig:
	"""
	Settings snapshot read at the start of each rename.

	Attributes:
		date_format: Pattern using YYYY, MM, DD, HH, mm, ss tokens.
		separator: Text between the date and the original name (may be empty).
		avoid_duplicate_date: Do nothing when the date is already at the chosen edge.
		position: "prepend" or "append".
		date_source: "now", "created" or "modified".
		conflict_strategy: "append-counter" or "skip".
		markdown_only: Only rename .md files.
	"""
	date_format: str = DEFAULT_DATE_FORMAT
	separator: str = " "
	avoid_duplicate_date: bool = True
	position: str = "prepend"
	date_source: str = "now"
	conflict_strategy: str = "append-counter"
	markdown_only: bool = True

	#============================================
	def __post_init__(self) -> None:
		_check_choice("position", self.position, POSITIONS)
		_check_choice("date_source", self.date_source, DATE_SOURCES)
		_check_choice("conflict_strategy", self.conflict_strategy, CONFLICT_STRATEGIES)

	#============================================
	def to_dict(self) -> dict:
		return asdict(self)


#============================================


def _check_choice(name: str, value: str, choices: tuple[str, ...]) -> None:
	if value not in choices:
		raise ConfigError(f"Invalid {name} {value!r}; expected one of: {', '.join(choices)}")


#============================================


def merge_config(base: RenameConfig, partial: dict | None) -> RenameConfig:
	"""
	Overlay recognized keys from a partial mapping onto a config.

	Args:
		base: Config providing values for missing keys.
		partial: Loaded or user-supplied values, possibly with legacy keys.

	Returns:
		New RenameConfig.
	"""
	if not partial:
		return base
	if not isinstance(partial, dict):
		raise ConfigError(f"Settings must be a mapping, got {type(partial).__name__}")
	known = {item.name for item in fields(RenameConfig)}
	changes: dict = {}
	for key, value in partial.items():
		name = _KEY_ALIASES.get(key, key)
		if name not in known:
			logger.debug("Ignoring unknown setting %r", key)
			continue
		if value is None:
			continue
		changes[name] = value
	for name in ("avoid_duplicate_date", "markdown_only"):
		if name in changes and not isinstance(changes[name], bool):
			raise ConfigError(f"Invalid {name} {changes[name]!r}; expected true or false")
	for name in ("date_format", "separator"):
		if name in changes:
			changes[name] = str(changes[name])
	return replace(base, **changes)


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	with config_path.open("r", encoding="utf-8") as handle:
		if config_path.suffix.lower() in {".yml", ".yaml"}:
			loaded = yaml.safe_load(handle)
		else:
			loaded = json.load(handle)
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise ConfigError(f"{config_path} must hold a mapping of settings, got {type(loaded).__name__}")
	return loaded


#============================================


def write_user_config(config_path: Path, values: dict) -> None:
	config_path.parent.mkdir(parents=True, exist_ok=True)
	with config_path.open("w", encoding="utf-8") as handle:
		if config_path.suffix.lower() in {".yml", ".yaml"}:
			yaml.safe_dump(values, handle, sort_keys=False)
		else:
			json.dump(values, handle, indent=2)
			handle.write("\n")


#============================================


class SettingsStore:
	"""
	Owns the persisted settings and hands out snapshots.
	"""

	#============================================
	def __init__(self, config_path: Path | None = None) -> None:
		self.config_path = config_path
		self.config = RenameConfig()

	#============================================
	def load(self) -> RenameConfig:
		"""
		Merge persisted values over defaults.

		Returns:
			The loaded config.
		"""
		self.config = merge_config(RenameConfig(), load_user_config(self.config_path))
		logger.info("Loaded settings from %s", self.config_path or "defaults")
		return self.config

	#============================================
	def save(self, config: RenameConfig | None = None) -> Path | None:
		"""
		Persist a config.

		Args:
			config: Config to write; defaults to the current one.

		Returns:
			Path written, or None when the store has no file.
		"""
		if config is not None:
			self.config = config
		if self.config_path is None:
			logger.debug("No settings path; keeping settings in memory")
			return None
		write_user_config(self.config_path, self.config.to_dict())
		logger.info("Saved settings to %s", self.config_path)
		return self.config_path

	#============================================
	def update(self, **patch) -> RenameConfig:
		"""
		Apply one settings edit and persist it immediately.

		Returns:
			The new snapshot.
		"""
		if "date_format" in patch:
			patch["date_format"] = str(patch["date_format"] or "").strip() or DEFAULT_DATE_FORMAT
		self.save(merge_config(self.config, patch))
		return self.config

	#============================================
	def snapshot(self) -> RenameConfig:
		return self.config
