#!/usr/bin/env python3
"""
Command line interface for rename-with-date.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# PIP3 modules
import yaml

# local repo modules
from .command import FAILED, UNAVAILABLE, RenameCommand, RenameOutcome, print_notice
from .config import (
	CONFLICT_STRATEGIES,
	DATE_SOURCES,
	DEFAULT_SETTINGS_PATH,
	POSITIONS,
	SettingsStore,
	merge_config,
)
from .vault import LocalVault

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Rename a file by adding a date to its name."
	)
	parser.add_argument(
		"file",
		help="File to rename.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help=f"JSON or YAML settings file (default {DEFAULT_SETTINGS_PATH}).",
	)
	parser.add_argument(
		"-r",
		"--root",
		dest="root",
		help="Vault root folder (default: the file's folder).",
	)
	parser.add_argument(
		"-f",
		"--format",
		dest="date_format",
		help="Date format. Tokens: YYYY, MM, DD, HH, mm, ss.",
	)
	parser.add_argument(
		"-s",
		"--separator",
		dest="separator",
		help="Text inserted between date and original name.",
	)
	parser.add_argument(
		"--position",
		dest="position",
		choices=list(POSITIONS),
		help="Place the date before or after the original name.",
	)
	parser.add_argument(
		"--date-source",
		dest="date_source",
		choices=list(DATE_SOURCES),
		help="Which date to use: current time, file created or file modified.",
	)
	parser.add_argument(
		"--conflict",
		dest="conflict_strategy",
		choices=list(CONFLICT_STRATEGIES),
		help="What to do when the target name already exists.",
	)
	dup_group = parser.add_mutually_exclusive_group()
	dup_group.add_argument(
		"--avoid-duplicate",
		dest="avoid_duplicate_date",
		action="store_true",
		default=None,
		help="Do nothing if the date is already at the chosen position.",
	)
	dup_group.add_argument(
		"--allow-duplicate",
		dest="avoid_duplicate_date",
		action="store_false",
		help="Always add the date.",
	)
	md_group = parser.add_mutually_exclusive_group()
	md_group.add_argument(
		"--markdown-only",
		dest="markdown_only",
		action="store_true",
		default=None,
		help="Limit renames to .md files.",
	)
	md_group.add_argument(
		"--any-file",
		dest="markdown_only",
		action="store_false",
		help="Rename files of any type.",
	)
	parser.add_argument(
		"--save",
		dest="save",
		action="store_true",
		help="Persist the given options to the settings file.",
	)
	parser.add_argument(
		"-d",
		"--dry-run",
		dest="dry_run",
		action="store_true",
		help="Only print the planned new name.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	return parser.parse_args(argv)


#============================================


def collect_overrides(args: argparse.Namespace) -> dict:
	names = (
		"date_format",
		"separator",
		"position",
		"date_source",
		"conflict_strategy",
		"avoid_duplicate_date",
		"markdown_only",
	)
	return {name: getattr(args, name) for name in names if getattr(args, name) is not None}


#============================================


def build_settings(args: argparse.Namespace) -> SettingsStore:
	"""
	Load settings from file and apply CLI overrides.
	"""
	config_path = Path(args.config_path).expanduser() if args.config_path else DEFAULT_SETTINGS_PATH
	store = SettingsStore(config_path)
	store.load()
	overrides = collect_overrides(args)
	if args.save:
		store.update(**overrides)
	elif overrides:
		store.config = merge_config(store.config, overrides)
	return store


#============================================


def build_vault(args: argparse.Namespace) -> LocalVault:
	file_path = Path(args.file).expanduser().resolve()
	root = Path(args.root) if args.root else file_path.parent
	vault = LocalVault(root)
	vault.set_active(file_path)
	return vault


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	if args.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	try:
		store = build_settings(args)
		vault = build_vault(args)
	except (ValueError, OSError, yaml.YAMLError) as error:
		logging.error("Invalid setup: %s", error)
		print_notice(RenameOutcome(FAILED, str(error)))
		return 1
	command = RenameCommand(vault, store, dry_run=args.dry_run)
	outcome = command.run()
	if outcome.status == UNAVAILABLE:
		return 2
	if outcome.status == FAILED:
		return 1
	return 0


#============================================


if __name__ == "__main__":
	sys.exit(main())
