"""
rename_with_date
================

Rename one file at a time by adding a formatted date to its name.
"""

__all__ = [
	"cli",
	"command",
	"config",
	"dates",
	"errors",
	"renamer",
	"vault",
]
