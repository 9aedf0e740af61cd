#!/usr/bin/env python3
"""
Rename one file with a date straight from a checkout of rename-with-date.

Examples:
	python run_date_rename.py ~/Notes/Ideas.md --dry-run
	python run_date_rename.py ~/Notes/Ideas.md --root ~/Notes --date-source created
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from rename_with_date.cli import main  # noqa: E402

if __name__ == "__main__":
	sys.exit(main())
