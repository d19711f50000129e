#!/usr/bin/env python3
"""
Remove directories left empty after flattening.
"""

# Standard Library
from collections.abc import Iterable
import logging
import os
from pathlib import Path

# local repo modules
from .errors import DirectoryRemovalError

logger = logging.getLogger(__name__)

#============================================


def _walk_dirs(root: Path) -> list[Path]:
	dirs: list[Path] = []

	def _on_error(error: OSError) -> None:
		logger.warning("Skipping unreadable directory %s: %s", error.filename, error)

	for dirpath, dirnames, _filenames in os.walk(root, onerror=_on_error):
		dirnames.sort()
		for name in dirnames:
			path = Path(dirpath) / name
			# symlinked directories are never removed
			if path.is_symlink():
				continue
			dirs.append(path)
	return dirs


#============================================


def prune_empty_dirs(root: Path, dry_run: bool = False, departed: Iterable[Path] = ()) -> list[Path]:
	"""
	Remove empty directories under root, deepest first.

	A parent whose only contents are directories removed earlier in the same
	pass is removed too. Root itself is never removed.

	Args:
		root: Canonical root directory.
		dry_run: Report what would be removed without removing it.
		departed: Files to count as already gone, used for dry-run planning.

	Returns:
		Removed (or removable) directories in removal order.
	"""
	gone = set(departed)
	removed: list[Path] = []
	dirs = _walk_dirs(root)
	dirs.sort(key=lambda path: len(path.parts), reverse=True)
	for directory in dirs:
		try:
			entries = list(directory.iterdir())
		except OSError as error:
			raise DirectoryRemovalError(
				directory, "read directory", error.strerror or str(error)
			) from error
		remaining = [entry for entry in entries if entry not in gone]
		if remaining:
			continue
		if not dry_run:
			try:
				directory.rmdir()
			except OSError as error:
				raise DirectoryRemovalError(directory, detail=error.strerror or str(error)) from error
			logger.info("Removed empty directory %s", directory)
		gone.add(directory)
		removed.append(directory)
	return removed
