#!/usr/bin/env python3
"""
Directory scanner: builds the full work list before anything is moved.
"""

# Standard Library
import logging
import os
from pathlib import Path

# local repo modules
from .errors import WalkError
from .models import CollectResult, PendingMove

logger = logging.getLogger(__name__)

#============================================


def destination_name(path: Path, rename: bool) -> str:
	"""
	Name a nested file will take at the root.

	Args:
		path: Nested source file.
		rename: Prefix the immediate parent folder name when True.

	Returns:
		File name for the root level.
	"""
	if rename:
		return f"{path.parent.name}_{path.name}"
	return path.name


#============================================


def collect_moves(root: Path, rename: bool, strict: bool = False) -> CollectResult:
	"""
	Walk root and plan a move for every file below its first level.

	Files already directly in root are left out. Directories that cannot be
	read are skipped with a warning, or raise WalkError when strict is set.

	Args:
		root: Canonical root directory.
		rename: Use parent-prefixed destination names.
		strict: Treat unreadable directories as fatal.

	Returns:
		CollectResult with pending moves, directories and skipped paths.
	"""
	result = CollectResult()

	def _on_error(error: OSError) -> None:
		skipped = Path(error.filename) if error.filename else root
		if strict:
			raise WalkError(skipped, error.strerror or str(error)) from error
		logger.warning("Skipping unreadable entry %s: %s", skipped, error)
		result.skipped.append(skipped)

	for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
		current = Path(dirpath)
		# sorted in place so os.walk descends in a stable order
		dirnames.sort()
		for name in dirnames:
			result.directories.add(current / name)
		if current == root:
			continue
		for name in sorted(filenames):
			source = current / name
			destination = root / destination_name(source, rename)
			result.moves.append(PendingMove(source=source, destination=destination))
	logger.info(
		"Collected %d files in %d directories under %s",
		len(result.moves), len(result.directories), root,
	)
	return result
