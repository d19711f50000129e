#!/usr/bin/env python3
"""
Core flatten pipeline: collect -> move -> prune.
"""

# Standard Library
import logging
import os
from pathlib import Path

# local repo modules
from .config import FlattenConfig
from .errors import PathResolutionError
from .models import FlattenReport
from .pruner import prune_empty_dirs
from .renamer import move_all, seed_occupied
from .scanner import collect_moves

logger = logging.getLogger(__name__)

#============================================


def resolve_root(root: Path | str) -> Path:
	"""
	Canonicalize the root directory.

	Args:
		root: User supplied path.

	Returns:
		Absolute resolved Path.

	Raises:
		PathResolutionError: root is missing, not a directory, or cannot be listed.
	"""
	raw = Path(root).expanduser()
	try:
		resolved = raw.resolve(strict=True)
	except OSError as error:
		raise PathResolutionError(raw, error.strerror or str(error)) from error
	if not resolved.is_dir():
		raise PathResolutionError(resolved, "not a directory")
	try:
		with os.scandir(resolved):
			pass
	except OSError as error:
		raise PathResolutionError(resolved, error.strerror or str(error)) from error
	return resolved


#============================================


def flatten_directory(
	root: Path | str,
	rename: bool = False,
	delete_empty: bool = False,
	*,
	dry_run: bool = False,
	strict: bool = False,
) -> FlattenReport:
	"""
	Move every nested file under root up to root.

	Args:
		root: Directory to flatten.
		rename: Prefix moved files with their immediate parent folder name.
		delete_empty: Remove directories left empty afterwards.
		dry_run: Plan only; nothing on disk changes.
		strict: Fail on unreadable directories instead of skipping them.

	Returns:
		FlattenReport describing the run.

	Raises:
		FlattenError: on the first fatal failure; later phases do not run.
	"""
	resolved = resolve_root(root)
	report = FlattenReport(root=resolved, dry_run=dry_run)

	collected = collect_moves(resolved, rename, strict=strict)
	report.skipped = list(collected.skipped)

	occupied = seed_occupied(resolved)
	report.moves = move_all(collected.moves, occupied, dry_run=dry_run)

	if delete_empty:
		departed = [result.source for result in report.moves] if dry_run else []
		report.removed_dirs = prune_empty_dirs(resolved, dry_run=dry_run, departed=departed)

	logger.info(
		"Flattened %s: %d moved, %d renamed, %d directories removed",
		resolved, report.moved_count, report.renamed_count, len(report.removed_dirs),
	)
	return report


#============================================


def run(config: FlattenConfig) -> FlattenReport:
	"""
	Run flatten_directory with settings from a FlattenConfig.
	"""
	return flatten_directory(
		config.normalized_root(),
		rename=config.rename,
		delete_empty=config.delete_empty,
		dry_run=config.dry_run,
		strict=config.strict,
	)
