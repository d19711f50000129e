#!/usr/bin/env python3
"""
Collision-free naming and moves into the root directory.
"""

# Standard Library
import dataclasses
import logging
from pathlib import Path

# local repo modules
from .errors import FlattenError, MoveError, WalkError
from .models import MoveResult, PendingMove

logger = logging.getLogger(__name__)

#============================================


def seed_occupied(root: Path) -> set[Path]:
	"""
	Collect files already sitting directly in root.

	Args:
		root: Canonical root directory.

	Returns:
		Set of root-level file paths.
	"""
	occupied: set[Path] = set()
	try:
		for entry in root.iterdir():
			if entry.is_file():
				occupied.add(entry)
	except OSError as error:
		raise WalkError(root, error.strerror or str(error)) from error
	return occupied


#============================================


def _is_free(candidate: Path, occupied: set[Path]) -> bool:
	if candidate in occupied:
		return False
	try:
		return not candidate.exists()
	except OSError as error:
		raise FlattenError(candidate, "check destination", error.strerror or str(error)) from error


#============================================


def resolve_destination(proposed: Path, occupied: set[Path]) -> Path:
	"""
	Append _1, _2, ... before the suffix until the name is free.

	A candidate is free when it is neither in occupied nor on disk.

	Args:
		proposed: Desired root-level path.
		occupied: Root-level paths already taken.

	Returns:
		First free path.
	"""
	if _is_free(proposed, occupied):
		return proposed
	counter = 1
	while True:
		candidate = proposed.with_name(f"{proposed.stem}_{counter}{proposed.suffix}")
		if _is_free(candidate, occupied):
			return candidate
		counter += 1


#============================================


def apply_move(move: PendingMove, dry_run: bool) -> MoveResult:
	"""
	Relocate one file to its already resolved destination.

	Args:
		move: Pending move with a free destination.
		dry_run: When True, no file changes.

	Returns:
		MoveResult for the move.
	"""
	if dry_run:
		return MoveResult(move.source, move.destination, performed=False)
	try:
		move.source.rename(move.destination)
	except OSError as error:
		raise MoveError(move.source, move.destination, error.strerror or str(error)) from error
	return MoveResult(move.source, move.destination, performed=True)


#============================================


def move_all(moves: list[PendingMove], occupied: set[Path], dry_run: bool = False) -> list[MoveResult]:
	"""
	Move every pending file into root without overwriting anything.

	Each accepted destination is added to occupied before the next move is
	resolved. The first failed move raises MoveError.

	Args:
		moves: Work list from the scanner.
		occupied: Root-level paths in use; updated in place.
		dry_run: Resolve names only.

	Returns:
		One MoveResult per pending move, in order.
	"""
	results: list[MoveResult] = []
	for move in moves:
		final = resolve_destination(move.destination, occupied)
		renamed = final != move.destination
		if renamed:
			logger.info("Name taken: %s -> %s", move.destination.name, final.name)
			move = dataclasses.replace(move, destination=final)
		result = apply_move(move, dry_run)
		occupied.add(final)
		results.append(dataclasses.replace(result, renamed=renamed))
		logger.info("%s %s -> %s", "Planned" if dry_run else "Moved", move.source, final)
	return results
