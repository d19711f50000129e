#!/usr/bin/env python3
"""
Records passed between the collect, move and prune phases.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path

#============================================


@dataclass(slots=True, frozen=True)
class PendingMove:
	"""
	Planned relocation of one nested file to the root.

	Attributes:
		source: File strictly below root.
		destination: Proposed direct child of root.
	"""

	source: Path
	destination: Path


#============================================


@dataclass(slots=True, frozen=True)
class MoveResult:
	source: Path
	destination: Path
	performed: bool
	renamed: bool = False


#============================================


@dataclass(slots=True)
class CollectResult:
	"""
	Snapshot of the tree taken before anything is moved.
	"""

	moves: list[PendingMove] = field(default_factory=list)
	directories: set[Path] = field(default_factory=set)
	skipped: list[Path] = field(default_factory=list)


#============================================


@dataclass(slots=True)
class FlattenReport:
	root: Path
	moves: list[MoveResult] = field(default_factory=list)
	removed_dirs: list[Path] = field(default_factory=list)
	skipped: list[Path] = field(default_factory=list)
	dry_run: bool = False

	#============================================
	@property
	def moved_count(self) -> int:
		return len(self.moves)

	#============================================
	@property
	def renamed_count(self) -> int:
		return sum(1 for result in self.moves if result.renamed)
