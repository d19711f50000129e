#!/usr/bin/env python3
"""
Error types raised by the flatten pipeline.
"""

from __future__ import annotations

# Standard Library
from pathlib import Path

#============================================


class FlattenError(Exception):
	"""
	Base error for the project.

	Attributes:
		path: Path the failed action was applied to.
		action: Short description of the action that failed.
	"""

	def __init__(self, path: Path, action: str, detail: str = "") -> None:
		self.path = path
		self.action = action
		self.detail = detail
		message = f"Failed to {action}: {path}"
		if detail:
			message = f"{message} ({detail})"
		super().__init__(message)


#============================================


class PathResolutionError(FlattenError):
	def __init__(self, path: Path, detail: str = "") -> None:
		super().__init__(path, "resolve path", detail)


#============================================


class MoveError(FlattenError):
	"""
	A single relocation failed; earlier moves stay where they landed.
	"""

	def __init__(self, source: Path, destination: Path, detail: str = "") -> None:
		self.source = source
		self.destination = destination
		super().__init__(source, f"move file to {destination}", detail)


#============================================


class DirectoryRemovalError(FlattenError):
	def __init__(self, path: Path, action: str = "remove empty directory", detail: str = "") -> None:
		super().__init__(path, action, detail)


#============================================


class WalkError(FlattenError):
	def __init__(self, path: Path, detail: str = "") -> None:
		super().__init__(path, "read directory", detail)
