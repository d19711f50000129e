"""
folder_flatten
==============

Move every nested file up to the root of a directory tree, resolving name
collisions and optionally pruning the directories left empty.
"""

__version__ = "0.1.0"

__all__ = [
	"config",
	"errors",
	"flattener",
	"models",
	"pruner",
	"renamer",
	"scanner",
]
