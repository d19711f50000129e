"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()


def write_files(root: Path, files: dict[str, str]) -> None:
	"""
	Create files (and their parent folders) relative to root.
	"""
	for rel_path, content in files.items():
		path = root / rel_path
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(content, encoding="utf-8")


def root_listing(root: Path) -> dict[str, str]:
	"""
	Map of file name -> content for files directly in root.
	"""
	return {
		path.name: path.read_text(encoding="utf-8")
		for path in root.iterdir()
		if path.is_file()
	}


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
	"""
	root.txt plus files one and two levels below the root.
	"""
	root = tmp_path.resolve()
	write_files(
		root,
		{
			"root.txt": "root file",
			"subdir1/file1.txt": "file in subdir1",
			"subdir1/subsubdir/deep.txt": "file in subsubdir",
			"subdir2/file2.txt": "file in subdir2",
		},
	)
	return root
