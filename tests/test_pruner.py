#!/usr/bin/env python3
"""
Tests for empty directory pruning.
"""

from pathlib import Path

import pytest

from folder_flatten.errors import DirectoryRemovalError
from folder_flatten.pruner import prune_empty_dirs
from conftest import write_files


def test_nested_empty_directories_are_removed(tmp_path: Path):
	root = tmp_path.resolve()
	(root / "empty1" / "empty2").mkdir(parents=True)
	removed = prune_empty_dirs(root)
	assert removed == [root / "empty1" / "empty2", root / "empty1"]
	assert not (root / "empty1").exists()


def test_non_empty_directory_is_preserved(tmp_path: Path):
	root = tmp_path.resolve()
	write_files(root, {"non_empty/file.txt": "content"})
	(root / "empty").mkdir()
	prune_empty_dirs(root)
	assert (root / "non_empty" / "file.txt").exists()
	assert not (root / "empty").exists()


def test_parent_with_file_keeps_only_its_file(tmp_path: Path):
	root = tmp_path.resolve()
	write_files(root, {"a/keep.txt": "k"})
	(root / "a" / "b" / "c").mkdir(parents=True)
	removed = prune_empty_dirs(root)
	assert removed == [root / "a" / "b" / "c", root / "a" / "b"]
	assert (root / "a").is_dir()


def test_root_is_never_removed(tmp_path: Path):
	root = tmp_path.resolve()
	assert prune_empty_dirs(root) == []
	assert root.is_dir()


def test_dry_run_counts_departed_files(tmp_path: Path):
	root = tmp_path.resolve()
	write_files(root, {"a/b/moved.txt": "m", "c/stays.txt": "s"})
	removed = prune_empty_dirs(root, dry_run=True, departed=[root / "a" / "b" / "moved.txt"])
	assert removed == [root / "a" / "b", root / "a"]
	assert (root / "a" / "b" / "moved.txt").exists()
	assert (root / "c").is_dir()


def test_removal_failure_is_fatal(tmp_path: Path, monkeypatch):
	root = tmp_path.resolve()
	(root / "x" / "y").mkdir(parents=True)

	def fake_rmdir(self):
		raise PermissionError(13, "Permission denied")

	monkeypatch.setattr(Path, "rmdir", fake_rmdir)
	with pytest.raises(DirectoryRemovalError) as excinfo:
		prune_empty_dirs(root)
	assert excinfo.value.path == root / "x" / "y"
	assert "remove empty directory" in str(excinfo.value)
