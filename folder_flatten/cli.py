#!/usr/bin/env python3
"""
Command line interface for folder-flatten.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# PIP3 modules
import yaml

# local repo modules
from . import __version__
from .config import FlattenConfig, apply_user_config, load_user_config
from .errors import FlattenError
from .flattener import run
from .models import FlattenReport

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		prog="folder-flatten",
		description="A CLI tool for organizing directories.",
	)
	parser.add_argument(
		"--version",
		action="version",
		version=f"%(prog)s {__version__}",
	)
	subparsers = parser.add_subparsers(dest="command", required=True)
	flatten = subparsers.add_parser(
		"flatten",
		help="Flatten a directory by moving all nested files to the root level.",
	)
	flatten.add_argument(
		"path",
		help="The path to flatten.",
	)
	flatten.add_argument(
		"-r",
		"--rename",
		dest="rename",
		action="store_true",
		help="Rename files by prepending the immediate parent folder name.",
	)
	flatten.add_argument(
		"-d",
		"--delete",
		dest="delete_empty",
		action="store_true",
		help="Delete empty folders after flattening.",
	)
	flatten.add_argument(
		"-n",
		"--dry-run",
		dest="dry_run",
		action="store_true",
		help="Only print planned actions.",
	)
	flatten.add_argument(
		"-s",
		"--strict",
		dest="strict",
		action="store_true",
		help="Fail on unreadable directories instead of skipping them.",
	)
	flatten.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="YAML or JSON file with default options.",
	)
	flatten.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	# None means "not given" so config file values survive
	flatten.set_defaults(rename=None, delete_empty=None, dry_run=None, strict=None, verbose=None)
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> FlattenConfig:
	"""
	Build runtime config from args and file.
	"""
	config = FlattenConfig()
	if args.config_path:
		config_path = Path(args.config_path).expanduser()
		apply_user_config(config, load_user_config(config_path))
	config.root = Path(args.path).expanduser()
	for name in ("rename", "delete_empty", "dry_run", "strict", "verbose"):
		value = getattr(args, name)
		if value is not None:
			setattr(config, name, value)
	return config


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def print_report(report: FlattenReport) -> None:
	"""
	Print moves, pruned directories and a summary line.
	"""
	move_tag = _color("[DRY RUN]", "33") if report.dry_run else _color("[MOVE]", "32")
	for result in report.moves:
		source = result.source.relative_to(report.root)
		suffix = " (renamed)" if result.renamed else ""
		print(f"{move_tag} {source} -> {result.destination.name}{suffix}")
	for directory in report.removed_dirs:
		print(f"{_color('[PRUNE]', '36')} {directory.relative_to(report.root)}")
	for skipped in report.skipped:
		print(f"{_color('[SKIP]', '33')} {skipped}")
	verb = "Would move" if report.dry_run else "Moved"
	print(
		f"{_color('[SUMMARY]', '34')} {verb} {report.moved_count} files "
		f"({report.renamed_count} renamed), removed {len(report.removed_dirs)} directories."
	)


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	try:
		config = build_config(args)
	except (OSError, ValueError, yaml.YAMLError) as error:
		print(f"{_color('[ERROR]', '31')} Invalid config: {error}", file=sys.stderr)
		return 2
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	try:
		report = run(config)
	except FlattenError as error:
		print(f"{_color('[ERROR]', '31')} {error}", file=sys.stderr)
		return 1
	print_report(report)
	return 0


#============================================


if __name__ == "__main__":
	sys.exit(main())
