#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from pathlib import Path
import json

# PIP3 modules
import yaml

#============================================

# config file keys mapped to FlattenConfig attributes
_CONFIG_KEYS = {
	"rename": "rename",
	"delete": "delete_empty",
	"delete_empty": "delete_empty",
	"dry_run": "dry_run",
	"strict": "strict",
	"verbose": "verbose",
}

#============================================


@dataclass(slots=True)
class FlattenConfig:
	"""
	Runtime configuration settings.

	Attributes:
		root: Directory to flatten.
		rename: Prefix moved files with their parent folder name.
		delete_empty: Prune directories left empty.
		dry_run: Only print planned work.
		strict: Fail on unreadable directories.
		verbose: Verbose logging.
	"""
	root: Path | None = None
	rename: bool = False
	delete_empty: bool = False
	dry_run: bool = False
	strict: bool = False
	verbose: bool = False

	#============================================
	def normalized_root(self) -> Path:
		"""
		Normalize root path.

		Returns:
			Expanded Path.
		"""
		if self.root is None:
			raise RuntimeError("root is not set.")
		return self.root.expanduser()


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	if config_path.suffix.lower() in {".yml", ".yaml"}:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = yaml.safe_load(handle)
			return loaded or {}
	with config_path.open("r", encoding="utf-8") as handle:
		return json.load(handle)


#============================================


def apply_user_config(config: FlattenConfig, data: dict) -> FlattenConfig:
	"""
	Copy recognised keys from a loaded config file onto config.

	Args:
		config: Config to update.
		data: Values from load_user_config.

	Returns:
		The updated config.
	"""
	if not isinstance(data, dict):
		raise ValueError("Config file must contain a mapping.")
	unknown = sorted(set(data) - set(_CONFIG_KEYS))
	if unknown:
		raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
	for key, value in data.items():
		if not isinstance(value, bool):
			raise ValueError(f"{key} must be true or false")
		setattr(config, _CONFIG_KEYS[key], value)
	return config
