"""Utility functions for loading dictionaries from files."""

import json
from pathlib import Path
from typing import Union

import toml
import yaml

from .utils import merge_dicts


def _load_yaml(path: Path) -> dict:
    with path.open(encoding="utf-8") as yaml_file:
        return yaml.safe_load(yaml_file) or {}


def _load_json(path: Path) -> dict:
    with path.open(encoding="utf-8") as json_file:
        return json.load(json_file)


def _load_toml(path: Path) -> dict:
    with path.open(encoding="utf-8") as toml_file:
        return toml.load(toml_file)


def load_dict(path: Path) -> dict:
    """Load a dictionary from a yaml, json or toml file."""
    path = Path(path)
    if not path.is_file():
        msg = f"Specified dict file {path} not found."
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix == ".toml":
        return _load_toml(path)
    if suffix == ".json":
        return _load_json(path)
    if suffix in (".yaml", ".yml"):
        return _load_yaml(path)
    msg = f"Filetype {path.suffix} not implemented."
    raise NotImplementedError(msg)


def load_merge_dict(path: Union[Path, list[Path]]) -> dict:
    """Load and merge multiple dictionaries from files."""
    if not isinstance(path, list):
        path = [path]
    data = load_dict(path[0])
    for path_item in path[1:]:
        merge_dicts(data, load_dict(path_item))
    return data
