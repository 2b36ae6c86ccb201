from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

YAML_SUFFIXES = frozenset({".yml", ".yaml"})


def read_yaml_mapping(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML document whose top-level node is a mapping.

    An empty document loads as an empty dict.

    Raises
    ------
    ValueError
        If the file is not `.yml`/`.yaml`, or its top-level node is not a mapping.
    yaml.YAMLError
        If the document cannot be parsed.
    """
    path_obj = Path(path)
    if path_obj.suffix.lower() not in YAML_SUFFIXES:
        raise ValueError(f"Expected a .yml or .yaml file, got '{path_obj.name}'")

    with path_obj.open(encoding="utf-8") as fh:
        document = yaml.safe_load(fh)

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"{path_obj.name}: top-level YAML node must be a mapping, got {type(document).__name__}")
    return document
