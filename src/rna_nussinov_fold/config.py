from __future__ import annotations
import logging
from importlib.resources import files as importlib_files
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from rna_nussinov_fold.errors import ConfigError
from rna_nussinov_fold.folding.nussinov.nussinov_recurrences import NussinovFoldingConfig
from rna_nussinov_fold.utils.yaml_io import read_yaml_mapping

logger = logging.getLogger(__name__)

_FIELD_TYPES: Dict[str, type] = {
    "allow_wobble": bool,
    "min_hairpin_unpaired": int,
    "verbose": bool,
}


def default_config_path() -> Path:
    """Path of the bundled default configuration file."""
    return Path(str(importlib_files("rna_nussinov_fold") / "data" / "nussinov_default.yaml"))


def parse_folding_config(raw: Dict[str, Any]) -> NussinovFoldingConfig:
    """
    Builds a `NussinovFoldingConfig` from a parsed YAML mapping.

    Settings may sit at the top level or under a `folding:` section.

    Raises
    ------
    ConfigError
        On unknown keys, wrong value types or a negative loop size.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(raw).__name__}")

    section = raw.get("folding", raw)
    if not isinstance(section, dict):
        raise ConfigError("'folding' section must be a mapping")

    unknown = sorted(set(section) - set(_FIELD_TYPES))
    if unknown:
        raise ConfigError(f"Unknown folding setting(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in section.items():
        expected = _FIELD_TYPES[key]
        # bool is a subclass of int; reject it where an int is expected.
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(f"Setting '{key}' must be of type {expected.__name__}, got {value!r}")
        values[key] = value

    if values.get("min_hairpin_unpaired", 0) < 0:
        raise ConfigError("Setting 'min_hairpin_unpaired' must be >= 0")

    return NussinovFoldingConfig(**values)


def load_folding_config(path: str | Path | None = None) -> NussinovFoldingConfig:
    """
    Loads folding settings from a YAML file, or the bundled defaults when `path` is None.

    Parameters
    ----------
    path : str | Path | None
        A `.yml` / `.yaml` file.

    Returns
    -------
    NussinovFoldingConfig
        The parsed configuration.

    Raises
    ------
    ConfigError
        If the file cannot be read or holds invalid settings.
    """
    config_path = Path(path) if path is not None else default_config_path()
    logger.info(f"Loading folding configuration from: {config_path}")

    try:
        raw = read_yaml_mapping(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read configuration {config_path}: {e}") from e

    return parse_folding_config(raw)


def apply_overrides(config: NussinovFoldingConfig, **overrides: Optional[Any]) -> NussinovFoldingConfig:
    """Returns a copy of `config` with every non-None override applied."""
    values = {
        "allow_wobble": config.allow_wobble,
        "min_hairpin_unpaired": config.min_hairpin_unpaired,
        "verbose": config.verbose,
    }
    for key, value in overrides.items():
        if key not in values:
            raise ConfigError(f"Unknown folding setting: {key}")
        if value is not None:
            values[key] = value
    return NussinovFoldingConfig(**values)
