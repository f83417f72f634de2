# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Factory functions for building WFParamsConfig instances.

Loading precedence (highest to lowest):
1. CLI overrides (programmatic)
2. Environment variables (WFPARAMS_*)
3. Config file (YAML)
4. Defaults from the nested Pydantic models
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml
from pydantic import ValidationError

from wfparams.core.config.transformers import get_flat_to_nested_map, transform_flat_to_nested
from wfparams.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from wfparams.core.config.models import WFParamsConfig

ENV_PREFIX = 'WFPARAMS_'
SECTION_KEYS = {'paths', 'analysis', 'plotting', 'system'}


def _to_nested(config: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Bring a flat, nested or mixed mapping into the nested layout."""
    nested: Dict[str, Dict[str, Any]] = {}
    flat: Dict[str, Any] = {}
    for key, value in config.items():
        key_lower = str(key).lower()
        if key_lower in SECTION_KEYS:
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ConfigurationError(
                    f"Configuration section '{key}' must be a mapping, got {type(value).__name__}"
                )
            nested[key_lower] = _field_names(key_lower, value)
        else:
            flat[key] = value
    if flat:
        nested = _deep_merge(nested, transform_flat_to_nested(flat))
    return nested


def _field_names(section: str, values: Dict[str, Any]) -> Dict[str, Any]:
    """Key a section mapping by field name, so aliases and names merge onto one key."""
    aliases = {
        alias: name
        for alias, (alias_section, name) in get_flat_to_nested_map().items()
        if alias_section == section
    }
    return {aliases.get(str(key).upper(), key): value for key, value in values.items()}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_overrides() -> Dict[str, Any]:
    """Collect ``WFPARAMS_<ALIAS>`` environment variables as flat overrides."""
    overrides = {}
    for alias in get_flat_to_nested_map():
        value = os.environ.get(f"{ENV_PREFIX}{alias}")
        if value is not None:
            overrides[alias] = value
    return overrides


def _anchor_relative_paths(nested: Dict[str, Any], base_dir: Path) -> Dict[str, Any]:
    """Resolve relative input/output directories against the config file's folder."""
    paths = nested.get('paths')
    if not paths:
        return nested
    anchored = dict(paths)
    for key in ('input_dir', 'output_dir'):
        value = anchored.get(key)
        if value is not None and not Path(str(value)).expanduser().is_absolute():
            anchored[key] = base_dir / str(value)
    return {**nested, 'paths': anchored}


def _format_validation_error(error: ValidationError) -> str:
    """Render a Pydantic ValidationError as one line per offending field."""
    lines = []
    for item in error.errors():
        location = '.'.join(str(part) for part in item.get('loc', ()))
        lines.append(f"  {location or '<root>'}: {item.get('msg')}")
    return "Invalid configuration:\n" + "\n".join(lines)


def from_mapping_factory(
    cls: type,
    config: Dict[str, Any],
    *,
    use_env: bool = False,
) -> 'WFParamsConfig':
    """
    Build a configuration from an in-memory flat or nested mapping.

    With ``use_env``, WFPARAMS_* environment variables fill in beneath the
    mapping, so values given in ``config`` win.

    Raises:
        ConfigurationError: If required values are missing or invalid
    """
    nested = _to_nested(config)
    if use_env:
        env_overrides = _load_env_overrides()
        if env_overrides:
            nested = _deep_merge(transform_flat_to_nested(env_overrides), nested)
    if 'paths' not in nested:
        raise ConfigurationError("Invalid configuration: INPUT_DIR and OUTPUT_DIR are required")
    try:
        return cls(**nested)
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e)) from e


def from_file_factory(
    cls: type,
    path: Path,
    overrides: Optional[Dict[str, Any]] = None,
    *,
    use_env: bool = True,
) -> 'WFParamsConfig':
    """
    Load configuration from a YAML file.

    Args:
        cls: WFParamsConfig class
        path: Path to configuration YAML file
        overrides: Dictionary of CLI/programmatic overrides (flat or nested)
        use_env: Whether to load environment variables (default: True)

    Returns:
        Validated WFParamsConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
        FileNotFoundError: If config file is missing
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            file_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse configuration file {path}: {e}") from e

    if not isinstance(file_config, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")

    nested = _anchor_relative_paths(_to_nested(file_config), path.parent.resolve())

    if use_env:
        env_overrides = _load_env_overrides()
        if env_overrides:
            nested = _deep_merge(nested, transform_flat_to_nested(env_overrides))

    if overrides:
        clean = {k: v for k, v in overrides.items() if v is not None}
        nested = _deep_merge(nested, _to_nested(clean))

    return from_mapping_factory(cls, nested)
