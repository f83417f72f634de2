# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""Configuration transformation utilities for wfparams.

This module handles conversion between flat and hierarchical configuration formats:
- Flat format: Uppercase keys like {'INPUT_DIR': 'sets', 'PLOT_DPI': 300}
- Nested format: Hierarchical structure like {'paths': {'input_dir': 'sets'}, 'plotting': {'dpi': 300}}

The flat keys are the field aliases declared on the section models, so the
mapping is generated from the models rather than maintained by hand.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

if TYPE_CHECKING:
    from wfparams.core.config.models import WFParamsConfig

logger = logging.getLogger(__name__)

_FLAT_TO_NESTED: Optional[Dict[str, Tuple[str, str]]] = None


def get_flat_to_nested_map() -> Dict[str, Tuple[str, str]]:
    """Map every flat alias to its ``(section, field)`` path.

    Generated lazily from the Pydantic models and cached.
    """
    global _FLAT_TO_NESTED
    if _FLAT_TO_NESTED is not None:
        return _FLAT_TO_NESTED

    from wfparams.core.config.models import WFParamsConfig

    mapping: Dict[str, Tuple[str, str]] = {}
    for section, section_field in WFParamsConfig.model_fields.items():
        section_model = section_field.annotation
        for name, field in section_model.model_fields.items():
            if field.alias:
                mapping[field.alias] = (section, name)
    _FLAT_TO_NESTED = mapping
    return mapping


def transform_flat_to_nested(flat_config: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Convert a flat alias-keyed dict into the nested section layout.

    Keys are matched case-insensitively; unknown keys are logged and ignored.

    Example:
        >>> transform_flat_to_nested({'INPUT_DIR': 'sets', 'plot_dpi': 300})
        {'paths': {'input_dir': 'sets'}, 'plotting': {'dpi': 300}}
    """
    mapping = get_flat_to_nested_map()
    nested: Dict[str, Dict[str, Any]] = {}
    for key, value in flat_config.items():
        path = mapping.get(str(key).upper())
        if path is None:
            logger.warning(f"Ignoring unknown configuration key '{key}'")
            continue
        section, name = path
        nested.setdefault(section, {})[name] = value
    return nested


def flatten_nested_config(config: 'WFParamsConfig') -> Dict[str, Any]:
    """Convert a WFParamsConfig into a flat dict keyed by alias.

    Paths become strings and tuples become lists so the result serialises
    cleanly to YAML or JSON.
    """
    flat: Dict[str, Any] = {}
    for alias, (section, name) in get_flat_to_nested_map().items():
        value = getattr(getattr(config, section), name)
        if isinstance(value, Path):
            value = str(value)
        elif isinstance(value, tuple):
            value = list(value)
        flat[alias] = value
    return flat
