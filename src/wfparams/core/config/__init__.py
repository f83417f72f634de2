# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

from typing import Any, Dict, Union

from wfparams.core.config.models import WFParamsConfig


def ensure_typed_config(
    config: Union[Dict[str, Any], WFParamsConfig],
    use_env: bool = False,
) -> WFParamsConfig:
    """
    Ensure configuration is a WFParamsConfig instance.

    Dict configs (flat or nested) are converted with the same rules as a
    config file. With ``use_env``, WFPARAMS_* environment variables supply
    any value the dict leaves out.

    Example:
        >>> config = ensure_typed_config({'INPUT_DIR': 'sets', 'OUTPUT_DIR': 'out'})
        >>> isinstance(config, WFParamsConfig)
        True
    """
    if isinstance(config, WFParamsConfig):
        return config
    from wfparams.core.config.factories import from_mapping_factory
    return from_mapping_factory(WFParamsConfig, config, use_env=use_env)


__all__ = [
    "WFParamsConfig",
    "ensure_typed_config",
]
