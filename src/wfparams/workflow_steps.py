"""Shared workflow step metadata for the CLI, orchestrator and tests.

This module centralizes canonical workflow step names, descriptions and
aliases so every entry point presents the same workflow contract.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

# Canonical workflow steps (must stay in orchestrator execution order).
WORKFLOW_STEP_ITEMS: List[Tuple[str, str]] = [
    ("discover_parameter_sets", "Discover parameter-set files and parse their names"),
    ("load_corpus", "Load parameter sets and assemble the long-form corpus"),
    ("normalize_corpus", "Normalize parameter names and class labels"),
    ("summarize_parameters", "Compute per-parameter summary statistics"),
    ("plot_parameters", "Render land-class and river-class boxplots"),
]

WORKFLOW_STEP_NAMES: List[str] = [name for name, _ in WORKFLOW_STEP_ITEMS]

# Steps whose output a step consumes
WORKFLOW_STEP_DEPENDENCIES: Dict[str, Tuple[str, ...]] = {
    "discover_parameter_sets": (),
    "load_corpus": ("discover_parameter_sets",),
    "normalize_corpus": ("load_corpus",),
    "summarize_parameters": ("normalize_corpus",),
    "plot_parameters": ("normalize_corpus",),
}

# Short aliases for workflow steps (alias -> canonical name)
WORKFLOW_STEP_ALIASES: Dict[str, str] = {
    "discover": "discover_parameter_sets",
    "catalog": "discover_parameter_sets",
    "load": "load_corpus",
    "normalize": "normalize_corpus",
    "summarize": "summarize_parameters",
    "summary": "summarize_parameters",
    "plot": "plot_parameters",
    "charts": "plot_parameters",
}

# Sub-command pipelines: every step up to and including the named one
SUMMARY_PIPELINE: List[str] = WORKFLOW_STEP_NAMES[:4]
PLOT_PIPELINE: List[str] = WORKFLOW_STEP_NAMES[:3] + ["plot_parameters"]


def resolve_workflow_step_name(name: str) -> str:
    """Resolve canonical workflow step name from a name or alias.

    Raises:
        ValueError: If step name/alias is unknown.
    """
    if name in WORKFLOW_STEP_NAMES:
        return name
    if name in WORKFLOW_STEP_ALIASES:
        return WORKFLOW_STEP_ALIASES[name]

    all_accepted = sorted(set(WORKFLOW_STEP_NAMES) | set(WORKFLOW_STEP_ALIASES.keys()))
    raise ValueError(
        "unknown step "
        f"'{name}'. Valid steps and aliases:\n  "
        + "\n  ".join(all_accepted)
    )
