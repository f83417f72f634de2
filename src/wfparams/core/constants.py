# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Normalization policy and fixed lookup tables for wfparams.

Centralizes the parameter rewrite chain, class-label synonyms and parameter
family membership so that the whole normalization policy can be audited in
one place. Everything here is immutable and evaluated once at import time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Tuple


class MatchMode(str, Enum):
    """How a rewrite rule locates its pattern inside a parameter name."""

    SUBSTRING = "substring"
    WORD = "word"


@dataclass(frozen=True)
class RewriteRule:
    """One step of the parameter-name rewrite chain.

    Attributes:
        pattern: Literal text to look for.
        replacement: Text substituted for every match.
        mode: ``SUBSTRING`` replaces every occurrence; ``WORD`` only replaces
            occurrences bounded by regex word boundaries.
    """
    pattern: str
    replacement: str
    mode: MatchMode = MatchMode.SUBSTRING


# Order matters: later rules see the output of earlier ones.
PARAMETER_REWRITE_RULES: Tuple[RewriteRule, ...] = (
    RewriteRule('mf', 'fm'),
    RewriteRule('nfm', 'fmn'),
    RewriteRule('lzf', 'flz'),
    RewriteRule('r2n', 'r2'),
    RewriteRule('r1n', 'r1'),
    RewriteRule('re', 'rec', MatchMode.WORD),
    RewriteRule('sublime', 'sublim_rate'),
    RewriteRule('albedo', 'alb'),
)

CLASS_LABEL_SYNONYMS: Dict[str, str] = {
    'grass': 'agricultural',
    'crops': 'agricultural',
}

DEFAULT_CLASS_LABEL = 'default'
"""Class column carrying template values rather than contributed values."""

CLASS_LABEL_STRIP_PATTERN = r'[0-9_.]'
"""Characters removed from class labels (``forest1`` and ``forest.1`` -> ``forest``)."""


class ParameterFamily:
    """
    Parameter family membership for WATFLOOD parameter sets.

    Land-class parameters are specified per land cover, river-class
    parameters per channel class (compared across basins), and global
    parameters once per set.
    """

    LANDCLASS = 'landclass'
    RIVERCLASS = 'riverclass'
    GLOBAL = 'global'

    LANDCLASS_PARAMETERS: FrozenSet[str] = frozenset({
        'ds', 'dsfs', 'rec', 'ak', 'akfs', 'retn', 'ak2', 'ak2fs', 'r3',
        'r3fs', 'r4', 'fpet', 'ftall', 'flint', 'fcap', 'ffcap', 'spore',
        'fratio', 'fm', 'base', 'fmn', 'tipm', 'rho', 'whcl', 'alb',
        'sublim_rate',
    })

    RIVERCLASS_PARAMETERS: FrozenSet[str] = frozenset({
        'flz', 'pwr', 'r2', 'r1', 'theta', 'kcond', 'mndr',
    })

    GLOBAL_PARAMETERS: FrozenSet[str] = frozenset({'a5'})

    MEMBERSHIP: Dict[str, FrozenSet[str]] = {
        LANDCLASS: LANDCLASS_PARAMETERS,
        RIVERCLASS: RIVERCLASS_PARAMETERS,
        GLOBAL: GLOBAL_PARAMETERS,
    }

    # Families that get boxplots, with the column each boxplot is grouped by
    # and the tag used in the chart file name.
    PLOTTED: Dict[str, Tuple[str, str]] = {
        LANDCLASS: ('ClassLabel', 'Land'),
        RIVERCLASS: ('Basin', 'River'),
    }

    @classmethod
    def all_families(cls) -> Tuple[str, ...]:
        return tuple(cls.MEMBERSHIP)


CLASS_TYPES: FrozenSet[str] = frozenset({'land', 'river'})
"""Accepted values of the first file-name token (compared case-insensitively)."""

UNKNOWN_BASIN = 'Basin'
"""File-name token used by contributors who do not know the basin."""

FIXED_VALUE_PARAMETERS: Tuple[str, ...] = ('fpet', 'ftall')
"""Parameters reported from textbook values rather than empirical limits."""


class CorpusColumns:
    """Column names of the long-form observation corpus."""

    PARAMETER = 'Parameter'
    CLASS_TYPE = 'ClassType'
    SOURCE = 'Source'
    SET_NUMBER = 'SetNumber'
    BASIN = 'Basin'
    CLASS_LABEL = 'ClassLabel'
    VALUE = 'Value'
    FAMILY = 'Family'

    KEY: Tuple[str, ...] = (PARAMETER, CLASS_TYPE, SOURCE, SET_NUMBER, BASIN)
    TEXT: Tuple[str, ...] = KEY + (CLASS_LABEL,)
    ALL: Tuple[str, ...] = KEY + (CLASS_LABEL, VALUE)


SUMMARY_COLUMNS: Tuple[str, ...] = ('Parameter', 'min', 'max', 'fifth', 'ninetyfifth', 'median')

PARAMETER_DESCRIPTIONS: Dict[str, str] = {
    'flz': 'Lower zone function coefficient',
    'pwr': 'Power on lower zone function',
    'r2': "Channel Manning's n",
    'r1': 'Floodplain roughness multiplier',
    'theta': 'Soil moisture content parameter',
    'mndr': 'Channel meander factor',
    'ak': 'Infiltration coefficient, bare ground',
    'akfs': 'Infiltration coefficient, snow covered',
    'rec': 'Interflow coefficient',
    'retn': 'Retention constant',
    'ak2': 'Lower zone depletion coefficient',
    'ak2fs': 'Lower zone depletion coefficient, snow covered',
    'r3': 'Overbank roughness multiplier',
    'ds': 'Depression storage, bare ground (mm)',
    'dsfs': 'Depression storage, snow covered (mm)',
    'fpet': 'PET adjustment factor',
    'ftall': 'Forest canopy adjustment',
    'fm': 'Melt factor (mm/°C/h)',
    'fmn': 'Negative melt factor',
    'base': 'Base temperature for melt (°C)',
    'rho': 'Snow density',
    'whcl': 'Snowpack liquid water holding capacity',
    'alb': 'Snow albedo',
    'sublim_rate': 'Sublimation rate',
}
