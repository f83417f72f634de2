# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 wfparams contributors

"""
Parameter-set file discovery.

Each contributed parameter set is a CSV file whose name carries its metadata:

    {ClassType}_{Source}_{SetNumber}_{Basin}.csv

ClassType is ``Land`` or ``River``. Contributors who do not know the basin
use the literal token ``Basin``, which is kept as an ordinary group key.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from wfparams.core.constants import CLASS_TYPES, UNKNOWN_BASIN, CorpusColumns
from wfparams.core.exceptions import CatalogError
from wfparams.core.mixins import LoggingMixin

FILENAME_SUFFIX = '.csv'
FILENAME_TOKENS = 4


@dataclass(frozen=True)
class ParameterSetFile:
    """Metadata of one parameter-set file, derived purely from its name."""
    path: Path
    class_type: str
    source: str
    set_number: str
    basin: str

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def has_known_basin(self) -> bool:
        return self.basin != UNKNOWN_BASIN

    def metadata(self) -> dict:
        """Metadata keyed by corpus column name."""
        return {
            CorpusColumns.CLASS_TYPE: self.class_type,
            CorpusColumns.SOURCE: self.source,
            CorpusColumns.SET_NUMBER: self.set_number,
            CorpusColumns.BASIN: self.basin,
        }


def parse_parameter_set_filename(path: Union[str, Path]) -> ParameterSetFile:
    """
    Split a parameter-set file name into its four metadata tokens.

    Case is preserved; lower-casing happens during normalization.

    Raises:
        CatalogError: If the name does not follow the naming convention.

    Example:
        >>> parse_parameter_set_filename('Land_UofS_2_Bow.csv').source
        'UofS'
    """
    path = Path(path)
    name = path.name

    if not name.lower().endswith(FILENAME_SUFFIX):
        raise CatalogError(
            f"Parameter-set file '{name}' must have a '{FILENAME_SUFFIX}' suffix "
            f"(expected ClassType_Source_SetNumber_Basin{FILENAME_SUFFIX})"
        )

    stem = name[:-len(FILENAME_SUFFIX)]
    tokens = stem.split('_')
    if len(tokens) != FILENAME_TOKENS:
        raise CatalogError(
            f"Parameter-set file '{name}' has {len(tokens)} underscore-separated "
            f"tokens, expected {FILENAME_TOKENS} (ClassType_Source_SetNumber_Basin{FILENAME_SUFFIX})"
        )
    if any(not token.strip() for token in tokens):
        raise CatalogError(f"Parameter-set file '{name}' has an empty name token")

    class_type, source, set_number, basin = tokens
    if class_type.lower() not in CLASS_TYPES:
        raise CatalogError(
            f"Parameter-set file '{name}' has class type '{class_type}', "
            f"expected one of: Land, River"
        )

    return ParameterSetFile(
        path=path,
        class_type=class_type,
        source=source,
        set_number=set_number,
        basin=basin,
    )


class ParameterSetCatalog(LoggingMixin):
    """
    Enumerates the parameter-set files directly inside a directory.

    Sub-directories are not searched and hidden files are skipped. Every other
    file must follow the naming convention; the first file that does not
    aborts discovery.
    """

    def __init__(self, input_dir: Union[str, Path], pattern: str = '*',
                 logger: Optional[logging.Logger] = None):
        self.input_dir = Path(input_dir)
        self.pattern = pattern
        self.logger = logger

    def discover(self) -> List[ParameterSetFile]:
        """Return the parsed parameter-set files, sorted by file name.

        Raises:
            CatalogError: If the directory is missing, empty, or holds a
                file with a malformed name.
        """
        if not self.input_dir.is_dir():
            raise CatalogError(f"Parameter-set directory not found: {self.input_dir}")

        files = []
        for path in sorted(self.input_dir.glob(self.pattern)):
            if not path.is_file():
                continue
            if path.name.startswith('.'):
                self.logger.debug(f"Skipping hidden file {path.name}")
                continue
            parameter_set = parse_parameter_set_filename(path)
            if not parameter_set.has_known_basin:
                self.logger.debug(f"{path.name}: basin unknown, grouped under '{UNKNOWN_BASIN}'")
            files.append(parameter_set)

        if not files:
            raise CatalogError(
                f"No parameter-set files matching '{self.pattern}' found in {self.input_dir}"
            )

        self.logger.info(f"Discovered {len(files)} parameter-set files in {self.input_dir}")
        return files

    def summary(self) -> pd.DataFrame:
        """One row per discovered file with its name and metadata."""
        rows = [{'File': f.name, **f.metadata()} for f in self.discover()]
        return pd.DataFrame(rows, columns=['File', *CorpusColumns.KEY[1:]])
