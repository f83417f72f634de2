"""
Root conftest.py - fixtures shared across all tests.

Provides synthetic parameter-set directories built in ``tmp_path`` and the
common mock fixtures. Matplotlib is forced onto the non-interactive Agg
backend before any test imports pyplot.
"""

from pathlib import Path
from typing import Callable, Dict, List
from unittest.mock import MagicMock

import matplotlib
import pytest

matplotlib.use('Agg')


# ============================================================================
# Synthetic parameter sets
# ============================================================================

# File name -> CSV text. Covers mixed case, numbered and synonymous class
# labels, the default class, an unknown basin, an unclassified parameter and
# a blank cell.
SAMPLE_PARAMETER_SETS: Dict[str, str] = {
    'Land_UW_1_Bow.csv': (
        "Parameter,forest1,forest2,crops,default\n"
        "MF,0.10,0.12,0.20,0.15\n"
        "ak,1.0,2.0,3.0,9.0\n"
        "fpet,2.0,2.0,3.0,1.0\n"
        "re,0.5,0.6,0.4,0.5\n"
    ),
    'Land_UofS_2_Basin.csv': (
        "Parameter,Forest,grass,Water\n"
        "mf,0.14,0.22,0.0\n"
        "AK,1.5,2.5,0.5\n"
        "ftall,0.7,1.0,1.0\n"
        "nonsense,1,2,3\n"
    ),
    'River_UW_1_Bow.csv': (
        "Parameter,class1,class2\n"
        "lzf,1e-5,2e-5\n"
        "pwr,2.0,2.5\n"
        "r2n,0.05,0.06\n"
        "a5,0.98,0.98\n"
    ),
    'River_EC_3_Saugeen.csv': (
        "Parameter,class1,class2\n"
        "flz,3e-5,4e-5\n"
        "pwr,1.5,\n"
        "r2,0.07,0.08\n"
    ),
}


@pytest.fixture
def write_parameter_set() -> Callable[[Path, str, str], Path]:
    """Return a helper that writes one parameter-set file and returns its path."""
    def _write(directory: Path, name: str, text: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(text, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def parameter_set_dir(tmp_path, write_parameter_set) -> Path:
    """Directory holding the four sample parameter-set files."""
    directory = tmp_path / 'parameter_sets'
    for name, text in SAMPLE_PARAMETER_SETS.items():
        write_parameter_set(directory, name, text)
    return directory


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Empty directory for pipeline outputs."""
    return tmp_path / 'results'


@pytest.fixture
def sample_file_names() -> List[str]:
    """Sorted names of the sample parameter-set files."""
    return sorted(SAMPLE_PARAMETER_SETS)


# ============================================================================
# Common Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_logger():
    """Create a mock logger for unit tests."""
    return MagicMock()


@pytest.fixture
def normalized_corpus(parameter_set_dir, mock_logger):
    """The sample parameter sets, discovered, loaded and normalized."""
    from wfparams.data import (
        CorpusNormalizer,
        ParameterSetCatalog,
        ParameterSetLoader,
        assemble_corpus,
    )
    files = ParameterSetCatalog(parameter_set_dir, logger=mock_logger).discover()
    raw = assemble_corpus(ParameterSetLoader(mock_logger).iter_records(files))
    return CorpusNormalizer(logger=mock_logger).normalize(raw)


@pytest.fixture
def typed_config(parameter_set_dir, output_dir):
    """A WFParamsConfig pointing at the sample directory, file logging off."""
    from wfparams.core.config.models import WFParamsConfig
    return WFParamsConfig.from_minimal(parameter_set_dir, output_dir, LOG_TO_FILE=False)
