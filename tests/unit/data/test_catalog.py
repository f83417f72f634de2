"""Unit tests for parameter-set file discovery."""

from pathlib import Path

import pytest

from wfparams.core.exceptions import CatalogError
from wfparams.data.catalog import (
    ParameterSetCatalog,
    ParameterSetFile,
    parse_parameter_set_filename,
)

pytestmark = [pytest.mark.unit]


class TestParseFilename:
    """Test file-name parsing."""

    def test_parses_four_tokens(self):
        """Each underscore-separated token maps to one metadata field."""
        parsed = parse_parameter_set_filename('Land_UofS_2_Bow.csv')

        assert parsed.class_type == 'Land'
        assert parsed.source == 'UofS'
        assert parsed.set_number == '2'
        assert parsed.basin == 'Bow'
        assert parsed.has_known_basin

    def test_round_trip(self):
        """Re-joining the tokens reproduces the file name."""
        name = 'River_EC_13_Saugeen.csv'
        parsed = parse_parameter_set_filename(Path('/data') / name)

        rebuilt = '_'.join([parsed.class_type, parsed.source, parsed.set_number, parsed.basin]) + '.csv'
        assert rebuilt == name
        assert parsed.name == name

    def test_unknown_basin_is_kept(self):
        """The literal 'Basin' token is a valid, if uninformative, basin."""
        parsed = parse_parameter_set_filename('Land_UW_1_Basin.csv')

        assert parsed.basin == 'Basin'
        assert not parsed.has_known_basin

    def test_case_preserved(self):
        """Tokens are not lower-cased at parse time."""
        parsed = parse_parameter_set_filename('LAND_Uw_1_BOW.csv')
        assert parsed.class_type == 'LAND'
        assert parsed.basin == 'BOW'

    @pytest.mark.parametrize("name", [
        'Land_UW_1.csv',
        'Land_UW_1_Bow_extra.csv',
        'LandUW1Bow.csv',
    ])
    def test_wrong_token_count_raises(self, name):
        """Anything but four tokens is rejected."""
        with pytest.raises(CatalogError, match="tokens"):
            parse_parameter_set_filename(name)

    def test_empty_token_raises(self):
        with pytest.raises(CatalogError, match="empty"):
            parse_parameter_set_filename('Land__1_Bow.csv')

    def test_unknown_class_type_raises(self):
        with pytest.raises(CatalogError, match="class type"):
            parse_parameter_set_filename('Lake_UW_1_Bow.csv')

    def test_missing_suffix_raises(self):
        with pytest.raises(CatalogError, match="suffix"):
            parse_parameter_set_filename('Land_UW_1_Bow.txt')

    def test_metadata_keys(self):
        """Metadata is keyed by corpus column name."""
        parsed = parse_parameter_set_filename('River_UW_1_Bow.csv')
        assert parsed.metadata() == {
            'ClassType': 'River',
            'Source': 'UW',
            'SetNumber': '1',
            'Basin': 'Bow',
        }


class TestParameterSetCatalog:
    """Test directory discovery."""

    def test_discovers_sorted_files(self, parameter_set_dir, sample_file_names, mock_logger):
        """All files are returned, sorted by name."""
        files = ParameterSetCatalog(parameter_set_dir, logger=mock_logger).discover()

        assert [f.name for f in files] == sample_file_names
        assert all(isinstance(f, ParameterSetFile) for f in files)
        mock_logger.info.assert_called()

    def test_skips_hidden_files_and_directories(self, parameter_set_dir, mock_logger):
        """Hidden files and sub-directories are ignored."""
        (parameter_set_dir / '.DS_Store').write_text('junk')
        (parameter_set_dir / 'archive').mkdir()

        files = ParameterSetCatalog(parameter_set_dir, logger=mock_logger).discover()
        assert len(files) == 4

    def test_malformed_name_aborts(self, parameter_set_dir, mock_logger):
        """A single malformed file name stops discovery."""
        (parameter_set_dir / 'notes.csv').write_text('x')

        with pytest.raises(CatalogError):
            ParameterSetCatalog(parameter_set_dir, logger=mock_logger).discover()

    def test_pattern_filters_files(self, parameter_set_dir, mock_logger):
        files = ParameterSetCatalog(parameter_set_dir, pattern='River_*', logger=mock_logger).discover()
        assert {f.class_type for f in files} == {'River'}
        assert len(files) == 2

    def test_missing_directory_raises(self, tmp_path, mock_logger):
        with pytest.raises(CatalogError, match="not found"):
            ParameterSetCatalog(tmp_path / 'missing', logger=mock_logger).discover()

    def test_empty_directory_raises(self, tmp_path, mock_logger):
        with pytest.raises(CatalogError, match="No parameter-set files"):
            ParameterSetCatalog(tmp_path, logger=mock_logger).discover()

    def test_summary_table(self, parameter_set_dir, mock_logger):
        """The summary has one row per file with its metadata."""
        summary = ParameterSetCatalog(parameter_set_dir, logger=mock_logger).summary()

        assert list(summary.columns) == ['File', 'ClassType', 'Source', 'SetNumber', 'Basin']
        assert len(summary) == 4
        row = summary.set_index('File').loc['River_EC_3_Saugeen.csv']
        assert row['Basin'] == 'Saugeen'
        assert row['SetNumber'] == '3'
