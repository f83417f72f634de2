"""Unit tests for the parameter summary aggregator."""

import pandas as pd
import pytest

from wfparams.core.exceptions import AggregationError
from wfparams.evaluation import ParameterSummaryAggregator, describe_values, write_summary

pytestmark = [pytest.mark.unit]

SUMMARY_COLUMNS = ['Parameter', 'min', 'max', 'fifth', 'ninetyfifth', 'median']


def _corpus(values_by_parameter, group_column='ClassLabel', groups=None):
    rows = []
    for parameter, values in values_by_parameter.items():
        for i, value in enumerate(values):
            group = groups[i % len(groups)] if groups else 'forest'
            rows.append({'Parameter': parameter, group_column: group, 'Value': value})
    return pd.DataFrame(rows)


@pytest.fixture
def aggregator(mock_logger):
    return ParameterSummaryAggregator(logger=mock_logger)


class TestDescribeValues:
    """Test single-sample statistics."""

    def test_three_values(self):
        """Linear interpolation between order statistics."""
        stats = describe_values([1.0, 2.0, 3.0])

        assert stats == {
            'min': 1.0,
            'max': 3.0,
            'fifth': 1.1,
            'ninetyfifth': 2.9,
            'median': 2.0,
        }

    def test_single_value(self):
        stats = describe_values([0.5])
        assert set(stats.values()) == {0.5}

    def test_rounding(self):
        stats = describe_values([1 / 3, 2 / 3], decimals=4)

        assert stats['min'] == 0.3333
        assert stats['max'] == 0.6667
        assert stats['median'] == 0.5

    def test_non_numeric_ignored(self):
        stats = describe_values([1.0, 'x', None, 3.0])
        assert stats['min'] == 1.0
        assert stats['max'] == 3.0

    def test_empty_returns_none(self):
        assert describe_values([]) is None
        assert describe_values([float('nan')]) is None


class TestSummarize:
    """Test the summary table."""

    def test_columns_and_order(self, aggregator):
        """Fixed column order, one row per parameter, sorted by name."""
        corpus = _corpus({'rec': [0.5, 0.6], 'ak': [1.0, 2.0, 3.0], 'flz': [1e-5]})
        summary = aggregator.summarize(corpus)

        assert list(summary.columns) == SUMMARY_COLUMNS
        assert summary['Parameter'].tolist() == ['ak', 'flz', 'rec']

    def test_ak_example(self, aggregator):
        corpus = _corpus({'ak': [3.0, 1.0, 2.0]})
        row = aggregator.summarize(corpus).iloc[0]

        assert row['min'] == 1.0
        assert row['max'] == 3.0
        assert row['median'] == 2.0
        assert row['fifth'] == pytest.approx(1.1)
        assert row['ninetyfifth'] == pytest.approx(2.9)

    def test_fixed_value_parameters_excluded(self, aggregator):
        """fpet and ftall never appear in the summary."""
        corpus = _corpus({'fpet': [1.0, 2.0], 'ftall': [0.7], 'ak': [1.0]})
        summary = aggregator.summarize(corpus)

        assert summary['Parameter'].tolist() == ['ak']

    def test_custom_exclusions(self, mock_logger):
        aggregator = ParameterSummaryAggregator(excluded_parameters=['AK'], logger=mock_logger)
        corpus = _corpus({'fpet': [1.0], 'ak': [1.0]})

        assert aggregator.summarize(corpus)['Parameter'].tolist() == ['fpet']

    def test_statistics_are_ordered(self, aggregator):
        """min <= fifth <= median <= ninetyfifth <= max for every row."""
        corpus = _corpus({
            'ak': [0.1, 5.0, 2.2, 0.3, 9.9, 1.0],
            'pwr': [1.5, 2.0, 2.5, 3.0],
            'r2': [0.05],
        })
        summary = aggregator.summarize(corpus)

        for _, row in summary.iterrows():
            assert row['min'] <= row['fifth'] <= row['median'] <= row['ninetyfifth'] <= row['max']

    def test_pooled_across_groups(self, aggregator):
        """Values are pooled over classes and basins."""
        corpus = _corpus({'ak': [1.0, 2.0, 3.0, 4.0]}, groups=['forest', 'water'])
        row = aggregator.summarize(corpus).iloc[0]

        assert row['min'] == 1.0
        assert row['max'] == 4.0

    def test_empty_group_skipped_with_warning(self, aggregator, mock_logger):
        corpus = _corpus({'ak': [float('nan')], 'rec': [0.5]})
        summary = aggregator.summarize(corpus)

        assert summary['Parameter'].tolist() == ['rec']
        assert 'ak' in mock_logger.warning.call_args[0][0]

    def test_empty_corpus(self, aggregator):
        summary = aggregator.summarize(pd.DataFrame(columns=['Parameter', 'Value']))

        assert summary.empty
        assert list(summary.columns) == SUMMARY_COLUMNS

    def test_missing_column_raises(self, aggregator):
        with pytest.raises(AggregationError, match="Value"):
            aggregator.summarize(pd.DataFrame({'Parameter': ['ak']}))


class TestSummarizeByGroup:
    """Test the per-group tables."""

    def test_group_rows(self, aggregator):
        corpus = _corpus({'pwr': [1.0, 2.0, 3.0, 4.0]}, group_column='Basin', groups=['bow', 'saugeen'])
        table = aggregator.summarize_by_group(corpus, 'Basin')

        assert list(table.columns) == ['Parameter', 'Basin', 'count', 'min', 'max', 'fifth', 'ninetyfifth', 'median']
        assert table['Basin'].tolist() == ['bow', 'saugeen']
        assert table['count'].tolist() == [2, 2]
        bow = table.iloc[0]
        assert bow['min'] == 1.0
        assert bow['max'] == 3.0

    def test_fixed_value_parameters_kept(self, aggregator):
        """Group tables describe every plotted parameter, fpet included."""
        corpus = _corpus({'fpet': [1.0, 2.0]})
        table = aggregator.summarize_by_group(corpus, 'ClassLabel')

        assert table['Parameter'].tolist() == ['fpet']

    def test_missing_group_column_raises(self, aggregator):
        corpus = _corpus({'ak': [1.0]})
        with pytest.raises(AggregationError, match="Basin"):
            aggregator.summarize_by_group(corpus, 'Basin')


class TestWriteSummary:
    """Test CSV output."""

    def test_writes_csv_without_index(self, aggregator, tmp_path):
        summary = aggregator.summarize(_corpus({'ak': [1.0, 2.0, 3.0]}))
        path = write_summary(summary, tmp_path / 'nested' / 'ParameterSummary.csv')

        assert path.exists()
        reread = pd.read_csv(path)
        assert list(reread.columns) == SUMMARY_COLUMNS
        assert reread.iloc[0]['Parameter'] == 'ak'
        assert reread.iloc[0]['fifth'] == pytest.approx(1.1)
