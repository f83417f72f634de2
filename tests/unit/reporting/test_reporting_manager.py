"""Unit tests for the ReportingManager facade."""

from unittest.mock import MagicMock

import pytest

from wfparams.core.config.models import WFParamsConfig
from wfparams.reporting import ReportingManager

pytestmark = [pytest.mark.unit]


@pytest.fixture
def disabled_config(parameter_set_dir, output_dir):
    return WFParamsConfig.from_minimal(parameter_set_dir, output_dir, PLOT_ENABLED=False, LOG_TO_FILE=False)


class TestReportingManagerInit:

    def test_rejects_dict_config(self, mock_logger):
        with pytest.raises(TypeError, match="WFParamsConfig"):
            ReportingManager({'INPUT_DIR': 'x'}, mock_logger)

    def test_visualize_follows_config(self, typed_config, disabled_config, mock_logger):
        assert ReportingManager(typed_config, mock_logger).visualize is True
        assert ReportingManager(disabled_config, mock_logger).visualize is False

    def test_visualize_argument_overrides_config(self, disabled_config, mock_logger):
        assert ReportingManager(disabled_config, mock_logger, visualize=True).visualize is True


class TestVisualizationDisabled:
    """Disabled plotting returns defaults without building plotters."""

    def test_family_returns_none(self, disabled_config, mock_logger, normalized_corpus):
        rm = ReportingManager(disabled_config, mock_logger)

        assert rm.visualize_parameter_family(normalized_corpus, 'landclass') is None
        assert 'boxplot_plotter' not in rm.__dict__

    def test_all_families_return_empty(self, disabled_config, mock_logger, normalized_corpus):
        rm = ReportingManager(disabled_config, mock_logger)
        results = rm.visualize_parameters(normalized_corpus)

        assert results == {}
        results['landclass'] = None
        assert rm.visualize_parameters(normalized_corpus) == {}


class TestVisualizationEnabled:

    def test_charts_default_to_charts_dir(self, typed_config, mock_logger, normalized_corpus, output_dir):
        rm = ReportingManager(typed_config, mock_logger)
        results = rm.visualize_parameters(normalized_corpus)

        assert set(results) == {'landclass', 'riverclass'}
        assert all(r.succeeded for r in results.values())
        charts = sorted(p.name for p in (output_dir / 'charts').glob('*.png'))
        assert len(charts) == 8
        assert 'Param_Land_fm.png' in charts
        assert 'Param_River_r2.png' in charts

    def test_delegates_to_plotter(self, typed_config, mock_logger, normalized_corpus, tmp_path):
        rm = ReportingManager(typed_config, mock_logger)
        plotter = MagicMock()
        rm.__dict__['boxplot_plotter'] = plotter

        rm.visualize_parameter_family(normalized_corpus, 'riverclass', tmp_path)

        plotter.plot_family.assert_called_once_with(normalized_corpus, 'riverclass', tmp_path)
