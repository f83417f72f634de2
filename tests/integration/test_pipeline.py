"""
End-to-end tests of the WFParams pipeline on the sample parameter sets.

Runs discovery, loading, normalization, summary and chart rendering through
the public API and checks the files a user would look at.
"""

import json
import logging

import pandas as pd
import pytest

from wfparams import WFParams
from wfparams.core.config.models import WFParamsConfig
from wfparams.core.exceptions import CatalogError

pytestmark = [pytest.mark.integration]


@pytest.fixture(autouse=True)
def release_log_handlers():
    yield
    logger = logging.getLogger('wfparams')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def system(parameter_set_dir, output_dir):
    return WFParams(config_overrides={'INPUT_DIR': str(parameter_set_dir), 'OUTPUT_DIR': str(output_dir)})


class TestFullPipeline:
    """The complete workflow on the four sample files."""

    def test_summary_table(self, system, output_dir):
        state = system.run_workflow()
        summary = pd.read_csv(output_dir / 'ParameterSummary.csv')

        assert state.summary_path == output_dir / 'ParameterSummary.csv'
        assert list(summary.columns) == ['Parameter', 'min', 'max', 'fifth', 'ninetyfifth', 'median']
        assert set(summary['Parameter']) == {'fm', 'ak', 'rec', 'flz', 'pwr', 'r2', 'a5'}
        assert not set(summary['Parameter']) & {'fpet', 'ftall', 'nonsense', 'mf', 'MF', 're', 'lzf', 'r2n'}

    def test_summary_values(self, system, output_dir):
        """Synonymous names pool into one row; default-class values are gone."""
        system.run_workflow()
        summary = pd.read_csv(output_dir / 'ParameterSummary.csv').set_index('Parameter')

        # ak from both land files, without the 9.0 in the default column
        assert summary.loc['ak', 'min'] == 0.5
        assert summary.loc['ak', 'max'] == 3.0
        assert summary.loc['ak', 'median'] == 1.75
        # MF and mf both end up as fm
        assert summary.loc['fm', 'min'] == 0.0
        assert summary.loc['fm', 'max'] == 0.22
        # the blank pwr cell is not counted
        assert summary.loc['pwr', 'min'] == 1.5
        assert summary.loc['pwr', 'median'] == 2.0

    def test_charts(self, system, output_dir):
        system.run_workflow()
        charts = sorted(p.name for p in (output_dir / 'charts').glob('*.png'))

        assert charts == [
            'Param_Land_ak.png',
            'Param_Land_fm.png',
            'Param_Land_fpet.png',
            'Param_Land_ftall.png',
            'Param_Land_rec.png',
            'Param_River_flz.png',
            'Param_River_pwr.png',
            'Param_River_r2.png',
        ]

    def test_run_summary(self, system, output_dir):
        system.run_workflow()
        summaries = list((output_dir / '_logs').glob('run_summary_*.json'))

        assert len(summaries) == 1
        run_summary = json.loads(summaries[0].read_text(encoding='utf-8'))
        assert run_summary['status'] == 'completed'
        assert len(run_summary['steps_completed']) == 5
        assert any('nonsense' in w['warning'] for w in run_summary['warnings'])

    def test_status(self, system):
        system.run_workflow()
        status = system.get_workflow_status()

        assert status['completed_steps'] == status['total_steps'] == 5

    def test_blank_parameter_named_in_run_summary(self, parameter_set_dir, output_dir, write_parameter_set):
        """A parameter with only blank cells is left out and named in the warnings."""
        write_parameter_set(parameter_set_dir, 'River_UW_2_Bow.csv', "Parameter,class1,class2\nr1n,,\npwr,2.2,2.4\n")
        system = WFParams(config_overrides={'INPUT_DIR': str(parameter_set_dir), 'OUTPUT_DIR': str(output_dir),
                                            'PLOT_ENABLED': False})

        state = system.run_workflow()

        assert state.normalization_report.empty_parameters == ['r1']
        assert 'r1' not in pd.read_csv(output_dir / 'ParameterSummary.csv')['Parameter'].tolist()
        run_summary = json.loads(next((output_dir / '_logs').glob('run_summary_*.json')).read_text(encoding='utf-8'))
        assert any('without numeric values' in w['warning'] and 'r1' in w['warning']
                   for w in run_summary['warnings'])


class TestConfigurationEntryPoints:

    def test_from_config_file(self, parameter_set_dir, output_dir, tmp_path):
        config = tmp_path / 'wfparams.yaml'
        config.write_text(
            f"INPUT_DIR: {parameter_set_dir}\nOUTPUT_DIR: {output_dir}\nPLOT_ENABLED: false\n",
            encoding='utf-8',
        )
        state = WFParams(config).run_workflow()

        assert state.summary_path.exists()
        assert state.chart_results == {}

    def test_typed_config_with_overrides(self, typed_config, output_dir):
        """Overrides are applied on top of a typed configuration."""
        system = WFParams(typed_config, config_overrides={'PLOT_ENABLED': False, 'SUMMARY_FILE': 'limits.csv'})
        system.run_workflow()

        assert (output_dir / 'limits.csv').exists()
        assert not (output_dir / 'charts').exists()

    def test_environment_paths(self, parameter_set_dir, output_dir, monkeypatch):
        """With no config file, WFPARAMS_* variables fill in beneath the overrides."""
        monkeypatch.setenv('WFPARAMS_INPUT_DIR', str(parameter_set_dir))
        monkeypatch.setenv('WFPARAMS_OUTPUT_DIR', str(output_dir))

        state = WFParams(config_overrides={'PLOT_ENABLED': False}).run_workflow()

        assert state.summary_path == output_dir.resolve() / 'ParameterSummary.csv'
        assert state.summary_path.exists()

    def test_partial_run(self, parameter_set_dir, output_dir):
        """With STOP_ON_ERROR off, a failed discovery is recorded, not raised."""
        (parameter_set_dir / 'Lake_UW_1_Bow.csv').write_text('x', encoding='utf-8')
        config = WFParamsConfig.from_minimal(parameter_set_dir, output_dir, STOP_ON_ERROR=False)

        state = WFParams(config).run_workflow()

        assert 'discover_parameter_sets' in state.failed_steps
        assert len(state.skipped_steps) == 4
        summary = json.loads(next((output_dir / '_logs').glob('run_summary_*.json')).read_text(encoding='utf-8'))
        assert summary['status'] == 'failed'

    def test_stop_on_error_raises(self, parameter_set_dir, output_dir):
        (parameter_set_dir / 'Lake_UW_1_Bow.csv').write_text('x', encoding='utf-8')

        with pytest.raises(CatalogError, match="class type"):
            WFParams(config_overrides={'INPUT_DIR': str(parameter_set_dir),
                                       'OUTPUT_DIR': str(output_dir)}).run_workflow()
        assert list((output_dir / '_logs').glob('run_summary_*.json'))
