"""
Workflow orchestration for the parameter-analysis pipeline.

Coordinates the execution sequence: file discovery, corpus loading,
normalization, summary statistics and chart rendering. Intermediate results
flow between steps through a :class:`PipelineState`.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple, Union

import pandas as pd

from wfparams.core.config import ensure_typed_config
from wfparams.core.constants import ParameterFamily
from wfparams.core.exceptions import WFParamsError, require, require_not_none
from wfparams.core.mixins import ConfigMixin, LoggingMixin, ensure_dir
from wfparams.data import (
    CorpusNormalizer,
    NormalizationReport,
    ParameterSetCatalog,
    ParameterSetFile,
    ParameterSetLoader,
    assemble_corpus,
    partition,
)
from wfparams.evaluation import ParameterSummaryAggregator, write_summary
from wfparams.workflow_steps import (
    WORKFLOW_STEP_DEPENDENCIES,
    WORKFLOW_STEP_ITEMS,
    WORKFLOW_STEP_NAMES,
    resolve_workflow_step_name,
)

if TYPE_CHECKING:
    from wfparams.core.config.models import WFParamsConfig
    from wfparams.reporting import ReportingManager
    from wfparams.reporting.plotters import FamilyPlotResult

CORPUS_FILE = 'ParameterCorpus.csv'

# Errors a step is expected to raise; anything else is logged with a traceback
EXPECTED_STEP_ERRORS = (WFParamsError, FileNotFoundError, PermissionError, ValueError)


@dataclass
class PipelineState:
    """Results produced by the workflow steps of one run."""
    files: Optional[List[ParameterSetFile]] = None
    raw_corpus: Optional[pd.DataFrame] = None
    corpus: Optional[pd.DataFrame] = None
    normalization_report: Optional[NormalizationReport] = None
    summary: Optional[pd.DataFrame] = None
    summary_path: Optional[Path] = None
    group_summary_paths: Dict[str, Path] = field(default_factory=dict)
    chart_results: Dict[str, 'FamilyPlotResult'] = field(default_factory=dict)
    completed_steps: List[str] = field(default_factory=list)
    failed_steps: Dict[str, str] = field(default_factory=dict)
    skipped_steps: List[str] = field(default_factory=list)

    @property
    def chart_failures(self) -> Dict[str, str]:
        """Per-parameter chart failures across all families."""
        failures: Dict[str, str] = {}
        for result in self.chart_results.values():
            if result is not None and not result.succeeded:
                failures.update(result.failures)
        return failures


@dataclass
class WorkflowStep:
    """
    Represents a single step in the wfparams workflow.
    """
    name: str
    func: Callable[[], None]
    description: str
    requires: Tuple[str, ...] = ()


class WorkflowOrchestrator(ConfigMixin, LoggingMixin):
    """
    Orchestrates the pipeline steps and manages the step sequence.

    Steps always run in canonical order. When ``STOP_ON_ERROR`` is false a
    failed step does not abort the run; the steps that consume its output
    are skipped with a warning and the others still run.

    Attributes:
        state: Results of the steps executed so far
        logging_manager: Reference to logging manager for step banners
    """

    def __init__(
        self,
        config: Union['WFParamsConfig', Dict[str, Any]],
        logger: Optional[logging.Logger] = None,
        logging_manager=None,
        reporting_manager: Optional['ReportingManager'] = None,
    ):
        self._config = ensure_typed_config(config)
        self.logger = logger
        self.logging_manager = logging_manager
        self._reporting_manager = reporting_manager
        self.state = PipelineState()

    # =========================================================================
    # Components
    # =========================================================================

    @cached_property
    def catalog(self) -> ParameterSetCatalog:
        return ParameterSetCatalog(self.input_dir, self.config.paths.file_pattern, self.logger)

    @cached_property
    def loader(self) -> ParameterSetLoader:
        return ParameterSetLoader(self.logger)

    @cached_property
    def normalizer(self) -> CorpusNormalizer:
        return CorpusNormalizer(self.logger)

    @cached_property
    def aggregator(self) -> ParameterSummaryAggregator:
        return ParameterSummaryAggregator(
            decimals=self.config.analysis.decimals,
            excluded_parameters=self.config.analysis.excluded_parameters,
            logger=self.logger,
        )

    @property
    def reporting_manager(self) -> 'ReportingManager':
        if self._reporting_manager is None:
            from wfparams.reporting import ReportingManager
            self._reporting_manager = ReportingManager(self.config, self.logger)
        return self._reporting_manager

    # =========================================================================
    # Steps
    # =========================================================================

    def discover_parameter_sets(self) -> None:
        self.state.files = self.catalog.discover()

    def load_corpus(self) -> None:
        require(self.state.files is not None, "No parameter sets discovered; run discover_parameter_sets first")
        self.state.raw_corpus = assemble_corpus(self.loader.iter_records(self.state.files))
        self.logger.info(
            f"Assembled corpus of {len(self.state.raw_corpus)} records from {len(self.state.files)} files"
        )

    def normalize_corpus(self) -> None:
        require(self.state.raw_corpus is not None, "No corpus loaded; run load_corpus first")
        self.state.corpus = self.normalizer.normalize(self.state.raw_corpus)
        self.state.normalization_report = self.normalizer.report

        if self.config.analysis.write_corpus:
            path = write_summary(self.state.corpus, self.output_dir / CORPUS_FILE)
            self.logger.info(f"Normalized corpus written to: {path}")

    def summarize_parameters(self) -> None:
        corpus = require_not_none(self.state.corpus, "Normalized corpus from normalize_corpus")

        self.state.summary = self.aggregator.summarize(corpus)
        ensure_dir(self.output_dir)
        self.state.summary_path = write_summary(
            self.state.summary, self.output_dir / self.config.paths.summary_file
        )
        self.logger.info(f"Parameter summary written to: {self.state.summary_path}")

        if self.config.analysis.write_group_summaries:
            stem = Path(self.config.paths.summary_file).stem
            for family, (group_column, tag) in ParameterFamily.PLOTTED.items():
                table = self.aggregator.summarize_by_group(partition(corpus, family), group_column)
                path = write_summary(table, self.output_dir / f"{stem}_{tag}.csv")
                self.state.group_summary_paths[family] = path
                self.logger.info(f"{tag} group summary written to: {path}")

    def plot_parameters(self) -> None:
        corpus = require_not_none(self.state.corpus, "Normalized corpus from normalize_corpus")
        if not self.reporting_manager.visualize:
            self.logger.info("Plotting disabled (PLOT_ENABLED=False)")
            return

        self.state.chart_results = self.reporting_manager.visualize_parameters(corpus)
        failures = self.state.chart_failures
        if failures:
            self.logger.warning(
                f"{len(failures)} parameters could not be charted: {', '.join(sorted(failures))}"
            )

    # =========================================================================
    # Execution
    # =========================================================================

    def define_workflow_steps(self) -> List[WorkflowStep]:
        """The pipeline steps in execution order."""
        return [
            WorkflowStep(
                name=name,
                func=getattr(self, name),
                description=description,
                requires=WORKFLOW_STEP_DEPENDENCIES[name],
            )
            for name, description in WORKFLOW_STEP_ITEMS
        ]

    def _blocked_by(self, step: WorkflowStep) -> List[str]:
        unavailable = set(self.state.failed_steps) | set(self.state.skipped_steps)
        return [name for name in step.requires if name in unavailable]

    def _execute(self, step: WorkflowStep, index: int, total: int) -> None:
        if self.logging_manager:
            self.logging_manager.log_step_header(index, total, step.name, step.description)
        else:
            self.logger.info(f"Step {index}/{total}: {step.name}")

        step_start_time = datetime.now()
        try:
            step.func()
        except EXPECTED_STEP_ERRORS as e:
            self._record_failure(step, e)
            raise
        except Exception as e:
            self.logger.exception(f"Unexpected failure in workflow step '{step.name}'")
            self._record_failure(step, e)
            raise

        duration = (datetime.now() - step_start_time).total_seconds()
        self.state.completed_steps.append(step.name)
        if self.logging_manager:
            self.logging_manager.log_completion(True, step.description, duration)
        else:
            self.logger.info(f"✓ Completed: {step.name} (Duration: {duration:.2f}s)")

    def _record_failure(self, step: WorkflowStep, error: Exception) -> None:
        self.state.failed_steps[step.name] = str(error)
        if self.logging_manager:
            self.logging_manager.log_completion(False, f"{step.description}: {error}")
        else:
            self.logger.error(f"✗ Failed: {step.name}: {error}")

    def run_workflow(self, steps: Optional[List[str]] = None) -> PipelineState:
        """
        Run the pipeline, or the named subset of its steps, in canonical order.

        Args:
            steps: Step names or aliases to run; all steps when None

        Returns:
            The pipeline state after the run

        Raises:
            ValueError: If a step name is unknown.
            WFParamsError: If a step fails and ``STOP_ON_ERROR`` is true.
        """
        selected = set(WORKFLOW_STEP_NAMES if steps is None else
                       [resolve_workflow_step_name(s) for s in steps])
        workflow_steps = [s for s in self.define_workflow_steps() if s.name in selected]
        stop_on_error = self.config.system.stop_on_error

        start_time = datetime.now()
        self.logger.info("=" * 60)
        self.logger.info("WFPARAMS WORKFLOW EXECUTION")
        self.logger.info(f"Input: {self.input_dir}")
        self.logger.info(f"Output: {self.output_dir}")
        self.logger.info("=" * 60)

        total = len(workflow_steps)
        for idx, step in enumerate(workflow_steps, 1):
            blocked_by = self._blocked_by(step)
            if blocked_by:
                self.logger.warning(f"→ Skipping: {step.name} (requires {', '.join(blocked_by)})")
                self.state.skipped_steps.append(step.name)
                continue

            try:
                self._execute(step, idx, total)
            except Exception:
                if stop_on_error:
                    self.logger.error("Workflow stopped due to error (STOP_ON_ERROR=True)")
                    raise
                self.logger.warning("Continuing despite error (STOP_ON_ERROR=False)")

        self._log_summary(datetime.now() - start_time, total)
        return self.state

    def _log_summary(self, duration, total: int) -> None:
        self.logger.info("=" * 60)
        self.logger.info("WORKFLOW SUMMARY")
        self.logger.info("=" * 60)
        self.logger.info(f"Total execution time: {duration}")
        self.logger.info(f"Steps completed: {len(self.state.completed_steps)}/{total}")
        if self.state.skipped_steps:
            self.logger.warning(f"Steps skipped: {', '.join(self.state.skipped_steps)}")
        if self.state.failed_steps:
            self.logger.warning(f"Steps failed: {', '.join(self.state.failed_steps)}")
            self.logger.warning("Workflow completed with errors")
        else:
            self.logger.info("✓ Workflow completed successfully")

    def run_individual_steps(self, step_names: List[str], continue_on_error: bool = False) -> List[Dict[str, Any]]:
        """
        Execute specific steps by name or alias, in the order given.

        Args:
            step_names: Step names or aliases to execute
            continue_on_error: Whether to continue to the next step if one fails

        Returns:
            One result dictionary per requested step
        """
        step_map = {step.name: step for step in self.define_workflow_steps()}
        results: List[Dict[str, Any]] = []

        self.logger.info(f"Starting individual step execution: {', '.join(step_names)}")

        for idx, requested in enumerate(step_names, 1):
            try:
                step = step_map[resolve_workflow_step_name(requested)]
            except ValueError as e:
                self.logger.error(str(e))
                results.append({"step": requested, "fn": None, "success": False, "error": str(e)})
                if not continue_on_error:
                    raise
                continue

            step_start_time = datetime.now()
            try:
                self._execute(step, idx, len(step_names))
            except Exception as e:
                results.append({"step": requested, "fn": step.name, "success": False, "error": str(e)})
                if not continue_on_error:
                    raise
                continue

            duration = (datetime.now() - step_start_time).total_seconds()
            results.append({"step": requested, "fn": step.name, "success": True, "duration": duration})

        return results

    def get_workflow_status(self) -> Dict[str, Any]:
        """
        Status of every pipeline step in this run.

        Returns:
            Dictionary with total/completed/failed/skipped counts and
            per-step details
        """
        details = []
        for name, description in WORKFLOW_STEP_ITEMS:
            if name in self.state.completed_steps:
                step_status = 'completed'
            elif name in self.state.failed_steps:
                step_status = 'failed'
            elif name in self.state.skipped_steps:
                step_status = 'skipped'
            else:
                step_status = 'pending'
            details.append({
                'name': name,
                'description': description,
                'status': step_status,
                'complete': step_status == 'completed',
            })

        return {
            'total_steps': len(details),
            'completed_steps': len(self.state.completed_steps),
            'failed_steps': len(self.state.failed_steps),
            'skipped_steps': len(self.state.skipped_steps),
            'step_details': details,
        }
