"""
wfparams Core System Module.

Provides the WFParams class, the programmatic entry point that wires the
configuration, logging and workflow orchestrator together and records a
run summary for every execution.

Example:
    >>> from wfparams import WFParams
    >>> wp = WFParams("config.yaml")
    >>> state = wp.run_workflow()
    >>> state.summary_path
    PosixPath('.../ParameterSummary.csv')
"""
try:
    from wfparams.wfparams_version import __version__
except ImportError:
    __version__ = "0+unknown"


from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from wfparams.core.config import ensure_typed_config
from wfparams.core.config.models import WFParamsConfig
from wfparams.core.exceptions import WFParamsError
from wfparams.project.logging_manager import LoggingManager
from wfparams.project.workflow_orchestrator import PipelineState, WorkflowOrchestrator


class WFParams:
    """
    Main wfparams class.

    Accepts a configuration file, a typed configuration, or only flat
    overrides (``INPUT_DIR``/``OUTPUT_DIR`` at minimum) when no file is used.
    """

    def __init__(
        self,
        config_input: Optional[Union[Path, str, WFParamsConfig]] = None,
        config_overrides: Optional[Dict[str, Any]] = None,
        debug_mode: bool = False,
    ):
        """
        Initialize the system with configuration and CLI options.

        Args:
            config_input: Path to the configuration file or a WFParamsConfig instance
            config_overrides: Flat configuration overrides from the CLI
            debug_mode: Whether to enable debug logging
        """
        self.debug_mode = debug_mode
        self.config_overrides = config_overrides or {}
        self.config_path: Optional[Path] = None

        if isinstance(config_input, WFParamsConfig):
            self.typed_config = config_input
            if self.config_overrides:
                flat_config = self.typed_config.to_dict(flatten=True)
                flat_config.update(self.config_overrides)
                self.typed_config = ensure_typed_config(flat_config)
        elif config_input is None:
            self.typed_config = ensure_typed_config(dict(self.config_overrides), use_env=True)
        else:
            self.config_path = Path(config_input)
            self.typed_config = WFParamsConfig.from_file(
                self.config_path, overrides=self.config_overrides, use_env=True
            )

        self.logging_manager = LoggingManager(self.typed_config, debug_mode=debug_mode)
        self.logger = self.logging_manager.logger

        self.logger.info(f"wfparams {__version__} initialized")
        if self.config_path:
            self.logger.info(f"Config path: {self.config_path}")
        if self.config_overrides:
            self.logger.info(f"Configuration overrides applied: {list(self.config_overrides.keys())}")

        self.workflow_orchestrator = WorkflowOrchestrator(
            self.typed_config, self.logger, self.logging_manager
        )

    @property
    def state(self) -> PipelineState:
        """Results of the steps executed so far."""
        return self.workflow_orchestrator.state

    def _warnings(self) -> List[Dict[str, str]]:
        warns = [
            {"step": name, "warning": "skipped because a required step failed"}
            for name in self.state.skipped_steps
        ]
        report = self.state.normalization_report
        if report is not None and report.unclassified_parameters:
            warns.append({
                "step": "normalize_corpus",
                "warning": f"unclassified parameters dropped: {', '.join(report.unclassified_parameters)}",
            })
        if report is not None and report.empty_parameters:
            warns.append({
                "step": "normalize_corpus",
                "warning": f"parameters without numeric values skipped: {', '.join(report.empty_parameters)}",
            })
        for parameter, error in sorted(self.state.chart_failures.items()):
            warns.append({"step": "plot_parameters", "warning": f"{parameter}: {error}"})
        return warns

    def _status(self) -> str:
        if not self.state.failed_steps:
            return "completed"
        return "partial" if self.state.completed_steps else "failed"

    def run_workflow(self, steps: Optional[List[str]] = None) -> PipelineState:
        """Execute the complete pipeline, or the named steps in pipeline order."""
        start = datetime.now()
        errors: List[Any] = []
        status = "failed"

        try:
            self.logger.info("Starting wfparams workflow execution")
            self.workflow_orchestrator.run_workflow(steps)
            status = self._status()
            errors = [{"step": name, "error": error} for name, error in self.state.failed_steps.items()]
            return self.state

        except (WFParamsError, FileNotFoundError, PermissionError, ValueError) as e:
            errors.append({"where": "run_workflow", "error": str(e)})
            self.logger.error(f"Workflow execution failed: {e}")
            raise
        except Exception as e:
            errors.append({"where": "run_workflow", "error": str(e)})
            self.logger.exception(f"Unexpected workflow execution failure: {e}")
            raise
        finally:
            elapsed_s = (datetime.now() - start).total_seconds()
            self.logging_manager.create_run_summary(
                steps_completed=list(self.state.completed_steps),
                errors=errors,
                warnings=self._warnings(),
                execution_time=elapsed_s,
                status=status,
            )

    def run_individual_steps(self, step_names: List[str], continue_on_error: bool = False) -> List[Dict[str, Any]]:
        """
        Execute specific workflow steps by name or alias.

        Steps run in the order given and share the pipeline state, so later
        steps see the results of earlier ones.

        Args:
            step_names: Step names or aliases (e.g. ``['discover', 'load']``)
            continue_on_error: Whether to keep going after a failed step
        """
        start = datetime.now()
        results: List[Dict[str, Any]] = []
        status = "failed"

        try:
            results = self.workflow_orchestrator.run_individual_steps(step_names, continue_on_error)
            failed = [r for r in results if not r['success']]
            if not failed:
                status = "completed"
            elif len(failed) < len(results):
                status = "partial"
            return results
        finally:
            elapsed_s = (datetime.now() - start).total_seconds()
            self.logging_manager.create_run_summary(
                steps_completed=list(self.state.completed_steps),
                errors=[{"step": n, "error": e} for n, e in self.state.failed_steps.items()],
                warnings=self._warnings(),
                execution_time=elapsed_s,
                status=status,
            )

    def get_workflow_status(self) -> Dict[str, Any]:
        """Return workflow status from the orchestrator."""
        return self.workflow_orchestrator.get_workflow_status()
