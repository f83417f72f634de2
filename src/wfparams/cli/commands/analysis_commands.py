"""
Analysis command handlers for the wfparams CLI.

Implements ``run``, ``summarize``, ``plot`` and ``steps``.
"""

from argparse import Namespace
from typing import List, Optional

from wfparams.workflow_steps import PLOT_PIPELINE, SUMMARY_PIPELINE

from ..exit_codes import ExitCode
from .base import BaseCommand


class AnalysisCommands(BaseCommand):
    """Handlers for the pipeline sub-commands."""

    @staticmethod
    def _report(state) -> None:
        console = BaseCommand._console
        if state.summary_path is not None:
            console.success(f"Parameter summary: {state.summary_path} ({len(state.summary)} parameters)")
        for path in state.group_summary_paths.values():
            console.indent(f"Group summary: {path}")
        for family, result in state.chart_results.items():
            if result is None:
                continue
            console.success(f"{family}: {len(result.written)} charts written")
            for parameter, error in sorted(result.failures.items()):
                console.warning(f"{family} chart for '{parameter}' failed: {error}")
        for name, error in state.failed_steps.items():
            console.error(f"Step {name} failed: {error}")
        for name in state.skipped_steps:
            console.warning(f"Step {name} skipped")

    @staticmethod
    def _run_pipeline(args: Namespace, steps: Optional[List[str]], label: str) -> int:
        try:
            system = BaseCommand.create_system(args)
            BaseCommand._console.info(f"Starting {label}...")
            state = system.run_workflow(steps)
        except Exception as e:
            BaseCommand._console.error(f"{label.capitalize()} failed: {e}")
            if getattr(args, 'debug', False):
                import traceback
                traceback.print_exc()
            return ExitCode.FAILURE

        AnalysisCommands._report(state)
        if state.failed_steps:
            return ExitCode.FAILURE
        BaseCommand._console.success(f"{label.capitalize()} completed successfully")
        return ExitCode.SUCCESS

    @staticmethod
    def run(args: Namespace) -> int:
        """Execute: wfparams run"""
        return AnalysisCommands._run_pipeline(args, None, "full workflow")

    @staticmethod
    def summarize(args: Namespace) -> int:
        """Execute: wfparams summarize"""
        return AnalysisCommands._run_pipeline(args, SUMMARY_PIPELINE, "parameter summary")

    @staticmethod
    def plot(args: Namespace) -> int:
        """Execute: wfparams plot"""
        if getattr(args, 'no_plots', False):
            BaseCommand._console.warning("--no-plots given to 'plot'; no charts will be rendered")
        return AnalysisCommands._run_pipeline(args, PLOT_PIPELINE, "chart rendering")

    @staticmethod
    def steps(args: Namespace) -> int:
        """Execute: wfparams steps STEP_NAME [STEP_NAME ...]"""
        try:
            system = BaseCommand.create_system(args)
            results = system.run_individual_steps(
                args.step_names, continue_on_error=getattr(args, 'continue_on_error', False)
            )
        except Exception as e:
            BaseCommand._console.error(f"Step execution failed: {e}")
            return ExitCode.FAILURE

        AnalysisCommands._report(system.state)
        failed = [r for r in results if not r['success']]
        if failed:
            return ExitCode.FAILURE
        BaseCommand._console.success(f"Executed steps: {', '.join(r['fn'] for r in results)}")
        return ExitCode.SUCCESS

    @staticmethod
    def list_steps(args: Namespace) -> int:
        """Execute: wfparams list-steps"""
        from wfparams.workflow_steps import WORKFLOW_STEP_ALIASES, WORKFLOW_STEP_ITEMS

        aliases = {}
        for alias, canonical in WORKFLOW_STEP_ALIASES.items():
            aliases.setdefault(canonical, []).append(alias)

        BaseCommand._console.table(
            columns=["Step", "Aliases", "Description"],
            rows=[[name, ", ".join(aliases.get(name, [])), description]
                  for name, description in WORKFLOW_STEP_ITEMS],
            title="Workflow steps",
        )
        return ExitCode.SUCCESS

    execute = run
