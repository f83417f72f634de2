"""
wfparams CLI Argument Parser.

Provides the command-line parser with one sub-command per pipeline entry
point:

    - run: discover, load, normalize, summarize and plot
    - summarize: everything up to the summary table
    - plot: everything up to the charts, without the summary table
    - steps: run named workflow steps
    - list-steps: show the workflow steps and their aliases
    - catalog: list the parameter-set files in the input directory
"""

import argparse
from typing import List, Optional

from wfparams.workflow_steps import resolve_workflow_step_name

try:
    from wfparams.wfparams_version import __version__
except ImportError:
    __version__ = "0+unknown"


def resolve_step_name(name: str) -> str:
    """Resolve a step name or alias to the canonical workflow step name.

    Raises:
        argparse.ArgumentTypeError: If the name is not recognised.
    """
    try:
        return resolve_workflow_step_name(name)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


class CLIParser:
    """
    Main CLI parser.

    Attributes:
        common_parser: Parent parser with the options shared by all sub-commands
        parser: Main argument parser with all sub-commands registered
    """

    def __init__(self):
        """Initialize the CLI parser with common options and all sub-commands."""
        self.common_parser = self._create_common_parser()
        self.parser = self._create_parser()

    def _create_common_parser(self) -> argparse.ArgumentParser:
        """Create a parent parser with common arguments."""
        # SUPPRESS keeps a sub-command's defaults from overwriting global flags
        parser = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)

        parser.add_argument('--config', type=str,
                            help='Path to a YAML configuration file')
        parser.add_argument('--input-dir', type=str, dest='input_dir',
                            help='Directory holding the parameter-set CSV files (overrides INPUT_DIR)')
        parser.add_argument('--output-dir', type=str, dest='output_dir',
                            help='Directory receiving the summary, charts and logs (overrides OUTPUT_DIR)')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug output')
        parser.add_argument('--no-plots', action='store_true', dest='no_plots',
                            help='Skip chart rendering (sets PLOT_ENABLED=False)')
        return parser

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the main parser with global options and subparsers."""
        parser = argparse.ArgumentParser(
            prog='wfparams',
            description='wfparams - WATFLOOD parameter-set analysis',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            parents=[self.common_parser],
            epilog="""
Examples:
  wfparams run --config wfparams.yaml
  wfparams run --input-dir parameter_sets --output-dir results
  wfparams summarize --input-dir parameter_sets --output-dir results
  wfparams plot --config wfparams.yaml
  wfparams steps discover load --input-dir parameter_sets --output-dir results
  wfparams catalog --input-dir parameter_sets

For more help on a specific command:
  wfparams <command> --help
"""
        )

        parser.add_argument('--version', action='version',
                            version=f'wfparams {__version__}')

        subparsers = parser.add_subparsers(
            dest='command',
            required=True,
            help='Command',
            metavar='<command>'
        )

        self._register_analysis_commands(subparsers)
        self._register_catalog_commands(subparsers)

        return parser

    def _register_analysis_commands(self, subparsers):
        """Register the pipeline commands."""
        from .commands import AnalysisCommands

        run_parser = subparsers.add_parser(
            'run',
            help='Run the complete workflow (summary and charts)',
            parents=[self.common_parser]
        )
        run_parser.set_defaults(func=AnalysisCommands.run)

        summarize_parser = subparsers.add_parser(
            'summarize',
            help='Write the parameter summary table only',
            parents=[self.common_parser]
        )
        summarize_parser.set_defaults(func=AnalysisCommands.summarize)

        plot_parser = subparsers.add_parser(
            'plot',
            help='Render the parameter boxplots only',
            parents=[self.common_parser]
        )
        plot_parser.set_defaults(func=AnalysisCommands.plot)

        steps_parser = subparsers.add_parser(
            'steps',
            help='Run individual workflow steps',
            parents=[self.common_parser]
        )
        steps_parser.add_argument('step_names', nargs='+', type=resolve_step_name, metavar='STEP_NAME',
                                  help='Steps to execute in order (full names or aliases; see "list-steps")')
        steps_parser.add_argument('--continue-on-error', action='store_true', dest='continue_on_error',
                                  help='Continue executing steps even if one fails')
        steps_parser.set_defaults(func=AnalysisCommands.steps)

        list_steps_parser = subparsers.add_parser(
            'list-steps',
            help='List available workflow steps'
        )
        list_steps_parser.set_defaults(func=AnalysisCommands.list_steps)

    def _register_catalog_commands(self, subparsers):
        """Register the catalog command."""
        from .commands import CatalogCommands

        catalog_parser = subparsers.add_parser(
            'catalog',
            help='List parameter-set files and their metadata',
            parents=[self.common_parser]
        )
        catalog_parser.set_defaults(func=CatalogCommands.list_files)

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command-line arguments.

        Args:
            args: List of argument strings (for testing). If None, uses sys.argv.

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)
