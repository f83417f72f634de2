"""
Catalog command handler for the wfparams CLI.

Lists the parameter-set files found in the input directory without loading
them.
"""

from argparse import Namespace

from ..exit_codes import ExitCode
from .base import BaseCommand


class CatalogCommands(BaseCommand):
    """Handlers for ``wfparams catalog``."""

    @staticmethod
    def list_files(args: Namespace) -> int:
        """Execute: wfparams catalog"""
        from wfparams.data import ParameterSetCatalog

        try:
            input_dir = getattr(args, 'input_dir', None)
            pattern = '*'
            if BaseCommand.get_config_path(args) or not input_dir:
                config = BaseCommand.load_typed_config(args)
                input_dir = config.paths.input_dir
                pattern = config.paths.file_pattern

            summary = ParameterSetCatalog(input_dir, pattern).summary()
        except Exception as e:
            BaseCommand._console.error(f"Catalog failed: {e}")
            return ExitCode.FAILURE

        BaseCommand._console.table(
            columns=list(summary.columns),
            rows=summary.values.tolist(),
            title=f"Parameter sets in {input_dir}",
        )
        counts = summary['ClassType'].str.lower().value_counts()
        BaseCommand._console.info(
            f"{len(summary)} files: {counts.get('land', 0)} land, {counts.get('river', 0)} river"
        )
        return ExitCode.SUCCESS

    execute = list_files
