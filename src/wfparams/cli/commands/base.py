"""
Base command class for wfparams CLI commands.

Provides the configuration plumbing shared by every command handler.
"""

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from ..console import Console, console as global_console

if TYPE_CHECKING:
    from wfparams.core.config.models import WFParamsConfig
    from wfparams.core.system import WFParams


class BaseCommand(ABC):
    """
    Base class for all CLI command handlers.

    Attributes:
        _console: Shared console instance for all commands
    """

    _console: ClassVar[Console] = global_console

    @classmethod
    def set_console(cls, console: Console) -> None:
        """Set the console instance for all commands (useful in tests)."""
        cls._console = console

    @staticmethod
    def get_config_path(args: Namespace) -> Optional[str]:
        """Configuration file given with ``--config``, if any."""
        return getattr(args, 'config', None) or None

    @staticmethod
    def get_overrides(args: Namespace) -> Dict[str, Any]:
        """Flat configuration overrides from the common CLI options."""
        overrides: Dict[str, Any] = {}
        if getattr(args, 'input_dir', None):
            overrides['INPUT_DIR'] = args.input_dir
        if getattr(args, 'output_dir', None):
            overrides['OUTPUT_DIR'] = args.output_dir
        if getattr(args, 'no_plots', False):
            overrides['PLOT_ENABLED'] = False
        if getattr(args, 'debug', False):
            overrides['LOG_LEVEL'] = 'DEBUG'
        return overrides

    @staticmethod
    def load_typed_config(args: Namespace) -> 'WFParamsConfig':
        """
        Load the typed configuration from ``--config`` and the CLI overrides.

        Raises:
            ConfigurationError: If the resulting configuration is invalid.
            FileNotFoundError: If ``--config`` names a missing file.
        """
        from wfparams.core.config import ensure_typed_config
        from wfparams.core.config.models import WFParamsConfig

        config_path = BaseCommand.get_config_path(args)
        overrides = BaseCommand.get_overrides(args)
        if config_path:
            return WFParamsConfig.from_file(config_path, overrides=overrides)
        return ensure_typed_config(overrides, use_env=True)

    @staticmethod
    def create_system(args: Namespace) -> 'WFParams':
        """Create a WFParams instance from the CLI arguments."""
        from wfparams.core.system import WFParams

        return WFParams(
            BaseCommand.get_config_path(args),
            config_overrides=BaseCommand.get_overrides(args),
            debug_mode=getattr(args, 'debug', False),
        )

    @staticmethod
    @abstractmethod
    def execute(args: Namespace) -> int:
        """
        Execute the command.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        pass
