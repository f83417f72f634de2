"""
Console output for the wfparams CLI.

Thin wrapper around :mod:`rich` so that command handlers share one output
style and tests can inject a capture-friendly instance.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, TextIO

from rich.console import Console as RichConsole
from rich.table import Table


@dataclass
class ConsoleConfig:
    """Output streams and styling for :class:`Console`."""
    output_stream: Optional[TextIO] = None
    error_stream: Optional[TextIO] = None
    use_colors: bool = True


class Console:
    """Formatted CLI output: status lines and tables."""

    def __init__(self, config: Optional[ConsoleConfig] = None):
        self.config = config or ConsoleConfig()
        no_color = not self.config.use_colors
        self._out = RichConsole(
            file=self.config.output_stream, no_color=no_color, highlight=False, soft_wrap=True
        )
        if self.config.error_stream is not None:
            self._err = RichConsole(
                file=self.config.error_stream, no_color=no_color, highlight=False, soft_wrap=True
            )
        else:
            self._err = RichConsole(stderr=True, no_color=no_color, highlight=False, soft_wrap=True)

    def info(self, message: str) -> None:
        self._out.print(message, markup=False)

    def success(self, message: str) -> None:
        self._out.print(f"✓ {message}", style="green", markup=False)

    def warning(self, message: str) -> None:
        self._err.print(f"⚠ {message}", style="yellow", markup=False)

    def error(self, message: str) -> None:
        self._err.print(f"✗ {message}", style="bold red", markup=False)

    def indent(self, message: str, level: int = 1) -> None:
        self._out.print(f"{'  ' * level}{message}", markup=False)

    def table(
        self,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        title: Optional[str] = None,
    ) -> None:
        """Print ``rows`` as a table with the given column headers."""
        table = Table(title=title)
        for column in columns:
            table.add_column(str(column))
        for row in rows:
            table.add_row(*[str(value) for value in row])
        self._out.print(table)


console = Console()

__all__: List[str] = ['Console', 'ConsoleConfig', 'console']
