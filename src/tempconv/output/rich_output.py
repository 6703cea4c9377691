from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from tempconv.models.conversion import Conversion


def format_temp(value: float, symbol: str, precision: int | None = None) -> str:
    """Render *value* with its degree *symbol*, optionally fixed to *precision* places."""
    if precision is None:
        return f"{value}{symbol}"
    return f"{value:.{precision}f}{symbol}"


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*."""

    def __init__(self, console: Console, *, precision: int | None = None) -> None:
        self._con = console
        self._precision = precision

    def conversion(self, conv: Conversion) -> None:
        """Print a two-row table with the input and converted temperatures."""
        table = Table(title="Conversion")
        table.add_column("", style="bold")
        table.add_column("Temperature", justify="right")

        table.add_row(
            "From",
            format_temp(conv.value, conv.source.symbol, self._precision),
        )
        table.add_row(
            "To",
            f"[cyan]{format_temp(conv.result, conv.target.symbol, self._precision)}[/cyan]",
        )

        self._con.print(table)

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")
