"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses

import click

from tempconv import __version__
from tempconv._internal.log import configure_logging
from tempconv.models.config import AppSettings
from tempconv.output.formatter import OutputFormatter

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``.

    :func:`main` creates the instance itself and hands it to Click, so the
    error handler can still reach the chosen format and command name after
    Click has torn its contexts down.
    """

    output_format: str | None = None
    quiet: bool = False
    verbose: bool = False
    precision: int | None = None
    command: str = "unknown"
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else self.output_format
            self._formatter = OutputFormatter(force_format=force, precision=self.precision)
        return self._formatter


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(__version__, prog_name="tempconv")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option(
    "--precision",
    type=click.IntRange(min=0),
    default=None,
    help="Decimal places shown in rich output",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    precision: int | None,
    verbose: bool,
) -> None:
    """Convert temperatures between Fahrenheit and Celsius."""
    if not isinstance(ctx.obj, AppContext):
        ctx.obj = AppContext()
    app_ctx: AppContext = ctx.obj
    app_ctx.command = ctx.invoked_subcommand or app_ctx.command

    # Command-line flags first, so a bad environment is still reported in
    # the requested format.
    app_ctx.output_format = output_format
    app_ctx.quiet = quiet
    app_ctx.precision = precision
    app_ctx.verbose = verbose
    app_ctx._formatter = None

    settings = AppSettings()
    if app_ctx.output_format is None:
        app_ctx.output_format = settings.output_format
    if app_ctx.precision is None:
        app_ctx.precision = settings.precision
    app_ctx.verbose = verbose or settings.verbose
    configure_logging(app_ctx.verbose)


# ---------------------------------------------------------------------------
# Register subcommands
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from tempconv.cli.convert import c2f_cmd, convert_cmd, f2c_cmd

    cli.add_command(c2f_cmd)
    cli.add_command(convert_cmd)
    cli.add_command(f2c_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    app_ctx = AppContext()
    try:
        cli.main(args=argv, prog_name="tempconv", standalone_mode=False, obj=app_ctx)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx.formatter.error(
            code=type(exc).__name__,
            message=str(exc),
            command=app_ctx.command,
        )
        raise SystemExit(1) from exc
