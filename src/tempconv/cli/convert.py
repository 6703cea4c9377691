"""CLI commands for temperature conversion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from tempconv.cli._options import global_options
from tempconv.models.conversion import Conversion, TempScale

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext

logger = logging.getLogger(__name__)

# Lets negative numbers such as "-40" through as positional values.
_NUMERIC_ARGS = {"ignore_unknown_options": True}

_SCALE_CHOICE = click.Choice([s.value for s in TempScale], case_sensitive=False)


def _run(
    app_ctx: AppContext,
    value: float,
    source: TempScale | str,
    target: TempScale | str,
    *,
    command: str,
) -> None:
    conv = Conversion.build(value, source, target)
    logger.debug("%s: %r %s -> %r %s", command, value, conv.source, conv.result, conv.target)

    app_ctx.formatter.conversion(conv, command=command)


@click.command("f2c", context_settings=_NUMERIC_ARGS)
@click.argument("value", type=float)
@global_options
def f2c_cmd(app_ctx: AppContext, value: float) -> None:
    """Convert VALUE degrees Fahrenheit to Celsius."""
    _run(app_ctx, value, TempScale.F, TempScale.C, command="f2c")


@click.command("c2f", context_settings=_NUMERIC_ARGS)
@click.argument("value", type=float)
@global_options
def c2f_cmd(app_ctx: AppContext, value: float) -> None:
    """Convert VALUE degrees Celsius to Fahrenheit."""
    _run(app_ctx, value, TempScale.C, TempScale.F, command="c2f")


@click.command("convert", context_settings=_NUMERIC_ARGS)
@click.argument("value", type=float)
@click.option("--from", "source", type=_SCALE_CHOICE, required=True, help="Scale of VALUE")
@click.option("--to", "target", type=_SCALE_CHOICE, required=True, help="Scale to convert to")
@global_options
def convert_cmd(app_ctx: AppContext, value: float, source: str, target: str) -> None:
    """Convert VALUE between scales.

    Converting to the same scale returns VALUE unchanged.
    """
    _run(app_ctx, value, source, target, command="convert")
