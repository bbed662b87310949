"""CLI de dice-roll (Typer).

Por qué Typer:
- Declaramos argumentos con type hints y Click se encarga del parseo, la
  ayuda y los errores de uso (exit 2 con el texto de uso).

Flujo:
- `ROLLS` se convierte en `DiceRoll` vía `DiceRollParamType`.
- Según `--verbose` se imprime cada tirada o solo la suma.
"""

from __future__ import annotations

import os
import sys
from importlib.metadata import PackageNotFoundError, version

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.roll_output import RollWriter
from core.config import AppSettings
from core.domain.errors import FormatError, OutputError
from core.domain.models import DiceRoll, parse_dice_roll
from core.logging_setup import configure_logging
from core.services.roll_engine import RollEngine

APP_NAME = "dice-roll"

# sysexits.h: EX_IOERR
EXIT_IO_ERROR = 74

app = typer.Typer(add_completion=False, help="Rolls dice.")

_err_console = Console(stderr=True)


class DiceRollParamType(click.ParamType):
    """Tipo Click para la notación `NdM`."""

    name = "NdM"

    def convert(self, value, param, ctx):
        if isinstance(value, DiceRoll):
            return value
        try:
            return parse_dice_roll(value)
        except FormatError as exc:
            self.fail(str(exc), param, ctx)


def get_version() -> str:
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {get_version()}")
        raise typer.Exit()


def execute(roll: DiceRoll, *, verbose: bool, engine: RollEngine, writer: RollWriter) -> None:
    """Tira los dados y escribe el resultado en el modo pedido."""

    if verbose:
        engine.roll_each(roll, writer.write_roll)
    else:
        writer.write_sum(engine.roll_sum(roll))
    writer.flush()


def _silence_stdout() -> None:
    # Evita un segundo BrokenPipeError al vaciar stdout durante el cierre.
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def _load_settings() -> AppSettings:
    # Los DICE_ROLL_* solo ajustan la ejecución: si son inválidos se ignoran.
    try:
        return AppSettings()
    except ValidationError as exc:
        _err_console.print(
            f"[yellow]Warning:[/yellow] ignoring invalid DICE_ROLL_* settings "
            f"({exc.error_count()} error(s)), using defaults."
        )
        return AppSettings.model_construct()


@app.command()
def roll(
    rolls: DiceRoll = typer.Argument(
        ...,
        click_type=DiceRollParamType(),
        help="Dice roll in `NdM` form (N dice with M faces), e.g. 3d6.",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show every roll instead of the sum.",
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Rolls dice and prints the sum (or every roll with --verbose)."""

    settings = _load_settings()
    configure_logging(settings)

    engine = RollEngine(settings)
    writer = RollWriter()
    try:
        execute(rolls, verbose=verbose, engine=engine, writer=writer)
    except OutputError as exc:
        _silence_stdout()
        _err_console.print(f"[red]I/O error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_IO_ERROR) from exc


def run() -> None:
    app(prog_name=APP_NAME)
