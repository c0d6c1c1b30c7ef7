"""CLI de poetry-finder (Typer).

`poetry-finder` sin subcomando pide un poema aleatorio a PoetryDB e imprime su
primer verso. Los fallos del fetch se diagnostican en stderr y el proceso
termina con código 0 igualmente; una configuración inválida es un error de
uso (código 2).
"""

from __future__ import annotations

import asyncio
import logging
import sys
from enum import Enum

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.poetrydb import PoetryDBSource
from adapters.presenters import JsonPresenter, LinePresenter, PanelPresenter
from cli import doctor
from cli.logging_setup import configure_logging
from core.config import AppSettings
from core.interfaces.presenter import PoemPresenter
from core.services.poem_pipeline import run_pipeline

app = typer.Typer(
    add_completion=False,
    help="Fetch a random poem from PoetryDB and print its first line.",
)
app.command(name="doctor")(doctor.run)


class OutputFormat(str, Enum):
    LINE = "line"
    PANEL = "panel"
    JSON = "json"


def build_presenter(output_format: OutputFormat, console: Console | None = None) -> PoemPresenter:
    if output_format is OutputFormat.PANEL:
        return PanelPresenter(console)
    if output_format is OutputFormat.JSON:
        return JsonPresenter(console)
    return LinePresenter(console)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    output_format: OutputFormat = typer.Option(
        OutputFormat.LINE,
        "--format",
        "-f",
        case_sensitive=False,
        help="line: first line only; panel: whole poem; json: raw record.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    settings = load_settings()
    configure_logging(logging.DEBUG if verbose else settings.log_level)

    if ctx.invoked_subcommand is not None:
        return

    presenter = build_presenter(output_format)
    asyncio.run(run_pipeline(PoetryDBSource(settings), presenter))


def load_settings() -> AppSettings:
    """`AppSettings` desde el entorno; un valor inválido es un error de uso."""

    try:
        return AppSettings()
    except ValidationError as exc:
        fields = ", ".join(
            "POETRY_FINDER_" + str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]
        )
        raise typer.BadParameter(f"invalid configuration ({fields}): {exc}") from exc


def run() -> None:
    # Los poemas traen comillas tipográficas y rayas; consolas cp1252 fallan sin esto.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()
