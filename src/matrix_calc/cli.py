"""Typer-powered command-line interface for the matrix calculator."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from numeric_matrix import SUPPORTED_TYPES, MatrixError, TokenReader, get_element_type, supported_tags

from .config import DEFAULT_TYPE_TAG, CalculatorSettings
from .session import CalculatorSession

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Exercise generic numeric matrices interactively.")
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.WARNING))


def _load_settings(field_width: Optional[int], log_level: Optional[str]) -> CalculatorSettings:
    try:
        settings = CalculatorSettings.from_env().with_overrides(
            field_width=field_width, log_level=log_level
        )
    except ValueError as exc:
        console.print(f"[bold red]Invalid settings:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    _configure_logging(settings.log_level)
    return settings


@app.command("run")
def run(
    field_width: Optional[int] = typer.Option(
        None,
        "--field-width",
        help="Width each element is right-justified to when printing matrices.",
        rich_help_panel="Output",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
        rich_help_panel="Diagnostics",
    ),
) -> None:
    """Start the interactive menu reading answers from standard input."""

    settings = _load_settings(field_width, log_level)
    LOGGER.info("Starting calculator session (field width %d)", settings.field_width)
    session = CalculatorSession(TokenReader(sys.stdin), console, settings)
    session.run()


@app.command("types")
def list_types() -> None:
    """List the element types the calculator offers."""

    table = Table(title="Supported element types")
    table.add_column("Option", justify="right")
    table.add_column("Tag")
    table.add_column("Label")
    table.add_column("numpy type")
    for option, element_type in enumerate(SUPPORTED_TYPES, start=1):
        table.add_row(str(option), element_type.tag, element_type.label, element_type.dtype.__name__)
    console.print(table)


@app.command("show")
def show(
    path: Path = typer.Argument(..., help="File holding 'rows cols' followed by the elements."),
    type_tag: str = typer.Option(
        DEFAULT_TYPE_TAG,
        "--type",
        help=f"Element type tag; one of: {', '.join(supported_tags())}.",
    ),
    field_width: Optional[int] = typer.Option(None, "--field-width", help="Element field width."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """Read a matrix from a text file and print it."""

    settings = _load_settings(field_width, log_level)
    try:
        element_type = get_element_type(type_tag)
    except KeyError as exc:
        console.print(f"[bold red]{escape(str(exc.args[0]))}[/bold red]")
        raise typer.Exit(code=1) from exc
    if not path.exists():
        console.print(f"[bold red]No such file:[/bold red] {escape(str(path))}")
        raise typer.Exit(code=1)

    with path.open(encoding="utf8") as handle:
        reader = TokenReader(handle)
        try:
            rows = _read_dimension(reader, "row count")
            cols = _read_dimension(reader, "column count")
            matrix = element_type.zeros(rows, cols).read(reader)
        except (MatrixError, ValueError) as exc:
            console.print(f"[bold red]Could not read {escape(str(path))}:[/bold red] {escape(str(exc))}")
            raise typer.Exit(code=1) from exc

    console.print(f"{matrix.rows}x{matrix.cols} {element_type.describe()}", highlight=False)
    console.print(matrix.format(settings.field_width), markup=False, highlight=False, soft_wrap=True)


def _read_dimension(reader: TokenReader, what: str) -> int:
    token = reader.require_token(what)
    try:
        return int(token)
    except ValueError as exc:
        raise ValueError(f"{what} must be an integer, got {token!r}") from exc


def main() -> None:
    """Entry point for ``python -m matrix_calc``."""

    app()


if __name__ == "__main__":
    main()
