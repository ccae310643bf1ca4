"""Menu-driven session that exercises every matrix operation for a chosen type."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence, Tuple

from rich.console import Console
from rich.markup import escape

from numeric_matrix import (
    SUPPORTED_TYPES,
    ElementType,
    ErrorKind,
    Matrix,
    MatrixError,
    Outcome,
    ParseError,
    TokenReader,
    attempt,
)

from .config import CalculatorSettings

LOGGER = logging.getLogger(__name__)


class CalculatorSession:
    """Interactive loop: pick an element type, enter two matrices, see results.

    Errors raised by the matrix core are reported on the console and the loop
    carries on; only the exit option or end of input stops it.
    """

    def __init__(
        self,
        reader: TokenReader,
        console: Console,
        settings: CalculatorSettings | None = None,
        element_types: Sequence[ElementType] = SUPPORTED_TYPES,
    ) -> None:
        if not element_types:
            raise ValueError("at least one element type is required")
        self.reader = reader
        self.console = console
        self.settings = settings or CalculatorSettings()
        self.element_types = tuple(element_types)

    @property
    def exit_option(self) -> int:
        return len(self.element_types) + 1

    def run(self) -> None:
        while True:
            self._print_menu()
            token = self.reader.next_token()
            if token is None:
                LOGGER.info("Input closed; ending session")
                self.console.print()
                return
            try:
                choice = int(token)
            except ValueError:
                choice = -1
            if choice == self.exit_option:
                self.console.print("Goodbye.")
                return
            if 1 <= choice <= len(self.element_types):
                self.exercise(self.element_types[choice - 1])
            else:
                LOGGER.debug("Rejected menu choice %r", token)
                self.console.print("[yellow]Invalid choice, please try again.[/yellow]")

    def _print_menu(self) -> None:
        self.console.print()
        self.console.print("[bold]=== Matrix calculator ===[/bold]")
        for option, element_type in enumerate(self.element_types, start=1):
            self.console.print(f"{option}. {element_type.describe()}", highlight=False)
        self.console.print(f"{self.exit_option}. Exit", highlight=False)
        self.console.print(f"Choose an element type (1-{self.exit_option}): ", end="")

    def exercise(self, element_type: ElementType) -> None:
        """Run every operation on two matrices of ``element_type`` read from input."""

        LOGGER.info("Exercising %s matrices", element_type.tag)
        self.console.rule(f"Testing {element_type.describe()}")

        self._prompt("Enter the number of rows and columns: ")
        shape = attempt(self._read_shape)
        if not shape.ok:
            self._report_error(shape)
            return
        rows, cols = shape.value  # type: ignore[misc]

        matrices = []
        for ordinal in ("first", "second"):
            self._prompt(f"Enter the {rows}x{cols} elements of the {ordinal} matrix: ")
            outcome = attempt(self._read_matrix, element_type, rows, cols)
            if not outcome.ok:
                self._report_error(outcome)
                return
            matrices.append(outcome.value)
        m1, m2 = matrices

        self._show("Matrix 1", m1)
        self._show("Matrix 2", m2)

        operations: Tuple[Tuple[str, Callable[[Matrix[Any]], Matrix[Any]]], ...] = (
            ("Addition (m1 + m2)", m1.add),
            ("Subtraction (m1 - m2)", m1.subtract),
            ("Matrix product (m1 @ m2)", m1.multiply),
        )
        for title, operation in operations:
            self._show_outcome(title, attempt(operation, m2))

        self._prompt("Enter a scalar for scalar multiplication: ")
        scalar = attempt(self._read_scalar, element_type)
        if scalar.ok:
            self._show_outcome(f"Scalar product (m1 * {scalar.value})", attempt(m1.scale, scalar.value))
        else:
            self._report_error(scalar)

        self.console.print(f"m1 == m2: {m1 == m2}", highlight=False)
        self.console.print(f"m1 != m2: {m1 != m2}", highlight=False)

    def _prompt(self, text: str) -> None:
        self.console.print(text, end="", highlight=False)

    def _read_shape(self) -> Tuple[int, int]:
        names = ("row count", "column count")
        tokens = [self.reader.require_token(what) for what in names]
        dims = []
        for what, token in zip(names, tokens):
            try:
                value = int(token)
            except ValueError as exc:
                raise ParseError(f"{what} must be an integer, got {token!r}", token=token) from exc
            if value <= 0:
                raise ParseError(f"{what} must be positive, got {value}", token=token)
            dims.append(value)
        return dims[0], dims[1]

    def _read_matrix(self, element_type: ElementType, rows: int, cols: int) -> Matrix[Any]:
        return element_type.zeros(rows, cols).read(self.reader)

    def _read_scalar(self, element_type: ElementType) -> Any:
        return element_type.parse_scalar(self.reader.require_token("scalar"))

    def _show(self, title: str, matrix: Matrix[Any]) -> None:
        self.console.print(f"{title}:", highlight=False)
        self.console.print(
            matrix.format(self.settings.field_width),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def _show_outcome(self, title: str, outcome: Outcome[Matrix[Any]]) -> None:
        if outcome.ok:
            self._show(title, outcome.value)  # type: ignore[arg-type]
        else:
            self.console.print(f"{title}:", highlight=False)
            self._report_error(outcome)

    def _report_error(self, outcome: Outcome[Any]) -> None:
        error: MatrixError = outcome.error  # type: ignore[assignment]
        LOGGER.debug("Operation failed (%s): %s", error.kind.value, error)
        self.console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", highlight=False)
        if error.kind is ErrorKind.PARSE_ERROR:
            self.reader.discard_line()
