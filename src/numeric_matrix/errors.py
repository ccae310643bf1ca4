"""Error kinds raised by :mod:`numeric_matrix` and a result wrapper for callers.

Every failure the matrix core can signal is a :class:`MatrixError` tagged with an
:class:`ErrorKind`.  The concrete classes also derive from the matching builtin
(``ValueError``/``IndexError``) so plain ``except ValueError`` handlers keep
working.  Callers that prefer not to rely on exceptions can wrap an operation
with :func:`attempt` and inspect the returned :class:`Outcome`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

R = TypeVar("R")


class ErrorKind(str, Enum):
    """Failure categories a caller may want to distinguish."""

    SHAPE_MISMATCH = "shape_mismatch"
    OUT_OF_RANGE = "out_of_range"
    PARSE_ERROR = "parse_error"


class MatrixError(Exception):
    """Base class for all matrix failures."""

    kind: ErrorKind


class ShapeMismatch(MatrixError, ValueError):
    """Raised when operand or row dimensions violate an operation's rule."""

    kind = ErrorKind.SHAPE_MISMATCH


class OutOfRange(MatrixError, IndexError):
    """Raised when an element index falls outside the declared bounds."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, row: int, col: int, shape: tuple[int, int]) -> None:
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"index ({row}, {col}) is out of range for a {shape[0]}x{shape[1]} matrix"
        )


class ParseError(MatrixError, ValueError):
    """Raised when a stream token cannot be read as the matrix element type."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, message: str, *, token: str | None = None, position: int | None = None) -> None:
        self.token = token
        self.position = position
        super().__init__(message)


@dataclass(frozen=True)
class Outcome(Generic[R]):
    """Either the value an operation produced or the error it raised."""

    value: Optional[R] = None
    error: Optional[MatrixError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> R:
        """Return the value, re-raising the captured error on failure."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(func: Callable[..., R], *args, **kwargs) -> Outcome[R]:
    """Run ``func`` and capture a :class:`MatrixError` instead of propagating it.

    >>> attempt(int, "3").value
    3

    Errors that are not matrix errors (programming mistakes such as a
    ``TypeError`` from mixing element types) still propagate.
    """

    try:
        return Outcome(value=func(*args, **kwargs))
    except MatrixError as exc:
        return Outcome(error=exc)
