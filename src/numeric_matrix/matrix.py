"""Dense row-major matrix over a numeric element type."""

from __future__ import annotations

import logging
import numbers
from typing import Any, Generic, Iterator, List, Sequence, TextIO, Tuple, TypeVar

from .element_types import (
    coerce_value,
    parse_scalar,
    require_numeric_type,
    type_name,
    wrap_scalar,
    zero_value,
)
from .errors import OutOfRange, ParseError, ShapeMismatch
from .streams import TokenReader, as_token_reader

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_FIELD_WIDTH = 8


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _check_index(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} index must be an integer, got {value!r}")
    return int(value)


class Matrix(Generic[T]):
    """A ``rows x cols`` matrix whose elements all share one numeric type.

    Storage is a flat list in row-major order; element ``(i, j)`` lives at
    ``i * cols + j``.  Arithmetic always returns a new matrix.

    >>> a = Matrix.from_rows([[1, 2], [3, 4]], dtype=int)
    >>> b = Matrix.from_rows([[5, 6], [7, 8]], dtype=int)
    >>> (a @ b).to_rows()
    [[19, 22], [43, 50]]
    >>> (a * 2).to_rows()
    [[2, 4], [6, 8]]
    """

    __slots__ = ("_rows", "_cols", "_dtype", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, dtype: type = float) -> None:
        self._rows = _check_dimension("rows", rows)
        self._cols = _check_dimension("cols", cols)
        self._dtype = require_numeric_type(dtype)
        zero = zero_value(dtype)
        self._data: List[T] = [zero] * (rows * cols)

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: type = float) -> "Matrix[T]":
        return cls(rows, cols, dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], dtype: type = float) -> "Matrix[T]":
        """Build a matrix from nested rows; all rows must share one length."""

        require_numeric_type(dtype)
        row_list = [list(row) for row in rows]
        if not row_list or not row_list[0]:
            raise ValueError("matrix must have at least one row and one column")
        cols = len(row_list[0])
        for index, row in enumerate(row_list):
            if len(row) != cols:
                raise ShapeMismatch(
                    "all rows must have the same column count: "
                    f"row {index} has {len(row)} values, expected {cols}"
                )
        matrix = cls(len(row_list), cols, dtype)
        matrix._data = [coerce_value(value, dtype) for row in row_list for value in row]
        LOGGER.debug("Built %dx%d %s matrix from rows", matrix._rows, cols, dtype.__name__)
        return matrix

    @classmethod
    def parse(cls, text: str, rows: int, cols: int, dtype: type = float) -> "Matrix[T]":
        """Read a ``rows x cols`` matrix from whitespace separated ``text``."""

        matrix = cls(rows, cols, dtype)
        matrix.read(TokenReader.from_text(text))
        return matrix

    def _empty_like(self, rows: int, cols: int) -> "Matrix[T]":
        return type(self)(rows, cols, self._dtype)

    def copy(self) -> "Matrix[T]":
        clone = self._empty_like(self._rows, self._cols)
        clone._data = list(self._data)
        return clone

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> type:
        return self._dtype

    @property
    def type_name(self) -> str:
        return type_name(self._dtype)

    def _offset(self, i: int, j: int) -> int:
        i = _check_index("row", i)
        j = _check_index("column", j)
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise OutOfRange(i, j, self.shape)
        return i * self._cols + j

    def at(self, i: int, j: int) -> T:
        return self._data[self._offset(i, j)]

    def set(self, i: int, j: int, value: Any) -> None:
        self._data[self._offset(i, j)] = coerce_value(value, self._dtype)

    def __getitem__(self, index: Tuple[int, int]) -> T:
        i, j = index
        return self.at(i, j)

    def __setitem__(self, index: Tuple[int, int], value: Any) -> None:
        i, j = index
        self.set(i, j, value)

    def elements(self) -> Iterator[T]:
        return iter(list(self._data))

    def to_rows(self) -> List[List[T]]:
        cols = self._cols
        return [self._data[start : start + cols] for start in range(0, len(self._data), cols)]

    def _require_same_dtype(self, other: "Matrix[Any]", op: str) -> None:
        if other._dtype is not self._dtype:
            raise TypeError(
                f"cannot {op} a {other._dtype.__name__} matrix and a "
                f"{self._dtype.__name__} matrix"
            )

    def _require_same_shape(self, other: "Matrix[Any]", op: str) -> None:
        if self.shape != other.shape:
            raise ShapeMismatch(
                f"cannot {op} {self._rows}x{self._cols} and {other._rows}x{other._cols} "
                "matrices: rows and columns must match"
            )

    def add(self, other: "Matrix[T]") -> "Matrix[T]":
        self._require_same_dtype(other, "add")
        self._require_same_shape(other, "add")
        result = self._empty_like(self._rows, self._cols)
        result._data = [left + right for left, right in zip(self._data, other._data)]
        return result

    def subtract(self, other: "Matrix[T]") -> "Matrix[T]":
        self._require_same_dtype(other, "subtract")
        self._require_same_shape(other, "subtract")
        result = self._empty_like(self._rows, self._cols)
        result._data = [left - right for left, right in zip(self._data, other._data)]
        return result

    def multiply(self, other: "Matrix[T]") -> "Matrix[T]":
        """Matrix product; requires ``self.cols == other.rows``."""

        self._require_same_dtype(other, "multiply")
        if self._cols != other._rows:
            raise ShapeMismatch(
                f"cannot multiply {self._rows}x{self._cols} by {other._rows}x{other._cols}: "
                f"left has {self._cols} columns but right has {other._rows} rows"
            )
        inner = self._cols
        out_cols = other._cols
        result = self._empty_like(self._rows, out_cols)
        left = self._data
        right = other._data
        zero = zero_value(self._dtype)
        for i in range(self._rows):
            row_start = i * inner
            for j in range(out_cols):
                total = zero
                for k in range(inner):
                    total += left[row_start + k] * right[k * out_cols + j]
                result._data[i * out_cols + j] = total
        LOGGER.debug(
            "Multiplied %dx%d by %dx%d", self._rows, inner, other._rows, out_cols
        )
        return result

    def scale(self, scalar: Any) -> "Matrix[T]":
        """Multiply every element by ``scalar``; the result keeps this dtype."""

        dtype = self._dtype
        factor = wrap_scalar(scalar, dtype)
        result = self._empty_like(self._rows, self._cols)
        result._data = [dtype(value * factor) for value in self._data]
        return result

    def equals(self, other: "Matrix[Any]") -> bool:
        """Exact elementwise equality; different shapes or element types are unequal."""

        if self._dtype is not other._dtype or self.shape != other.shape:
            return False
        return all(left == right for left, right in zip(self._data, other._data))

    def not_equals(self, other: "Matrix[Any]") -> bool:
        return not self.equals(other)

    def __add__(self, other: object) -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, scalar: object) -> "Matrix[T]":
        if isinstance(scalar, Matrix):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.not_equals(other)

    def format(self, width: int = DEFAULT_FIELD_WIDTH) -> str:
        """Render one line per row with each element right-justified to ``width``."""

        lines = []
        for row in self.to_rows():
            lines.append("".join(str(value).rjust(width) for value in row))
        return "".join(line + "\n" for line in lines)

    def write(self, stream: TextIO, width: int = DEFAULT_FIELD_WIDTH) -> None:
        stream.write(self.format(width))

    def read(self, source: TokenReader | TextIO) -> "Matrix[T]":
        """Replace every element with values read row-major from ``source``.

        Nothing is stored unless all ``rows * cols`` tokens parse.
        """

        reader = as_token_reader(source)
        count = self._rows * self._cols
        values: List[T] = []
        for position in range(count):
            token = reader.next_token()
            if token is None:
                raise ParseError(
                    f"unexpected end of input: read {position} of {count} elements",
                    position=position,
                )
            values.append(parse_scalar(token, self._dtype, position=position))
        self._data = values
        LOGGER.debug("Read %d %s elements", count, self._dtype.__name__)
        return self

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, dtype={self._dtype.__name__})"
