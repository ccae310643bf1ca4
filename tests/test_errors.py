from __future__ import annotations

import pytest

from numeric_matrix import ErrorKind, Matrix, MatrixError, OutOfRange, ParseError, ShapeMismatch, attempt


def test_error_kinds_and_builtin_bases() -> None:
    assert ShapeMismatch("x").kind is ErrorKind.SHAPE_MISMATCH
    assert ParseError("x").kind is ErrorKind.PARSE_ERROR
    assert OutOfRange(1, 2, (1, 1)).kind is ErrorKind.OUT_OF_RANGE
    assert issubclass(ShapeMismatch, ValueError)
    assert issubclass(ParseError, ValueError)
    assert issubclass(OutOfRange, IndexError)
    assert all(issubclass(cls, MatrixError) for cls in (ShapeMismatch, ParseError, OutOfRange))


def test_attempt_returns_value_on_success(int_pair) -> None:
    left, right = int_pair
    outcome = attempt(left.add, right)
    assert outcome.ok
    assert outcome.kind is None
    assert outcome.unwrap().to_rows() == [[6, 8], [10, 12]]


def test_attempt_captures_matrix_errors() -> None:
    outcome = attempt(Matrix(2, 3, int).multiply, Matrix(2, 3, int))
    assert not outcome.ok
    assert outcome.kind is ErrorKind.SHAPE_MISMATCH
    assert outcome.value is None
    with pytest.raises(ShapeMismatch):
        outcome.unwrap()


def test_attempt_distinguishes_error_kinds() -> None:
    matrix = Matrix(1, 1, int)
    assert attempt(matrix.at, 5, 0).kind is ErrorKind.OUT_OF_RANGE
    assert attempt(Matrix.parse, "z", 1, 1, int).kind is ErrorKind.PARSE_ERROR
    assert attempt(Matrix.from_rows, [[1], [2, 3]], int).kind is ErrorKind.SHAPE_MISMATCH


def test_attempt_does_not_swallow_other_errors() -> None:
    with pytest.raises(TypeError):
        attempt(Matrix(1, 1, int).add, Matrix(1, 1, float))
