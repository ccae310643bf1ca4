from __future__ import annotations

import io

import numpy as np
import pytest

from numeric_matrix import Matrix, ParseError, TokenReader


def test_format_right_justifies_in_eight_columns(int_pair) -> None:
    left, _ = int_pair
    assert left.format() == "       1       2\n       3       4\n"
    assert str(left) == left.format()


def test_format_with_custom_width() -> None:
    matrix = Matrix.from_rows([[1, -20]], dtype=np.int32)
    assert matrix.format(width=4) == "   1 -20\n"


def test_format_float_elements() -> None:
    matrix = Matrix.from_rows([[1.5, 0.25]], dtype=np.float32)
    assert matrix.format() == "     1.5    0.25\n"


def test_write_sends_formatted_text_to_stream(int_pair) -> None:
    _, right = int_pair
    buffer = io.StringIO()
    right.write(buffer)
    assert buffer.getvalue() == "       5       6\n       7       8\n"


def test_read_fills_row_major_from_stream() -> None:
    matrix = Matrix(2, 3, np.int64)
    result = matrix.read(io.StringIO("1 2\n3\n4 5 6\n"))
    assert result is matrix
    assert matrix.to_rows() == [[1, 2, 3], [4, 5, 6]]
    assert type(matrix.at(0, 0)) is np.int64


def test_read_shares_a_token_reader() -> None:
    reader = TokenReader.from_text("1 2 3 4 9.5 8.5")
    first = Matrix(2, 2, int).read(reader)
    second = Matrix(1, 2, float).read(reader)
    assert first.to_rows() == [[1, 2], [3, 4]]
    assert second.to_rows() == [[9.5, 8.5]]
    assert reader.at_end


def test_parse_constructor() -> None:
    matrix = Matrix.parse("1.25 2\n3 4", 2, 2, np.float64)
    assert matrix.to_rows() == [[1.25, 2.0], [3.0, 4.0]]


def test_malformed_token_raises_parse_error_and_leaves_matrix_unchanged() -> None:
    matrix = Matrix.from_rows([[9, 9], [9, 9]], dtype=np.int32)
    with pytest.raises(ParseError) as excinfo:
        matrix.read(io.StringIO("1 x 3 4"))
    assert excinfo.value.token == "x"
    assert excinfo.value.position == 1
    assert matrix.to_rows() == [[9, 9], [9, 9]]


def test_integer_matrix_rejects_decimal_token() -> None:
    with pytest.raises(ParseError):
        Matrix.parse("1 2.5", 1, 2, np.int32)


def test_fixed_width_integer_rejects_out_of_range_token() -> None:
    with pytest.raises(ParseError, match="short integer"):
        Matrix.parse("40000", 1, 1, np.int16)


def test_premature_end_of_input_is_a_parse_error() -> None:
    matrix = Matrix(2, 2, int)
    with pytest.raises(ParseError, match="read 3 of 4"):
        matrix.read(io.StringIO("1 2 3"))
    assert matrix.to_rows() == [[0, 0], [0, 0]]


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Matrix.parse("nope", 1, 1, float)


def test_consecutive_reads_from_one_raw_stream_lose_nothing() -> None:
    stream = io.StringIO("1 2 3 4 5 6\n")
    first = Matrix(2, 2, int).read(stream)
    assert first.to_rows() == [[1, 2], [3, 4]]
    assert "5 6" in stream.getvalue()[stream.tell():]
    second = Matrix(1, 2, int).read(stream)
    assert second.to_rows() == [[5, 6]]


def test_raw_stream_read_stops_after_last_element() -> None:
    stream = io.StringIO("7 8\nnext line\n")
    Matrix(1, 2, int).read(stream)
    assert stream.read() == "next line\n"
