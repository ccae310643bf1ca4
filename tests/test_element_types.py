from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from numeric_matrix import (
    SUPPORTED_TYPES,
    ElementType,
    ParseError,
    get_element_type,
    is_numeric_type,
    parse_scalar,
    supported_tags,
    type_name,
    zero_value,
)
from numeric_matrix.element_types import coerce_value, wrap_scalar


@pytest.mark.parametrize("dtype", [int, float, Fraction, np.int16, np.int32, np.int64, np.uint8, np.float32, np.float64])
def test_numeric_types_are_accepted(dtype) -> None:
    assert is_numeric_type(dtype)


@pytest.mark.parametrize("dtype", [bool, np.bool_, complex, np.complex128, Decimal, str, list, np.timedelta64, 3, None])
def test_non_numeric_types_are_rejected(dtype) -> None:
    assert not is_numeric_type(dtype)


@pytest.mark.parametrize(
    "dtype, label",
    [
        (np.int32, "integer"),
        (np.float32, "float"),
        (np.float64, "double"),
        (float, "double"),
        (np.int64, "long integer"),
        (np.int16, "short integer"),
        (int, "arbitrary-precision integer"),
        (np.uint8, "numeric"),
        (Fraction, "numeric"),
    ],
)
def test_type_names(dtype, label: str) -> None:
    assert type_name(dtype) == label


def test_zero_value_uses_element_type() -> None:
    assert zero_value(int) == 0
    assert type(zero_value(np.float32)) is np.float32


def test_parse_scalar_handles_each_kind() -> None:
    assert parse_scalar("-12", np.int16) == -12
    assert parse_scalar(" 2.5 ", np.float64) == 2.5
    assert parse_scalar("1/3", Fraction) == Fraction(1, 3)
    assert type(parse_scalar("7", np.int64)) is np.int64


@pytest.mark.parametrize("token, dtype", [("abc", float), ("1e3", int), ("2147483648", np.int32), ("", float)])
def test_parse_scalar_rejects_bad_tokens(token: str, dtype) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_scalar(token, dtype, position=4)
    assert excinfo.value.token == token
    assert excinfo.value.position == 4


def test_registry_offers_the_five_classic_types() -> None:
    assert supported_tags() == ("int", "float", "double", "long", "short")
    assert [entry.label for entry in SUPPORTED_TYPES] == [
        "integer",
        "float",
        "double",
        "long integer",
        "short integer",
    ]


def test_registry_factories_build_typed_matrices() -> None:
    short = get_element_type("short")
    matrix = short.from_rows([[1, 2]])
    assert matrix.dtype is np.int16
    assert short.zeros(2, 3).shape == (2, 3)
    assert short.parse_scalar("5") == 5


def test_registry_lookup_is_case_insensitive_and_strict() -> None:
    assert get_element_type(" Double ").dtype is np.float64
    with pytest.raises(KeyError, match="expected one of"):
        get_element_type("complex")


def test_element_type_requires_numeric_dtype() -> None:
    with pytest.raises(TypeError):
        ElementType("flag", bool)


def test_coerce_value_keeps_integer_types_exact() -> None:
    assert coerce_value(2.0, np.int32) == 2
    assert type(coerce_value(2, np.int32)) is np.int32
    assert coerce_value(Fraction(6, 3), int) == 2
    assert coerce_value(1, np.float32) == 1.0
    with pytest.raises(ValueError):
        coerce_value(2.5, int)
    with pytest.raises(ValueError):
        coerce_value(-40000, np.int16)
    with pytest.raises(TypeError):
        coerce_value(True, np.int16)


@pytest.mark.parametrize(
    "scalar, dtype, expected",
    [(70000, np.int16, 4464), (-1, np.uint8, 255), (2**31, np.int32, -(2**31)), (5, int, 5), (2.5, np.float64, 2.5)],
)
def test_wrap_scalar_follows_element_arithmetic(scalar, dtype, expected) -> None:
    value = wrap_scalar(scalar, dtype)
    assert value == expected
    assert type(value) is dtype


def test_wrap_scalar_rejects_fractional_factor_for_integers() -> None:
    with pytest.raises(TypeError, match="non-integral"):
        wrap_scalar(2.5, np.int16)
    with pytest.raises(TypeError):
        wrap_scalar(None, float)
