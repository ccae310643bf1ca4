"""Element-type rules for :class:`numeric_matrix.Matrix`.

A matrix element type must be a real numeric type that is not boolean.  That
covers Python ``int``/``float``/``Fraction`` as well as numpy's fixed-width
scalar types, whose arithmetic is used as-is (``numpy.int16`` wraps where a
Python ``int`` would grow).
"""

from __future__ import annotations

import numbers
from typing import Any, Mapping

import numpy as np

from .errors import ParseError

TYPE_NAMES: Mapping[type, str] = {
    np.int32: "integer",
    np.float32: "float",
    np.float64: "double",
    float: "double",
    np.int64: "long integer",
    np.int16: "short integer",
    int: "arbitrary-precision integer",
}
GENERIC_TYPE_NAME = "numeric"

_NON_NUMERIC = (bool, np.bool_, np.timedelta64)


def is_numeric_type(dtype: Any) -> bool:
    """Return ``True`` when ``dtype`` may parameterise a matrix.

    >>> is_numeric_type(int), is_numeric_type(np.float32), is_numeric_type(bool)
    (True, True, False)
    """

    if not isinstance(dtype, type):
        return False
    if issubclass(dtype, _NON_NUMERIC):
        return False
    return issubclass(dtype, numbers.Real)


def require_numeric_type(dtype: Any) -> type:
    if not is_numeric_type(dtype):
        raise TypeError(
            f"matrix element type must be a real, non-boolean numeric type; got {dtype!r}"
        )
    return dtype


def is_integral(dtype: type) -> bool:
    return issubclass(dtype, numbers.Integral)


def zero_value(dtype: type) -> Any:
    """The additive identity of ``dtype`` (``dtype()``)."""

    return dtype()


def type_name(dtype: type) -> str:
    """Human readable label for ``dtype``; unknown numeric types are ``"numeric"``."""

    return TYPE_NAMES.get(dtype, GENERIC_TYPE_NAME)


def parse_scalar(token: str, dtype: type, *, position: int | None = None) -> Any:
    """Parse a single text token as a value of ``dtype``.

    Integral types only accept integer literals, and fixed-width numpy integers
    reject literals outside their range instead of wrapping.
    """

    text = token.strip()
    try:
        if is_integral(dtype):
            value = int(text, 10)
            if issubclass(dtype, np.integer):
                info = np.iinfo(dtype)
                if not info.min <= value <= info.max:
                    raise OverflowError(f"{value} does not fit in {dtype.__name__}")
            return dtype(value)
        return dtype(text)
    except (ValueError, OverflowError, ZeroDivisionError) as exc:
        where = "" if position is None else f" at element {position}"
        raise ParseError(
            f"cannot read {token!r} as {type_name(dtype)}{where}",
            token=token,
            position=position,
        ) from exc


def coerce_value(value: Any, dtype: type) -> Any:
    """Convert a literal element value to ``dtype`` without truncating or wrapping.

    Integral types accept integers and integer-valued reals only, and
    fixed-width numpy integers reject values outside their range.
    """

    if isinstance(value, _NON_NUMERIC) or not isinstance(value, numbers.Real):
        raise TypeError(f"matrix elements must be real numbers, got {value!r}")
    if not is_integral(dtype):
        return dtype(value)
    if not isinstance(value, numbers.Integral):
        if not float(value).is_integer():
            raise ValueError(f"{value!r} is not an integer value for {type_name(dtype)}")
    whole = int(value)
    if issubclass(dtype, np.integer):
        info = np.iinfo(dtype)
        if not info.min <= whole <= info.max:
            raise ValueError(f"{whole} does not fit in {dtype.__name__}")
    return dtype(whole)


def wrap_scalar(scalar: Any, dtype: type) -> Any:
    """Convert a scalar factor to ``dtype`` the way ``dtype`` arithmetic would.

    Integers are reduced modulo the width of fixed-size numpy integer types.
    A non-integral factor for an integral type is a ``TypeError``.

    >>> int(wrap_scalar(70000, np.int16))
    4464
    """

    if isinstance(scalar, _NON_NUMERIC) or not isinstance(scalar, numbers.Real):
        raise TypeError(f"scalar must be a real number, got {scalar!r}")
    if not is_integral(dtype):
        return dtype(scalar)
    if not isinstance(scalar, numbers.Integral):
        raise TypeError(
            f"cannot scale a {type_name(dtype)} matrix by non-integral {scalar!r}"
        )
    whole = int(scalar)
    if issubclass(dtype, np.integer):
        info = np.iinfo(dtype)
        span = 1 << info.bits
        whole = (whole - info.min) % span + info.min
    return dtype(whole)
