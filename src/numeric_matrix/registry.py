"""Closed set of element types offered to interactive users.

Each entry pairs a short tag with the numpy scalar type it instantiates so a
caller can pick an instantiation at runtime by tag instead of by type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

import numpy as np

from .element_types import parse_scalar, require_numeric_type, type_name
from .matrix import Matrix


@dataclass(frozen=True, slots=True)
class ElementType:
    """A selectable matrix element type."""

    tag: str
    dtype: type

    def __post_init__(self) -> None:
        require_numeric_type(self.dtype)

    @property
    def label(self) -> str:
        return type_name(self.dtype)

    def zeros(self, rows: int, cols: int) -> Matrix[Any]:
        return Matrix(rows, cols, self.dtype)

    def from_rows(self, rows: Sequence[Sequence[Any]]) -> Matrix[Any]:
        return Matrix.from_rows(rows, dtype=self.dtype)

    def parse_scalar(self, token: str) -> Any:
        return parse_scalar(token, self.dtype)

    def describe(self) -> str:
        """
        >>> ElementType("short", np.int16).describe()
        'short integer matrix (int16)'
        """

        return f"{self.label} matrix ({self.dtype.__name__})"


SUPPORTED_TYPES: Tuple[ElementType, ...] = (
    ElementType("int", np.int32),
    ElementType("float", np.float32),
    ElementType("double", np.float64),
    ElementType("long", np.int64),
    ElementType("short", np.int16),
)


def supported_tags() -> Tuple[str, ...]:
    return tuple(entry.tag for entry in SUPPORTED_TYPES)


def get_element_type(tag: str) -> ElementType:
    normalised = tag.strip().lower()
    for entry in SUPPORTED_TYPES:
        if entry.tag == normalised:
            return entry
    raise KeyError(f"unknown element type {tag!r}; expected one of: {', '.join(supported_tags())}")
