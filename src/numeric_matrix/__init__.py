"""Generic dense numeric matrices with bounds-checked access and text I/O."""

from importlib import metadata

from .element_types import coerce_value, is_numeric_type, parse_scalar, type_name, wrap_scalar, zero_value
from .errors import ErrorKind, MatrixError, OutOfRange, Outcome, ParseError, ShapeMismatch, attempt
from .matrix import DEFAULT_FIELD_WIDTH, Matrix
from .registry import SUPPORTED_TYPES, ElementType, get_element_type, supported_tags
from .streams import TokenReader

__all__ = [
    "DEFAULT_FIELD_WIDTH",
    "ElementType",
    "ErrorKind",
    "Matrix",
    "MatrixError",
    "OutOfRange",
    "Outcome",
    "ParseError",
    "SUPPORTED_TYPES",
    "ShapeMismatch",
    "TokenReader",
    "attempt",
    "coerce_value",
    "get_element_type",
    "is_numeric_type",
    "parse_scalar",
    "supported_tags",
    "type_name",
    "wrap_scalar",
    "zero_value",
    "__version__",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("numeric-matrix")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)
