"""Top-level package for the interactive matrix calculator."""

from .config import DEFAULT_FIELD_WIDTH, CalculatorSettings
from .session import CalculatorSession

__all__ = [
    "DEFAULT_FIELD_WIDTH",
    "CalculatorSession",
    "CalculatorSettings",
]
