"""Configuration helpers for the matrix calculator.

The module centralises defaults to keep them consistent between the CLI, the
interactive session and tests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from numeric_matrix import DEFAULT_FIELD_WIDTH

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TYPE_TAG = "int"
FIELD_WIDTH_ENV = "MATRIX_CALC_FIELD_WIDTH"
LOG_LEVEL_ENV = "MATRIX_CALC_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class CalculatorSettings:
    """Presentation settings for a calculator session.

    Parameters
    ----------
    field_width:
        Width each matrix element is right-justified to when printed.
    log_level:
        Name of the :mod:`logging` level configured by the CLI.
    """

    field_width: int = DEFAULT_FIELD_WIDTH
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.field_width < 1:
            raise ValueError("field_width must be >= 1")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CalculatorSettings":
        """Read overrides from ``MATRIX_CALC_*`` environment variables.

        >>> CalculatorSettings.from_env({"MATRIX_CALC_FIELD_WIDTH": "5"}).field_width
        5
        """

        env = os.environ if environ is None else environ
        width_text = env.get(FIELD_WIDTH_ENV, "").strip()
        try:
            width = int(width_text) if width_text else DEFAULT_FIELD_WIDTH
        except ValueError as exc:
            raise ValueError(f"{FIELD_WIDTH_ENV} must be an integer, got {width_text!r}") from exc
        level = env.get(LOG_LEVEL_ENV, "").strip() or DEFAULT_LOG_LEVEL
        return cls(field_width=width, log_level=level.upper())

    def with_overrides(self, *, field_width: int | None = None, log_level: str | None = None) -> "CalculatorSettings":
        return CalculatorSettings(
            field_width=self.field_width if field_width is None else field_width,
            log_level=self.log_level if log_level is None else log_level.upper(),
        )
