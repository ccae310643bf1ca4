from __future__ import annotations

import io

import pytest
from rich.console import Console

from numeric_matrix import Matrix


@pytest.fixture()
def int_pair() -> tuple[Matrix[int], Matrix[int]]:
    left = Matrix.from_rows([[1, 2], [3, 4]], dtype=int)
    right = Matrix.from_rows([[5, 6], [7, 8]], dtype=int)
    return left, right


@pytest.fixture()
def console_buffer() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, force_terminal=False)
    return console, buffer
