"""Shared test fixtures."""

from __future__ import annotations

from itertools import cycle
from typing import Iterable

import pytest


class SequenceSource:
    """Uniform source replaying a fixed list of draws, cyclically."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = cycle(list(values))

    def random(self) -> float:
        return next(self._values)


@pytest.fixture
def sequence_source():
    return SequenceSource
