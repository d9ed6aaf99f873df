from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

import numpy as np

logger = logging.getLogger(__name__)


class UniformSource(Protocol):
    """Anything that yields floats uniformly distributed in ``[0, 1)``."""

    def random(self) -> float:
        ...


class SystemUniformSource:
    """Uniform draws backed by the operating system's entropy pool."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def random(self) -> float:
        return self._rng.random()


class NumpyUniformSource:
    """Uniform draws from a numpy ``Generator`` (seedable)."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())


def default_uniform_source() -> UniformSource:
    """Prefer OS entropy, fall back to numpy's PCG64 when it is unavailable."""
    source = SystemUniformSource()
    try:
        source.random()
    except NotImplementedError:
        logger.debug("OS entropy unavailable, falling back to numpy generator")
        return NumpyUniformSource()
    return source
