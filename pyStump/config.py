from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ClusterSpec:
    """Centre and dispersion of one Gaussian blob."""

    cx: float
    cy: float
    sigma: float = 0.8


@dataclass
class GeneratorConfig:
    """Parameters of the two-blob generator.

    Points are labelled 1 when ``w1 * x1 + w2 * x2 + b + noise > 0`` with
    ``noise`` uniform in ``[-label_noise, label_noise]``. The optional third
    feature is ``f3_w1 * x1 + f3_w2 * x2 + noise`` with ``noise`` uniform in
    ``[-f3_noise, f3_noise]``; it never enters the label.
    """

    cluster_a: ClusterSpec = field(default_factory=lambda: ClusterSpec(-1.0, -0.5))
    cluster_b: ClusterSpec = field(default_factory=lambda: ClusterSpec(1.2, 0.7))
    w1: float = 0.9
    w2: float = -0.7
    b: float = 0.1
    label_noise: float = 0.1
    f3_w1: float = 0.4
    f3_w2: float = -0.2
    f3_noise: float = 0.25
    u1_floor: float = 1e-9


@dataclass
class SessionConfig:
    n_points: int = 15
    feature_counts: Tuple[int, int] = (2, 3)
    filename_prefix: str = "adaboost_dataset"
