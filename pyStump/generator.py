from __future__ import annotations

import logging
import math
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

from .config import ClusterSpec, GeneratorConfig
from .data import Dataset, Point
from .random_source import UniformSource, default_uniform_source

logger = logging.getLogger(__name__)


class DatasetGenerator:
    """Synthetic two-cluster dataset with a noisy linear labelling rule.

    Parameters
    ----------
    config : Optional[GeneratorConfig]
        Cluster centres, label weights and noise levels.
    source : Optional[UniformSource]
        Provider of uniform ``[0, 1)`` draws. Defaults to OS entropy with a
        numpy fallback; tests pass a fixed sequence instead.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        source: Optional[UniformSource] = None,
    ) -> None:
        self.config = config if config is not None else GeneratorConfig()
        self.source = source if source is not None else default_uniform_source()

    def random_feature_count(self, choices: Tuple[int, int] = (2, 3)) -> int:
        """Fair coin between the two feature counts."""
        return choices[0] if self.source.random() < 0.5 else choices[1]

    def _sample_blob(self, cluster: ClusterSpec) -> Tuple[float, float]:
        # Box-Muller; u1 must stay away from 0 for the log.
        u1 = self.source.random() or self.config.u1_floor
        u2 = self.source.random()
        radius = math.sqrt(-2.0 * math.log(u1)) * cluster.sigma
        theta = 2.0 * math.pi * u2
        return cluster.cx + radius * math.cos(theta), cluster.cy + radius * math.sin(theta)

    def _sample_point(self, point_id: int, feature_count: int) -> Point:
        cfg = self.config
        cluster = cfg.cluster_b if self.source.random() < 0.5 else cfg.cluster_a
        x1, x2 = self._sample_blob(cluster)

        x3 = None
        if feature_count == 3:
            noise = (self.source.random() - 0.5) * 2.0 * cfg.f3_noise
            x3 = cfg.f3_w1 * x1 + cfg.f3_w2 * x2 + noise

        noise = (self.source.random() - 0.5) * 2.0 * cfg.label_noise
        score = cfg.w1 * x1 + cfg.w2 * x2 + cfg.b + noise
        return Point(id=point_id, f1=x1, f2=x2, f3=x3, y=1 if score > 0 else 0)

    def generate(self, n: int, feature_count: int = 2) -> Dataset:
        if n < 1:
            raise ValueError("n must be a positive integer.")
        if feature_count not in (2, 3):
            raise ValueError("feature_count must be 2 or 3.")

        points: List[Point] = [self._sample_point(i + 1, feature_count) for i in range(n)]
        dataset = Dataset(points=tuple(points), feature_count=feature_count)
        logger.debug("Generated %d points with %d features", n, feature_count)
        return dataset

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        params: Dict[str, Any] = {"config": self.config, "source": self.source}
        if deep:
            params.update(asdict(self.config))
        return params

    def set_params(self, **params) -> "DatasetGenerator":
        for key, value in params.items():
            if key in ("config", "source"):
                setattr(self, key, value)
            elif hasattr(self.config, key):
                setattr(self.config, key, value)
            else:
                raise ValueError(f"Unknown parameter {key}")
        return self
