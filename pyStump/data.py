from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

BASE_FEATURES: Tuple[str, ...] = ("f1", "f2")


@dataclass(frozen=True)
class Point:
    """One labelled sample. ``f3`` is only set in three-feature datasets."""

    id: int
    f1: float
    f2: float
    y: int
    f3: Optional[float] = None

    def value(self, feature: str) -> Optional[float]:
        return getattr(self, feature)


@dataclass(frozen=True)
class DatasetSummary:
    n_rows: int
    feature_count: int
    class_0: int
    class_1: int

    def __str__(self) -> str:
        return (
            f"Rows: {self.n_rows} · Features: {self.feature_count} · "
            f"Class 0: {self.class_0} · Class 1: {self.class_1}"
        )


@dataclass(frozen=True)
class Dataset:
    """Ordered, immutable collection of points sharing one feature count.

    ``feature_count`` is a dataset-level flag: with 3 every point carries
    ``f3``, with 2 none does.
    """

    points: Tuple[Point, ...]
    feature_count: int

    def __post_init__(self) -> None:
        if self.feature_count not in (2, 3):
            raise ValueError("feature_count must be 2 or 3.")
        object.__setattr__(self, "points", tuple(self.points))
        has_f3 = self.feature_count == 3
        for p in self.points:
            if (p.f3 is not None) != has_f3:
                raise ValueError(
                    f"Point {p.id} does not match feature_count={self.feature_count}."
                )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @property
    def feature_names(self) -> List[str]:
        names = list(BASE_FEATURES)
        if self.feature_count == 3:
            names.append("f3")
        return names

    def class_counts(self) -> Dict[int, int]:
        counts = {0: 0, 1: 0}
        for p in self.points:
            counts[p.y] += 1
        return counts

    def summary(self) -> DatasetSummary:
        counts = self.class_counts()
        return DatasetSummary(
            n_rows=len(self.points),
            feature_count=self.feature_count,
            class_0=counts[0],
            class_1=counts[1],
        )

    def to_numpy(self) -> Tuple[np.ndarray, np.ndarray, List[str]]:
        """Return ``(X, y, feature_names)`` with one column per active feature."""
        names = self.feature_names
        X = np.array(
            [[p.value(name) for name in names] for p in self.points], dtype=float
        ).reshape(len(self.points), len(names))
        y = np.array([p.y for p in self.points], dtype=int)
        return X, y, names
