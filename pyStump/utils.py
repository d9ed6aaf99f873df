from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .data import BASE_FEATURES
from .metrics import majority_label, weighted_gini

OPTIONAL_FEATURES: Tuple[str, ...] = ("f3",)


def field_value(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def ensure_columns(data) -> Tuple[Dict[str, np.ndarray], np.ndarray, List[str]]:
    """Turn points (a ``Dataset``, ``Point``s or mappings) into float columns.

    Absent feature values become NaN. ``f1`` and ``f2`` are always active;
    ``f3`` only when at least one record carries a numeric value for it.
    """
    records = list(data)

    labels = [field_value(r, "y") for r in records]
    if any(label not in (0, 1) for label in labels):
        raise ValueError("Labels must be 0 or 1.")
    y = np.array(labels, dtype=int)

    columns: Dict[str, np.ndarray] = {}
    for name in BASE_FEATURES + OPTIONAL_FEATURES:
        values = [field_value(r, name) for r in records]
        columns[name] = np.array(
            [np.nan if v is None else float(v) for v in values], dtype=float
        )

    feature_names = list(BASE_FEATURES)
    for name in OPTIONAL_FEATURES:
        if np.any(~np.isnan(columns[name])):
            feature_names.append(name)
    return columns, y, feature_names


@dataclass
class SplitCandidate:
    feature: str
    threshold: float
    impurity: float
    left_pred: int
    right_pred: int
    n_left: int
    n_right: int


def best_split_for_feature(
    feature: str, x: np.ndarray, y: np.ndarray
) -> Optional[SplitCandidate]:
    """Lowest weighted-Gini boundary on one feature, first one on ties."""
    present = ~np.isnan(x)
    x = x[present]
    y = y[present]
    if x.size < 2:
        return None

    order = np.argsort(x, kind="mergesort")
    x_sorted = x[order]
    y_sorted = y[order]

    # Equal neighbours cannot be separated by a threshold.
    split_positions = np.nonzero(np.diff(x_sorted) != 0)[0]
    if split_positions.size == 0:
        return None

    csum_1 = np.cumsum(y_sorted)
    total_1 = int(csum_1[-1])
    total_0 = int(x_sorted.size) - total_1

    left_n = split_positions + 1
    left_1 = csum_1[split_positions]
    left_0 = left_n - left_1
    right_1 = total_1 - left_1
    right_0 = total_0 - left_0

    impurities = weighted_gini(left_0, left_1, right_0, right_1)
    best_idx = int(np.argmin(impurities))
    pos = split_positions[best_idx]
    return SplitCandidate(
        feature=feature,
        threshold=float((x_sorted[pos] + x_sorted[pos + 1]) / 2),
        impurity=float(impurities[best_idx]),
        left_pred=majority_label(int(left_0[best_idx]), int(left_1[best_idx])),
        right_pred=majority_label(int(right_0[best_idx]), int(right_1[best_idx])),
        n_left=int(left_n[best_idx]),
        n_right=int(x_sorted.size - left_n[best_idx]),
    )


def find_best_split(
    columns: Dict[str, np.ndarray],
    y: np.ndarray,
    feature_names: List[str],
    history: Optional[List[SplitCandidate]] = None,
) -> Optional[SplitCandidate]:
    """Best boundary across features; an equal impurity never replaces an earlier one."""
    best: Optional[SplitCandidate] = None
    for name in feature_names:
        candidate = best_split_for_feature(name, columns[name], y)
        if candidate is None:
            continue
        if history is not None:
            history.append(candidate)
        if best is None or candidate.impurity < best.impurity:
            best = candidate
    return best
