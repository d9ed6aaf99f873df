from __future__ import annotations

import math

import numpy as np


def gini_of_counts(count0, count1):
    """Gini impurity ``1 - (p0² + p1²)``; an empty group has impurity 0.

    Works on scalars and on numpy arrays of counts alike.
    """
    c0 = np.asarray(count0, dtype=float)
    c1 = np.asarray(count1, dtype=float)
    total = c0 + c1
    safe = np.where(total > 0, total, 1.0)
    p0 = c0 / safe
    p1 = c1 / safe
    gini = np.where(total > 0, 1.0 - (p0 * p0 + p1 * p1), 0.0)
    return float(gini) if gini.ndim == 0 else gini


def weighted_gini(left0, left1, right0, right1):
    """Size-weighted mean of the left and right Gini impurities."""
    n_left = np.asarray(left0, dtype=float) + np.asarray(left1, dtype=float)
    n_right = np.asarray(right0, dtype=float) + np.asarray(right1, dtype=float)
    impurity = (
        n_left * gini_of_counts(left0, left1) + n_right * gini_of_counts(right0, right1)
    ) / (n_left + n_right)
    return float(impurity) if np.ndim(impurity) == 0 else impurity


def majority_label(count0: int, count1: int) -> int:
    """Majority class, ties resolved toward label 1."""
    return 1 if count1 >= count0 else 0


def say(error_rate: float) -> float:
    """AdaBoost amount of say ``0.5 * ln((1 - e) / e)``.

    Perfect stumps get ``+inf`` and always-wrong stumps get ``-inf``.
    """
    if error_rate <= 0:
        return math.inf
    if error_rate >= 1:
        return -math.inf
    return 0.5 * math.log((1.0 - error_rate) / error_rate)
