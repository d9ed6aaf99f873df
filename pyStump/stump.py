from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from .metrics import majority_label
from .utils import SplitCandidate, ensure_columns, field_value, find_best_split

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StumpDescriptor:
    """A fitted depth-1 tree.

    ``feature`` and ``threshold`` are ``None`` for the constant-prediction
    fallback, in which case ``left_pred == right_pred`` is the majority label.
    """

    feature: Optional[str]
    threshold: Optional[float]
    left_pred: int
    right_pred: int
    error_count: int
    error_rate: float

    @property
    def is_constant(self) -> bool:
        return self.feature is None

    def predict_value(self, value: Optional[float]) -> Optional[int]:
        if self.is_constant:
            return self.left_pred
        if value is None or math.isnan(value):
            return None
        return self.left_pred if value <= self.threshold else self.right_pred

    def predict_row(self, row) -> Optional[int]:
        """Predict one point or mapping; ``None`` if the split feature is absent."""
        if self.is_constant:
            return self.left_pred
        return self.predict_value(field_value(row, self.feature))

    def predict(self, rows) -> List[Optional[int]]:
        return [self.predict_row(row) for row in rows]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)


class StumpTrainer:
    """Exhaustive Gini search for the best single-feature threshold.

    Parameters
    ----------
    store_history : bool
        If True, keeps the best boundary found on each feature.
    """

    def __init__(self, store_history: bool = False) -> None:
        self.store_history = store_history
        self.history_: List[SplitCandidate] = []
        self.stump_: Optional[StumpDescriptor] = None

    def fit(self, data) -> Optional[StumpDescriptor]:
        """Fit on a ``Dataset`` or a sequence of points/mappings.

        Returns ``None`` for an empty input. A point whose value for the chosen
        feature is absent always counts as misclassified.
        """
        self.history_ = []
        self.stump_ = None
        columns, y, feature_names = ensure_columns(data)
        n = int(y.size)
        if n == 0:
            logger.debug("Empty dataset, no stump fitted")
            return None

        history: Optional[List[SplitCandidate]] = [] if self.store_history else None
        best = find_best_split(columns, y, feature_names, history=history)
        if history is not None:
            self.history_ = history

        if best is None:
            count1 = int(np.sum(y))
            label = majority_label(n - count1, count1)
            errors = int(np.sum(y != label))
            logger.debug("No valid boundary, constant prediction %d", label)
            self.stump_ = StumpDescriptor(
                feature=None,
                threshold=None,
                left_pred=label,
                right_pred=label,
                error_count=errors,
                error_rate=errors / n,
            )
            return self.stump_

        # Re-apply the split to every point; impurity bookkeeping is not reused.
        x = columns[best.feature]
        preds = np.where(x <= best.threshold, best.left_pred, best.right_pred)
        wrong = (preds != y) | np.isnan(x)
        errors = int(np.sum(wrong))
        self.stump_ = StumpDescriptor(
            feature=best.feature,
            threshold=best.threshold,
            left_pred=best.left_pred,
            right_pred=best.right_pred,
            error_count=errors,
            error_rate=errors / n,
        )
        logger.debug(
            "Best split %s <= %.4f (impurity %.4f, %d errors)",
            best.feature,
            best.threshold,
            best.impurity,
            errors,
        )
        return self.stump_

    def summary(self) -> List[Dict[str, Any]]:
        """Return the per-feature best boundaries for diagnostics."""
        return [asdict(c) for c in self.history_]

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        return {"store_history": self.store_history}

    def set_params(self, **params) -> "StumpTrainer":
        for key, value in params.items():
            if key not in self.get_params():
                raise ValueError(f"Unknown parameter {key}")
            setattr(self, key, value)
        return self
