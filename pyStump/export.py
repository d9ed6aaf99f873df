from __future__ import annotations

import math
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .data import Dataset
from .stump import StumpDescriptor


def format_number(x: Optional[float]) -> str:
    """Three decimals, or an empty string for an absent value."""
    return f"{x:.3f}" if isinstance(x, (int, float)) else ""


def to_csv(dataset: Dataset) -> str:
    """Header ``id,f1,f2[,f3],y`` followed by one line per point."""
    if len(dataset) == 0:
        return ""
    names = dataset.feature_names
    lines = [",".join(["id"] + names + ["y"])]
    for p in dataset:
        values = [str(p.id)] + [format_number(p.value(name)) for name in names]
        values.append(str(p.y))
        lines.append(",".join(values))
    return "\n".join(lines)


def suggested_filename(
    dataset: Dataset, when: Optional[datetime] = None, prefix: str = "adaboost_dataset"
) -> str:
    stamp = (when or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{len(dataset)}rows_{dataset.feature_count}f_{stamp}.csv"


def write_csv(dataset: Dataset, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(to_csv(dataset), encoding="utf-8")
    return path


def format_say(value: float) -> str:
    if math.isinf(value):
        return "+∞" if value > 0 else "-∞"
    return f"{value:.3f}"


def format_answer(stump: StumpDescriptor, say_value: float, n_rows: int) -> str:
    parts = [
        f"Say: {format_say(say_value)}",
        f"Training error: {stump.error_rate * 100:.1f}% ({stump.error_count}/{n_rows})",
    ]
    if stump.is_constant:
        parts.append(f"Stump: constant prediction = {stump.left_pred}")
    else:
        parts.append(
            f"Stump: {stump.feature} ≤ {format_number(stump.threshold)} → "
            f"{stump.left_pred}, else {stump.right_pred}"
        )
    return " · ".join(parts)
