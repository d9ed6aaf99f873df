from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt

from .data import Dataset
from .stump import StumpDescriptor

CLASS_COLORS = {0: "#1d3557", 1: "#e76f51"}


def plot_dataset(
    dataset: Dataset,
    stump: Optional[StumpDescriptor] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Scatter f1 against f2 coloured by label, with the stump threshold if any."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))
    X, y, names = dataset.to_numpy()
    for label, color in CLASS_COLORS.items():
        mask = y == label
        ax.scatter(X[mask, 0], X[mask, 1], alpha=0.8, s=30, color=color, label=f"y={label}")

    if stump is not None and not stump.is_constant:
        # f3 is not on either axis.
        if stump.feature == "f1":
            ax.axvline(stump.threshold, color="0.4", linestyle="--", label="threshold")
        elif stump.feature == "f2":
            ax.axhline(stump.threshold, color="0.4", linestyle="--", label="threshold")

    ax.set_xlabel(names[0])
    ax.set_ylabel(names[1])
    ax.legend()
    ax.set_title(f"{len(dataset)} points, {dataset.feature_count} features")
    return ax
