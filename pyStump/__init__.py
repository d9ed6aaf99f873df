"""pyStump: synthetic two-cluster data and a Gini-optimal decision stump.

A small teaching aid for AdaBoost: generate a labelled 2D/3D point set,
fit the best single-threshold split and compute the stump's amount of say.
"""

from .data import Dataset, Point
from .generator import DatasetGenerator
from .metrics import say
from .session import StumpSession
from .stump import StumpDescriptor, StumpTrainer

__all__ = [
    "Dataset",
    "DatasetGenerator",
    "Point",
    "StumpDescriptor",
    "StumpSession",
    "StumpTrainer",
    "say",
]
