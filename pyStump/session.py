from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .config import SessionConfig
from .data import Dataset
from .export import format_answer, suggested_filename, write_csv
from .generator import DatasetGenerator
from .metrics import say
from .stump import StumpDescriptor, StumpTrainer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevealResult:
    stump: StumpDescriptor
    say: float
    text: str


class StumpSession:
    """Holds the current dataset between a regenerate and the next one.

    ``regenerate`` replaces the dataset wholesale and clears the last answer;
    ``reveal`` fits a stump on whatever dataset is current.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        generator: Optional[DatasetGenerator] = None,
        trainer: Optional[StumpTrainer] = None,
    ) -> None:
        self.config = config if config is not None else SessionConfig()
        self.generator = generator if generator is not None else DatasetGenerator()
        self.trainer = trainer if trainer is not None else StumpTrainer()
        self.dataset: Optional[Dataset] = None
        self.answer: Optional[RevealResult] = None

    def regenerate(self) -> Dataset:
        feature_count = self.generator.random_feature_count(self.config.feature_counts)
        self.dataset = self.generator.generate(self.config.n_points, feature_count)
        self.answer = None
        logger.debug("Session regenerated: %s", self.dataset.summary())
        return self.dataset

    def reveal(self) -> Optional[RevealResult]:
        if self.dataset is None or len(self.dataset) == 0:
            return None
        stump = self.trainer.fit(self.dataset)
        if stump is None:
            return None
        say_value = say(stump.error_rate)
        self.answer = RevealResult(
            stump=stump,
            say=say_value,
            text=format_answer(stump, say_value, len(self.dataset)),
        )
        return self.answer

    def export_csv(
        self, directory: Union[str, Path], when: Optional[datetime] = None
    ) -> Path:
        if self.dataset is None:
            raise RuntimeError("No dataset to export; call regenerate() first.")
        name = suggested_filename(self.dataset, when=when, prefix=self.config.filename_prefix)
        path = write_csv(self.dataset, Path(directory) / name)
        logger.debug("Exported %d rows to %s", len(self.dataset), path)
        return path
