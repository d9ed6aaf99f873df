import csv
from datetime import datetime

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from pyStump.config import SessionConfig
from pyStump.generator import DatasetGenerator
from pyStump.plotting import plot_dataset
from pyStump.random_source import NumpyUniformSource
from pyStump.session import StumpSession
from pyStump.stump import StumpDescriptor


def test_reveal_without_dataset_is_noop(tmp_path):
    session = StumpSession()
    assert session.reveal() is None
    with pytest.raises(RuntimeError):
        session.export_csv(tmp_path)


def test_regenerate_reveal_export(tmp_path):
    session = StumpSession(generator=DatasetGenerator(source=NumpyUniformSource(seed=7)))

    data = session.regenerate()
    assert len(data) == 15
    assert data.feature_count in (2, 3)
    assert session.answer is None

    result = session.reveal()
    assert result is session.answer
    assert result.text.startswith("Say: ")
    assert f"({result.stump.error_count}/15)" in result.text

    path = session.export_csv(tmp_path, when=datetime(2025, 1, 2, 3, 4, 5))
    assert path.name == f"adaboost_dataset_15rows_{data.feature_count}f_20250102_030405.csv"
    with path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert [int(r["id"]) for r in rows] == list(range(1, 16))
    assert ("f3" in rows[0]) == (data.feature_count == 3)

    # A new dataset replaces the old one and clears the answer.
    new_data = session.regenerate()
    assert new_data is not data
    assert session.answer is None


def test_session_feature_count_follows_coin(sequence_source):
    session = StumpSession(
        config=SessionConfig(n_points=4),
        generator=DatasetGenerator(source=sequence_source([0.7, 0.3, 0.6, 0.2, 0.5])),
    )
    data = session.regenerate()
    assert data.feature_count == 3
    assert len(data) == 4


def test_plot_dataset_draws_threshold():
    data = DatasetGenerator(source=NumpyUniformSource(seed=1)).generate(20, 2)
    fig, ax = plt.subplots()

    plot_dataset(data, StumpDescriptor("f1", 0.0, 0, 1, 3, 0.15), ax=ax)
    assert len(ax.lines) == 1
    assert ax.get_xlabel() == "f1"

    ax2 = plot_dataset(data, StumpDescriptor(None, None, 1, 1, 9, 0.45))
    assert len(ax2.lines) == 0
    plt.close("all")
