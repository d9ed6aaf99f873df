import math

import numpy as np
import pytest

from pyStump.metrics import gini_of_counts, majority_label, say, weighted_gini


def test_gini_of_counts():
    assert gini_of_counts(0, 0) == 0.0
    assert gini_of_counts(4, 0) == 0.0
    assert gini_of_counts(2, 2) == pytest.approx(0.5)
    assert gini_of_counts(1, 2) == pytest.approx(4.0 / 9.0)


def test_gini_of_counts_vectorised():
    out = gini_of_counts(np.array([0, 1, 2]), np.array([0, 1, 0]))
    assert out.shape == (3,)
    assert out.tolist() == pytest.approx([0.0, 0.5, 0.0])


def test_weighted_gini():
    assert weighted_gini(2, 0, 0, 2) == 0.0
    assert weighted_gini(1, 0, 1, 2) == pytest.approx(1.0 / 3.0)


def test_majority_label_ties_toward_one():
    assert majority_label(3, 1) == 0
    assert majority_label(1, 3) == 1
    assert majority_label(2, 2) == 1
    assert majority_label(0, 0) == 1


def test_say_boundaries():
    assert say(0.0) == math.inf
    assert say(1.0) == -math.inf
    assert say(-0.1) == math.inf
    assert say(1.5) == -math.inf
    assert say(0.5) == 0.0


def test_say_matches_log_odds():
    assert say(0.2) == pytest.approx(0.5 * math.log(4.0))
    assert say(0.2) == say(0.2)


def test_say_is_strictly_decreasing():
    rates = np.linspace(0.01, 0.99, 50)
    values = [say(float(r)) for r in rates]
    assert all(a > b for a, b in zip(values, values[1:]))
