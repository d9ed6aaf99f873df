import math
from datetime import datetime

from pyStump.data import Dataset, Point
from pyStump.export import (
    format_answer,
    format_number,
    format_say,
    suggested_filename,
    to_csv,
    write_csv,
)
from pyStump.metrics import say
from pyStump.stump import StumpDescriptor


def _two_feature_data():
    return Dataset(
        points=(Point(id=1, f1=0.12345, f2=-1.0, y=1), Point(id=2, f1=2.0, f2=0.5, y=0)),
        feature_count=2,
    )


def test_format_number():
    assert format_number(1.23456) == "1.235"
    assert format_number(-0.5) == "-0.500"
    assert format_number(None) == ""


def test_csv_two_features():
    assert to_csv(_two_feature_data()) == "id,f1,f2,y\n1,0.123,-1.000,1\n2,2.000,0.500,0"


def test_csv_three_features():
    data = Dataset(points=(Point(id=1, f1=1.0, f2=2.0, f3=0.0004, y=0),), feature_count=3)
    assert to_csv(data) == "id,f1,f2,f3,y\n1,1.000,2.000,0.000,0"


def test_csv_empty():
    assert to_csv(Dataset(points=(), feature_count=2)) == ""


def test_write_csv(tmp_path):
    path = write_csv(_two_feature_data(), tmp_path / "out.csv")
    assert path.read_text(encoding="utf-8").splitlines()[0] == "id,f1,f2,y"


def test_suggested_filename():
    when = datetime(2024, 3, 5, 7, 8, 9)
    assert (
        suggested_filename(_two_feature_data(), when=when)
        == "adaboost_dataset_2rows_2f_20240305_070809.csv"
    )


def test_format_say():
    assert format_say(math.inf) == "+∞"
    assert format_say(-math.inf) == "-∞"
    assert format_say(0.34657) == "0.347"


def test_answer_for_split():
    stump = StumpDescriptor("f1", 1.5, 0, 1, 0, 0.0)
    text = format_answer(stump, say(stump.error_rate), 4)
    assert text == "Say: +∞ · Training error: 0.0% (0/4) · Stump: f1 ≤ 1.500 → 0, else 1"


def test_answer_for_constant_prediction():
    stump = StumpDescriptor(None, None, 1, 1, 1, 1.0 / 3.0)
    text = format_answer(stump, say(stump.error_rate), 3)
    assert text == "Say: 0.347 · Training error: 33.3% (1/3) · Stump: constant prediction = 1"
