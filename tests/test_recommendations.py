import pytest

from meridianscan.recommendations import Recommendations
from meridianscan.scan_session import MERIDIAN_KEYS

NORM_MAX = 60.0
NORM_MIN = 40.0

LUNG_INSUFFICIENT = (
    "The lung is working insufficiently, if abnormities persist over time, "
    "we recommend that you see a lung specialist\n"
)
STOMACH_HYPERACTIVE = (
    "The stomach is working hyperactively, if abnormities persist over time, "
    "we recommend that you see a stomach specialist\n"
)
HEART_IRREGULAR = (
    "The heart is working irregularly, if abnormities persist over time, "
    "we recommend that you see a heart specialist\n"
)


def normal_points(**overrides):
    points = {key: 50.0 for key in MERIDIAN_KEYS}
    points.update(overrides)
    return points


def run(points):
    rec = Recommendations(points)
    return rec.calculate_abnormities(NORM_MAX, NORM_MIN)


def test_all_normal_gives_no_advice():
    assert run(normal_points()) == []


def test_left_low_right_normal_is_insufficient():
    assert run(normal_points(h1Left=10.0)) == [LUNG_INSUFFICIENT]


def test_only_right_low_is_insufficient():
    assert run(normal_points(h1Right=10.0)) == [LUNG_INSUFFICIENT]


def test_both_high_is_hyperactive():
    assert run(normal_points(f6Left=90.0, f6Right=90.0)) == [STOMACH_HYPERACTIVE]


def test_only_right_high_is_hyperactive():
    assert run(normal_points(f6Right=90.0)) == [STOMACH_HYPERACTIVE]


@pytest.mark.parametrize(
    "left, right",
    [
        (10.0, 90.0),
        (90.0, 10.0),
        (10.0, NORM_MAX),
        (10.0, NORM_MIN + 0.0) if False else (90.0, NORM_MIN),
        (90.0, NORM_MAX - 0.0) if False else (10.0, NORM_MAX),
    ],
)
def test_opposite_or_boundary_sides_are_irregular(left, right):
    assert run(normal_points(h3Left=left, h3Right=right)) == [HEART_IRREGULAR]


def test_left_high_right_exactly_max_is_irregular():
    assert run(normal_points(h3Left=90.0, h3Right=NORM_MAX)) == [HEART_IRREGULAR]


def test_boundaries_on_both_sides_count_as_normal():
    assert run(normal_points(h1Left=NORM_MIN, h1Right=NORM_MAX)) == []


def test_every_organ_reported_in_order():
    advice = run({key: 0.0 for key in MERIDIAN_KEYS})
    assert len(advice) == 12
    assert advice[0] == LUNG_INSUFFICIENT
    organs = [line.split(" is working")[0][len("The "):] for line in advice]
    assert organs == [
        "lung", "pericardium", "heart", "small intestine", "lymph vessel",
        "large intestine", "pancreas", "liver", "kidney", "bladder",
        "gall bladder", "stomach",
    ]
    assert all("insufficiently" in line for line in advice)


def test_missing_points_read_as_zero():
    advice = Recommendations({}).calculate_abnormities(NORM_MAX, NORM_MIN)
    assert len(advice) == 12
    assert advice[0] == LUNG_INSUFFICIENT


def test_repeated_calculation_accumulates():
    rec = Recommendations(normal_points(h1Left=10.0))
    rec.calculate_abnormities(NORM_MAX, NORM_MIN)
    rec.calculate_abnormities(NORM_MAX, NORM_MIN)
    assert rec.recommendations() == [LUNG_INSUFFICIENT, LUNG_INSUFFICIENT]


def test_recommendations_returns_copy():
    rec = Recommendations(normal_points(h1Left=10.0))
    rec.calculate_abnormities(NORM_MAX, NORM_MIN)
    rec.recommendations().clear()
    assert rec.recommendations() == [LUNG_INSUFFICIENT]


def test_input_mapping_is_copied():
    points = normal_points()
    rec = Recommendations(points)
    points["h1Left"] = 10.0
    assert rec.calculate_abnormities(NORM_MAX, NORM_MIN) == []