import pytest

from services.grading.normalizer import InvalidMaximum, InvalidScore, normalize_score


def test_normalize_on_twenty_scale():
    assert normalize_score(15, 20) == 15.0
    assert normalize_score(8, 10) == 16.0
    assert normalize_score(30, 40) == 15.0


def test_zero_score():
    assert normalize_score(0, 10) == 0.0


def test_value_above_maximum_is_not_clamped():
    assert normalize_score(25, 20) == 25.0


@pytest.mark.parametrize("max_value", [0, -5])
def test_non_positive_maximum_rejected(max_value):
    with pytest.raises(InvalidMaximum) as exc_info:
        normalize_score(10, max_value)
    assert exc_info.value.max_value == max_value
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("value, max_value", [
    (float("inf"), 20),
    (float("nan"), 20),
    (10, float("inf")),
    (10, float("nan")),
])
def test_non_finite_score_rejected(value, max_value):
    with pytest.raises(InvalidScore):
        normalize_score(value, max_value)


def test_invalid_maximum_is_an_invalid_score():
    assert issubclass(InvalidMaximum, InvalidScore)
