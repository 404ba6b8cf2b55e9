import pytest

from schemas.grading import StudentAggregate
from services.grading.statistics import compute_class_statistics, grade_band


@pytest.mark.parametrize("value, band", [
    (None, None),
    (19.5, "excellent"),
    (16.0, "excellent"),
    (15.99, "good"),
    (14.0, "good"),
    (10.0, "average"),
    (9.99, "poor"),
    (0.0, "poor"),
])
def test_grade_band(value, band):
    assert grade_band(value) == band


def test_class_statistics():
    roster = [
        StudentAggregate(student_id=1, general_average=16.0),
        StudentAggregate(student_id=2, general_average=8.0),
        StudentAggregate(student_id=3, general_average=12.0),
        StudentAggregate(student_id=4, general_average=None),
    ]
    stats = compute_class_statistics(roster)
    assert stats.total_students == 4
    assert stats.graded_students == 3
    assert stats.class_average == pytest.approx(12.0)
    assert stats.highest == 16.0
    assert stats.lowest == 8.0
    assert stats.passed == 2
    assert stats.success_rate == pytest.approx(200 / 3)


def test_statistics_without_grades():
    stats = compute_class_statistics([StudentAggregate(student_id=1)])
    assert stats.total_students == 1
    assert stats.graded_students == 0
    assert stats.class_average is None
    assert stats.success_rate is None


def test_custom_pass_mark():
    roster = [StudentAggregate(student_id=1, general_average=11.0)]
    assert compute_class_statistics(roster, pass_mark=12.0).passed == 0
