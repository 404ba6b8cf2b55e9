from typing import Iterable, Optional

from schemas.grading import ClassStatistics, StudentAggregate

# 성적 구간 (하한, 이름) - 높은 구간부터 검사
GRADE_BANDS = [
    (16.0, "excellent"),
    (14.0, "good"),
    (10.0, "average"),
]


def grade_band(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    for lower, name in GRADE_BANDS:
        if value >= lower:
            return name
    return "poor"


def compute_class_statistics(students: Iterable[StudentAggregate], pass_mark: float = 10.0) -> ClassStatistics:
    """학급 요약 통계 (평균 없는 학생은 인원수에만 포함)"""
    students = list(students)
    averages = [s.general_average for s in students if s.general_average is not None]
    if not averages:
        return ClassStatistics(total_students=len(students))

    passed = sum(1 for avg in averages if avg >= pass_mark)
    return ClassStatistics(
        total_students=len(students),
        graded_students=len(averages),
        class_average=sum(averages) / len(averages),
        highest=max(averages),
        lowest=min(averages),
        passed=passed,
        success_rate=passed / len(averages) * 100,
    )
