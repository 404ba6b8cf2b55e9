from typing import Iterable

from schemas.grading import Score, SubjectAverage
from services.grading.normalizer import normalize_score


def compute_subject_average(subject_id: int, scores: Iterable[Score]) -> SubjectAverage:
    """
    학생 1명 · 과목 1개 · 기간 1개의 점수들로 과목 평균 계산
    - 모든 평가는 유형(interro/devoir/exam)과 무관하게 같은 비중
    - 유형별 묶음(grades)은 화면 표시용이며 평균에 영향 없음
    - 점수가 하나도 없으면 average=None (과목을 빼지 않음)
    """
    result = SubjectAverage(subject_id=subject_id)
    for score in scores:
        normalized = normalize_score(score.value, score.max_value)
        result.values.append(normalized)
        result.grades.setdefault(score.grade_type, []).append(normalized)

    if result.values:
        result.average = sum(result.values) / len(result.values)
    return result
