from typing import List

from schemas.grading import StudentAggregate


def rank_class(students: List[StudentAggregate]) -> List[StudentAggregate]:
    """
    학급 석차 산정 (동점 공동 석차, 다음 석차는 건너뜀: 1, 1, 3, 4)
    - 평균이 없는 학생은 rank=None, 석차 인원(rank_total)에서도 제외
    - 반환 순서: 석차 순(동점은 입력 순서 유지) → 평균 없는 학생(입력 순서)
    """
    graded = [s for s in students if s.general_average is not None]
    ungraded = [s for s in students if s.general_average is None]

    # sorted()는 안정 정렬이므로 reverse=True 여도 동점자의 입력 순서 유지
    graded = sorted(graded, key=lambda s: s.general_average, reverse=True)

    previous = None
    for position, student in enumerate(graded, start=1):
        if previous is not None and previous.general_average == student.general_average:
            student.rank = previous.rank
        else:
            student.rank = position
        student.rank_total = len(graded)
        previous = student

    for student in ungraded:
        student.rank = None
        student.rank_total = len(graded)

    return graded + ungraded
