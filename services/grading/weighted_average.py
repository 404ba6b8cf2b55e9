"""
과목 계수 적용 · 가중 전체 평균

- 계수 조회 순서: (과목, 학년 단계) 재정의 → 과목 기본 계수 → 1
- 평균이 없는 과목은 분자/분모 어디에도 포함하지 않음
"""

from typing import Iterable, Mapping, Optional, Tuple

from schemas.grading import SubjectAverage, WeightedAverage

DEFAULT_COEFFICIENT = 1


class CoefficientResolver:
    """(subject_id, level) → 계수"""

    def __init__(
        self,
        subject_coefficients: Optional[Mapping[int, int]] = None,
        level_coefficients: Optional[Mapping[Tuple[int, str], int]] = None,
    ):
        self.subject_coefficients = dict(subject_coefficients or {})
        self.level_coefficients = dict(level_coefficients or {})

    @classmethod
    def from_rows(cls, subjects, level_rows) -> "CoefficientResolver":
        """subjects / subject_level_coefficients 테이블 행(ORM 객체)으로 생성"""
        return cls(
            {s.id: s.coefficient for s in subjects if s.coefficient},
            {(r.subject_id, r.level): r.coefficient for r in level_rows},
        )

    def __call__(self, subject_id: int, level: Optional[str] = None) -> int:
        if level is not None:
            override = self.level_coefficients.get((subject_id, level))
            if override is not None:
                return override
        return self.subject_coefficients.get(subject_id, DEFAULT_COEFFICIENT)


def compute_weighted_average(
    subject_averages: Iterable[SubjectAverage],
    coefficient_resolver,
    level: Optional[str] = None,
) -> WeightedAverage:
    weighted_sum = 0.0
    coefficient_sum = 0

    for subject in subject_averages:
        subject.coefficient = coefficient_resolver(subject.subject_id, level)
        if subject.average is None:
            subject.weighted_average = None
            continue
        subject.weighted_average = subject.average * subject.coefficient
        weighted_sum += subject.weighted_average
        coefficient_sum += subject.coefficient

    general_average = weighted_sum / coefficient_sum if coefficient_sum > 0 else None
    return WeightedAverage(
        general_average=general_average,
        weighted_sum=weighted_sum,
        coefficient_sum=coefficient_sum,
    )
