"""
학급 성적 파이프라인

점수 행 → 과목 평균 → 가중 전체 평균 → 석차 를 한 번에 수행.
DB에 의존하지 않으며, 호출자가 조회한 행(ORM 객체 또는 Score)을 그대로 넘기면 됨.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from schemas.grading import Score, StudentAggregate
from services.grading.normalizer import InvalidScore, normalize_score
from services.grading.ranking import rank_class
from services.grading.subject_averager import compute_subject_average
from services.grading.weighted_average import compute_weighted_average

logger = logging.getLogger(__name__)


def _as_score(row) -> Score:
    return row if isinstance(row, Score) else Score.model_validate(row)


def build_class_roster(
    student_ids: Sequence[int],
    subject_ids: Sequence[int],
    scores: Iterable,
    coefficient_resolver,
    level: Optional[str] = None,
) -> List[StudentAggregate]:
    students = {student_id: StudentAggregate(student_id=student_id) for student_id in student_ids}
    subjects = set(subject_ids)
    grouped: Dict[Tuple[int, int], List[Score]] = defaultdict(list)

    for row in scores:
        score = _as_score(row)
        if score.student_id not in students or score.subject_id not in subjects:
            continue
        try:
            normalize_score(score.value, score.max_value)
        except InvalidScore as exc:
            # 잘못된 행 1건 때문에 학급 전체 계산을 중단하지 않음
            logger.warning("Skipping score %s for student %s: %s", score.id, score.student_id, exc)
            if score.id is not None:
                students[score.student_id].skipped_scores.append(score.id)
            continue
        grouped[(score.student_id, score.subject_id)].append(score)

    for student_id, aggregate in students.items():
        aggregate.subject_averages = [
            compute_subject_average(subject_id, grouped.get((student_id, subject_id), []))
            for subject_id in subject_ids
        ]
        weighted = compute_weighted_average(aggregate.subject_averages, coefficient_resolver, level)
        aggregate.general_average = weighted.general_average
        aggregate.weighted_sum = weighted.weighted_sum
        aggregate.coefficient_sum = weighted.coefficient_sum

    return rank_class(list(students.values()))
