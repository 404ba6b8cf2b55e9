import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from models.bulletins import Bulletin as BulletinModel
from models.classes import Class as ClassModel
from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel, SubjectLevelCoefficient as LevelCoefficientModel
from schemas.grading import StudentAggregate
from services.grading.pipeline import build_class_roster
from services.grading.statistics import grade_band
from services.grading.weighted_average import CoefficientResolver

logger = logging.getLogger(__name__)


# ==========================================================
# [1단계] 조회 + 계산 (저장 없음)
# ==========================================================
def get_coefficient_resolver(db: Session, level: str) -> Tuple[List[SubjectModel], CoefficientResolver]:
    """활성 과목 목록과 해당 학년 단계의 계수 조회기"""
    subjects = (
        db.query(SubjectModel)
        .filter(SubjectModel.is_active.is_(True))
        .order_by(SubjectModel.name)
        .all()
    )
    level_rows = db.query(LevelCoefficientModel).filter(LevelCoefficientModel.level == level).all()
    return subjects, CoefficientResolver.from_rows(subjects, level_rows)


def compute_class_roster(
    db: Session,
    class_obj: ClassModel,
    period: str,
    subject_ids: Optional[List[int]] = None,
) -> Tuple[List[StudentModel], List[SubjectModel], List[StudentAggregate]]:
    """
    학급 · 기간의 석차 포함 성적 요약
    - subject_ids 를 주면 해당 과목만으로 계산 (과목별 화면)
    """
    students = (
        db.query(StudentModel)
        .filter(StudentModel.class_id == class_obj.id, StudentModel.is_active.is_(True))
        .order_by(StudentModel.matricule)
        .all()
    )
    subjects, resolver = get_coefficient_resolver(db, class_obj.level)
    if subject_ids is not None:
        subjects = [s for s in subjects if s.id in subject_ids]

    scores = (
        db.query(GradeModel)
        .filter(GradeModel.class_id == class_obj.id, GradeModel.period == period)
        .all()
    )
    roster = build_class_roster(
        [s.id for s in students],
        [s.id for s in subjects],
        scores,
        resolver,
        level=class_obj.level,
    )
    return students, subjects, roster


def serialize_aggregate(aggregate: StudentAggregate, student: Optional[StudentModel], subject_names: Dict[int, str]) -> dict:
    return {
        "student_id": aggregate.student_id,
        "matricule": student.matricule if student else None,
        "name": f"{student.first_name} {student.last_name}".strip() if student else None,
        "general_average": aggregate.general_average,
        "band": grade_band(aggregate.general_average),
        "rank": aggregate.rank,
        "rank_total": aggregate.rank_total,
        "weighted_sum": aggregate.weighted_sum,
        "coefficient_sum": aggregate.coefficient_sum,
        "skipped_scores": aggregate.skipped_scores,
        "subjects": [
            {
                "subject_id": sa.subject_id,
                "subject_name": subject_names.get(sa.subject_id),
                "coefficient": sa.coefficient,
                "grades": sa.grades,
                "average": sa.average,
                "weighted_average": sa.weighted_average,
                "band": grade_band(sa.average),
            }
            for sa in aggregate.subject_averages
        ],
    }


# ==========================================================
# [2단계] 성적표 생성/갱신
# ==========================================================
def generate_bulletins(
    db: Session,
    class_obj: ClassModel,
    period: str,
    academic_year: Optional[str] = None,
) -> List[BulletinModel]:
    """
    학급 전체 성적표를 계산해 upsert
    - 기존 의견/서명은 유지하고 평균 · 석차만 갱신
    """
    students, _, roster = compute_class_roster(db, class_obj, period)
    academic_year = academic_year or class_obj.academic_year

    existing = {
        b.student_id: b
        for b in db.query(BulletinModel)
        .filter(BulletinModel.class_id == class_obj.id, BulletinModel.period == period)
        .all()
    }

    bulletins = []
    for aggregate in roster:
        bulletin = existing.get(aggregate.student_id)
        if bulletin is None:
            bulletin = BulletinModel(
                student_id=aggregate.student_id,
                class_id=class_obj.id,
                period=period,
            )
            db.add(bulletin)
        bulletin.academic_year = academic_year
        bulletin.general_average = aggregate.general_average
        bulletin.rank = aggregate.rank
        bulletin.rank_total = aggregate.rank_total
        bulletin.class_size = len(students)
        bulletins.append(bulletin)

    # 학급을 떠났거나 비활성화된 학생의 성적표는 석차에서 제외 (의견 · 서명은 유지)
    roster_ids = {aggregate.student_id for aggregate in roster}
    stale = [b for student_id, b in existing.items() if student_id not in roster_ids]
    for bulletin in stale:
        bulletin.general_average = None
        bulletin.rank = None
        bulletin.rank_total = None

    db.commit()
    for bulletin in bulletins:
        db.refresh(bulletin)

    logger.info(
        "Generated %d bulletins for class %s (%s), %d ranked, %d cleared",
        len(bulletins), class_obj.id, period, roster[0].rank_total if roster else 0, len(stale),
    )
    return bulletins
