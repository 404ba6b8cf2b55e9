from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from models.classes import Class as ClassModel
from models.grades import Grade as GradeModel
from schemas.grades import Grade, GradeBulkUpsert, GradeCreate
from services.bulletin_service import compute_class_roster, serialize_aggregate
from services.grading.statistics import compute_class_statistics

router = APIRouter(prefix="/grades", tags=["grades"])


# ==========================================================
# [1단계] 집계 라우터 (저장 없이 계산만)
# ==========================================================

# ✅ [AVERAGES] 반 전체 학생의 과목별 평균 · 가중 평균 · 석차
# - 담임 의견 입력 화면에서 사용 (성적표 저장 전 미리보기)
@router.get("/class/{class_id}/averages")
def get_class_averages(class_id: int, period: str, db: Session = Depends(get_db)):
    class_obj = db.query(ClassModel).filter(ClassModel.id == class_id).first()
    if class_obj is None:
        return {"success": False, "error": {"code": 404, "message": "Class not found"}}

    students, subjects, roster = compute_class_roster(db, class_obj, period)
    by_id = {s.id: s for s in students}
    subject_names = {s.id: s.name for s in subjects}
    stats = compute_class_statistics(roster, pass_mark=settings.PASS_MARK)

    return {
        "success": True,
        "data": {
            "class_id": class_id,
            "level": class_obj.level,
            "period": period,
            "statistics": stats.model_dump(),
            "students": [serialize_aggregate(a, by_id.get(a.student_id), subject_names) for a in roster],
        }
    }


# ✅ [AVERAGES] 한 과목만의 학생별 평균 (점수 입력 화면)
@router.get("/class/{class_id}/subject/{subject_id}/averages")
def get_subject_averages(class_id: int, subject_id: int, period: str, db: Session = Depends(get_db)):
    class_obj = db.query(ClassModel).filter(ClassModel.id == class_id).first()
    if class_obj is None:
        return {"success": False, "error": {"code": 404, "message": "Class not found"}}

    students, subjects, roster = compute_class_roster(db, class_obj, period, subject_ids=[subject_id])
    if not subjects:
        return {"success": False, "error": {"code": 404, "message": "Subject not found"}}

    by_id = {s.id: s for s in students}
    subject = subjects[0]
    return {
        "success": True,
        "data": {
            "class_id": class_id,
            "subject_id": subject.id,
            "subject_name": subject.name,
            "period": period,
            "students": [
                {
                    "student_id": a.student_id,
                    "matricule": by_id[a.student_id].matricule,
                    "grades": a.subject_averages[0].grades,
                    "average": a.subject_averages[0].average,
                    "coefficient": a.subject_averages[0].coefficient,
                    "rank": a.rank,
                    "rank_total": a.rank_total,
                }
                for a in roster
            ],
        }
    }


# ==========================================================
# [2단계] 일괄 입력
# ==========================================================

# ✅ [BULK UPSERT] 한 학급 · 과목 · 기간의 점수표 저장
# - (student_id, grade_type) 가 이미 있으면 수정, 없으면 추가
@router.post("/bulk")
def upsert_grades(payload: GradeBulkUpsert, db: Session = Depends(get_db)):
    existing = {
        (g.student_id, g.grade_type): g
        for g in db.query(GradeModel).filter(
            GradeModel.class_id == payload.class_id,
            GradeModel.subject_id == payload.subject_id,
            GradeModel.period == payload.period,
        ).all()
    }

    created, updated = 0, 0
    for entry in payload.entries:
        grade = existing.get((entry.student_id, entry.grade_type))
        if grade is None:
            grade = GradeModel(
                student_id=entry.student_id,
                subject_id=payload.subject_id,
                class_id=payload.class_id,
                period=payload.period,
                grade_type=entry.grade_type,
            )
            db.add(grade)
            existing[(entry.student_id, entry.grade_type)] = grade
            created += 1
        else:
            updated += 1
        grade.value = entry.value
        grade.max_value = entry.max_value
        grade.teacher_id = payload.teacher_id
        grade.academic_year = payload.academic_year

    db.commit()
    return {
        "success": True,
        "data": {"created": created, "updated": updated},
        "message": "Grades saved successfully"
    }


# ==========================================================
# [3단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 점수 추가
@router.post("/")
def create_grade(grade: GradeCreate, db: Session = Depends(get_db)):
    db_grade = GradeModel(**grade.model_dump())
    db.add(db_grade)
    db.commit()
    db.refresh(db_grade)
    return {
        "success": True,
        "data": Grade.model_validate(db_grade).model_dump(),
        "message": "Grade created successfully"
    }

# ✅ [READ] 점수 조회 (학급/과목/기간/학생 필터)
@router.get("/")
def read_grades(
    class_id: int = None,
    subject_id: int = None,
    period: str = None,
    student_id: int = None,
    db: Session = Depends(get_db),
):
    query = db.query(GradeModel)
    if class_id is not None:
        query = query.filter(GradeModel.class_id == class_id)
    if subject_id is not None:
        query = query.filter(GradeModel.subject_id == subject_id)
    if period is not None:
        query = query.filter(GradeModel.period == period)
    if student_id is not None:
        query = query.filter(GradeModel.student_id == student_id)
    records = query.order_by(GradeModel.id).all()
    return {"success": True, "data": [Grade.model_validate(r).model_dump() for r in records]}

# ==========================================================
# [4단계] 완전 동적 라우터
# ==========================================================

# ✅ [READ] 특정 점수 조회
@router.get("/{grade_id}")
def read_grade(grade_id: int, db: Session = Depends(get_db)):
    grade = db.query(GradeModel).filter(GradeModel.id == grade_id).first()
    if grade is None:
        return {"success": False, "error": {"code": 404, "message": "Grade not found"}}
    return {"success": True, "data": Grade.model_validate(grade).model_dump()}

# ✅ [UPDATE] 점수 수정
@router.put("/{grade_id}")
def update_grade(grade_id: int, updated: GradeCreate, db: Session = Depends(get_db)):
    grade = db.query(GradeModel).filter(GradeModel.id == grade_id).first()
    if grade is None:
        return {"success": False, "error": {"code": 404, "message": "Grade not found"}}

    for key, value in updated.model_dump().items():
        setattr(grade, key, value)

    db.commit()
    db.refresh(grade)
    return {
        "success": True,
        "data": Grade.model_validate(grade).model_dump(),
        "message": "Grade updated successfully"
    }

# ✅ [DELETE] 점수 삭제
@router.delete("/{grade_id}")
def delete_grade(grade_id: int, db: Session = Depends(get_db)):
    grade = db.query(GradeModel).filter(GradeModel.id == grade_id).first()
    if grade is None:
        return {"success": False, "error": {"code": 404, "message": "Grade not found"}}

    db.delete(grade)
    db.commit()
    return {
        "success": True,
        "data": {"grade_id": grade_id, "message": "Grade deleted successfully"}
    }
