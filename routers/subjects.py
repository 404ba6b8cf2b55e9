from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.subjects import Subject as SubjectModel, SubjectLevelCoefficient as LevelCoefficientModel
from schemas.subjects import LevelCoefficient, LevelCoefficientUpdate, Subject, SubjectCreate
from services.bulletin_service import get_coefficient_resolver

router = APIRouter(prefix="/subjects", tags=["과목 정보"])


# ==========================================================
# [1단계] CRUD 라우터
# ==========================================================

# ✅ [CREATE] 과목 정보 추가
@router.post("/")
def create_subject(subject: SubjectCreate, db: Session = Depends(get_db)):
    db_subject = SubjectModel(**subject.model_dump())
    db.add(db_subject)
    db.commit()
    db.refresh(db_subject)
    return {
        "success": True,
        "data": Subject.model_validate(db_subject).model_dump(),
        "message": "과목 정보가 성공적으로 추가되었습니다"
    }


# ✅ [READ] 전체 과목 조회
@router.get("/")
def read_subjects(db: Session = Depends(get_db)):
    records = db.query(SubjectModel).order_by(SubjectModel.name).all()
    return {
        "success": True,
        "data": [Subject.model_validate(r).model_dump() for r in records],
        "message": "전체 과목 정보 조회 완료"
    }


# ==========================================================
# [2단계] 학년 단계별 계수
# ==========================================================

# ✅ [READ] 특정 단계에서 적용되는 과목별 계수 (재정의 → 기본 계수 → 1)
@router.get("/levels/{level}/coefficients")
def read_level_coefficients(level: str, db: Session = Depends(get_db)):
    subjects, resolver = get_coefficient_resolver(db, level)
    return {
        "success": True,
        "data": [
            LevelCoefficient(
                subject_id=s.id,
                subject_name=s.name,
                level=level,
                coefficient=resolver(s.id, level),
            ).model_dump()
            for s in subjects
        ],
        "message": f"{level} 단계 과목 계수 조회 완료"
    }


# ✅ [UPSERT] 특정 과목의 단계별 계수 지정
@router.put("/{subject_id}/levels/{level}")
def set_level_coefficient(subject_id: int, level: str, payload: LevelCoefficientUpdate, db: Session = Depends(get_db)):
    subject = db.query(SubjectModel).filter(SubjectModel.id == subject_id).first()
    if subject is None:
        return {"success": False, "error": {"code": 404, "message": "과목 정보를 찾을 수 없습니다"}}

    row = (
        db.query(LevelCoefficientModel)
        .filter(LevelCoefficientModel.subject_id == subject_id, LevelCoefficientModel.level == level)
        .first()
    )
    if row is None:
        row = LevelCoefficientModel(subject_id=subject_id, level=level)
        db.add(row)
    row.coefficient = payload.coefficient

    db.commit()
    db.refresh(row)
    return {
        "success": True,
        "data": LevelCoefficient.model_validate(row).model_dump(),
        "message": "과목 계수가 저장되었습니다"
    }


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [READ] 과목 상세 조회
@router.get("/{subject_id}")
def read_subject(subject_id: int, db: Session = Depends(get_db)):
    subject = db.query(SubjectModel).filter(SubjectModel.id == subject_id).first()
    if subject is None:
        return {"success": False, "error": {"code": 404, "message": "과목 정보를 찾을 수 없습니다"}}
    return {"success": True, "data": Subject.model_validate(subject).model_dump()}


# ✅ [UPDATE] 과목 정보 수정
@router.put("/{subject_id}")
def update_subject(subject_id: int, updated: SubjectCreate, db: Session = Depends(get_db)):
    subject = db.query(SubjectModel).filter(SubjectModel.id == subject_id).first()
    if subject is None:
        return {"success": False, "error": {"code": 404, "message": "과목 정보를 찾을 수 없습니다"}}

    for key, value in updated.model_dump().items():
        setattr(subject, key, value)

    db.commit()
    db.refresh(subject)
    return {
        "success": True,
        "data": Subject.model_validate(subject).model_dump(),
        "message": "과목 정보가 성공적으로 수정되었습니다"
    }
