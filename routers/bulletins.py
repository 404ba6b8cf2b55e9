from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from models.bulletins import Bulletin as BulletinModel
from models.classes import Class as ClassModel
from schemas.bulletins import AppreciationUpdate, Bulletin, BulletinGenerateRequest
from services.bulletin_service import compute_class_roster, generate_bulletins, serialize_aggregate
from services.grading.statistics import compute_class_statistics

router = APIRouter(prefix="/bulletins", tags=["bulletins"])


# ==========================================================
# [1단계] 생성 / 통계
# ==========================================================

# ✅ [GENERATE] 학급 · 기간 단위 성적표 일괄 계산 및 저장
# - 다시 호출하면 평균 · 석차만 갱신 (의견 · 서명 유지)
@router.post("/generate")
def generate_class_bulletins(payload: BulletinGenerateRequest, db: Session = Depends(get_db)):
    class_obj = db.query(ClassModel).filter(ClassModel.id == payload.class_id).first()
    if class_obj is None:
        return {"success": False, "error": {"code": 404, "message": "Class not found"}}

    bulletins = generate_bulletins(db, class_obj, payload.period, payload.academic_year)
    return {
        "success": True,
        "data": [Bulletin.model_validate(b).model_dump() for b in bulletins],
        "message": f"{len(bulletins)} bulletins generated"
    }


# ✅ [STATISTICS] 학급 통계 (평균, 최고/최저, 합격률)
@router.get("/class/{class_id}/statistics")
def get_class_statistics(class_id: int, period: str, db: Session = Depends(get_db)):
    class_obj = db.query(ClassModel).filter(ClassModel.id == class_id).first()
    if class_obj is None:
        return {"success": False, "error": {"code": 404, "message": "Class not found"}}

    _, _, roster = compute_class_roster(db, class_obj, period)
    stats = compute_class_statistics(roster, pass_mark=settings.PASS_MARK)
    return {
        "success": True,
        "data": {"class_id": class_id, "period": period, "pass_mark": settings.PASS_MARK, **stats.model_dump()}
    }


# ==========================================================
# [2단계] 조회
# ==========================================================

# ✅ [READ] 성적표 목록 (학급 · 기간 필터, 석차 순)
@router.get("/")
def read_bulletins(class_id: int = None, period: str = None, db: Session = Depends(get_db)):
    query = db.query(BulletinModel)
    if class_id is not None:
        query = query.filter(BulletinModel.class_id == class_id)
    if period is not None:
        query = query.filter(BulletinModel.period == period)
    records = query.all()
    # 석차 없는 성적표는 뒤로
    records.sort(key=lambda b: (b.rank is None, b.rank or 0, b.id))
    return {"success": True, "data": [Bulletin.model_validate(r).model_dump() for r in records]}


# ✅ [READ] 성적표 상세 (과목별 평균은 현재 점수로 다시 계산)
@router.get("/{bulletin_id}")
def read_bulletin(bulletin_id: int, db: Session = Depends(get_db)):
    bulletin = db.query(BulletinModel).filter(BulletinModel.id == bulletin_id).first()
    if bulletin is None:
        return {"success": False, "error": {"code": 404, "message": "Bulletin not found"}}

    data = Bulletin.model_validate(bulletin).model_dump()
    class_obj = db.query(ClassModel).filter(ClassModel.id == bulletin.class_id).first()
    if class_obj is not None:
        students, subjects, roster = compute_class_roster(db, class_obj, bulletin.period)
        aggregate = next((a for a in roster if a.student_id == bulletin.student_id), None)
        if aggregate is not None:
            student = next((s for s in students if s.id == bulletin.student_id), None)
            detail = serialize_aggregate(aggregate, student, {s.id: s.name for s in subjects})
            data["student_name"] = detail["name"]
            data["matricule"] = detail["matricule"]
            data["band"] = detail["band"]
            data["subjects"] = detail["subjects"]
    return {"success": True, "data": data}


# ==========================================================
# [3단계] 의견 · 서명
# ==========================================================

# ✅ [UPDATE] 담임/교장 의견 저장
@router.put("/{bulletin_id}/appreciation")
def update_appreciation(bulletin_id: int, payload: AppreciationUpdate, db: Session = Depends(get_db)):
    bulletin = db.query(BulletinModel).filter(BulletinModel.id == bulletin_id).first()
    if bulletin is None:
        return {"success": False, "error": {"code": 404, "message": "Bulletin not found"}}

    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(bulletin, key, value)

    db.commit()
    db.refresh(bulletin)
    return {
        "success": True,
        "data": Bulletin.model_validate(bulletin).model_dump(),
        "message": "Appreciation saved"
    }


# ✅ [SIGN] 관리자 서명
@router.post("/{bulletin_id}/sign")
def sign_bulletin(bulletin_id: int, db: Session = Depends(get_db)):
    bulletin = db.query(BulletinModel).filter(BulletinModel.id == bulletin_id).first()
    if bulletin is None:
        return {"success": False, "error": {"code": 404, "message": "Bulletin not found"}}

    bulletin.admin_signature = True
    bulletin.admin_signed_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(bulletin)
    return {
        "success": True,
        "data": Bulletin.model_validate(bulletin).model_dump(),
        "message": "Bulletin signed"
    }
