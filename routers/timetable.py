import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.timetable_slots import TimetableSlot as TimetableSlotModel
from schemas.timetable import ConflictCheckResult, TimeSlot, TimeSlotCreate
from services.timetable_service import TimetableConflictError, detect_conflicts

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/timetable", tags=["timetable"])


def _same_day_slots(db: Session, day_of_week: int):
    # 충돌은 같은 요일에서만 발생하므로 해당 요일 슬롯만 조회
    return db.query(TimetableSlotModel).filter(TimetableSlotModel.day_of_week == day_of_week).all()


def _ensure_no_conflicts(db: Session, candidate: TimeSlot, exclude_id: int = None):
    conflicts = detect_conflicts(candidate, _same_day_slots(db, candidate.day_of_week), exclude_id=exclude_id)
    if conflicts:
        logger.info(
            "Rejected timetable slot (day %s %s-%s): %s",
            candidate.day_of_week, candidate.start_time, candidate.end_time,
            ", ".join(c.kind for c in conflicts),
        )
        raise TimetableConflictError(conflicts)


# ==========================================================
# [1단계] 충돌 검사
# ==========================================================

# ✅ [CHECK] 저장 없이 충돌 여부만 확인 (수정 중이면 exclude_id 로 자기 자신 제외)
@router.post("/check")
def check_slot(slot: TimeSlotCreate, exclude_id: int = None, db: Session = Depends(get_db)):
    candidate = TimeSlot(**slot.model_dump())
    conflicts = detect_conflicts(candidate, _same_day_slots(db, slot.day_of_week), exclude_id=exclude_id)
    result = ConflictCheckResult(has_conflicts=bool(conflicts), conflicts=conflicts)
    return {"success": True, "data": result.model_dump(mode="json")}


# ==========================================================
# [2단계] CRUD 라우터
# ==========================================================

# ✅ [CREATE] 슬롯 추가 (충돌 시 409)
@router.post("/")
def create_slot(slot: TimeSlotCreate, db: Session = Depends(get_db)):
    _ensure_no_conflicts(db, TimeSlot(**slot.model_dump()))

    db_slot = TimetableSlotModel(**slot.model_dump())
    db.add(db_slot)
    db.commit()
    db.refresh(db_slot)
    return {
        "success": True,
        "data": TimeSlot.model_validate(db_slot).model_dump(mode="json"),
        "message": "Timetable slot created"
    }


# ✅ [READ] 시간표 조회 (학급/교사/요일 필터, 요일 · 시작 시각 순)
@router.get("/")
def read_slots(class_id: int = None, teacher_id: int = None, day_of_week: int = None, db: Session = Depends(get_db)):
    query = db.query(TimetableSlotModel)
    if class_id is not None:
        query = query.filter(TimetableSlotModel.class_id == class_id)
    if teacher_id is not None:
        query = query.filter(TimetableSlotModel.teacher_id == teacher_id)
    if day_of_week is not None:
        query = query.filter(TimetableSlotModel.day_of_week == day_of_week)
    records = query.order_by(TimetableSlotModel.day_of_week, TimetableSlotModel.start_time).all()
    return {"success": True, "data": [TimeSlot.model_validate(r).model_dump(mode="json") for r in records]}


# ✅ [UPDATE] 슬롯 수정 (자기 자신은 충돌 검사에서 제외)
@router.put("/{slot_id}")
def update_slot(slot_id: int, updated: TimeSlotCreate, db: Session = Depends(get_db)):
    db_slot = db.query(TimetableSlotModel).filter(TimetableSlotModel.id == slot_id).first()
    if db_slot is None:
        return {"success": False, "error": {"code": 404, "message": "Timetable slot not found"}}

    _ensure_no_conflicts(db, TimeSlot(id=slot_id, **updated.model_dump()), exclude_id=slot_id)

    for key, value in updated.model_dump().items():
        setattr(db_slot, key, value)

    db.commit()
    db.refresh(db_slot)
    return {
        "success": True,
        "data": TimeSlot.model_validate(db_slot).model_dump(mode="json"),
        "message": "Timetable slot updated"
    }


# ✅ [DELETE] 슬롯 삭제
@router.delete("/{slot_id}")
def delete_slot(slot_id: int, db: Session = Depends(get_db)):
    db_slot = db.query(TimetableSlotModel).filter(TimetableSlotModel.id == slot_id).first()
    if db_slot is None:
        return {"success": False, "error": {"code": 404, "message": "Timetable slot not found"}}

    db.delete(db_slot)
    db.commit()
    return {"success": True, "data": {"slot_id": slot_id, "message": "Timetable slot deleted"}}
