from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.teachers import Teacher as TeacherModel
from models.timetable_slots import TimetableSlot as TimetableSlotModel
from schemas.teachers import Teacher, TeacherCreate

router = APIRouter(prefix="/teachers", tags=["teachers"])


# ==========================================================
# [1단계] CRUD 라우터
# ==========================================================

# ✅ [CREATE] 교사 추가
@router.post("/")
def create_teacher(teacher: TeacherCreate, db: Session = Depends(get_db)):
    db_teacher = TeacherModel(**teacher.model_dump())
    db.add(db_teacher)
    db.commit()
    db.refresh(db_teacher)
    return {
        "success": True,
        "data": Teacher.model_validate(db_teacher).model_dump(),
        "message": "Teacher created successfully"
    }

# ✅ [READ] 전체 교사 조회
@router.get("/")
def read_teachers(db: Session = Depends(get_db)):
    records = db.query(TeacherModel).order_by(TeacherModel.name).all()
    return {"success": True, "data": [Teacher.model_validate(r).model_dump() for r in records]}

# ==========================================================
# [2단계] 동적 라우터
# ==========================================================

# ✅ [READ] 교사 주간 수업 (요일 · 시작 시각 순)
@router.get("/{teacher_id}/timetable")
def get_teacher_timetable(teacher_id: int, db: Session = Depends(get_db)):
    teacher = db.query(TeacherModel).filter(TeacherModel.id == teacher_id).first()
    if teacher is None:
        return {"success": False, "error": {"code": 404, "message": "Teacher not found"}}
    slots = (
        db.query(TimetableSlotModel)
        .filter(TimetableSlotModel.teacher_id == teacher_id)
        .order_by(TimetableSlotModel.day_of_week, TimetableSlotModel.start_time)
        .all()
    )
    return {
        "success": True,
        "data": [
            {
                "id": s.id,
                "day_of_week": s.day_of_week,
                "start_time": s.start_time.strftime("%H:%M"),
                "end_time": s.end_time.strftime("%H:%M"),
                "class_id": s.class_id,
                "subject_id": s.subject_id,
                "room": s.room,
            }
            for s in slots
        ]
    }

# ✅ [READ] 특정 교사 조회
@router.get("/{teacher_id}")
def read_teacher(teacher_id: int, db: Session = Depends(get_db)):
    teacher = db.query(TeacherModel).filter(TeacherModel.id == teacher_id).first()
    if teacher is None:
        return {"success": False, "error": {"code": 404, "message": "Teacher not found"}}
    return {"success": True, "data": Teacher.model_validate(teacher).model_dump()}
