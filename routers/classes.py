from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.classes import Class as ClassModel
from models.students import Student as StudentModel
from schemas.classes import Class, ClassCreate

router = APIRouter(prefix="/classes", tags=["classes"])


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 학급 추가
# - 예: 6ème A (단계 6ème) 를 새로 등록
@router.post("/")
def create_class(new_class: ClassCreate, db: Session = Depends(get_db)):
    db_class = ClassModel(**new_class.model_dump())
    db.add(db_class)
    db.commit()
    db.refresh(db_class)
    return {
        "success": True,
        "data": Class.model_validate(db_class).model_dump(),
        "message": "Class created successfully"
    }

# ✅ [READ] 전체 학급 조회
# - active_only=True 이면 운영 중인 학급만
@router.get("/")
def read_classes(active_only: bool = False, db: Session = Depends(get_db)):
    query = db.query(ClassModel)
    if active_only:
        query = query.filter(ClassModel.is_active.is_(True))
    records = query.order_by(ClassModel.name).all()
    return {
        "success": True,
        "data": [Class.model_validate(r).model_dump() for r in records]
    }

# ==========================================================
# [2단계] 동적 라우터
# ==========================================================

# ✅ [READ] 학급별 학생 목록 조회 (학번 순)
@router.get("/{class_id}/students")
def get_class_students(class_id: int, db: Session = Depends(get_db)):
    students = (
        db.query(StudentModel)
        .filter(StudentModel.class_id == class_id, StudentModel.is_active.is_(True))
        .order_by(StudentModel.matricule)
        .all()
    )
    if not students:
        return {"success": False, "error": {"code": 404, "message": "No students found for this class"}}
    return {
        "success": True,
        "data": [
            {"id": s.id, "matricule": s.matricule, "name": f"{s.first_name} {s.last_name}"}
            for s in students
        ]
    }

# ✅ [READ] 특정 학급 조회
@router.get("/{class_id}")
def read_class(class_id: int, db: Session = Depends(get_db)):
    db_class = db.query(ClassModel).filter(ClassModel.id == class_id).first()
    if db_class is None:
        return {"success": False, "error": {"code": 404, "message": "Class not found"}}
    return {"success": True, "data": Class.model_validate(db_class).model_dump()}
