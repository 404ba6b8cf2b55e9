from fastapi import APIRouter, Depends
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database.db import get_db
from models.bulletins import Bulletin as BulletinModel
from models.students import Student as StudentModel
from schemas.students import Student, StudentCreate

router = APIRouter(prefix="/students", tags=["students"])


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 학생 정보 추가
@router.post("/")
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    db_student = StudentModel(**student.model_dump())
    db.add(db_student)
    db.commit()
    db.refresh(db_student)
    return {
        "success": True,
        "data": Student.model_validate(db_student).model_dump(),
        "message": "Student created successfully"
    }


# ✅ [READ] 전체 학생 조회 (class_id 로 필터 가능)
@router.get("/")
def read_students(class_id: int = None, db: Session = Depends(get_db)):
    query = db.query(StudentModel)
    if class_id is not None:
        query = query.filter(StudentModel.class_id == class_id)
    records = query.order_by(StudentModel.matricule).all()
    return {
        "success": True,
        "data": [Student.model_validate(r).model_dump() for r in records]
    }


# ==========================================================
# [2단계] 정적 라우터 (검색)
# ==========================================================

# ✅ [SEARCH] 이름 또는 학번으로 검색
@router.get("/search")
def search_students(q: str, db: Session = Depends(get_db)):
    results = (
        db.query(StudentModel)
        .filter(or_(
            StudentModel.first_name.contains(q),
            StudentModel.last_name.contains(q),
            StudentModel.matricule.contains(q),
        ))
        .order_by(StudentModel.matricule)
        .all()
    )
    if not results:
        return {"success": False, "error": {"code": 404, "message": "No matching students"}}
    return {"success": True, "data": [Student.model_validate(r).model_dump() for r in results]}


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [READ] 학생별 성적표 이력 (기간 순)
@router.get("/{student_id}/bulletins")
def get_student_bulletins(student_id: int, db: Session = Depends(get_db)):
    records = (
        db.query(BulletinModel)
        .filter(BulletinModel.student_id == student_id)
        .order_by(BulletinModel.academic_year, BulletinModel.period)
        .all()
    )
    return {
        "success": True,
        "data": [
            {
                "id": b.id,
                "class_id": b.class_id,
                "period": b.period,
                "academic_year": b.academic_year,
                "general_average": b.general_average,
                "rank": b.rank,
                "rank_total": b.rank_total,
            }
            for b in records
        ]
    }


# ✅ [READ] 학생 상세 조회
@router.get("/{student_id}")
def read_student(student_id: int, db: Session = Depends(get_db)):
    student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
    if student is None:
        return {"success": False, "error": {"code": 404, "message": "Student not found"}}
    return {"success": True, "data": Student.model_validate(student).model_dump()}


# ✅ [UPDATE] 학생 정보 수정
@router.put("/{student_id}")
def update_student(student_id: int, updated: StudentCreate, db: Session = Depends(get_db)):
    student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
    if student is None:
        return {"success": False, "error": {"code": 404, "message": "Student not found"}}

    for key, value in updated.model_dump().items():
        setattr(student, key, value)

    db.commit()
    db.refresh(student)
    return {
        "success": True,
        "data": Student.model_validate(student).model_dump(),
        "message": "Student updated successfully"
    }


# ✅ [DELETE] 학생 삭제
@router.delete("/{student_id}")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
    if student is None:
        return {"success": False, "error": {"code": 404, "message": "Student not found"}}

    db.delete(student)
    db.commit()
    return {
        "success": True,
        "data": {"student_id": student_id, "message": "Student deleted successfully"}
    }
