from pydantic import BaseModel
from typing import Optional

# ✅ 입력용 (POST/PUT 등)
class StudentCreate(BaseModel):
    matricule: str                           # 학번
    first_name: str                          # 이름
    last_name: str                           # 성
    class_id: int                            # 소속 반 ID
    parent_name: Optional[str] = None        # 보호자 이름
    parent_phone: Optional[str] = None       # 보호자 연락처
    is_active: bool = True                   # 재학 여부

# ✅ 전체 출력용 (GET, 상세조회 등)
class Student(StudentCreate):
    id: int

    class Config:
        from_attributes = True  # Pydantic v2 기준
