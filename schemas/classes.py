from pydantic import BaseModel
from typing import Optional

# ✅ 생성(Create) 요청용 스키마
# 새 학급을 추가할 때 요청 바디에 사용 → id는 DB에서 자동 생성되므로 제외
class ClassCreate(BaseModel):
    name: str                                    # 학급 이름 (예: 6ème A)
    level: str                                   # 학년 단계 (과목 계수 조회 키)
    academic_year: Optional[str] = None          # 학년도
    principal_teacher_id: Optional[int] = None   # 담임 교사 ID
    is_active: bool = True                       # 운영 여부


# ✅ 응답(Response) / 조회(Read) 용 스키마
class Class(ClassCreate):
    id: int                                      # 학급 고유 ID (PK)

    class Config:
        # Pydantic v2에서는 orm_mode 대신 from_attributes 사용
        from_attributes = True
