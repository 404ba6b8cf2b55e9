from pydantic import BaseModel, Field
from typing import Optional

# ✅ 입력용: POST/PUT 요청에서 사용할 스키마
class SubjectCreate(BaseModel):
    name: str                                        # 과목 이름
    coefficient: int = Field(1, ge=1)                # 기본 계수
    is_active: bool = True                           # 사용 여부

# ✅ 출력용: GET, POST 응답 등에서 사용할 스키마
class Subject(SubjectCreate):
    id: int                                          # 고유 과목 ID

    class Config:
        from_attributes = True                       # orm_mode → 최신 Pydantic 문법


# ✅ 학년 단계별 계수 재정의 (PUT /subjects/{id}/levels/{level})
class LevelCoefficientUpdate(BaseModel):
    coefficient: int = Field(..., ge=1)              # 해당 단계 계수


class LevelCoefficient(BaseModel):
    subject_id: int
    level: str
    coefficient: int
    subject_name: Optional[str] = None

    class Config:
        from_attributes = True
