from pydantic import BaseModel, Field
from typing import List, Optional

# ✅ 입력용: 평가 점수 1건 추가/수정
class GradeCreate(BaseModel):
    student_id: int                                  # 학생 ID
    subject_id: int                                  # 과목 ID
    class_id: int                                    # 학급 ID
    period: str                                      # 평가 기간 (예: Trimestre 1)
    grade_type: str                                  # 평가 유형 (interro_1, devoir_1, exam ...)
    value: float = Field(..., ge=0, allow_inf_nan=False)      # 원점수 (NaN · 무한대 거부)
    max_value: float = Field(20, gt=0, allow_inf_nan=False)   # 만점 (0 이하는 거부)
    teacher_id: Optional[int] = None                 # 입력 교사 ID
    academic_year: Optional[str] = None              # 학년도

# ✅ 출력용
class Grade(GradeCreate):
    id: int                                          # 점수 고유 ID

    class Config:
        from_attributes = True


# ✅ 일괄 입력: 한 학급 · 한 과목 · 한 기간의 점수표를 한 번에 저장
# (student_id, grade_type) 기준으로 있으면 수정, 없으면 추가
class GradeEntry(BaseModel):
    student_id: int
    grade_type: str
    value: float = Field(..., ge=0, allow_inf_nan=False)
    max_value: float = Field(20, gt=0, allow_inf_nan=False)


class GradeBulkUpsert(BaseModel):
    class_id: int
    subject_id: int
    period: str
    teacher_id: Optional[int] = None
    academic_year: Optional[str] = None
    entries: List[GradeEntry] = []
