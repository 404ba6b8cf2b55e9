from datetime import datetime
from pydantic import BaseModel
from typing import Optional

# ✅ 요청: 학급 · 기간 단위 성적표 일괄 생성
class BulletinGenerateRequest(BaseModel):
    class_id: int                                    # 학급 ID
    period: str                                      # 평가 기간 (예: Trimestre 1)
    academic_year: Optional[str] = None              # 학년도 (없으면 학급의 학년도 사용)


# ✅ 요청: 담임/교장 의견 저장 (보낸 항목만 갱신)
class AppreciationUpdate(BaseModel):
    teacher_appreciation: Optional[str] = None
    principal_appreciation: Optional[str] = None


# ✅ 출력용
class Bulletin(BaseModel):
    id: int
    student_id: int
    class_id: int
    period: str
    academic_year: Optional[str] = None
    general_average: Optional[float] = None
    rank: Optional[int] = None
    rank_total: Optional[int] = None
    class_size: Optional[int] = None
    teacher_appreciation: Optional[str] = None
    principal_appreciation: Optional[str] = None
    admin_signature: bool = False
    admin_signed_at: Optional[datetime] = None

    class Config:
        from_attributes = True
