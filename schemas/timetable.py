from datetime import time
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator


# ✅ 입력용: 시간표 슬롯 생성/수정/검사
class TimeSlotCreate(BaseModel):
    day_of_week: int = Field(..., ge=1, le=7)      # 요일 (1=월 ~ 7=일)
    start_time: time                               # 시작 시각 (예: "08:00")
    end_time: time                                 # 종료 시각
    class_id: int                                  # 학급 ID
    teacher_id: int                                # 교사 ID
    subject_id: int                                # 과목 ID
    room: Optional[str] = None                     # 교실 (선택)

    @model_validator(mode="after")
    def _check_range(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


# ✅ 출력용 / 충돌 검사 대상
class TimeSlot(TimeSlotCreate):
    id: Optional[int] = None                       # 저장 전 후보 슬롯은 None

    class Config:
        from_attributes = True


ConflictKind = Literal["teacher", "class", "room"]


class ConflictDescriptor(BaseModel):
    """후보 슬롯과 겹치는 기존 슬롯 1개에 대한 충돌 1건"""
    kind: ConflictKind
    slot_id: Optional[int] = None
    day_of_week: int
    start_time: time
    end_time: time


class ConflictCheckResult(BaseModel):
    has_conflicts: bool
    conflicts: List[ConflictDescriptor] = []
