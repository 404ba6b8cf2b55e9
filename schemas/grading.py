"""
schemas/grading.py

- 성적 집계 엔진(services/grading)이 주고받는 값 객체 모음
- Pydantic v2 기준
- "데이터 없음"은 0이 아니라 None 으로 표현 (미채점 ≠ 0점)
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Score(BaseModel):
    """평가 결과 1건 (grades 테이블 행에서 그대로 변환 가능)"""
    id: Optional[int] = None
    student_id: int
    subject_id: int
    class_id: Optional[int] = None
    period: Optional[str] = None
    grade_type: str = "exam"
    value: float                       # 원점수
    max_value: float = 20              # 만점 (검증은 정규화 단계에서)

    model_config = ConfigDict(from_attributes=True)


class SubjectAverage(BaseModel):
    """학생 1명 · 과목 1개의 평균"""
    subject_id: int
    grades: Dict[str, List[float]] = Field(default_factory=dict)   # 평가 유형별 정규화 점수 (표시용)
    values: List[float] = Field(default_factory=list)              # 정규화 점수 전체
    average: Optional[float] = None
    coefficient: int = 1
    weighted_average: Optional[float] = None


class WeightedAverage(BaseModel):
    general_average: Optional[float] = None
    weighted_sum: float = 0.0
    coefficient_sum: int = 0


class StudentAggregate(BaseModel):
    """학생 1명의 기간 성적 요약 (석차는 rank_class 에서 채움)"""
    student_id: int
    subject_averages: List[SubjectAverage] = Field(default_factory=list)
    general_average: Optional[float] = None
    weighted_sum: float = 0.0
    coefficient_sum: int = 0
    rank: Optional[int] = None
    rank_total: int = 0                # "X등 / Y명" 의 Y (평균이 있는 학생 수)
    skipped_scores: List[int] = Field(default_factory=list)


class ClassStatistics(BaseModel):
    total_students: int = 0
    graded_students: int = 0
    class_average: Optional[float] = None
    highest: Optional[float] = None
    lowest: Optional[float] = None
    passed: int = 0
    success_rate: Optional[float] = None   # 백분율 (0~100)
