from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, UniqueConstraint
from database.db import Base

class Subject(Base):
    __tablename__ = "subjects"  # 과목 정보 테이블

    id = Column(Integer, primary_key=True, index=True)             # 과목 고유 ID (Primary Key)
    name = Column(String(100), nullable=False)                     # 과목 이름 (예: Mathématiques)
    coefficient = Column(Integer, default=1, nullable=False)       # 기본 계수 (학년별 재정의 없을 때 사용)
    is_active = Column(Boolean, default=True, nullable=False)      # 사용 여부


class SubjectLevelCoefficient(Base):
    __tablename__ = "subject_level_coefficients"  # 학년 단계별 과목 계수 재정의
    __table_args__ = (UniqueConstraint("subject_id", "level", name="uq_subject_level"),)

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)   # 과목 ID
    level = Column(String(50), nullable=False)                                # 학년 단계 (classes.level과 동일 값)
    coefficient = Column(Integer, nullable=False)                             # 해당 단계에서의 계수
