from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from database.db import Base

class Class(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)          # 학급 고유 ID (PK)
    name = Column(String(100), nullable=False)                  # 학급 이름 (예: 6ème A)
    level = Column(String(50), nullable=False)                  # 학년 단계 (과목 계수 조회 키, 예: 6ème)
    academic_year = Column(String(20))                          # 학년도 (예: 2024-2025)
    is_active = Column(Boolean, default=True, nullable=False)   # 운영 여부

    # ✅ 담임 교사 ID (FK) - teachers.id 참조
    principal_teacher_id = Column(Integer, ForeignKey("teachers.id"))
