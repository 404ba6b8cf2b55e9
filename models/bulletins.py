from sqlalchemy import Column, Integer, Float, String, Boolean, DateTime, ForeignKey, UniqueConstraint
from database.db import Base

class Bulletin(Base):
    __tablename__ = "bulletins"  # 성적표 (학생 · 학급 · 기간 단위)
    __table_args__ = (
        UniqueConstraint("student_id", "class_id", "period", name="uq_bulletin_student_period"),
    )

    id = Column(Integer, primary_key=True, index=True)                       # 성적표 고유 ID
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False)  # 학생 ID
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)     # 학급 ID
    period = Column(String(50), nullable=False)                              # 평가 기간
    academic_year = Column(String(20))                                       # 학년도
    general_average = Column(Float)                                          # 가중 전체 평균 (없으면 NULL)
    rank = Column(Integer)                                                   # 석차 (평균 없으면 NULL)
    rank_total = Column(Integer)                                             # 석차 산정 대상 인원
    class_size = Column(Integer)                                             # 학급 전체 인원
    teacher_appreciation = Column(String(1000))                              # 담임 의견
    principal_appreciation = Column(String(1000))                            # 교장 의견
    admin_signature = Column(Boolean, default=False, nullable=False)         # 관리자 서명 여부
    admin_signed_at = Column(DateTime)                                       # 서명 시각
