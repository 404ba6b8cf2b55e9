from sqlalchemy import Column, Integer, Float, String, ForeignKey
from database.db import Base

class Grade(Base):
    __tablename__ = "grades"  # 개별 평가 점수 테이블 (퀴즈/과제/시험 1건 = 1행)

    id = Column(Integer, primary_key=True, index=True)                      # 점수 고유 ID (Primary Key)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False) # 학생 ID
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False) # 과목 ID
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)    # 학급 ID
    teacher_id = Column(Integer, ForeignKey("teachers.id"))                 # 입력 교사 ID
    period = Column(String(50), nullable=False, index=True)                 # 평가 기간 (예: Trimestre 1)
    academic_year = Column(String(20))                                      # 학년도
    grade_type = Column(String(30), nullable=False)                         # 평가 유형 (interro_1, devoir_2, exam ...)
    value = Column(Float, nullable=False)                                   # 원점수
    max_value = Column(Float, nullable=False, default=20)                   # 만점
