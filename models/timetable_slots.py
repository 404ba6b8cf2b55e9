from sqlalchemy import Column, Integer, String, Time, ForeignKey
from database.db import Base

class TimetableSlot(Base):
    __tablename__ = "timetable_slots"  # 주간 시간표 슬롯

    id = Column(Integer, primary_key=True, index=True)                       # 슬롯 고유 ID
    day_of_week = Column(Integer, nullable=False, index=True)                # 요일 (1=월 ~ 7=일)
    start_time = Column(Time, nullable=False)                                # 시작 시각
    end_time = Column(Time, nullable=False)                                  # 종료 시각
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)     # 학급 ID
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False)  # 교사 ID
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)  # 과목 ID
    room = Column(String(50))                                                # 교실 (선택)
