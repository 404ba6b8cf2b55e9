from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    id = Column(Integer, primary_key=True, index=True)                       # 고유 학생 ID (Primary Key)
    matricule = Column(String(50), unique=True, nullable=False)             # 학번
    first_name = Column(String(100), nullable=False)                        # 이름
    last_name = Column(String(100), nullable=False)                         # 성
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)    # 소속 반 ID
    parent_name = Column(String(200))                                       # 보호자 이름
    parent_phone = Column(String(20))                                       # 보호자 연락처
    is_active = Column(Boolean, default=True, nullable=False)               # 재학 여부
