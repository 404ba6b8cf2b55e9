import os

# settings 는 import 시점에 읽히므로 앱 import 전에 메모리 DB 지정
os.environ["DB_URL_OVERRIDE"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import time

import pytest
from fastapi.testclient import TestClient

from database.db import Base, SessionLocal, engine
from main import app
from schemas.grading import Score
from schemas.timetable import TimeSlot


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_score():
    def _make(student_id=1, subject_id=1, value=10.0, max_value=20.0, grade_type="exam", score_id=None):
        return Score(
            id=score_id,
            student_id=student_id,
            subject_id=subject_id,
            class_id=1,
            period="Trimestre 1",
            grade_type=grade_type,
            value=value,
            max_value=max_value,
        )
    return _make


@pytest.fixture()
def make_slot():
    def _make(start="08:00", end="09:00", day=1, teacher_id=1, class_id=1, subject_id=1, room=None, slot_id=None):
        return TimeSlot(
            id=slot_id,
            day_of_week=day,
            start_time=time.fromisoformat(start),
            end_time=time.fromisoformat(end),
            teacher_id=teacher_id,
            class_id=class_id,
            subject_id=subject_id,
            room=room,
        )
    return _make
