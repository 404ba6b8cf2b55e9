import csv
import sys
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.grades import Grade as GradeModel  # ✅ 모델 import

CSV_PATH = "data/grades.csv"  # ✅ 기본 파일 경로

# 헤더: student_id, subject_id, class_id, period, grade_type, value, max_value
def row_to_grade(row: dict) -> GradeModel:
    return GradeModel(
        student_id=int(row["student_id"]),                   # 학생 ID
        subject_id=int(row["subject_id"]),                   # 과목 ID
        class_id=int(row["class_id"]),                       # 학급 ID
        period=row["period"].strip(),                        # 평가 기간
        grade_type=row["grade_type"].strip(),                # 평가 유형
        value=float(row["value"]),                           # 원점수
        max_value=float(row.get("max_value") or 20),         # 만점 (비어 있으면 20)
        academic_year=(row.get("academic_year") or "").strip() or None,
    )

def migrate_grades(csv_path: str = CSV_PATH) -> int:
    db: Session = SessionLocal()
    count = 0
    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                db.add(row_to_grade(row))
                count += 1
        db.commit()
    finally:
        db.close()
    print(f"✅ 점수 CSV → DB 마이그레이션 완료 ({count}건)")
    return count

if __name__ == "__main__":
    migrate_grades(sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
