from typing import Iterable, List, Optional

from schemas.timetable import ConflictDescriptor, TimeSlot


class TimetableConflictError(Exception):
    """저장하려는 슬롯이 기존 슬롯과 충돌 (conflicts 가 비어 있지 않음)"""

    def __init__(self, conflicts: List[ConflictDescriptor]):
        self.conflicts = conflicts
        super().__init__(f"{len(conflicts)} timetable conflict(s)")


def _room_key(room: Optional[str]) -> str:
    return (room or "").strip().casefold()


def overlaps(a, b) -> bool:
    # 반개구간 비교: 한 슬롯의 종료 == 다른 슬롯의 시작 이면 겹치지 않음
    return a.day_of_week == b.day_of_week and a.start_time < b.end_time and a.end_time > b.start_time


def detect_conflicts(
    candidate: TimeSlot,
    existing: Iterable,
    exclude_id: Optional[int] = None,
) -> List[ConflictDescriptor]:
    """
    후보 슬롯과 시간이 겹치는 기존 슬롯마다 교사/학급/교실 충돌을 찾음
    - 수정 시에는 exclude_id 로 자기 자신을 제외
    - 결과가 비어 있으면 저장 가능, 하나라도 있으면 저장 불가
    """
    conflicts: List[ConflictDescriptor] = []
    candidate_room = _room_key(candidate.room)

    for slot in existing:
        if exclude_id is not None and slot.id == exclude_id:
            continue
        if not overlaps(candidate, slot):
            continue

        kinds = []
        if slot.teacher_id == candidate.teacher_id:
            kinds.append("teacher")
        if slot.class_id == candidate.class_id:
            kinds.append("class")
        if candidate_room and candidate_room == _room_key(slot.room):
            kinds.append("room")

        for kind in kinds:
            conflicts.append(ConflictDescriptor(
                kind=kind,
                slot_id=slot.id,
                day_of_week=slot.day_of_week,
                start_time=slot.start_time,
                end_time=slot.end_time,
            ))
    return conflicts
