import pytest


@pytest.fixture()
def refs(client):
    t1 = client.post("/v1/teachers/", json={"name": "M. Dupont"}).json()["data"]["id"]
    t2 = client.post("/v1/teachers/", json={"name": "Mme Martin"}).json()["data"]["id"]
    c1 = client.post("/v1/classes/", json={"name": "5ème A", "level": "5ème"}).json()["data"]["id"]
    c2 = client.post("/v1/classes/", json={"name": "5ème B", "level": "5ème"}).json()["data"]["id"]
    subject = client.post("/v1/subjects/", json={"name": "Anglais"}).json()["data"]["id"]
    return {"t1": t1, "t2": t2, "c1": c1, "c2": c2, "subject": subject}


def _slot(refs, start="08:00", end="09:00", teacher="t1", klass="c1", room=None, day=1):
    return {
        "day_of_week": day, "start_time": start, "end_time": end,
        "class_id": refs[klass], "teacher_id": refs[teacher], "subject_id": refs["subject"], "room": room,
    }


def test_create_and_list(client, refs):
    body = client.post("/v1/timetable/", json=_slot(refs)).json()
    assert body["success"] is True
    assert body["data"]["start_time"] == "08:00:00"

    listed = client.get("/v1/timetable/", params={"class_id": refs["c1"]}).json()["data"]
    assert len(listed) == 1


def test_back_to_back_is_accepted(client, refs):
    assert client.post("/v1/timetable/", json=_slot(refs)).status_code == 200
    assert client.post("/v1/timetable/", json=_slot(refs, "09:00", "10:00")).status_code == 200


def test_conflicting_slot_is_rejected(client, refs):
    client.post("/v1/timetable/", json=_slot(refs, room="B12"))
    response = client.post("/v1/timetable/", json=_slot(refs, "08:30", "09:30", klass="c2", room="B12"))

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "TIMETABLE_CONFLICT"
    assert sorted(c["kind"] for c in error["conflicts"]) == ["room", "teacher"]
    assert len(client.get("/v1/timetable/").json()["data"]) == 1


def test_check_does_not_persist(client, refs):
    client.post("/v1/timetable/", json=_slot(refs))
    data = client.post("/v1/timetable/check", json=_slot(refs, "08:59", "10:00", klass="c2")).json()["data"]
    assert data["has_conflicts"] is True
    assert [c["kind"] for c in data["conflicts"]] == ["teacher"]
    assert len(client.get("/v1/timetable/").json()["data"]) == 1


def test_update_ignores_own_slot(client, refs):
    slot_id = client.post("/v1/timetable/", json=_slot(refs)).json()["data"]["id"]
    response = client.put(f"/v1/timetable/{slot_id}", json=_slot(refs, "08:30", "09:30"))
    assert response.status_code == 200
    assert response.json()["data"]["end_time"] == "09:30:00"


def test_update_into_other_slot_is_rejected(client, refs):
    client.post("/v1/timetable/", json=_slot(refs, teacher="t2", klass="c2"))
    slot_id = client.post("/v1/timetable/", json=_slot(refs, "10:00", "11:00")).json()["data"]["id"]
    response = client.put(f"/v1/timetable/{slot_id}", json=_slot(refs, "08:00", "09:00", teacher="t2"))
    assert response.status_code == 409


def test_end_before_start_is_invalid(client, refs):
    assert client.post("/v1/timetable/", json=_slot(refs, "10:00", "09:00")).status_code == 422


def test_teacher_timetable(client, refs):
    client.post("/v1/timetable/", json=_slot(refs, "10:00", "11:00", day=2))
    client.post("/v1/timetable/", json=_slot(refs, "08:00", "09:00", day=1))
    slots = client.get(f"/v1/teachers/{refs['t1']}/timetable").json()["data"]
    assert [(s["day_of_week"], s["start_time"]) for s in slots] == [(1, "08:00"), (2, "10:00")]


def test_delete_missing_slot(client):
    body = client.delete("/v1/timetable/42").json()
    assert body["success"] is False
