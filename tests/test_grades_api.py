import pytest


@pytest.fixture()
def school(client):
    """학급 1개 (단계 6ème), 학생 3명, 과목 2개 (수학 계수 3 → 6ème 에서 4)"""
    class_id = client.post("/v1/classes/", json={"name": "6ème A", "level": "6ème", "academic_year": "2024-2025"}).json()["data"]["id"]
    students = [
        client.post("/v1/students/", json={
            "matricule": f"M00{i}", "first_name": f"Eleve{i}", "last_name": "Test", "class_id": class_id,
        }).json()["data"]["id"]
        for i in range(1, 4)
    ]
    maths = client.post("/v1/subjects/", json={"name": "Mathématiques", "coefficient": 3}).json()["data"]["id"]
    french = client.post("/v1/subjects/", json={"name": "Français", "coefficient": 2}).json()["data"]["id"]
    client.put(f"/v1/subjects/{maths}/levels/6ème", json={"coefficient": 4})
    return {"class_id": class_id, "students": students, "maths": maths, "french": french}


def _bulk(client, school, subject_id, entries):
    return client.post("/v1/grades/bulk", json={
        "class_id": school["class_id"],
        "subject_id": subject_id,
        "period": "Trimestre 1",
        "entries": entries,
    })


def test_create_grade_rejects_non_positive_maximum(client, school):
    payload = {
        "student_id": school["students"][0], "subject_id": school["maths"], "class_id": school["class_id"],
        "period": "Trimestre 1", "grade_type": "exam", "value": 12, "max_value": 0,
    }
    assert client.post("/v1/grades/", json=payload).status_code == 422


def test_grade_crud(client, school):
    payload = {
        "student_id": school["students"][0], "subject_id": school["maths"], "class_id": school["class_id"],
        "period": "Trimestre 1", "grade_type": "interro_1", "value": 12, "max_value": 20,
    }
    grade_id = client.post("/v1/grades/", json=payload).json()["data"]["id"]

    payload["value"] = 15
    assert client.put(f"/v1/grades/{grade_id}", json=payload).json()["data"]["value"] == 15
    assert len(client.get("/v1/grades/", params={"student_id": school["students"][0]}).json()["data"]) == 1

    assert client.delete(f"/v1/grades/{grade_id}").json()["success"] is True
    body = client.get(f"/v1/grades/{grade_id}").json()
    assert body["success"] is False
    assert body["error"]["code"] == 404


def test_bulk_upsert_updates_existing_entries(client, school):
    s1 = school["students"][0]
    first = _bulk(client, school, school["maths"], [
        {"student_id": s1, "grade_type": "interro_1", "value": 10},
        {"student_id": s1, "grade_type": "exam", "value": 12},
    ]).json()["data"]
    assert first == {"created": 2, "updated": 0}

    second = _bulk(client, school, school["maths"], [
        {"student_id": s1, "grade_type": "exam", "value": 18},
    ]).json()["data"]
    assert second == {"created": 0, "updated": 1}

    grades = client.get("/v1/grades/", params={"class_id": school["class_id"], "subject_id": school["maths"]}).json()["data"]
    assert sorted(g["value"] for g in grades) == [10, 18]


def test_class_averages_use_level_coefficients(client, school):
    s1, s2, s3 = school["students"]
    _bulk(client, school, school["maths"], [
        {"student_id": s1, "grade_type": "exam", "value": 10},
        {"student_id": s2, "grade_type": "exam", "value": 16},
    ])
    _bulk(client, school, school["french"], [
        {"student_id": s1, "grade_type": "exam", "value": 8, "max_value": 10},
        {"student_id": s2, "grade_type": "exam", "value": 6},
    ])

    data = client.get(f"/v1/grades/class/{school['class_id']}/averages", params={"period": "Trimestre 1"}).json()["data"]
    students = {s["student_id"]: s for s in data["students"]}

    # s1: (10*4 + 16*2) / 6 = 12.0, s2: (16*4 + 6*2) / 6 = 12.666...
    assert students[s1]["general_average"] == pytest.approx(12.0)
    assert students[s2]["general_average"] == pytest.approx(76 / 6)
    assert students[s2]["rank"] == 1
    assert students[s1]["rank"] == 2
    assert students[s3]["rank"] is None
    assert students[s3]["general_average"] is None
    assert students[s1]["rank_total"] == 2
    maths = next(sub for sub in students[s1]["subjects"] if sub["subject_id"] == school["maths"])
    assert maths["coefficient"] == 4
    assert data["statistics"]["graded_students"] == 2
    assert data["statistics"]["total_students"] == 3


def test_subject_averages_for_one_subject(client, school):
    s1, s2, _ = school["students"]
    _bulk(client, school, school["french"], [
        {"student_id": s1, "grade_type": "interro_1", "value": 10},
        {"student_id": s1, "grade_type": "interro_2", "value": 14},
        {"student_id": s2, "grade_type": "exam", "value": 15},
    ])
    data = client.get(
        f"/v1/grades/class/{school['class_id']}/subject/{school['french']}/averages",
        params={"period": "Trimestre 1"},
    ).json()["data"]
    students = {s["student_id"]: s for s in data["students"]}
    assert students[s1]["average"] == pytest.approx(12.0)
    assert students[s1]["grades"] == {"interro_1": [10.0], "interro_2": [14.0]}
    assert students[s2]["rank"] == 1


def test_averages_for_unknown_class(client):
    body = client.get("/v1/grades/class/999/averages", params={"period": "Trimestre 1"}).json()
    assert body["success"] is False


def test_level_coefficients_listing(client, school):
    rows = client.get("/v1/subjects/levels/6ème/coefficients").json()["data"]
    by_subject = {r["subject_id"]: r["coefficient"] for r in rows}
    assert by_subject == {school["maths"]: 4, school["french"]: 2}

    rows = client.get("/v1/subjects/levels/5ème/coefficients").json()["data"]
    assert {r["subject_id"]: r["coefficient"] for r in rows}[school["maths"]] == 3


def test_non_finite_values_rejected(client, school):
    body = (
        '{"class_id": %d, "subject_id": %d, "period": "Trimestre 1", '
        '"entries": [{"student_id": %d, "grade_type": "exam", "value": Infinity}]}'
    ) % (school["class_id"], school["maths"], school["students"][0])
    response = client.post("/v1/grades/bulk", content=body, headers={"Content-Type": "application/json"})
    assert response.status_code == 422

    payload = {
        "student_id": school["students"][0], "subject_id": school["maths"], "class_id": school["class_id"],
        "period": "Trimestre 1", "grade_type": "exam", "value": 12, "max_value": "NaN",
    }
    assert client.post("/v1/grades/", json=payload).status_code == 422

    averages = client.get(f"/v1/grades/class/{school['class_id']}/averages", params={"period": "Trimestre 1"})
    assert averages.status_code == 200
