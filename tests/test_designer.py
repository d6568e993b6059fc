from tests.conftest import register_and_login


def _question(**overrides):
    body = {
        "text": "What is 2 + 2?",
        "options": ["3", "4", "5"],
        "correct_answer": 1,
        "difficulty": 2,
    }
    body.update(overrides)
    return body


def test_designer_lists_only_own_questions_with_category_name(client):
    _, d1 = register_and_login(client, "designer1", "designer")
    _, d2 = register_and_login(client, "designer2", "designer")

    resp = client.post("/api/designer/categories", json={"name": "Math"}, headers=d1)
    assert resp.status_code == 201
    category_id = resp.json()["category_id"]

    resp = client.post("/api/designer/questions", json=_question(category_id=category_id), headers=d1)
    assert resp.status_code == 201
    qx = resp.json()
    assert qx["category"] == {"category_id": category_id, "name": "Math"}
    assert qx["correct_answer"] == 1

    listed = client.get("/api/designer/questions", headers=d1).json()
    assert [q["question_id"] for q in listed] == [qx["question_id"]]
    assert listed[0]["category"]["name"] == "Math"
    assert "correct_answer" not in listed[0]

    assert client.get("/api/designer/questions", headers=d2).json() == []


def test_correct_answer_must_index_options(client):
    _, d1 = register_and_login(client, "designer1", "designer")

    resp = client.post("/api/designer/questions", json=_question(correct_answer=3), headers=d1)
    assert resp.status_code == 422

    resp = client.post("/api/designer/questions", json=_question(difficulty=6), headers=d1)
    assert resp.status_code == 422

    qid = client.post("/api/designer/questions", json=_question(), headers=d1).json()["question_id"]

    # shrinking options below the stored answer index is rejected
    resp = client.put(f"/api/designer/questions/{qid}", json={"options": ["a", "b"], "correct_answer": 2}, headers=d1)
    assert resp.status_code == 400
    resp = client.put(f"/api/designer/questions/{qid}", json={"correct_answer": 5}, headers=d1)
    assert resp.status_code == 400

    resp = client.put(f"/api/designer/questions/{qid}", json={"correct_answer": 2, "text": "Pick 5"}, headers=d1)
    assert resp.status_code == 200
    assert resp.json()["correct_answer"] == 2
    assert resp.json()["text"] == "Pick 5"


def test_other_designer_cannot_touch_question(client):
    _, d1 = register_and_login(client, "designer1", "designer")
    _, d2 = register_and_login(client, "designer2", "designer")
    qid = client.post("/api/designer/questions", json=_question(), headers=d1).json()["question_id"]

    assert client.get(f"/api/designer/questions/{qid}", headers=d2).status_code == 404
    assert client.put(f"/api/designer/questions/{qid}", json={"text": "x"}, headers=d2).status_code == 404
    assert client.delete(f"/api/designer/questions/{qid}", headers=d2).status_code == 404
    assert client.get(f"/api/designer/questions/{qid}", headers=d1).status_code == 200


def test_question_in_foreign_category_rejected(client):
    _, d1 = register_and_login(client, "designer1", "designer")
    _, d2 = register_and_login(client, "designer2", "designer")
    category_id = client.post("/api/designer/categories", json={"name": "Math"}, headers=d1).json()["category_id"]

    resp = client.post("/api/designer/questions", json=_question(category_id=category_id), headers=d2)
    assert resp.status_code == 404


def test_related_questions_link_and_unlink(client):
    _, d1 = register_and_login(client, "designer1", "designer")
    q1 = client.post("/api/designer/questions", json=_question(), headers=d1).json()["question_id"]
    q2 = client.post("/api/designer/questions", json=_question(text="Second"), headers=d1).json()["question_id"]

    resp = client.post(f"/api/designer/questions/{q1}/related/{q2}", headers=d1)
    assert resp.status_code == 200
    assert resp.json()["related_questions"] == [q2]

    # linking twice keeps a single entry
    resp = client.post(f"/api/designer/questions/{q1}/related/{q2}", headers=d1)
    assert resp.json()["related_questions"] == [q2]

    related = client.get(f"/api/designer/questions/{q1}/related", headers=d1).json()
    assert [q["question_id"] for q in related] == [q2]

    assert client.post(f"/api/designer/questions/{q1}/related/{q1}", headers=d1).status_code == 400
    assert client.post(f"/api/designer/questions/{q1}/related/Q_MISSING", headers=d1).status_code == 404

    resp = client.delete(f"/api/designer/questions/{q1}/related/{q2}", headers=d1)
    assert resp.status_code == 200
    assert resp.json()["related_questions"] == []


def test_deleting_question_clears_related_references(client):
    _, d1 = register_and_login(client, "designer1", "designer")
    q1 = client.post("/api/designer/questions", json=_question(), headers=d1).json()["question_id"]
    q2 = client.post("/api/designer/questions", json=_question(related_questions=[q1]), headers=d1).json()["question_id"]

    resp = client.delete(f"/api/designer/questions/{q1}", headers=d1)
    assert resp.status_code == 200
    assert client.get(f"/api/designer/questions/{q1}", headers=d1).status_code == 404
    assert client.get(f"/api/designer/questions/{q2}", headers=d1).json()["related_questions"] == []


def test_category_crud(client):
    _, d1 = register_and_login(client, "designer1", "designer")
    _, d2 = register_and_login(client, "designer2", "designer")

    category_id = client.post("/api/designer/categories", json={"name": "Math"}, headers=d1).json()["category_id"]
    qid = client.post("/api/designer/questions", json=_question(category_id=category_id), headers=d1).json()["question_id"]

    resp = client.put(f"/api/designer/categories/{category_id}", json={"name": "Algebra"}, headers=d1)
    assert resp.status_code == 200
    assert resp.json()["name"] == "Algebra"
    assert client.put(f"/api/designer/categories/{category_id}", json={"name": "X"}, headers=d2).status_code == 404

    assert [c["name"] for c in client.get("/api/designer/categories", headers=d1).json()] == ["Algebra"]
    assert client.get("/api/designer/categories", headers=d2).json() == []

    assert client.delete(f"/api/designer/categories/{category_id}", headers=d2).status_code == 404
    assert client.delete(f"/api/designer/categories/{category_id}", headers=d1).status_code == 200
    assert client.get(f"/api/designer/questions/{qid}", headers=d1).json()["category"] is None


def test_null_category_uncategorises_question(client):
    _, d1 = register_and_login(client, "designer1", "designer")
    category_id = client.post("/api/designer/categories", json={"name": "Math"}, headers=d1).json()["category_id"]
    qid = client.post("/api/designer/questions", json=_question(category_id=category_id), headers=d1).json()["question_id"]

    # fields left out of the body keep their values
    resp = client.put(f"/api/designer/questions/{qid}", json={"text": "Still Math?"}, headers=d1)
    assert resp.json()["category"]["name"] == "Math"

    resp = client.put(f"/api/designer/questions/{qid}", json={"category_id": None}, headers=d1)
    assert resp.status_code == 200
    assert resp.json()["category"] is None
    assert resp.json()["text"] == "Still Math?"

    resp = client.put(f"/api/designer/questions/{qid}", json={"category_id": category_id}, headers=d1)
    assert resp.json()["category"] == {"category_id": category_id, "name": "Math"}
