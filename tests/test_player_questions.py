import random

import pytest

from quiz_app.designers import designer_service
from quiz_app.errors import NoMoreQuestions, NotFound
from quiz_app.players import question_service, scoring_service
from quiz_app.users.user_models import Role
from tests.conftest import make_user, register_and_login


async def _seed(db, designer, count, category_id=None, difficulty=1):
    ids = []
    for i in range(count):
        question = await designer_service.create_question(db, designer, {
            "text": f"Question {i}",
            "options": ["a", "b"],
            "correct_answer": 0,
            "difficulty": difficulty,
            "category_id": category_id,
        })
        ids.append(question["question_id"])
    return ids


async def test_listing_excludes_answered_and_hides_answer(db):
    designer = await make_user(db, "designer", Role.DESIGNER)
    player = await make_user(db, "player", Role.PLAYER)
    ids = await _seed(db, designer, 3)

    await scoring_service.submit_answer(db, player.user_id, ids[0], 0)

    listed = await question_service.list_questions(db, player.user_id)
    assert {q["question_id"] for q in listed} == set(ids[1:])
    assert all("correct_answer" not in q for q in listed)


async def test_listing_is_capped_at_page_size(db):
    designer = await make_user(db, "designer", Role.DESIGNER)
    player = await make_user(db, "player", Role.PLAYER)
    await _seed(db, designer, 12)

    listed = await question_service.list_questions(db, player.user_id)
    assert len(listed) == 10


async def test_listing_filters_by_category_name_and_difficulty(db):
    designer = await make_user(db, "designer", Role.DESIGNER)
    other = await make_user(db, "other", Role.DESIGNER)
    player = await make_user(db, "player", Role.PLAYER)

    math = await designer_service.create_category(db, designer, "Math")
    other_math = await designer_service.create_category(db, other, "Math")
    history = await designer_service.create_category(db, designer, "History")

    easy_math = await _seed(db, designer, 1, math["category_id"], difficulty=1)
    hard_math = await _seed(db, designer, 1, math["category_id"], difficulty=4)
    others_math = await _seed(db, other, 1, other_math["category_id"], difficulty=4)
    await _seed(db, designer, 2, history["category_id"], difficulty=4)

    listed = await question_service.list_questions(db, player.user_id, category="Math")
    assert {q["question_id"] for q in listed} == set(easy_math + hard_math + others_math)
    assert all(q["category"]["name"] == "Math" for q in listed)

    listed = await question_service.list_questions(db, player.user_id, category="Math", difficulty=4)
    assert {q["question_id"] for q in listed} == set(hard_math + others_math)

    with pytest.raises(NotFound):
        await question_service.list_questions(db, player.user_id, category="Geography")


async def test_random_question_is_unanswered_and_seedable(db):
    designer = await make_user(db, "designer", Role.DESIGNER)
    player = await make_user(db, "player", Role.PLAYER)
    ids = await _seed(db, designer, 5)
    await scoring_service.submit_answer(db, player.user_id, ids[2], 0)

    first = await question_service.get_random_question(db, player.user_id, random.Random(7))
    second = await question_service.get_random_question(db, player.user_id, random.Random(7))

    assert first["question_id"] == second["question_id"]
    assert first["question_id"] in ids
    assert first["question_id"] != ids[2]
    assert "correct_answer" not in first


async def test_random_question_covers_candidate_set(db):
    designer = await make_user(db, "designer", Role.DESIGNER)
    player = await make_user(db, "player", Role.PLAYER)
    ids = await _seed(db, designer, 3)

    rng = random.Random(0)
    seen = set()
    for _ in range(60):
        seen.add((await question_service.get_random_question(db, player.user_id, rng))["question_id"])
    assert seen == set(ids)


async def test_random_question_when_all_answered(db):
    designer = await make_user(db, "designer", Role.DESIGNER)
    player = await make_user(db, "player", Role.PLAYER)

    with pytest.raises(NoMoreQuestions):
        await question_service.get_random_question(db, player.user_id, random.Random(1))

    ids = await _seed(db, designer, 2)
    for qid in ids:
        await scoring_service.submit_answer(db, player.user_id, qid, 1)

    with pytest.raises(NoMoreQuestions):
        await question_service.get_random_question(db, player.user_id, random.Random(1))


def test_player_question_endpoints(client):
    _, designer = register_and_login(client, "designer", "designer")
    _, player = register_and_login(client, "player", "player")

    resp = client.get("/api/player/questions/random", headers=player)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "No more questions available"

    category_id = client.post("/api/designer/categories", json={"name": "Math"}, headers=designer).json()["category_id"]
    qid = client.post("/api/designer/questions", json={
        "text": "1+1?", "options": ["1", "2"], "correct_answer": 1, "difficulty": 2, "category_id": category_id
    }, headers=designer).json()["question_id"]

    resp = client.get("/api/player/questions", params={"category": "Math", "difficulty": 2}, headers=player)
    assert resp.status_code == 200
    assert [q["question_id"] for q in resp.json()] == [qid]
    assert "correct_answer" not in resp.json()[0]

    assert client.get("/api/player/questions", params={"category": "Nope"}, headers=player).status_code == 404
    assert client.get("/api/player/questions", params={"difficulty": 9}, headers=player).status_code == 422

    resp = client.get("/api/player/questions/random", headers=player)
    assert resp.status_code == 200
    assert resp.json()["question_id"] == qid


def test_rng_dependency_is_shared_across_requests():
    rng = question_service.get_rng()
    assert question_service.get_rng() is rng

    first = rng.random()
    assert question_service.get_rng().random() != first
