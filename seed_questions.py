"""
Seed the questions collection with generated practice questions.

    python seed_questions.py --designer-id USR_XXXX --count 100
"""
import argparse
import os
import random
import secrets
from datetime import datetime

from pymongo import MongoClient

TOPICS = [
    "JavaScript", "Python", "HTML", "CSS", "React", "Node.js",
    "Database", "Git", "Docker", "APIs", "Security", "Networks",
]


def generate_id(prefix: str) -> str:
    return f"{prefix}_{secrets.token_hex(8).upper()}"


def ensure_categories(db, designer_id: str) -> dict:
    """One category per topic, reused across runs"""
    category_ids = {}
    for topic in TOPICS:
        existing = db.categories.find_one({"name": topic, "creator_id": designer_id})
        if existing:
            category_ids[topic] = existing["category_id"]
            continue
        category_id = generate_id("CAT")
        now = datetime.utcnow()
        db.categories.insert_one({
            "category_id": category_id,
            "name": topic,
            "creator_id": designer_id,
            "created_at": now,
            "updated_at": now,
        })
        category_ids[topic] = category_id
    return category_ids


def build_question(index: int, designer_id: str, category_ids: dict, rng: random.Random) -> dict:
    topic = rng.choice(TOPICS)
    now = datetime.utcnow()
    return {
        "question_id": generate_id("Q"),
        "text": f"Question about {topic} #{index + 1}",
        "options": [f"Option {n} for {topic}" for n in range(1, 5)],
        "correct_answer": rng.randrange(4),
        "category_id": category_ids[topic],
        "difficulty": rng.randint(1, 4),
        "creator_id": designer_id,
        "related_questions": [],
        "created_at": now,
        "updated_at": now,
    }


def main():
    parser = argparse.ArgumentParser(description="Insert generated quiz questions")
    parser.add_argument("--designer-id", required=True, help="user_id of the owning designer")
    parser.add_argument("--count", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--mongo-url", default=os.getenv("MONGO_URL", "mongodb://localhost:27017"))
    parser.add_argument("--db-name", default=os.getenv("MONGO_DB_NAME", "quiz_app"))
    args = parser.parse_args()

    client = MongoClient(args.mongo_url)
    db = client[args.db_name]

    designer = db.users.find_one({"user_id": args.designer_id, "role": "designer"})
    if not designer:
        raise SystemExit(f"No designer with user_id {args.designer_id}")

    rng = random.Random(args.seed)
    category_ids = ensure_categories(db, args.designer_id)
    questions = [build_question(i, args.designer_id, category_ids, rng) for i in range(args.count)]

    db.questions.insert_many(questions)
    print(f"✅ Inserted {len(questions)} questions for designer {args.designer_id}")


if __name__ == "__main__":
    main()
