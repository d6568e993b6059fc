import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from quiz_app.config import MONGO_URL, MONGO_DB_NAME, MONGO_TIMEOUT_MS

logger = logging.getLogger("database")

# timeoutMS bounds every operation; retryable reads/writes stay on (pymongo default)
client = AsyncIOMotorClient(MONGO_URL, timeoutMS=MONGO_TIMEOUT_MS)
db = client[MONGO_DB_NAME]


async def get_db() -> AsyncIOMotorDatabase:
    """Database dependency"""
    return db


async def create_indexes(database: AsyncIOMotorDatabase):
    """
    Create database indexes for the quiz collections
    Called during application startup
    """

    # Users
    await database.users.create_index("user_id", unique=True)
    await database.users.create_index("username", unique=True)
    await database.users.create_index([("role", 1), ("points", -1)])

    # Questions
    await database.questions.create_index("question_id", unique=True)
    await database.questions.create_index("creator_id")
    await database.questions.create_index([("category_id", 1), ("difficulty", 1)])

    # Categories
    await database.categories.create_index("category_id", unique=True)
    await database.categories.create_index("creator_id")
    await database.categories.create_index("name")

    logger.info("Quiz indexes created successfully")
