"""
Quiz Game Configuration
Database, token and gameplay settings
"""

import os

# MongoDB
MONGO_URL = os.getenv("MONGO_URL", "mongodb://localhost:27017")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "quiz_app")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
# Multi-document transactions need a replica set
MONGO_TRANSACTIONS = os.getenv("MONGO_TRANSACTIONS", "false").lower() == "true"

# Tokens
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me-in-production")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_HOURS = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "24"))

# Gameplay
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "10"))
LEADERBOARD_SIZE = int(os.getenv("LEADERBOARD_SIZE", "10"))
POINTS_PER_DIFFICULTY = 10
_seed = os.getenv("QUESTION_RANDOM_SEED")
QUESTION_RANDOM_SEED = int(_seed) if _seed else None

# Service
VERSION = os.getenv("VERSION", "1.0.0")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")
