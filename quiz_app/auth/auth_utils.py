# quiz_app/auth/auth_utils.py
from datetime import datetime, timedelta
import logging

from fastapi import Header
from jose import jwt, JWTError
from passlib.context import CryptContext

from quiz_app.config import JWT_SECRET_KEY, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_HOURS
from quiz_app.errors import Unauthenticated
from quiz_app.users.user_models import Role

logger = logging.getLogger("auth")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt hashes at most 72 bytes of input, not characters
BCRYPT_MAX_BYTES = 72


def check_password_bytes(password):
    """Reject passwords that bcrypt would silently truncate"""
    if password is not None and len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
    return password


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(user_id: str, role: Role) -> str:
    expires = datetime.utcnow() + timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)
    payload = {"sub": user_id, "role": Role(role).value, "exp": expires}
    return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def _decode_jwt_token(token: str) -> dict:
    try:
        return jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError:
        raise Unauthenticated("Invalid or Expired Token")


def verify_token(authorization: str = Header(None)) -> dict:
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthenticated("Access denied. No token provided.")

    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise Unauthenticated("Access denied. No token provided.")

    # Decodes and checks expiration/signature
    return _decode_jwt_token(token)
