from fastapi import Depends

from quiz_app.auth.auth_utils import verify_token
from quiz_app.errors import Unauthenticated, Forbidden
from quiz_app.users.user_models import Role


class UserContext:
    """
    Identity decoded from the bearer token
    """
    def __init__(self, user_id: str, role: Role):
        self.user_id = user_id
        self.role = role


def get_current_user(payload: dict = Depends(verify_token)) -> UserContext:
    """
    Dependency: turns the token payload into a UserContext

    Raises:
        401: Missing subject or unknown role claim
    """
    user_id = payload.get("sub")
    if not user_id:
        raise Unauthenticated("Invalid token: missing user_id")

    try:
        role = Role(payload.get("role"))
    except ValueError:
        raise Unauthenticated("Invalid token: unknown role")

    return UserContext(user_id, role)


def require_role(role: Role):
    """Build a dependency that only lets `role` through (403 otherwise)"""

    def checker(user: UserContext = Depends(get_current_user)) -> UserContext:
        if user.role != role:
            raise Forbidden(f"Access denied. {role.value.capitalize()}s only.")
        return user

    return checker


get_current_designer = require_role(Role.DESIGNER)
get_current_player = require_role(Role.PLAYER)
