import logging

from quickcheck.core.exceptions import ValidationError
from quickcheck.core.security import create_access_token
from quickcheck.db.models import User, UserRole
from quickcheck.db.store import Store

logger = logging.getLogger(__name__)


def login_as_role(store: Store, role: str) -> tuple[User, str]:
    """Sign in as the first user holding ``role``; returns the user and an access token."""
    try:
        wanted = UserRole(role)
    except ValueError as exc:
        raise ValidationError("User for role not found") from exc

    user = store.find_one(User, User.role == wanted, order_by=(User.created_at.asc(), User.id.asc()))
    if not user:
        raise ValidationError("User for role not found")

    logger.info("auth.login role=%s user_id=%s", wanted.value, user.id)
    return user, create_access_token(user.id, user.role.value)
