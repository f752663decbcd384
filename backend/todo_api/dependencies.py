"""Request authentication and ownership dependencies.

``get_current_user`` resolves the bearer token to a stored user and never
mutates anything. ``require_owner`` narrows that to routes addressed by
``/{user_id}``: the caller may only act on their own user id.
"""
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from todo_api.database import get_db
from todo_api.errors import AuthError, OwnershipError
from todo_api.models.user import User
from todo_api.security import decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise AuthError("Not authorized, no token")

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        logger.warning("Request rejected: token failed verification")
        raise AuthError("Not authorized, token failed")

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.warning("Request rejected: token for unknown user %s", user_id)
        raise AuthError("Not authorized, user not found")
    return user


def require_owner(user_id: str, current_user: User = Depends(get_current_user)) -> User:
    """Reject with 403 unless the path ``user_id`` is the caller's own id."""
    if current_user.id != user_id:
        logger.warning("User %s attempted to access resources of %s", current_user.id, user_id)
        raise OwnershipError()
    return current_user
