"""Account service — registration, login and profile management.

Responsibilities:
- Email uniqueness (emails arrive lowercased from the schemas)
- Password hashing on every write and re-verification before a change
- Login failures that never reveal whether the email exists
- ``updated_at`` bump on every mutating save
"""
import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from todo_api.errors import ConflictError, InvalidCredentialsError, NotFoundError
from todo_api.models.user import User, DefaultTaskStatus, NotificationEmail, Theme
from todo_api.security import hash_password, verify_password

logger = logging.getLogger(__name__)

_SETTINGS_FIELDS = {
    "notification_email": NotificationEmail,
    "theme": Theme,
    "default_task_status": DefaultTaskStatus,
}


def _find_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_user(db: Session, user_id: str) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def register(db: Session, name: str, email: str, password: str) -> User:
    """Create a user; raises ConflictError if the email is already registered."""
    email = email.strip().lower()
    if _find_by_email(db, email):
        raise ConflictError("User already exists")

    user = User(name=name, email=email, password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same address.
        db.rollback()
        raise ConflictError("User already exists")
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """Return the user for valid credentials, else InvalidCredentialsError."""
    user = _find_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError("Invalid credentials")
    return user


def update_profile(db: Session, user_id: str, changes: dict[str, Any]) -> User:
    """Merge ``name``/``email``/``settings`` into the profile.

    Only keys present in ``changes`` are applied; ``settings`` is merged key by key.
    """
    user = get_user(db, user_id)

    if changes.get("name") is not None:
        user.name = changes["name"]

    new_email = changes.get("email")
    if new_email is not None and new_email != user.email:
        other = _find_by_email(db, new_email)
        if other and other.id != user.id:
            raise ConflictError("Email is already in use.")
        user.email = new_email.strip().lower()

    for field, value in (changes.get("settings") or {}).items():
        if field in _SETTINGS_FIELDS and value is not None:
            setattr(user, field, _SETTINGS_FIELDS[field](value))

    user.touch()
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email is already in use.")
    db.refresh(user)
    logger.info("Updated profile of user %s", user.id)
    return user


def change_password(db: Session, user_id: str, current_password: str, new_password: str) -> None:
    """Replace the password after re-verifying the current one."""
    user = get_user(db, user_id)
    if not verify_password(current_password, user.password_hash):
        raise InvalidCredentialsError("Current password is incorrect")

    user.password_hash = hash_password(new_password)
    user.touch()
    db.commit()
    logger.info("Changed password of user %s", user.id)


def delete_account(db: Session, user_id: str) -> None:
    """Delete the user; owned tasks are removed in the same transaction."""
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)
