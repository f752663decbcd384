"""User profile API routes. Every route is restricted to the caller's own id."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from todo_api.database import get_db
from todo_api.dependencies import require_owner
from todo_api.schemas.common import MessageResponse
from todo_api.schemas.user import (
    PasswordChange,
    ProfileResponse,
    ProfileUpdateResponse,
    UserProfile,
    UserUpdate,
)
from todo_api.services import account_service

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_owner)])


@router.get("/{user_id}", response_model=ProfileResponse)
def get_user(user_id: str, db: Session = Depends(get_db)):
    """Fetch the caller's profile and settings."""
    user = account_service.get_user(db, user_id)
    return ProfileResponse(user=UserProfile.model_validate(user))


@router.put("/{user_id}", response_model=ProfileUpdateResponse)
def update_user(user_id: str, payload: UserUpdate, db: Session = Depends(get_db)):
    """Update name, email and/or settings (partial update)."""
    user = account_service.update_profile(db, user_id, payload.model_dump(exclude_unset=True))
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserProfile.model_validate(user),
    )


@router.put("/{user_id}/password", response_model=MessageResponse)
def change_password(user_id: str, payload: PasswordChange, db: Session = Depends(get_db)):
    account_service.change_password(db, user_id, payload.current_password, payload.new_password)
    return MessageResponse(message="Password updated successfully")


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    """Delete the account together with all of its tasks."""
    account_service.delete_account(db, user_id)
    return MessageResponse(message="Account deleted successfully")
