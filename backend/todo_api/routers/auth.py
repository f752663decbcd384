"""Authentication API routes — signup, login and the current user."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from todo_api.database import get_db
from todo_api.dependencies import get_current_user
from todo_api.models.user import User
from todo_api.schemas.auth import AuthResponse, LoginRequest, MeResponse, SignupRequest
from todo_api.schemas.user import UserPublic
from todo_api.security import create_access_token
from todo_api.services import account_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    """Register a new user and return an access token."""
    user = account_service.register(db, name=payload.name, email=payload.email, password=payload.password)
    return AuthResponse(
        message="User registered successfully",
        token=create_access_token(user.id),
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for an access token."""
    user = account_service.authenticate(db, email=payload.email, password=payload.password)
    logger.info("User %s logged in", user.id)
    return AuthResponse(
        message="Logged in successfully",
        token=create_access_token(user.id),
        user=UserPublic.model_validate(user),
    )


@router.get("/me", response_model=MeResponse)
def me(current_user: User = Depends(get_current_user)):
    return MeResponse(user=UserPublic.model_validate(current_user))
