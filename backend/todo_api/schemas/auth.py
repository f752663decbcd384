"""Pydantic schemas for signup, login and the token responses."""
from __future__ import annotations

from pydantic import Field

from todo_api.schemas.common import CamelModel, Envelope, Name, NormalizedEmail
from todo_api.schemas.user import UserPublic


class SignupRequest(CamelModel):
    name: Name
    email: NormalizedEmail
    password: str = Field(min_length=6)


class LoginRequest(CamelModel):
    email: NormalizedEmail
    password: str = Field(min_length=1)


class AuthResponse(Envelope):
    message: str
    token: str
    user: UserPublic


class MeResponse(Envelope):
    user: UserPublic
