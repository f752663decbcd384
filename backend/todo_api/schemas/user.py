"""Pydantic schemas for user profiles and settings."""
from __future__ import annotations
from typing import Optional

from pydantic import Field, field_validator

from todo_api.models.user import DefaultTaskStatus, NotificationEmail, Theme
from todo_api.schemas.common import CamelModel, Envelope, Name, NormalizedEmail


class UserSettings(CamelModel):
    notification_email: NotificationEmail = NotificationEmail.daily
    theme: Theme = Theme.light
    default_task_status: DefaultTaskStatus = DefaultTaskStatus.pending


class UserSettingsUpdate(CamelModel):
    notification_email: Optional[NotificationEmail] = None
    theme: Optional[Theme] = None
    default_task_status: Optional[DefaultTaskStatus] = None


class UserUpdate(CamelModel):
    name: Optional[Name] = None
    email: Optional[NormalizedEmail] = None
    settings: Optional[UserSettingsUpdate] = None

    @field_validator("name", "email")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class PasswordChange(CamelModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6)


class UserPublic(CamelModel):
    id: str
    name: str
    email: str

    model_config = {"from_attributes": True}


class UserProfile(UserPublic):
    settings: UserSettings


class ProfileResponse(Envelope):
    user: UserProfile


class ProfileUpdateResponse(Envelope):
    message: str
    user: UserProfile
