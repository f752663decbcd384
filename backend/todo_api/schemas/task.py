"""Pydantic schemas for tasks."""
from __future__ import annotations
from typing import Optional

from pydantic import Field, field_validator

from todo_api.models.task import TaskStatus
from todo_api.schemas.common import CamelModel, Envelope, Title, UtcDatetime


class TaskCreate(CamelModel):
    title: Title
    description: Optional[str] = Field(None, max_length=500)
    status: Optional[TaskStatus] = None
    due_date: Optional[UtcDatetime] = None


class TaskUpdate(CamelModel):
    title: Optional[Title] = None
    description: Optional[str] = Field(None, max_length=500)
    status: Optional[TaskStatus] = None
    due_date: Optional[UtcDatetime] = None

    @field_validator("title", "status")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class TaskOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    due_date: Optional[UtcDatetime] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}


class TaskResponse(Envelope):
    message: str
    task: TaskOut


class TaskListResponse(Envelope):
    tasks: list[TaskOut]
