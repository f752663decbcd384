"""Task service — CRUD over the task list owned by a user.

Tasks are never queried or saved on their own: each operation loads the
owning user, changes ``user.tasks`` in memory and commits once, so the task
change and the owner's ``updated_at`` bump land together. Two concurrent
writers to the same user race at last-write-wins.
"""
import logging
from datetime import datetime
from typing import Any, Optional

from sqlalchemy.orm import Session

from todo_api.database import as_utc, next_timestamp
from todo_api.errors import NotFoundError
from todo_api.models.task import Task, TaskStatus
from todo_api.services.account_service import get_user

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("title", "description", "status", "due_date")


def _utc_or_none(value: Optional[datetime]) -> Optional[datetime]:
    return as_utc(value) if value is not None else None


def _get_owned_task(user, task_id: str) -> Task:
    task = user.find_task(task_id)
    if task is None:
        raise NotFoundError("Task not found or not owned by user")
    return task


def list_tasks(db: Session, user_id: str) -> list[Task]:
    """All tasks of the user, in storage order."""
    return list(get_user(db, user_id).tasks)


def create_task(db: Session, user_id: str, data: dict[str, Any]) -> Task:
    """Append a task to the user's list; status falls back to the user's default."""
    user = get_user(db, user_id)
    status = data.get("status") or TaskStatus(user.default_task_status.value)
    task = Task(
        title=data["title"],
        description=data.get("description"),
        status=TaskStatus(status),
        due_date=_utc_or_none(data.get("due_date")),
    )
    user.tasks.append(task)
    user.touch()
    db.commit()
    db.refresh(task)
    logger.info("Created task %s for user %s", task.id, user.id)
    return task


def update_task(db: Session, user_id: str, task_id: str, changes: dict[str, Any]) -> Task:
    """Merge the provided fields into the task; absent fields keep their values."""
    user = get_user(db, user_id)
    task = _get_owned_task(user, task_id)

    for field, value in changes.items():
        if field not in _UPDATABLE_FIELDS:
            continue
        if field == "status":
            value = TaskStatus(value)
        elif field == "due_date":
            value = _utc_or_none(value)
        setattr(task, field, value)

    task.updated_at = next_timestamp(task.updated_at)
    user.touch()
    db.commit()
    db.refresh(task)
    logger.info("Updated task %s for user %s", task_id, user.id)
    return task


def delete_task(db: Session, user_id: str, task_id: str) -> None:
    """Remove the task from the user's list; NotFoundError leaves the list as is."""
    user = get_user(db, user_id)
    task = _get_owned_task(user, task_id)
    user.tasks.remove(task)
    user.touch()
    db.commit()
    logger.info("Deleted task %s for user %s", task_id, user.id)
