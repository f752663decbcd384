"""Task API routes, nested under the owning user."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from todo_api.database import get_db
from todo_api.dependencies import require_owner
from todo_api.schemas.common import MessageResponse
from todo_api.schemas.task import TaskCreate, TaskListResponse, TaskOut, TaskResponse, TaskUpdate
from todo_api.services import task_service

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_owner)])


@router.get("/{user_id}/tasks", response_model=TaskListResponse)
def list_tasks(user_id: str, db: Session = Depends(get_db)):
    tasks = task_service.list_tasks(db, user_id)
    return TaskListResponse(tasks=[TaskOut.model_validate(t) for t in tasks])


@router.post("/{user_id}/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(user_id: str, payload: TaskCreate, db: Session = Depends(get_db)):
    """Append a task to the user's list."""
    task = task_service.create_task(db, user_id, payload.model_dump(exclude_unset=True))
    return TaskResponse(message="Task created successfully", task=TaskOut.model_validate(task))


@router.put("/{user_id}/tasks/{task_id}", response_model=TaskResponse)
def update_task(user_id: str, task_id: str, payload: TaskUpdate, db: Session = Depends(get_db)):
    """Update the provided fields of a task (partial update)."""
    task = task_service.update_task(db, user_id, task_id, payload.model_dump(exclude_unset=True))
    return TaskResponse(message="Task updated successfully", task=TaskOut.model_validate(task))


@router.delete("/{user_id}/tasks/{task_id}", response_model=MessageResponse)
def delete_task(user_id: str, task_id: str, db: Session = Depends(get_db)):
    task_service.delete_task(db, user_id, task_id)
    return MessageResponse(message="Task deleted successfully")
