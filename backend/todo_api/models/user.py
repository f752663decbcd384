"""User ORM model — aggregate root that owns the task list."""
import uuid
import enum
from sqlalchemy import Column, String, DateTime, Enum as SAEnum
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from todo_api.database import Base, next_timestamp, utcnow


class NotificationEmail(str, enum.Enum):
    immediate = "immediate"
    daily = "daily"
    weekly = "weekly"
    none = "none"


class Theme(str, enum.Enum):
    light = "light"
    dark = "dark"


class DefaultTaskStatus(str, enum.Enum):
    pending = "pending"
    in_progress = "in-progress"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    notification_email = Column(
        SAEnum(NotificationEmail, values_callable=_enum_values, native_enum=False),
        nullable=False,
        default=NotificationEmail.daily,
    )
    theme = Column(SAEnum(Theme, values_callable=_enum_values, native_enum=False), nullable=False, default=Theme.light)
    default_task_status = Column(
        SAEnum(DefaultTaskStatus, values_callable=_enum_values, native_enum=False),
        nullable=False,
        default=DefaultTaskStatus.pending,
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Tasks live and die with their owner; list order is the storage order.
    tasks = relationship(
        "Task",
        back_populates="owner",
        cascade="all, delete-orphan",
        order_by="Task.position",
        collection_class=ordering_list("position"),
    )

    @property
    def settings(self) -> dict:
        return {
            "notification_email": self.notification_email,
            "theme": self.theme,
            "default_task_status": self.default_task_status,
        }

    def touch(self) -> None:
        """Mark the aggregate as modified; every mutating save calls this."""
        self.updated_at = next_timestamp(self.updated_at)

    def find_task(self, task_id: str):
        """Return the owned task with ``task_id`` or None."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
