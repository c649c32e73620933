"""Task store: CRUD over the tasks table. Each call is one committed statement."""
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import TaskNotFound
from app.models.task import Task, utcnow

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, description: str) -> Task:
        task = Task(description=description, completed=False, created_at=utcnow())
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        logger.info("created task id=%s", task.id)
        return task

    def get(self, task_id: int) -> Task:
        task = self.db.get(Task, task_id)
        if task is None:
            raise TaskNotFound()
        return task

    def update(self, task_id: int, description: str, completed: bool) -> Task:
        """Replace both mutable fields; id and created_at never change."""
        task = self.get(task_id)
        task.description = description
        task.completed = completed
        self.db.commit()
        self.db.refresh(task)
        logger.info("updated task id=%s completed=%s", task.id, task.completed)
        return task

    def delete(self, task_id: int) -> None:
        task = self.get(task_id)
        self.db.delete(task)
        self.db.commit()
        logger.info("deleted task id=%s", task_id)

    def list(self) -> list[Task]:
        """All tasks in insertion order (ascending id)."""
        result = self.db.execute(select(Task).order_by(Task.id.asc()))
        return list(result.scalars().all())
