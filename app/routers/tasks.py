"""Task routes. Every route here sits behind the session gate."""
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.db.session import get_db
from app.routers.deps import require_session
from app.schemas.task import TaskCreateSchema, TaskOutSchema, TaskUpdateSchema
from app.services.tasks import TaskStore

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(require_session)],
)

TaskId = Annotated[int, Path(gt=0, description="Positive task id")]


@router.api_route("/", methods=["GET", "PUT", "DELETE"], include_in_schema=False)
def missing_task_id():
    # /tasks/ with no id; answered here instead of redirecting to /tasks
    raise NotFound("Task id missing")


@router.get("", response_model=list[TaskOutSchema])
def list_tasks(db: Annotated[Session, Depends(get_db)]):
    return TaskStore(db).list()


@router.post("", response_model=TaskOutSchema, status_code=201)
def create_task(
    body: TaskCreateSchema,
    db: Annotated[Session, Depends(get_db)],
):
    return TaskStore(db).create(body.description)


@router.get("/{task_id}", response_model=TaskOutSchema)
def get_task(task_id: TaskId, db: Annotated[Session, Depends(get_db)]):
    return TaskStore(db).get(task_id)


@router.put("/{task_id}", response_model=TaskOutSchema)
def update_task(
    task_id: TaskId,
    body: TaskUpdateSchema,
    db: Annotated[Session, Depends(get_db)],
):
    """Full replace of description and completed."""
    return TaskStore(db).update(task_id, body.description, body.completed)


@router.delete("/{task_id}", status_code=204, response_class=Response)
def delete_task(task_id: TaskId, db: Annotated[Session, Depends(get_db)]):
    TaskStore(db).delete(task_id)
    return Response(status_code=204)
