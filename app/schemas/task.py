"""Pydantic schemas for tasks."""
from datetime import datetime

from pydantic import BaseModel


class TaskCreateSchema(BaseModel):
    description: str


class TaskUpdateSchema(BaseModel):
    # full replace: an omitted `completed` resets it to False
    description: str
    completed: bool = False


class TaskOutSchema(BaseModel):
    id: int
    description: str
    completed: bool
    created_at: datetime

    class Config:
        from_attributes = True
