from app.schemas.auth import CredentialsSchema, TokenOutSchema, UserOutSchema
from app.schemas.task import TaskCreateSchema, TaskOutSchema, TaskUpdateSchema

__all__ = [
    "CredentialsSchema",
    "TokenOutSchema",
    "UserOutSchema",
    "TaskCreateSchema",
    "TaskOutSchema",
    "TaskUpdateSchema",
]
