"""SQLAlchemy declarative base and model imports for create_all."""
from app.db.session import Base

# Import all models so their tables are registered on Base.metadata
from app.models.task import Task  # noqa: F401
from app.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Task"]
