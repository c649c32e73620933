from app.services.auth import AuthService, SessionVerifier
from app.services.credentials import CredentialStore
from app.services.tasks import TaskStore

__all__ = ["AuthService", "SessionVerifier", "CredentialStore", "TaskStore"]
