"""Credential store: users table, bcrypt hashes, unique usernames."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateUsername, InternalFailure, InvalidCredentials, UserNotFound
from app.core.security import hash_password, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(self, db: Session):
        self.db = db

    def _find(self, username: str) -> User | None:
        result = self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    def register(self, username: str, password: str) -> User:
        """Hash the password and insert the user. Raises DuplicateUsername."""
        if self._find(username) is not None:
            raise DuplicateUsername()

        try:
            password_hash = hash_password(password)
        except ValueError as exc:
            logger.exception("password hashing failed for username=%s", username)
            raise InternalFailure("Could not hash password") from exc

        user = User(username=username, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race against a concurrent registration
            self.db.rollback()
            raise DuplicateUsername() from None
        self.db.refresh(user)

        logger.info("registered user id=%s username=%s", user.id, user.username)
        return user

    def get(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise UserNotFound()
        return user

    def authenticate(self, username: str, password: str) -> User:
        """Return the user if the password matches its stored hash."""
        user = self._find(username)
        if user is None:
            raise UserNotFound()
        if not verify_password(password, user.password_hash):
            raise InvalidCredentials()
        return user
