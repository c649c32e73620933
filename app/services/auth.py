"""Login (token issuing) and session verification for gated routes."""
import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.errors import InvalidCredentials, Unauthorized, UserNotFound
from app.core.security import TokenClaims, create_access_token, decode_access_token
from app.models.user import User
from app.services.credentials import CredentialStore

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class AuthService:
    def __init__(self, db: Session, settings: Settings):
        self.credentials = CredentialStore(db)
        self.settings = settings

    def register(self, username: str, password: str) -> User:
        return self.credentials.register(username, password)

    def login(self, username: str, password: str, now: datetime | None = None) -> str:
        """Check the password and return a signed token valid for 5 minutes."""
        try:
            user = self.credentials.authenticate(username, password)
        except (UserNotFound, InvalidCredentials):
            logger.info("login failed for username=%s", username)
            raise InvalidCredentials() from None

        logger.info("login ok for username=%s", user.username)
        return create_access_token(user.username, self.settings, now=now)


class SessionVerifier:
    """
    Validates a token by signature and expiry only.

    The user table is not consulted: a token stays valid until it expires,
    whatever happens to the account meanwhile.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    @staticmethod
    def token_from_header(value: str | None) -> str | None:
        """Raw token as sent in Authorization; a `Bearer ` prefix is tolerated."""
        if value is None:
            return None
        parts = value.split(None, 1)
        if not parts:
            return None
        if parts[0].lower() == BEARER_SCHEME:
            return parts[1].strip() if len(parts) == 2 else None
        return value.strip()

    def verify(self, token: str | None) -> TokenClaims:
        if not token:
            raise Unauthorized("Missing token")
        claims = decode_access_token(token, self.settings)
        if claims is None:
            raise Unauthorized("Invalid token")
        return claims
