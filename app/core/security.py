"""Password hashing and signed access tokens (JWT)."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings

# Fixed on purpose: sessions re-login after expiry, there is no refresh.
ACCESS_TOKEN_EXPIRE_MINUTES = 5
TOKEN_TYPE = "access"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt hard limit
MAX_PASSWORD_BYTES = 72


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded access token payload."""

    username: str
    expires_at: datetime


def create_access_token(
    username: str,
    settings: Settings,
    now: datetime | None = None,
) -> str:
    """Sign a token for `username` that expires ACCESS_TOKEN_EXPIRE_MINUTES after `now`."""
    issued = now or datetime.now(timezone.utc)
    expire = issued + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": username, "exp": expire, "type": TOKEN_TYPE}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> TokenClaims | None:
    """Verify signature, expiry and type; return claims or None."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None

    username = payload.get("sub")
    exp = payload.get("exp")
    if payload.get("type") != TOKEN_TYPE or not username or exp is None:
        return None
    try:
        expires_at = datetime.fromtimestamp(int(exp), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return None
    return TokenClaims(username=username, expires_at=expires_at)
