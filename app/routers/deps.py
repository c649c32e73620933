"""Shared dependencies: settings, session verification."""
from typing import Annotated

from fastapi import Depends, Header, Request

from app.core.config import Settings
from app.core.security import TokenClaims
from app.services.auth import SessionVerifier


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_session(
    settings: Annotated[Settings, Depends(get_app_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Gate for protected routes: 401 unless the Authorization token verifies."""
    verifier = SessionVerifier(settings)
    return verifier.verify(SessionVerifier.token_from_header(authorization))
