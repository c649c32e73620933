"""Auth routes: register and login. The only routes reachable without a token."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.db.session import get_db
from app.routers.deps import get_app_settings
from app.schemas.auth import CredentialsSchema, TokenOutSchema, UserOutSchema
from app.services.auth import AuthService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserOutSchema, status_code=201)
def register(
    body: CredentialsSchema,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Create a user; responds with id and username only."""
    user = AuthService(db, settings).register(body.username, body.password)
    return UserOutSchema.model_validate(user)


@router.post("/login", response_model=TokenOutSchema)
def login(
    body: CredentialsSchema,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Check credentials and return a short-lived token."""
    token = AuthService(db, settings).login(body.username, body.password)
    return TokenOutSchema(token=token)
