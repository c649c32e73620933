"""Pydantic schemas for registration and login."""
from pydantic import BaseModel, Field, field_validator

from app.core.security import MAX_PASSWORD_BYTES


class CredentialsSchema(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class UserOutSchema(BaseModel):
    # never carries the password hash
    id: int
    username: str

    class Config:
        from_attributes = True


class TokenOutSchema(BaseModel):
    token: str
