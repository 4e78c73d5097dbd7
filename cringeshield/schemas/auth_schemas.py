from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from cringeshield.schemas.base import CamelModel


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(CamelModel):
    email: str
    password: str
    confirm_password: str


class LoginResponse(CamelModel):
    message: str
    token_set: bool


class RegisterResponse(BaseModel):
    message: str


class LogoutResponse(BaseModel):
    message: str


class AuthTokenPayload(BaseModel):
    sub: str
    exp: Optional[datetime] = None


class CurrentUserResponse(CamelModel):
    id: int
    email: str
    is_admin: bool
    created_at: Optional[str] = None
    notification_preferences: Optional[dict] = None
    theme: Optional[str] = None
