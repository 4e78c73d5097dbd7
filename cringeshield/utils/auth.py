from typing import Optional

from fastapi import HTTPException, Cookie, Response, status, Depends
from sqlalchemy.orm import Session

from cringeshield.config import get_db, settings
from cringeshield.models.models import User
from cringeshield.schemas.auth_schemas import AuthTokenPayload
from cringeshield.utils.jwt import verify_token, get_password_hash, create_access_token, verify_password, token_expiry
from cringeshield.utils.logger import set_user_id

COOKIE_NAME = "access_token"


async def get_current_user(access_token: Optional[str] = Cookie(None), db: Session = Depends(get_db)) -> User:
    if not access_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    payload = verify_token(access_token)
    if payload.sub is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
    user = get_user_by_email(payload.sub, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )
    set_user_id(user.id)
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


def set_auth_cookie(response: Response, user: User) -> None:
    token = create_access_token(AuthTokenPayload(sub=user.email, exp=token_expiry()))
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=settings.access_token_expire_minutes * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key=COOKIE_NAME,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax"
    )


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(email: str, db: Session) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def create_user(email: str, password: str, db: Session, *, is_admin: bool = False) -> User:
    user = User(email=normalize_email(email), hashed_password=get_password_hash(password), is_admin=is_admin)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate_user(email: str, password: str, db: Session) -> User | None:
    user = get_user_by_email(email, db)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
