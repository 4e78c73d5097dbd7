from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cringeshield.config import get_db
from cringeshield.models.models import User
from cringeshield.schemas.auth_schemas import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
)
from cringeshield.utils.auth import (
    authenticate_user,
    clear_auth_cookie,
    create_user,
    get_current_user,
    get_user_by_email,
    set_auth_cookie,
)
from cringeshield.utils.common import iso_format
from cringeshield.utils.logger import get_logger

auth_routes = APIRouter()
logger = get_logger("auth")

MIN_PASSWORD_LENGTH = 6


def current_user_response(user: User) -> CurrentUserResponse:
    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        is_admin=bool(user.is_admin),
        created_at=iso_format(user.created_at),
        notification_preferences=user.notification_preferences,
        theme=user.theme,
    )


@auth_routes.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, response: Response, db: Session = Depends(get_db)) -> LoginResponse:
    """Authenticate user and set HTTP-only cookie with token."""
    user = authenticate_user(request.email, request.password, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password"
        )
    set_auth_cookie(response, user)
    logger.info("login user_id=%s", user.id)
    return LoginResponse(message="Login successful", token_set=True)


@auth_routes.post("/register", response_model=RegisterResponse)
async def register(request: RegisterRequest, response: Response, db: Session = Depends(get_db)) -> RegisterResponse:
    """Register a new user and sign them in."""
    if "@" not in request.email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email address")
    if get_user_by_email(request.email, db):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )
    if request.password != request.confirm_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Passwords do not match"
        )
    if len(request.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )

    try:
        user = create_user(request.email, request.password, db)
    except IntegrityError:
        db.rollback()
        logger.info("register lost race for existing email")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        ) from None
    set_auth_cookie(response, user)
    logger.info("registered user_id=%s", user.id)
    return RegisterResponse(message="Registration successful")


@auth_routes.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Clear the authentication cookie."""
    clear_auth_cookie(response)
    return LogoutResponse(message="Logout successful")


@auth_routes.get("/current-user", response_model=CurrentUserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)) -> CurrentUserResponse:
    return current_user_response(current_user)


@auth_routes.delete("/account", response_model=LogoutResponse)
async def delete_account(
    response: Response,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> LogoutResponse:
    """Delete the account with its sessions, progress and badges."""
    user_id = current_user.id
    db.delete(current_user)
    db.commit()
    clear_auth_cookie(response)
    logger.info("account deleted user_id=%s", user_id)
    return LogoutResponse(message="Account deleted")
