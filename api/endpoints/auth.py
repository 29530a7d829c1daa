"""
Zero Waste Chef Authentication Endpoints
Registration, login and password reset
"""

from fastapi import APIRouter, HTTPException, status
import logging

from core.dependencies import DbSession, Auth
from services.exceptions import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
)
from schemas.auth_schemas import (
    UserCreate, UserLogin, TokenResponse, PasswordResetRequest,
    PasswordResetLink, PasswordReset, DuplicateCheck, DuplicateCheckResponse,
    MessageResponse
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: DbSession, auth: Auth):
    """
    Register a new standard account and log it in

    Returns a session token valid for one hour.
    """
    try:
        token = await auth.register(user_data, db)
    except DuplicateIdentityError as e:
        logger.warning(f"Registration failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
async def login(login_data: UserLogin, db: DbSession, auth: Auth):
    """
    Authenticate by username or email

    Unknown users and wrong passwords get the same 401 response.
    """
    try:
        token = await auth.login(login_data.username_or_email, login_data.password, db)
    except InvalidCredentialsError as e:
        logger.warning("Login failed")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)

    return TokenResponse(token=token)


@router.post("/forgot-password", response_model=PasswordResetLink)
async def forgot_password(reset_request: PasswordResetRequest, db: DbSession, auth: Auth):
    """
    Request a password reset token

    No mail is sent; the token is returned directly to the caller.
    """
    try:
        reset_token = await auth.request_password_reset(reset_request.email, db)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return PasswordResetLink(reset_token=reset_token)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(password_reset: PasswordReset, db: DbSession, auth: Auth):
    """Set a new password using a reset token"""
    try:
        await auth.reset_password(password_reset.token, password_reset.new_password, db)
    except InvalidTokenError:
        logger.warning("Password reset failed: invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid or expired token"
        )

    return MessageResponse(message="Password reset successfully")


@router.post("/check-duplicates", response_model=DuplicateCheckResponse)
async def check_duplicates(check: DuplicateCheck, db: DbSession, auth: Auth):
    """Tell the registration form which of username/email are taken"""
    result = await auth.check_duplicates(check.username, check.email, db)
    return DuplicateCheckResponse(**result)
