"""
Zero Waste Chef Core Dependencies
FastAPI dependencies for authentication, authorization, and shared services
"""

from fastapi import Depends, Header, HTTPException, status, Request
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional, AsyncGenerator, Annotated
import logging

from core.config import Settings
from models.users import User
from schemas.auth_schemas import IdentityContext
from services.auth_service import TokenService, AuthService
from services.exceptions import AuthenticationError, AuthorizationError
from services.recipe_service import RecipeService
from utils.request_utils import get_client_ip

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI to get database session
    """
    async with request.app.state.db.session() as session:
        yield session


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_recipe_service(request: Request) -> RecipeService:
    return request.app.state.recipe_service


async def get_current_identity(
    request: Request,
    authorization: Annotated[Optional[str], Header()] = None,
    tokens: TokenService = Depends(get_token_service)
) -> IdentityContext:
    """
    Resolve the caller from the Authorization header

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    try:
        identity = tokens.authenticate_request(authorization)
    except AuthenticationError as e:
        logger.info(f"Authentication failed: {e.message}", extra={
            "ip": get_client_ip(request),
            "path": request.url.path
        })
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    request.state.user_id = identity.id
    return identity


async def require_admin(
    identity: IdentityContext = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service)
) -> User:
    """Dependency for admin-only endpoints; the role is read from storage each time"""
    try:
        return await tokens.authorize_admin(identity, db)
    except AuthorizationError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message
        )


# Type aliases for common dependencies
DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentIdentity = Annotated[IdentityContext, Depends(get_current_identity)]
AdminUser = Annotated[User, Depends(require_admin)]
Auth = Annotated[AuthService, Depends(get_auth_service)]
Recipes = Annotated[RecipeService, Depends(get_recipe_service)]
