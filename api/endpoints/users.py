"""
Zero Waste Chef User Endpoints
Profiles, activity reports and account moderation
"""

from fastapi import APIRouter, HTTPException, Response, status
from typing import List
import logging

from core.dependencies import DbSession, CurrentIdentity, AdminUser, Recipes
from schemas.user_schemas import UserResponse, ActivityReport
from services import user_service
from services.exceptions import NotFoundError, ForbiddenRoleError

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/user", response_model=UserResponse)
async def get_current_user_profile(identity: CurrentIdentity, db: DbSession):
    """
    Get the caller's profile

    The token may outlive the account; a deleted user gets 404.
    """
    try:
        return await user_service.get_profile(db, identity.id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.get("/user/activities", response_model=ActivityReport)
async def get_user_activities(identity: CurrentIdentity, db: DbSession):
    return await user_service.activity_report(db, identity.id)


@router.get("/all-activities", response_model=ActivityReport)
async def get_all_activities(admin: AdminUser, db: DbSession):
    return await user_service.activity_report(db)


@router.get("/users", response_model=List[UserResponse])
async def get_users(admin: AdminUser, db: DbSession):
    return await user_service.list_users(db)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, admin: AdminUser, db: DbSession, recipes: Recipes):
    """Admin-only: delete an account and everything it owns"""
    try:
        await user_service.delete_user(db, recipes, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ForbiddenRoleError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)

    logger.info(f"User {user_id} deleted by admin {admin.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
