"""
Zero Waste Chef User Service
Profiles, activity reports and administrative account removal
"""

from typing import List, Optional

import structlog
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from models.recipe_models import Recipe, Comment, Like
from models.users import User, Ingredient, UserRole
from schemas.user_schemas import ActivityReport, LikeActivity, CommentActivity, RecipeActivity
from services.exceptions import NotFoundError, ForbiddenRoleError
from services.recipe_service import RecipeService

logger = structlog.get_logger()


async def get_profile(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def list_users(db: AsyncSession) -> List[User]:
    return list((await db.scalars(select(User).order_by(User.id))).all())


async def activity_report(db: AsyncSession, user_id: Optional[int] = None) -> ActivityReport:
    """Likes, comments and recipes of one user, or of everybody when user_id is None"""
    likes = select(Like).order_by(Like.id)
    comments = select(Comment).order_by(Comment.id)
    recipes = select(Recipe).order_by(Recipe.id)
    if user_id is not None:
        likes = likes.where(Like.user_id == user_id)
        comments = comments.where(Comment.user_id == user_id)
        recipes = recipes.where(Recipe.user_id == user_id)

    return ActivityReport(
        likes=[LikeActivity.model_validate(like) for like in (await db.scalars(likes)).all()],
        comments=[CommentActivity.model_validate(comment) for comment in (await db.scalars(comments)).all()],
        recipes=[RecipeActivity.model_validate(recipe) for recipe in (await db.scalars(recipes)).all()],
    )


async def delete_user(db: AsyncSession, recipe_service: RecipeService, user_id: int) -> None:
    """
    Remove an account and everything that depends on it: its votes,
    comments and pantry, and its recipes with their own images, comments
    and votes. Administrator accounts cannot be removed this way.
    """
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    if user.role == UserRole.ADMINISTRATOR:
        raise ForbiddenRoleError("Admin accounts cannot be deleted")

    recipe_ids = list((await db.scalars(select(Recipe.id).where(Recipe.user_id == user_id))).all())
    files = await recipe_service.delete_recipes(db, recipe_ids)

    await db.execute(delete(Like).where(Like.user_id == user_id))
    await db.execute(delete(Comment).where(Comment.user_id == user_id))
    await db.execute(delete(Ingredient).where(Ingredient.user_id == user_id))
    await db.execute(delete(User).where(User.id == user_id))
    await db.commit()

    recipe_service.images.delete_all(files)
    logger.info("User deleted", user_id=user_id, recipes_removed=len(recipe_ids))
