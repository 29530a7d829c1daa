"""
Zero Waste Chef Community Service
Pantry ingredients, recipe comments and like/dislike votes
"""

from typing import List, Optional

import structlog
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from models.recipe_models import Recipe, Comment, Like
from models.users import Ingredient
from services.exceptions import NotFoundError

logger = structlog.get_logger()


async def list_ingredients(db: AsyncSession, user_id: int) -> List[Ingredient]:
    result = await db.scalars(
        select(Ingredient).where(Ingredient.user_id == user_id).order_by(Ingredient.id)
    )
    return list(result.all())


async def add_ingredient(
    db: AsyncSession,
    user_id: int,
    name: str,
    expiration_date: Optional[str] = None
) -> int:
    ingredient = Ingredient(user_id=user_id, name=name, expiration_date=expiration_date or None)
    db.add(ingredient)
    await db.commit()
    return ingredient.id


async def _require_recipe(db: AsyncSession, recipe_id: int) -> None:
    if await db.get(Recipe, recipe_id) is None:
        raise NotFoundError("Recipe not found")


async def list_comments(db: AsyncSession, recipe_id: int) -> List[Comment]:
    result = await db.scalars(
        select(Comment).where(Comment.recipe_id == recipe_id).order_by(Comment.id)
    )
    return list(result.all())


async def add_comment(db: AsyncSession, user_id: int, recipe_id: int, text: str) -> int:
    await _require_recipe(db, recipe_id)
    comment = Comment(user_id=user_id, recipe_id=recipe_id, text=text)
    db.add(comment)
    await db.commit()
    logger.info("Comment added", comment_id=comment.id, recipe_id=recipe_id, user_id=user_id)
    return comment.id


async def record_vote(db: AsyncSession, user_id: int, recipe_id: int, is_like: bool) -> None:
    """
    Insert or update the user's vote on a recipe.

    Read-then-write is not atomic; two simultaneous votes by the same user
    may lose one update. The unique (user_id, recipe_id) constraint keeps
    duplicates out.
    """
    await _require_recipe(db, recipe_id)
    existing = await db.scalar(
        select(Like).where(Like.user_id == user_id, Like.recipe_id == recipe_id)
    )
    if existing:
        existing.is_like = is_like
    else:
        db.add(Like(user_id=user_id, recipe_id=recipe_id, is_like=is_like))
    await db.commit()


async def get_vote(db: AsyncSession, user_id: int, recipe_id: int) -> Optional[bool]:
    return await db.scalar(
        select(Like.is_like).where(Like.user_id == user_id, Like.recipe_id == recipe_id)
    )


async def count_votes(db: AsyncSession, recipe_id: int) -> dict:
    rows = await db.execute(
        select(Like.is_like, func.count())
        .where(Like.recipe_id == recipe_id)
        .group_by(Like.is_like)
    )
    counts = {"likes": 0, "dislikes": 0}
    for is_like, count in rows:
        counts["likes" if is_like else "dislikes"] = count
    return counts
