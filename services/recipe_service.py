"""
Zero Waste Chef Recipe Service
Recipe CRUD, image attachment and pantry-based suggestions
"""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence

import structlog
from fastapi import UploadFile
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from models.recipe_models import Recipe, RecipeImage, Comment, Like
from models.users import Ingredient
from schemas.recipe_schemas import RecipeData, RecipeResponse
from services.exceptions import NotFoundError
from services.image_storage import ImageStorage
from services.suggestion_service import suggest_recipes

logger = structlog.get_logger()


class RecipeService:
    def __init__(self, image_storage: ImageStorage, suggestion_window_days: int = 7):
        self.images = image_storage
        self.suggestion_window_days = suggestion_window_days

    async def _image_paths(self, db: AsyncSession, recipe_ids: Sequence[int]) -> Dict[int, List[str]]:
        if not recipe_ids:
            return {}
        rows = await db.execute(
            select(RecipeImage.recipe_id, RecipeImage.path)
            .where(RecipeImage.recipe_id.in_(recipe_ids))
            .order_by(RecipeImage.id)
        )
        paths: Dict[int, List[str]] = defaultdict(list)
        for recipe_id, path in rows:
            paths[recipe_id].append(path)
        return paths

    async def to_responses(self, db: AsyncSession, recipes: Sequence[Recipe]) -> List[RecipeResponse]:
        """Build response DTOs with image URLs attached"""
        paths = await self._image_paths(db, [recipe.id for recipe in recipes])
        responses = []
        for recipe in recipes:
            response = RecipeResponse.model_validate(recipe)
            response.images = [self.images.public_url(path) for path in paths.get(recipe.id, [])]
            responses.append(response)
        return responses

    async def _get_or_404(self, db: AsyncSession, recipe_id: int) -> Recipe:
        recipe = await db.get(Recipe, recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe

    async def list_recipes(self, db: AsyncSession, category: Optional[str] = None) -> List[RecipeResponse]:
        """All recipes, newest first, optionally restricted to one category"""
        query = select(Recipe)
        if category:
            query = query.where(Recipe.category == category)
        query = query.order_by(Recipe.created_at.desc(), Recipe.id.desc())

        recipes = (await db.scalars(query)).all()
        return await self.to_responses(db, recipes)

    async def get_recipe(self, db: AsyncSession, recipe_id: int) -> RecipeResponse:
        recipe = await self._get_or_404(db, recipe_id)
        return (await self.to_responses(db, [recipe]))[0]

    async def create_recipe(
        self,
        db: AsyncSession,
        owner_id: int,
        data: RecipeData,
        uploads: Optional[List[UploadFile]] = None
    ) -> int:
        """Insert a recipe and its images; returns the new id"""
        stored = await self.images.save_all(uploads)

        recipe = Recipe(user_id=owner_id, **data.model_dump())
        db.add(recipe)
        await db.flush()

        db.add_all([RecipeImage(recipe_id=recipe.id, path=path) for path in stored])
        await db.commit()

        logger.info("Recipe created", recipe_id=recipe.id, user_id=owner_id, images=len(stored))
        return recipe.id

    async def update_recipe(
        self,
        db: AsyncSession,
        recipe_id: int,
        data: RecipeData,
        uploads: Optional[List[UploadFile]] = None
    ) -> None:
        """Replace recipe fields; the image set is replaced only when new images arrive"""
        recipe = await self._get_or_404(db, recipe_id)
        stored = await self.images.save_all(uploads)

        for field, value in data.model_dump().items():
            setattr(recipe, field, value)

        replaced: List[str] = []
        if stored:
            replaced = (await self._image_paths(db, [recipe_id])).get(recipe_id, [])
            await db.execute(delete(RecipeImage).where(RecipeImage.recipe_id == recipe_id))
            db.add_all([RecipeImage(recipe_id=recipe_id, path=path) for path in stored])

        await db.commit()
        self.images.delete_all(replaced)
        logger.info("Recipe updated", recipe_id=recipe_id, images_replaced=bool(stored))

    async def delete_recipes(self, db: AsyncSession, recipe_ids: Sequence[int]) -> List[str]:
        """
        Delete recipes with their images, comments and likes. Does not commit.

        Returns:
            Paths of the image files that belonged to the recipes
        """
        if not recipe_ids:
            return []
        paths = await self._image_paths(db, recipe_ids)

        await db.execute(delete(RecipeImage).where(RecipeImage.recipe_id.in_(recipe_ids)))
        await db.execute(delete(Comment).where(Comment.recipe_id.in_(recipe_ids)))
        await db.execute(delete(Like).where(Like.recipe_id.in_(recipe_ids)))
        await db.execute(delete(Recipe).where(Recipe.id.in_(recipe_ids)))

        return [path for recipe_paths in paths.values() for path in recipe_paths]

    async def delete_recipe(self, db: AsyncSession, recipe_id: int) -> None:
        await self._get_or_404(db, recipe_id)
        files = await self.delete_recipes(db, [recipe_id])
        await db.commit()
        self.images.delete_all(files)
        logger.info("Recipe deleted", recipe_id=recipe_id)

    async def suggested_recipes(
        self,
        db: AsyncSession,
        user_id: int,
        search: Optional[str] = None
    ) -> List[RecipeResponse]:
        """Recipes matching the user's pantry (or the search term), see suggest_recipes"""
        pantry = (await db.scalars(select(Ingredient).where(Ingredient.user_id == user_id))).all()
        recipes = (await db.scalars(select(Recipe))).all()

        suggested = suggest_recipes(
            pantry,
            recipes,
            search=search,
            window_days=self.suggestion_window_days,
        )
        return await self.to_responses(db, suggested)
