"""
Zero Waste Chef Pantry Endpoints
"""

from fastapi import APIRouter, status
from typing import List

from core.dependencies import DbSession, CurrentIdentity
from schemas.recipe_schemas import IngredientCreate, IngredientResponse, CreatedResponse
from services import community_service

router = APIRouter()


@router.get("/ingredients", response_model=List[IngredientResponse])
async def get_ingredients(identity: CurrentIdentity, db: DbSession):
    """The caller's pantry"""
    return await community_service.list_ingredients(db, identity.id)


@router.post("/ingredients", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_ingredient(ingredient: IngredientCreate, identity: CurrentIdentity, db: DbSession):
    ingredient_id = await community_service.add_ingredient(
        db, identity.id, ingredient.name, ingredient.expiration_date
    )
    return CreatedResponse(id=ingredient_id)
