"""
Zero Waste Chef Recipe Endpoints
Recipe CRUD, moderation, and pantry-based suggestions
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Response, UploadFile, status
from typing import Annotated, List, Optional

from core.dependencies import DbSession, CurrentIdentity, AdminUser, Recipes
from schemas.recipe_schemas import RecipeData, RecipeResponse, CreatedResponse
from schemas.auth_schemas import MessageResponse
from services.exceptions import NotFoundError, ValidationError

router = APIRouter()


def recipe_form(
    name: Annotated[str, Form(min_length=1, max_length=255)],
    category: Annotated[str, Form(min_length=1, max_length=100)],
    ingredients: Annotated[str, Form(min_length=1)],
    instructions: Annotated[str, Form(min_length=1)],
    dietary_info: Annotated[Optional[str], Form()] = None,
    prep_time: Annotated[Optional[int], Form(ge=0)] = None,
    cook_time: Annotated[Optional[int], Form(ge=0)] = None,
) -> RecipeData:
    """Collect recipe fields from a multipart form"""
    return RecipeData(
        name=name,
        category=category,
        ingredients=ingredients,
        instructions=instructions,
        dietary_info=dietary_info,
        prep_time=prep_time,
        cook_time=cook_time,
    )


RecipeForm = Annotated[RecipeData, Depends(recipe_form)]
ImageUploads = Annotated[Optional[List[UploadFile]], File()]


@router.get("/recipes", response_model=List[RecipeResponse])
async def get_recipes(db: DbSession, recipes: Recipes, category: Optional[str] = None):
    """All recipes, newest first, optionally filtered by category"""
    return await recipes.list_recipes(db, category)


@router.get("/recipes/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(recipe_id: int, db: DbSession, recipes: Recipes):
    try:
        return await recipes.get_recipe(db, recipe_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.post("/recipes", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    identity: CurrentIdentity,
    data: RecipeForm,
    db: DbSession,
    recipes: Recipes,
    images: ImageUploads = None
):
    """Create a recipe owned by the caller, with up to five images"""
    try:
        recipe_id = await recipes.create_recipe(db, identity.id, data, images)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return CreatedResponse(id=recipe_id)


@router.put("/recipes/{recipe_id}", response_model=MessageResponse)
async def update_recipe(
    recipe_id: int,
    admin: AdminUser,
    data: RecipeForm,
    db: DbSession,
    recipes: Recipes,
    images: ImageUploads = None
):
    """Admin-only: replace a recipe's fields, and its images when new ones are sent"""
    try:
        await recipes.update_recipe(db, recipe_id, data, images)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return MessageResponse(message="Recipe updated successfully")


@router.delete("/recipes/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(recipe_id: int, admin: AdminUser, db: DbSession, recipes: Recipes):
    """Admin-only: delete a recipe with its images, comments and likes"""
    try:
        await recipes.delete_recipe(db, recipe_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/suggested-recipes", response_model=List[RecipeResponse])
async def get_suggested_recipes(
    identity: CurrentIdentity,
    db: DbSession,
    recipes: Recipes,
    search: Annotated[Optional[str], Query()] = None
):
    """Recipes that use the caller's pantry ingredients or match the search term"""
    return await recipes.suggested_recipes(db, identity.id, search)
