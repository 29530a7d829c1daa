"""
Zero Waste Chef Comment Endpoints
"""

from fastapi import APIRouter, HTTPException, status
from typing import List

from core.dependencies import DbSession, CurrentIdentity
from schemas.recipe_schemas import CommentCreate, CommentResponse, CreatedResponse
from services import community_service
from services.exceptions import NotFoundError

router = APIRouter()


@router.get("/comments/{recipe_id}", response_model=List[CommentResponse])
async def get_comments(recipe_id: int, db: DbSession):
    """Comments on a recipe, oldest first"""
    return await community_service.list_comments(db, recipe_id)


@router.post("/comments", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(comment: CommentCreate, identity: CurrentIdentity, db: DbSession):
    try:
        comment_id = await community_service.add_comment(db, identity.id, comment.recipe_id, comment.text)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return CreatedResponse(id=comment_id)
