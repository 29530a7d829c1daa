"""
Zero Waste Chef Recipe Schemas
Pydantic models for recipes, comments, votes and pantry items
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RecipeData(BaseModel):
    """Editable recipe fields, submitted as multipart form fields"""
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    ingredients: str = Field(..., min_length=1, json_schema_extra={"example": "1-2 eggs, butter or oil, salt, pepper"})
    instructions: str = Field(..., min_length=1)
    dietary_info: Optional[str] = None
    prep_time: Optional[int] = Field(None, ge=0)
    cook_time: Optional[int] = Field(None, ge=0)


class RecipeResponse(BaseModel):
    """Recipe as returned to clients, with image URLs attached"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    name: str
    category: str
    ingredients: str
    instructions: str
    dietary_info: Optional[str] = None
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    created_at: Optional[str] = None
    images: List[str] = Field(default_factory=list)


class CreatedResponse(BaseModel):
    id: int


class CommentCreate(BaseModel):
    recipe_id: int
    text: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    recipe_id: Optional[int] = None
    text: str
    created_at: Optional[str] = None


class VoteRequest(BaseModel):
    recipe_id: int
    is_like: bool


class VoteStatus(BaseModel):
    """True for a like, False for a dislike, None when the user has not voted"""
    liked: Optional[bool] = None


class VoteCounts(BaseModel):
    likes: int = 0
    dislikes: int = 0


class IngredientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    expiration_date: Optional[str] = Field(None, json_schema_extra={"example": "2024-12-31"})


class IngredientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    expiration_date: Optional[str] = None
