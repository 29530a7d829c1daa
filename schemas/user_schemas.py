"""
Zero Waste Chef User Schemas
Profile and activity responses
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_serializer

from models.users import UserRole


class UserResponse(BaseModel):
    """Public profile; the password hash never leaves the service"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    name: str
    family_name: str
    phone_number: Optional[str] = None
    profession: Optional[str] = None
    age: Optional[int] = None
    role: UserRole

    @field_serializer('role')
    def serialize_role(self, role: UserRole) -> str:
        return role.value


class LikeActivity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: Optional[int] = None
    recipe_id: int
    is_like: bool


class CommentActivity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: Optional[int] = None
    recipe_id: int
    text: str
    created_at: Optional[str] = None


class RecipeActivity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: Optional[int] = None
    id: int
    name: str


class ActivityReport(BaseModel):
    """Likes, comments and recipes, either for one user or for everyone"""
    likes: List[LikeActivity] = []
    comments: List[CommentActivity] = []
    recipes: List[RecipeActivity] = []
