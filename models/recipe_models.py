"""
Zero Waste Chef Recipe Models
Database models for recipes, their images, comments and votes
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from core.database import Base


class Recipe(Base):
    """Recipe model for storing recipe information"""
    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)
    ingredients = Column(Text, nullable=False)  # comma-separated, e.g. "eggs, butter, salt"
    instructions = Column(Text, nullable=False)
    dietary_info = Column(Text)
    prep_time = Column(Integer)  # in minutes
    cook_time = Column(Integer)  # in minutes

    # Kept as text ("YYYY-MM-DD HH:MM:SS", UTC) so imported rows with odd values still load
    created_at = Column(String(40), server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Recipe(id={self.id}, name={self.name})>"


class RecipeImage(Base):
    """Stored upload belonging to a recipe"""
    __tablename__ = "recipe_images"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    path = Column(String(500), nullable=False)


class Comment(Base):
    """User comment on a recipe"""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), index=True)
    text = Column(Text, nullable=False)
    created_at = Column(String(40), server_default=func.current_timestamp())


class Like(Base):
    """Like (is_like=True) or dislike (is_like=False), one per user and recipe"""
    __tablename__ = "likes"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), index=True)
    is_like = Column(Boolean, nullable=False)
