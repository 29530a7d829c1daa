"""
Zero Waste Chef Database Models
Central import module for all database models
"""

from .users import User, Ingredient, UserRole
from .recipe_models import Recipe, RecipeImage, Comment, Like

__all__ = [
    # User models
    "User",
    "Ingredient",

    # Enums
    "UserRole",

    # Recipe models
    "Recipe",
    "RecipeImage",
    "Comment",
    "Like",
]
