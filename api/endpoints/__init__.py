"""
Zero Waste Chef API Endpoints
All API endpoint modules
"""

from . import health, auth, recipes, ingredients, comments, likes, users

__all__ = [
    "health",
    "auth",
    "recipes",
    "ingredients",
    "comments",
    "likes",
    "users"
]
