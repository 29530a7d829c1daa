"""
Zero Waste Chef API Routes
Main router configuration for all API endpoints
"""

from fastapi import APIRouter
import structlog

from api.endpoints import health, auth, recipes, ingredients, comments, likes, users

logger = structlog.get_logger()

# Create main API router; mounted under /api
api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(recipes.router, tags=["recipes"])
api_router.include_router(ingredients.router, tags=["ingredients"])
api_router.include_router(comments.router, tags=["comments"])
api_router.include_router(likes.router, tags=["likes"])
api_router.include_router(users.router, tags=["users"])

logger.debug("API routes configured")
