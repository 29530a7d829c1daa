"""
Zero Waste Chef Backend Service - Main API Server
Recipe sharing, pantry tracking and ingredient-based suggestions
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import structlog
import time
from typing import AsyncGenerator, Optional

from core.config import Settings, get_settings
from core.database import Database
from api.routes import api_router
from middleware.security import SecurityMiddleware
from middleware.logging import LoggingMiddleware
from services.auth_service import TokenService, AuthService
from services.image_storage import ImageStorage
from services.recipe_service import RecipeService

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Structured logging for structlog and the stdlib loggers it sits beside"""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _error_response(status_code: int, message, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message},
        headers=headers
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own database, token issuer and image store"""
    settings = settings or get_settings()
    configure_logging(settings)

    db = Database(settings)
    image_storage = ImageStorage(settings)
    upload_dir = image_storage.ensure_directory()
    token_service = TokenService(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info("Starting Zero Waste Chef backend", environment=settings.ENVIRONMENT)
        await db.init()
        logger.info("Database connection established")

        yield

        logger.info("Shutting down Zero Waste Chef backend")
        await db.close()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Recipe sharing with pantry-based suggestions",
        version=settings.VERSION,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.db = db
    app.state.image_storage = image_storage
    app.state.token_service = token_service
    app.state.auth_service = AuthService(settings, token_service)
    app.state.recipe_service = RecipeService(image_storage, settings.SUGGESTION_EXPIRY_WINDOW_DAYS)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Process-Time", "X-Request-ID"]
    )

    # Custom Middleware
    app.add_middleware(SecurityMiddleware)
    app.add_middleware(LoggingMiddleware)

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add response time header"""
        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Process-Time"] = str(time.time() - start_time)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = first.get("msg", "Invalid request")
        logger.info("Request validation failed", path=request.url.path, errors=len(errors))
        return _error_response(400, f"{field}: {message}" if field else message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            exception=str(exc),
            path=request.url.path,
            method=request.method
        )
        return JSONResponse(
            status_code=500,
            content={
                "message": "An unexpected error occurred",
                "request_id": getattr(request.state, "request_id", None)
            }
        )

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": settings.APP_NAME,
            "version": settings.VERSION,
            "status": "healthy",
            "environment": settings.ENVIRONMENT
        }

    app.include_router(api_router, prefix="/api")
    app.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_config=None  # Use structlog instead
    )
