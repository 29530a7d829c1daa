"""
Zero Waste Chef Database Configuration
Async SQLite database setup with SQLAlchemy 2.0
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import MetaData, text
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager
from pathlib import Path
import structlog
from typing import AsyncGenerator, Optional

from core.config import Settings

logger = structlog.get_logger()


class Base(DeclarativeBase):
    """Base class for all database models"""

    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_N_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s"
        }
    )


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database"""
    marker = ":///"
    if not database_url.startswith("sqlite") or marker not in database_url:
        return
    path = database_url.split(marker, 1)[1]
    if not path or path.startswith(":memory:"):
        return
    Path(path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


class Database:
    """
    Owns the engine and session factory for one application instance.
    Built from Settings at startup and shared through app.state.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    async def init(self) -> None:
        """Initialize database connection and create tables"""
        # Models must be registered on Base.metadata before create_all
        import models  # noqa: F401
        from core.seed import seed_default_recipes

        try:
            _ensure_sqlite_directory(self.settings.DATABASE_URL)
            self.engine = create_async_engine(
                self.settings.DATABASE_URL,
                echo=self.settings.DATABASE_ECHO,
            )

            self.session_factory = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            if self.settings.SEED_DEFAULT_RECIPES:
                async with self.session() as session:
                    inserted = await seed_default_recipes(session)
                    if inserted:
                        logger.info("Seeded default recipes", count=inserted)

            logger.info("Database connection initialized successfully", url=self.settings.DATABASE_URL)

        except Exception as e:
            logger.error(f"Failed to initialize database: {str(e)}")
            raise

    async def close(self) -> None:
        """Close database connections"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info("Database connections closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager for database sessions
        Provides automatic transaction management and cleanup
        """
        if not self.session_factory:
            raise RuntimeError("Database not initialized. Call init() first.")

        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Database session error: {str(e)}")
                raise
            except Exception:
                # HTTP errors raised while the request holds the session
                await session.rollback()
                raise

    async def check_connection(self) -> bool:
        """Check if database connection is healthy"""
        try:
            async with self.session() as session:
                result = await session.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False


__all__ = [
    "Base",
    "Database",
]
