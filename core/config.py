"""
Zero Waste Chef Configuration Settings
Manages all application configuration with environment-based overrides
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "Zero Waste Chef"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    VERSION: str = "1.0.0"

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5000)

    # Security
    JWT_SECRET_KEY: str = Field(default="dev-jwt-secret-change-in-production")
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60)
    PASSWORD_RESET_TOKEN_EXPIRE_MINUTES: int = Field(default=60)
    BCRYPT_ROUNDS: int = Field(default=10)

    # CORS: comma-separated list of frontend origins
    CORS_ORIGINS: str = Field(default="http://localhost:5173,http://localhost:3000")

    # Database
    DATABASE_URL: str = Field(default="sqlite+aiosqlite:///./zero_waste_chef.db")
    DATABASE_ECHO: bool = Field(default=False)
    SEED_DEFAULT_RECIPES: bool = Field(default=False)

    # File Storage
    UPLOAD_DIR: str = Field(default="uploads")
    MAX_FILE_SIZE: int = Field(default=10 * 1024 * 1024)  # 10MB
    ALLOWED_FILE_TYPES: str = Field(default="image/jpeg,image/png,image/webp,image/gif")
    MAX_IMAGES_PER_RECIPE: int = Field(default=5)

    # Business Logic
    SUGGESTION_EXPIRY_WINDOW_DAYS: int = Field(default=7)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def allowed_file_types(self) -> List[str]:
        return [file_type.strip() for file_type in self.ALLOWED_FILE_TYPES.split(",") if file_type.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get application settings instance, built once per process"""
    return Settings()
