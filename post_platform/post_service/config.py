"""
Configuration management for the post service
"""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Post service configuration loaded from environment variables"""

    # Server Configuration
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    LOG_LEVEL: str = "DEBUG"

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./posts.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # Token Configuration
    SECRET_KEY: str = "change-this-secret-in-prod"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Pages
    POSTS_PER_PAGE: int = 5
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")
    STATIC_DIR: str = str(PACKAGE_DIR / "static")

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
