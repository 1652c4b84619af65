"""
Configuration management using Pydantic settings.
"""
from typing import List
import os
from pydantic import validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "CryptoPoll Survey"
    ENV: str = os.getenv("ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./cryptopoll.db")
    DATABASE_AUTH_TOKEN: str = os.getenv("DATABASE_AUTH_TOKEN", "")

    # Error responses
    EXPOSE_ERROR_DETAILS: bool = os.getenv("EXPOSE_ERROR_DETAILS", "true").lower() == "true"

    # CORS Configuration (comma-separated origins or "*")
    BACKEND_CORS_ORIGINS: str = os.getenv("BACKEND_CORS_ORIGINS", "*")

    @validator("DATABASE_URL", pre=True)
    def default_database_url(cls, v):
        if not v:
            return "sqlite:///./cryptopoll.db"
        return v

    @property
    def cors_origins(self) -> List[str]:
        if self.BACKEND_CORS_ORIGINS.strip() in ("", "*"):
            return ["*"]
        return [i.strip() for i in self.BACKEND_CORS_ORIGINS.split(",") if i.strip()]

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = True


settings = Settings()
