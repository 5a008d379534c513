"""
TMS Configuration
Core settings for the TMS validation application
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # Application Info
    APP_NAME: str = "TMS Validation API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./tms.db"
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",  # React frontend
        "http://localhost:5173",  # Vite dev server
    ]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Path = Path("logs")
    LOG_FILE: str = "app.log"
    ERROR_LOG_FILE: str = "error.log"
    LOG_TO_FILE: bool = False

    # Customer code generation
    CUSTOMER_CODE_PREFIX_LENGTH: int = 3
    CUSTOMER_CODE_FALLBACK_PREFIX: str = "CUS"
    CUSTOMER_CODE_NUMBER_WIDTH: int = 3
    CUSTOMER_CODE_MAX_ATTEMPTS: int = 5

    # Form behaviour hints returned to the UI
    FIELD_HIGHLIGHT_SECONDS: int = 3

    # Bulk validation
    BULK_VALIDATION_MAX_ROWS: int = 5000

    # API Configuration
    API_V1_STR: str = "/api/v1"
    DOCS_URL: str = "/docs"
    REDOC_URL: str = "/redoc"
    OPENAPI_URL: str = "/openapi.json"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names"""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("CUSTOMER_CODE_PREFIX_LENGTH", "CUSTOMER_CODE_NUMBER_WIDTH", "CUSTOMER_CODE_MAX_ATTEMPTS")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Must be at least 1")
        return v


# Global settings instance
settings = Settings()
