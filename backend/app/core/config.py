"""Application configuration."""

import os
from typing import Dict, List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "FinTrack"
    APP_ENV: str = "development"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Database - Credentials must come from environment
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "fintrack"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "fintrack"

    # Database pool configuration
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 40
    DB_POOL_RECYCLE: int = 3600

    @property
    def DATABASE_URL(self) -> str:
        """Build async database URL. Uses DATABASE_URL env var if set."""
        external = os.environ.get("DATABASE_URL", "")
        if external:
            if external.startswith("postgresql://"):
                return external.replace("postgresql://", "postgresql+asyncpg://", 1)
            return external
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    # CORS
    # Override with comma-separated env var: CORS_ORIGINS=https://mysite.com,https://www.mysite.com
    CORS_ORIGINS: Union[str, List[str]] = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    CORS_ALLOWED_METHODS: List[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    CORS_ALLOWED_HEADERS: List[str] = [
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
        "X-User-Id",
    ]

    # Rate Limiting
    RATE_LIMIT_PER_MINUTE: int = 60
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    # Alerting
    DUE_DATE_ALERT_WINDOW_DAYS: int = 7
    UPCOMING_BILLS_DEFAULT_DAYS: int = 7

    @field_validator("DUE_DATE_ALERT_WINDOW_DAYS", "UPCOMING_BILLS_DEFAULT_DAYS")
    @classmethod
    def validate_positive_days(cls, v: int) -> int:
        if v < 0:
            raise ValueError("day windows must not be negative")
        return v

    # Simulation defaults (annual rates as fractions)
    RISK_PROFILE_RATES: Dict[str, float] = {
        "conservative": 0.08,
        "moderate": 0.11,
        "aggressive": 0.15,
    }
    DEFAULT_INFLATION_RATE: float = 0.05

    @field_validator("RISK_PROFILE_RATES")
    @classmethod
    def validate_risk_profile_rates(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Every profile rate must be convertible to a monthly rate."""
        for profile, rate in v.items():
            if rate <= -1:
                raise ValueError(f"rate for profile '{profile}' must be greater than -100%")
        return v

    # Display formatting (presentation only, never read by the core)
    DISPLAY_LOCALE: str = "en-US"
    DISPLAY_CURRENCY: str = "USD"
    DISPLAY_DATE_FORMAT: str = "%Y-%m-%d"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.APP_ENV == "production" and not self.DEBUG

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
