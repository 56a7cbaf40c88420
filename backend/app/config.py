"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Decision thresholds
    HIGH_INCOME_THRESHOLD: int = 100_000
    LOW_INCOME_THRESHOLD: int = 20_000
    AUTO_REFERRAL_MAX_AGE: int = 20
    DETAILED_LOOKUP_MIN_AGE: int = 30

    # Frequent flyer validation service
    FREQUENT_FLYER_VALIDATOR_PROVIDER: str = "mock"
    VALID_LICENSE_KEY: str = "OK"

    # Mock validator behaviour (development only)
    MOCK_VALIDATOR_LICENSE_KEY: str = "OK"
    MOCK_VALIDATOR_VALID_PATTERN: str = r"^[A-Za-z0-9]{2,20}$"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


# Global settings instance
settings = Settings()
