"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from registration_api.domain.services.registration_validator import FieldBounds


class Settings(BaseSettings):
    """Application configuration - single source of truth.

    All settings loaded from environment variables or .env files.

    Usage:
        settings = get_settings()
        print(settings.database_url)
        print(settings.field_bounds)
    """

    # Database
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="postgres")
    db_name: str = Field(default="registration_db")
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)

    # Password hashing (Argon2id work factor)
    argon2_time_cost: int = Field(default=3, ge=1)
    argon2_memory_cost: int = Field(default=65536, ge=8, description="Memory cost in KiB")
    argon2_parallelism: int = Field(default=4, ge=1)
    password_hash_workers: int = Field(
        default=4,
        ge=1,
        description="Size of the thread pool that runs password hashing. "
        "Hashing is deliberately slow, so this bounds how many hashes "
        "run at once instead of letting them queue on the event loop.",
    )

    # Registration field bounds
    username_min_length: int = Field(default=1, ge=1)
    username_max_length: Optional[int] = Field(default=None, ge=1)
    password_min_length: int = Field(default=8, ge=0)
    password_max_length: Optional[int] = Field(default=None, ge=1)

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    debug: bool = Field(default=False)
    app_name: str = Field(default="Registration API")
    app_version: str = Field(default="1.0.0")

    # CORS
    cors_origins: str = Field(default="http://localhost:3000")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_length_bounds(self) -> "Settings":
        """Ensure configured maximums are not below their minimums."""
        for field in ("username", "password"):
            minimum = getattr(self, f"{field}_min_length")
            maximum = getattr(self, f"{field}_max_length")
            if maximum is not None and maximum < minimum:
                raise ValueError(
                    f"{field.upper()}_MAX_LENGTH must be >= {field.upper()}_MIN_LENGTH"
                )
        return self

    @property
    def field_bounds(self) -> dict[str, FieldBounds]:
        """Build the validator's bounds table."""
        return {
            "username": FieldBounds(self.username_min_length, self.username_max_length),
            "password": FieldBounds(self.password_min_length, self.password_max_length),
        }

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def database_url(self) -> str:
        """Build async PostgreSQL URL."""
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifecycle.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
