"""
Application Configuration

Settings are loaded from environment variables and an optional .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed settings for the hiring intake API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Runtime
    python_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./application1.db"
    database_echo: bool = False

    # CORS
    cors_origins: str = "*"

    # Admin credential seeded at startup
    admin_username: str = "admin"
    admin_password: str = "password123"
    bcrypt_rounds: int = 10

    # Outbound email (Resend)
    resend_api_key: str | None = None
    email_from: str = "Hiring Brightloom <noreply@brightloom.dev>"
    company_name: str = "Brightloom"
    email_timeout_seconds: float = 10.0

    @property
    def is_development(self) -> bool:
        return self.python_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        return self.python_env.lower() == "production"

    @property
    def cors_origins_list(self) -> list[str]:
        """Comma separated CORS_ORIGINS as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings accessor."""
    return Settings()


settings = get_settings()
