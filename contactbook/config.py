"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_path: str = "./data/contactbook.db"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    # Server
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "INFO"

    # JWT Configuration
    jwt_secret_key: str = "change-me-in-production-use-env-var"
    # None means tokens carry no exp claim
    jwt_expiry_days: int | None = None

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = 12

    # When enabled, PUT/DELETE on /contacts/<id> only match the caller's contacts
    enforce_contact_ownership: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
