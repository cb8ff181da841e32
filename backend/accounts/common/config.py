"""
Configuration - loaded from environment variables / .env
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "accounts"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./accounts.db"
    db_schema: str = "accounts"

    # CORS (comma separated)
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Security
    bcrypt_rounds: int = 12
    token_expire_minutes: Optional[int] = None

    # Error reporting: include raw exception text in 500 responses
    expose_error_details: bool = True

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @property
    def database_type(self) -> str:
        """sqlite or postgresql, derived from database_url"""
        if self.database_url.startswith("sqlite"):
            return "sqlite"
        return "postgresql"

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Global settings instance
settings = Settings()
