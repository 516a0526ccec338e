from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pydantic import field_validator


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///database/blood_donors.db"
    DB_ECHO: bool = False

    # Application
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    APP_NAME: str = "Roktokona Blood Donor API"
    APP_VERSION: str = "1.0.0"
    CORS_ORIGINS: str = "*"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Front-end bundle served for every non-API path
    STATIC_DIRECTORY: str = "frontend"
    STATIC_INDEX: str = "index.html"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE: str = ""  # empty keeps logging on the console only

    # Seeded on first startup; the password is stored as given
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"
    DEFAULT_ADMIN_EMAIL: str = "admin@roktokona.org"
    DEFAULT_ADMIN_NAME: str = "সিস্টেম অ্যাডমিন"

    @field_validator('DEBUG', 'DB_ECHO', mode='before')
    @classmethod
    def parse_bool(cls, v):
        """Parse boolean from string."""
        if isinstance(v, str):
            return v.lower() in ("true", "1", "yes")
        return bool(v)

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS_ORIGINS as a list."""
        return [item.strip() for item in self.CORS_ORIGINS.split(',') if item.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
