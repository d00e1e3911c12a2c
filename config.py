import os

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:5173,"
    "https://devashishyadav20.github.io"
)


class Settings(BaseSettings):
    APP_NAME: str = "E-commerce API"
    APP_VERSION: str = "1.0.0"

    PORT: int = 3000

    # Comma-separated list of origins allowed to make cross-origin requests
    ALLOWED_ORIGINS: str = DEFAULT_ALLOWED_ORIGINS

    # Upper bound for schema sync + seeding before startup is abandoned
    STARTUP_TIMEOUT_SECONDS: float = 30.0

    # Empty means a SQLite file next to this module
    DATABASE_URL: str = ""
    # Bounds connection attempts (and SQLite lock waits) so startup cannot hang on the store
    DB_CONNECT_TIMEOUT_SECONDS: float = 10.0

    ENVIRONMENT: str = "development"

    model_config = SettingsConfigDict(
        # Use absolute path to make sure .env is found
        env_file=os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> frozenset:
        return frozenset(
            origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()
        )


# Create the settings instance
settings = Settings()
