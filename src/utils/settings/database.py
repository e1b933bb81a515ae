"""Database settings configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DB_PATH: str = "data/organizations.db"
    DB_BUSY_TIMEOUT_MS: int = 5000
    DB_ECHO: bool = False

    @property
    def database_file(self) -> Path:
        return Path(self.DB_PATH).expanduser().resolve()

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        """Derive the aiosqlite URL from the database file path."""
        return f"sqlite+aiosqlite:///{self.database_file}"
