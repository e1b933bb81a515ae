from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.settings.app import DEFAULT_JWT_SECRET


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    JWT_SECRET: SecretStr = SecretStr(DEFAULT_JWT_SECRET)
    JWT_ALGORITHM: str = "HS256"
