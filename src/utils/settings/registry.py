"""Settings for self-registration with the micro-frontend host."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistrySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    MFE_HOST_API_URL: str = "http://localhost:3041"
    # Empty token disables the startup announcement
    MFE_ADMIN_TOKEN: SecretStr = SecretStr("")
    MFE_ENTRY_URL: str = "http://localhost:3044/assets/remoteEntry.js"
    MFE_REGISTRATION_TIMEOUT: float = 5.0

    @property
    def enabled(self) -> bool:
        return bool(self.MFE_ADMIN_TOKEN.get_secret_value())

    @property
    def modules_endpoint(self) -> str:
        return f"{self.MFE_HOST_API_URL.rstrip('/')}/api/admin/modules"
