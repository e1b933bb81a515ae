from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: str = "DEV"
    LOG_LEVEL: str = "INFO"
    API_VERSION: str = "0.1.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3045

    # Prefix for the organization routes, e.g. "/api"
    API_BASE_PATH: str = ""

    # The form UI is loaded into the host shell from another origin
    CORS_ORIGINS: list[str] = ["*"]

    # Same limit as the JSON body parser of the host platform services
    MAX_REQUEST_SIZE: int = 100 * 1024  # 100KB

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"

    def validate_prod(self, jwt_secret: str) -> None:
        """Sanity checks for production environment."""
        if self.is_production:
            if not jwt_secret or jwt_secret == DEFAULT_JWT_SECRET:
                raise ValueError("JWT_SECRET must be set in production")
            if not self.CORS_ORIGINS:
                raise ValueError("CORS_ORIGINS must be set in production")
