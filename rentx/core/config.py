from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    RENTX_API_BASE_URL: str | None = None
    RENTX_API_TIMEOUT_SECONDS: float = 10.0

    # Calendar days are local midnights in this timezone
    RENTX_TIMEZONE: str = "America/Sao_Paulo"

    # No authentication, every booking belongs to this user
    RENTX_USER_ID: int = 1


settings = Settings()
