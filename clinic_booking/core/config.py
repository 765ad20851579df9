from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CURRENCY_SYMBOL: str = "£"
    DEFAULT_MAX_SESSIONS: int = 10

    # Hosted backend (PostgREST-style REST API). Memory store is used when unset.
    BACKEND_URL: str | None = None
    BACKEND_API_KEY: str | None = None
    BACKEND_TIMEOUT_SECONDS: float = 10.0


settings = Settings()
