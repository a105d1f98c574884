from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Security: Read from .env, never hardcode defaults here.
    # A missing key is not checked here; requests fail and surface as translation errors.
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str | None = None

    # Model Configuration
    # Translation uses a reasoning model with an effort hint, explanation a lighter one
    TRANSLATION_MODEL: str = "o4-mini"
    TRANSLATION_REASONING_EFFORT: Literal["low", "medium", "high"] = "medium"
    EXPLANATION_MODEL: str = "gpt-4o-mini"

    # Transport retries of the SDK client (0 = fail on the first error)
    MAX_RETRIES: int = 0

    # Sessions idle for longer than this are dropped (0 = keep until deleted)
    SESSION_TTL_SECONDS: int = 3600

    LOG_LEVEL: str = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
