from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "BFHL API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Identity returned in every envelope; endpoints fail closed without it
    OFFICIAL_EMAIL: str = ""

    # AI provider
    AI_PROVIDER: Literal["openai", "gemini"] = "gemini"
    AI_TIMEOUT_SECONDS: float = 10.0
    AI_MAX_OUTPUT_TOKENS: int = 16
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_API_BASE: str = "https://api.openai.com/v1"
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"

    # Rate limiting
    RATE_LIMIT_REQUESTS: int = 120
    RATE_LIMIT_WINDOW_SECONDS: float = 60.0
    RATE_LIMIT_TRUST_FORWARDED: bool = False

    # HTTP
    MAX_BODY_BYTES: int = 10 * 1024
    CORS_ALLOW_ORIGINS: str = "*"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        """Parse the comma-separated CORS origin list."""
        return [origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]

@lru_cache()
def get_settings() -> Settings:
    return Settings()
