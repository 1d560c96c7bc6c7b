# portfolio_chat/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Portfolio Chat")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # provider
    GEMINI_API_KEY: str | None = None
    GEMINI_API_BASE: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    GEMINI_MODEL: str = Field(default="gemini-2.5-flash")
    # seconds; None leaves the transport without a timeout
    REQUEST_TIMEOUT: float | None = None

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def has_api_key(self) -> bool:
        return bool(self.GEMINI_API_KEY)


def get_settings() -> Settings:
    """Read configuration fresh so the API key is picked up at request time."""
    return Settings()


settings = Settings()
