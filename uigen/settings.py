# uigen/settings.py
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="uigen")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # completion service
    LLM_PROVIDER: str = Field(default="auto")  # openai | ollama | echo | auto
    LLM_API_KEY: Optional[str] = None
    LLM_BASE_URL: Optional[str] = None
    OLLAMA_HOST: str = Field(default="http://localhost:11434")

    # generation bounds
    LLM_TEMPERATURE: float = Field(default=0.9)
    LLM_MAX_TOKENS: int = Field(default=6000)
    LLM_TIMEOUT_S: float = Field(default=120.0)

    # component catalog (defaults to the packaged components.yaml)
    CATALOG_PATH: Optional[str] = None

    # bearer token for the generation endpoint; unset = open
    API_TOKEN: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )


settings = Settings()
