from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server configuration loaded from environment variables (.env optional)."""

    # Provider
    OPENAI_API_KEY: str | None = Field(None, description="API key for the OpenAI Images API")
    OPENAI_BASE_URL: str | None = Field(None, description="Alternative OpenAI-compatible endpoint")
    IMAGE_MODEL: str = Field("dall-e-3", description="Model name passed to the Images API")
    IMAGE_SIZE: str = Field("1024x1024", description="Requested image size")

    # Output
    OUTPUT_DIR_NAME: str = Field("generated-images", description="Subdirectory that receives saved images")
    OUTPUT_BASE_DIR: str | None = Field(
        None,
        description="Directory holding OUTPUT_DIR_NAME; defaults to the user's Desktop",
    )

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level for Loguru")
    LOG_DIR: str | None = Field(None, description="When set, rotating log files are written here")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
        "env_prefix": "",
    }

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------
    @model_validator(mode="after")
    def _ensure_api_key_set(self):  # noqa: D401 – pydantic hook
        """Fail fast if the provider credential is missing."""
        if not self.OPENAI_API_KEY:
            raise ValueError(
                "OPENAI_API_KEY is not set. Define it via environment variable (.env or export) "
                "before starting the image generator."
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once on first use."""
    return Settings()
