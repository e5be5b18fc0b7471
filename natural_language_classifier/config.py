"""
Client configuration using Pydantic Settings.
Loads from environment variables or .env file.
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URL = "https://gateway.watsonplatform.net/natural-language-classifier/api"


class ClassifierSettings(BaseSettings):
    """
    Endpoint and credential settings.

    Every field can be set through a ``NATURAL_LANGUAGE_CLASSIFIER_`` prefixed
    environment variable, e.g. ``NATURAL_LANGUAGE_CLASSIFIER_USERNAME``.
    """

    model_config = SettingsConfigDict(
        env_prefix="NATURAL_LANGUAGE_CLASSIFIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service endpoint
    url: str = DEFAULT_URL

    # Basic-auth credentials
    username: Optional[str] = None
    password: Optional[str] = None

    # Request Settings
    timeout: float = 60.0

    @field_validator("url", mode="before")
    @classmethod
    def _default_empty_url(cls, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return DEFAULT_URL
        return str(value).strip()
