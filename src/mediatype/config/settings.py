"""Configuration settings for the media type package.

Settings are loaded from ``MEDIATYPE_*`` environment variables and an
optional ``.env`` file. They only affect the HTTP helpers and the
command line; parsing and rendering are not configurable.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import MediaTypeParseError
from ..media_type import MediaType


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    :param log_level: Logging level used by the command line
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    :param default_content_type: Media type assumed when a message has
        no Content-Type header
    :type default_content_type: str
    :param strict_content_type: Raise on unparseable Content-Type headers
        instead of falling back to the default
    :type strict_content_type: bool
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIATYPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "WARNING", description="Logging level"
    )

    default_content_type: str = Field(
        "application/octet-stream",
        description="Media type assumed when no Content-Type header is present",
    )

    strict_content_type: bool = Field(
        True,
        description="Raise on unparseable Content-Type headers instead of falling back",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any casing.

        :param v: The raw log level value
        :return: Upper-cased log level
        """
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("default_content_type")
    @classmethod
    def validate_default_content_type(cls, v: str) -> str:
        """Ensure the default content type is a valid media type.

        The value is stored in canonical form.

        :param v: The configured media type string
        :type v: str
        :return: Canonical media type string
        :rtype: str
        :raises ValueError: If the value cannot be parsed
        """
        try:
            return str(MediaType.parse(v))
        except MediaTypeParseError as e:
            raise ValueError(f"Invalid default_content_type: {e.reason}") from e

    @property
    def default_media_type(self) -> MediaType:
        """Get the default content type as a media type.

        :return: Parsed default content type
        :rtype: MediaType
        """
        return MediaType.parse(self.default_content_type)


settings = Settings()
"""Global settings instance.

Created once at import time from the environment.
"""
