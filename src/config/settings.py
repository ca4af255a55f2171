"""
Module: settings.py
Description: Action configuration using pydantic-settings.

Reads the action inputs and AWS options from environment variables
with validation and defaults. No .env file is read: the working
directory belongs to the calling workflow. The Actions runner exposes inputs as
INPUT_<NAME> variables, which the field aliases below match.
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Action settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True
    )

    # Action inputs
    queue_url: str = Field(
        default="",
        validation_alias=AliasChoices("INPUT_QUEUE-URL", "QUEUE_URL", "queue_url"),
        description="URL of the SQS queue to delete"
    )
    endpoint_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_ENDPOINT-URL", "AWS_ENDPOINT_URL", "endpoint_url"),
        description="Custom SQS endpoint, e.g. a localstack URL"
    )

    # AWS settings
    aws_region: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION", "aws_region"),
        description="AWS region; left to botocore resolution when unset"
    )

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Optional[str] = Field(
        default=None,
        description="Log renderer: 'github' workflow commands or 'json'"
    )

    @field_validator('endpoint_url', 'aws_region', mode='before')
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty optional inputs as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate log format is a supported renderer."""
        if v is None or not v.strip():
            return None
        if v.lower() not in ('github', 'json'):
            raise ValueError("log_format must be one of: github, json")
        return v.lower()


def get_settings(**overrides) -> Settings:
    """
    Build settings from the environment.

    Args:
        **overrides: Values taking precedence over the environment,
            e.g. command-line options. None values are ignored.

    Returns:
        Validated Settings instance
    """
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
