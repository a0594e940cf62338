"""Configuration management for isodur."""

from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Configuration for duration parsing."""

    max_input_length: int | None = Field(
        default=None,
        ge=1,
        description="Longest text parse_duration will scan; None for no limit",
    )

    model_config = {
        "env_prefix": "ISODUR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@cache
def get_config() -> Config:
    """Process-wide config, read from the environment on first use."""
    return Config()
