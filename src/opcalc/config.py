"""Configuration management for opcalc."""

from typing import Literal

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Configuration for the opcalc command line driver."""

    log_level: str = "INFO"
    output_format: Literal["json", "raw", "table"] = "table"
    default_variant: Literal["basic", "scientific"] = "scientific"

    model_config = {
        "env_prefix": "OPCALC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "forbid",
    }
