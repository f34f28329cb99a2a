from pathlib import Path
from typing import Literal

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Explicitly load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from HILLCLIMB_* environment variables."""

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["plain", "json"] = Field(
        default="plain", description="Logging format (plain or json)"
    )

    # Search Configuration
    search_engine: Literal["recursive", "iterative", "bfs"] = Field(
        default="iterative", description="Search engine used by the command line runner"
    )
    recursion_limit: int = Field(
        default=100_000, ge=1000, description="Interpreter recursion limit for the recursive engine"
    )

    # Input Configuration
    default_input: str = Field(default="input.txt", description="Heightmap file read when none is given")

    class Config:
        env_prefix = "HILLCLIMB_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # .env may carry variables for other tools


# Instantiate singleton settings object
settings = Settings()
