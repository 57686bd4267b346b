"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first, so local overrides do not have to be exported by hand.
Defaults are provided for all fields; the API key default is only
suitable for development.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Shared secret expected in the Authorization header, either raw or
    # as ``Bearer <key>``.  An empty API_KEY falls back to the default.
    api_key: str = os.getenv("API_KEY") or "secret-api-key"

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT") or "3000")

    # Start with the three demo products so the API is usable right away.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    # Paths served without an API key.
    public_paths: Tuple[str, ...] = ("/", "/favicon.ico")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
