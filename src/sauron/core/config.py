"""
Sauron Configuration — client settings from the environment.

Reads from environment variables (and a local .env file) with defaults
that match a gateway running on localhost.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from sauron.version import VERSION

load_dotenv()

DEFAULT_BASE_URL = "http://localhost:3000"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ClientConfig:
    """Gateway connection settings."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0  # seconds, per request
    stream_timeout: float = 300.0  # seconds, read timeout while streaming
    user_agent: str = f"sauron-python/{VERSION}"
    verify_ssl: bool = True
    # Pre-issued JWT; empty means the client starts unauthenticated
    token: str = ""

    @classmethod
    def from_env(cls) -> ClientConfig:
        return cls(
            base_url=os.getenv("SAURON_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("SAURON_TIMEOUT", "30.0")),
            stream_timeout=float(os.getenv("SAURON_STREAM_TIMEOUT", "300.0")),
            user_agent=os.getenv("SAURON_USER_AGENT", f"sauron-python/{VERSION}"),
            verify_ssl=_env_bool("SAURON_VERIFY_SSL", True),
            token=os.getenv("SAURON_TOKEN", ""),
        )


# Singleton, rebuilt by reload_config()
config = ClientConfig.from_env()


def reload_config() -> ClientConfig:
    """Re-read the environment and replace the module-level config."""
    global config
    config = ClientConfig.from_env()
    return config
