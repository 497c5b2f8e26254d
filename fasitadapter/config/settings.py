"""
Settings loading.

Reads ``FASIT_*`` environment variables once per process.
"""

from __future__ import annotations

import os
from functools import lru_cache

from .schemas import FasitSettings


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


def load_settings() -> FasitSettings:
    """Build settings from the environment."""
    overrides = {}
    if template := os.getenv("FASIT_WSDL_URL_TEMPLATE"):
        overrides["wsdl_url_template"] = template

    return FasitSettings(
        base_url=os.getenv("FASIT_URL", "https://fasit.adeo.no"),
        username=os.getenv("FASIT_USERNAME", ""),
        password=os.getenv("FASIT_PASSWORD", ""),
        timeout=float(os.getenv("FASIT_TIMEOUT", "30")),
        log_requests=_env_flag("FASIT_LOG_REQUESTS"),
        log_responses=_env_flag("FASIT_LOG_RESPONSES"),
        **overrides,
    )


@lru_cache()
def get_settings() -> FasitSettings:
    """
    Get settings from environment.

    Uses lru_cache for singleton pattern.
    """
    return load_settings()
