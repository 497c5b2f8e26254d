"""
Fasit adapter configuration.

Environment-driven settings for the registry connection.
"""

from .schemas import FasitSettings
from .settings import get_settings, load_settings

__all__ = [
    "FasitSettings",
    "get_settings",
    "load_settings",
]
