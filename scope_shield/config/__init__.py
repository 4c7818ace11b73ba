"""
Configuration layer - Settings loading and validation
"""

from scope_shield.config.settings import (
    DEFAULT_ENV_FILE,
    PROJECT_ROOT,
    REQUIRED_SETTINGS,
    Settings,
    load_settings,
)

__all__ = [
    "DEFAULT_ENV_FILE",
    "PROJECT_ROOT",
    "REQUIRED_SETTINGS",
    "Settings",
    "load_settings",
]
