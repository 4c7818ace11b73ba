"""
Utilities - logging setup and error types
"""

from scope_shield.utils.errors import (
    AssistantRunFailed,
    ConfigurationMissing,
    RelayError,
    TelegramApiError,
)
from scope_shield.utils.logger import setup_logger

__all__ = [
    "AssistantRunFailed",
    "ConfigurationMissing",
    "RelayError",
    "TelegramApiError",
    "setup_logger",
]
