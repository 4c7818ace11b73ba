"""
Models - Telegram update payloads
"""

from scope_shield.models.telegram import (
    TelegramChat,
    TelegramMessage,
    TelegramUpdate,
    TelegramUser,
)

__all__ = [
    "TelegramChat",
    "TelegramMessage",
    "TelegramUpdate",
    "TelegramUser",
]
