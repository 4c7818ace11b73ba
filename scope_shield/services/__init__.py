"""
Services - Telegram Bot API client and keep-alive pinger
"""

from scope_shield.services.keepalive import KeepAlivePinger
from scope_shield.services.telegram_client import TelegramClient

__all__ = [
    "KeepAlivePinger",
    "TelegramClient",
]
