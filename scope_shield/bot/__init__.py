"""
Bot layer - Telegram update dispatch
"""

from scope_shield.bot.dispatcher import ERROR_REPLY_TEXT, WebhookDispatcher, parse_message

__all__ = [
    "ERROR_REPLY_TEXT",
    "WebhookDispatcher",
    "parse_message",
]
