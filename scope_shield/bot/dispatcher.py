"""
Webhook dispatcher

Turns one Telegram update into at most one reply:
- Ignores updates without a text message
- In group chats, only answers messages that mention the bot, and strips
  the mention before forwarding
- Resolves the (chat, user) thread, asks the assistant, replies in-thread
- Converts every failure into a generic error reply; never raises
"""

from typing import Any, Dict, Optional

from loguru import logger
from pydantic import ValidationError

from scope_shield.models.telegram import TelegramMessage, TelegramUpdate


ERROR_REPLY_TEXT = "Error processing your request."


def parse_message(payload: Dict[str, Any]) -> Optional[TelegramMessage]:
    """Extract the message from an update body, or None if it has no usable text"""
    try:
        update = TelegramUpdate.model_validate(payload)
    except ValidationError as e:
        logger.debug(f"Ignoring unparseable update: {e.error_count()} validation errors")
        return None
    message = update.message
    if message is None or not message.text:
        return None
    return message


class WebhookDispatcher:
    """
    Routes inbound chat messages to the assistant and back.

    Collaborators are duck-typed:
    - store: get_or_create(chat_id, user_id, context_factory) -> thread id
    - assistant: create_thread() -> thread id, ask(thread_id, text) -> reply
    - transport: send_message(chat_id, text, reply_to_message_id=None)
    """

    def __init__(self, store, assistant, transport, bot_username: str):
        self.store = store
        self.assistant = assistant
        self.transport = transport
        self.mention_tag = f"@{bot_username}"

    def extract_text(self, message: TelegramMessage) -> Optional[str]:
        """
        Text to forward to the assistant, or None if the bot should stay quiet.

        Private chats forward the text as-is. Other chats require the mention
        tag and drop its first occurrence.
        """
        text = message.text or ""
        if message.chat.is_private:
            return text

        if self.mention_tag not in text:
            return None
        return text.replace(self.mention_tag, "", 1).strip()

    async def handle_update(self, payload: Dict[str, Any]) -> None:
        """Process one webhook delivery. Never raises."""
        message = parse_message(payload)
        if message is None:
            return

        text = self.extract_text(message)
        if text is None:
            return

        chat_id = message.chat.id
        user_id = message.sender_id
        logger.info(f"Message from {chat_id}:{user_id} ({message.chat.type or 'unknown'} chat)")
        logger.debug(f"Text: {text[:100]}")

        try:
            thread_id = await self.store.get_or_create(
                chat_id, user_id, self.assistant.create_thread
            )
            reply = await self.assistant.ask(thread_id, text)
            await self.transport.send_message(
                chat_id, reply, reply_to_message_id=message.message_id
            )
        except Exception:
            logger.exception(f"Assistant error for {chat_id}:{user_id}")
            await self._send_error_reply(chat_id)

    async def _send_error_reply(self, chat_id: int) -> None:
        try:
            await self.transport.send_message(chat_id, ERROR_REPLY_TEXT)
        except Exception:
            logger.exception(f"Failed to send error reply to chat {chat_id}")
