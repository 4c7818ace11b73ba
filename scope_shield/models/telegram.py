"""
Pydantic models for the subset of a Telegram Update the relay reads.

Unknown fields are ignored so any real update parses.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TelegramUser(BaseModel):
    """Message sender"""
    model_config = ConfigDict(extra="ignore")

    id: int
    is_bot: bool = False
    username: Optional[str] = None


class TelegramChat(BaseModel):
    """Chat a message was posted in"""
    model_config = ConfigDict(extra="ignore")

    id: int
    type: str = ""  # "private", "group", "supergroup" or "channel"

    @property
    def is_private(self) -> bool:
        return self.type == "private"


class TelegramMessage(BaseModel):
    """Inbound chat message"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message_id: Optional[int] = None
    chat: TelegramChat
    from_user: Optional[TelegramUser] = Field(default=None, alias="from")
    text: Optional[str] = None

    @property
    def sender_id(self) -> Optional[int]:
        return self.from_user.id if self.from_user else None


class TelegramUpdate(BaseModel):
    """Webhook delivery body"""
    model_config = ConfigDict(extra="ignore")

    update_id: Optional[int] = None
    message: Optional[TelegramMessage] = None
