"""
Shared fixtures and fakes for the relay tests
"""

from typing import Any, Dict, List, Optional

import pytest

from scope_shield.memory.thread_store import thread_key


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeStore:
    """In-memory stand-in for ThreadStore"""

    def __init__(self, error: Optional[Exception] = None):
        self.threads: Dict[str, str] = {}
        self.error = error

    def load(self) -> None:
        pass

    async def get_or_create(self, chat_id, user_id, context_factory):
        key = thread_key(chat_id, user_id)
        if key not in self.threads:
            thread_id = await context_factory()
            if self.error is not None:
                raise self.error
            self.threads[key] = thread_id
        return self.threads[key]


class FakeAssistant:
    """Records questions and returns a canned reply (or raises)"""

    def __init__(self, reply: str = "Refunds are accepted within 30 days.", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.asked: List[tuple] = []
        self.threads_created = 0
        self.closed = False

    async def create_thread(self) -> str:
        self.threads_created += 1
        return f"thread_{self.threads_created}"

    async def ask(self, thread_id: str, user_text: str) -> str:
        self.asked.append((thread_id, user_text))
        if self.error is not None:
            raise self.error
        return self.reply

    async def close(self) -> None:
        self.closed = True


class FakeTransport:
    """Records outbound Telegram calls; can fail the first N sends"""

    def __init__(self, errors: Optional[List[Exception]] = None):
        self.sent: List[Dict[str, Any]] = []
        self.webhooks: List[str] = []
        self.errors = list(errors or [])
        self.closed = False

    async def send_message(self, chat_id, text, reply_to_message_id=None):
        self.sent.append(
            {"chat_id": chat_id, "text": text, "reply_to_message_id": reply_to_message_id}
        )
        if self.errors:
            raise self.errors.pop(0)
        return {"message_id": 1000 + len(self.sent)}

    async def set_webhook(self, url: str) -> bool:
        self.webhooks.append(url)
        return True

    async def close(self) -> None:
        self.closed = True


def build_update(
    text: Optional[str],
    chat_type: str = "group",
    chat_id: int = -100123,
    user_id: Optional[int] = 777,
    message_id: int = 42,
) -> Dict[str, Any]:
    """Telegram Update body with a single message"""
    message: Dict[str, Any] = {
        "message_id": message_id,
        "chat": {"id": chat_id, "type": chat_type},
    }
    if user_id is not None:
        message["from"] = {"id": user_id, "is_bot": False, "first_name": "Ada"}
    if text is not None:
        message["text"] = text
    return {"update_id": 1, "message": message}


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def fake_assistant():
    return FakeAssistant()


@pytest.fixture
def fake_transport():
    return FakeTransport()
