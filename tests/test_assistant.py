"""
Tests for the OpenAI Assistant adapter.

The OpenAI client is replaced with SimpleNamespace stand-ins exposing only
the beta.threads surface the adapter touches.
"""

from types import SimpleNamespace

import pytest

from scope_shield.llm.assistant import AssistantClient, NO_RESPONSE_TEXT, extract_reply_text
from scope_shield.utils.errors import AssistantRunFailed


def _message(role, *texts):
    return SimpleNamespace(
        role=role,
        content=[SimpleNamespace(type="text", text=SimpleNamespace(value=t)) for t in texts],
    )


class FakeMessages:
    def __init__(self, data):
        self.data = data
        self.created = []
        self.list_calls = []

    async def create(self, thread_id, role, content):
        self.created.append({"thread_id": thread_id, "role": role, "content": content})
        return SimpleNamespace(id="msg_1")

    async def list(self, thread_id, limit, order):
        self.list_calls.append({"thread_id": thread_id, "limit": limit, "order": order})
        return SimpleNamespace(data=self.data)


class FakeRuns:
    def __init__(self, status):
        self.status = status
        self.calls = []

    async def create_and_poll(self, thread_id, assistant_id, poll_interval_ms):
        self.calls.append({"thread_id": thread_id, "assistant_id": assistant_id})
        return SimpleNamespace(id="run_1", status=self.status)


class FakeThreads:
    def __init__(self, status="completed", data=None):
        self.messages = FakeMessages(data or [])
        self.runs = FakeRuns(status)

    async def create(self):
        return SimpleNamespace(id="thread_new")


def _client(threads):
    return SimpleNamespace(beta=SimpleNamespace(threads=threads))


@pytest.mark.anyio
async def test_ask_returns_latest_assistant_text():
    threads = FakeThreads(data=[_message("assistant", "newest"), _message("assistant", "older")])
    assistant = AssistantClient("asst_123", client=_client(threads))

    reply = await assistant.ask("thread_a", "what is the refund policy?")

    assert reply == "newest"
    assert threads.messages.created == [
        {"thread_id": "thread_a", "role": "user", "content": "what is the refund policy?"}
    ]
    assert threads.runs.calls == [{"thread_id": "thread_a", "assistant_id": "asst_123"}]
    assert threads.messages.list_calls == [{"thread_id": "thread_a", "limit": 5, "order": "desc"}]


@pytest.mark.anyio
async def test_ask_skips_user_messages():
    threads = FakeThreads(data=[_message("user", "hi"), _message("assistant", "hello")])
    assistant = AssistantClient("asst_123", client=_client(threads))

    assert await assistant.ask("thread_a", "hi") == "hello"


@pytest.mark.anyio
async def test_ask_without_assistant_message_returns_fallback():
    threads = FakeThreads(data=[_message("user", "hi")])
    assistant = AssistantClient("asst_123", client=_client(threads))

    assert await assistant.ask("thread_a", "hi") == "No response generated."


@pytest.mark.anyio
async def test_ask_raises_when_run_not_completed():
    threads = FakeThreads(status="failed", data=[_message("assistant", "stale")])
    assistant = AssistantClient("asst_123", client=_client(threads))

    with pytest.raises(AssistantRunFailed) as exc:
        await assistant.ask("thread_a", "hi")

    assert exc.value.status == "failed"
    assert threads.messages.list_calls == []


@pytest.mark.anyio
async def test_create_thread_returns_id():
    assistant = AssistantClient("asst_123", client=_client(FakeThreads()))

    assert await assistant.create_thread() == "thread_new"


def test_messages_limit_is_configurable():
    assistant = AssistantClient("asst_123", client=_client(FakeThreads()), messages_limit=10)

    assert assistant.messages_limit == 10


class TestExtractReplyText:
    """Test extract_reply_text()"""

    def test_empty_list(self):
        assert extract_reply_text([]) == NO_RESPONSE_TEXT

    def test_assistant_message_without_text_block(self):
        image_only = SimpleNamespace(
            role="assistant",
            content=[SimpleNamespace(type="image_file", image_file=SimpleNamespace(file_id="f"))],
        )

        assert extract_reply_text([image_only, _message("assistant", "older")]) == NO_RESPONSE_TEXT

    def test_first_text_block_wins(self):
        assert extract_reply_text([_message("assistant", "first", "second")]) == "first"
