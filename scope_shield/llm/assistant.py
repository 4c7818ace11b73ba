"""
OpenAI Assistant client

Wraps the Assistants API thread/run protocol behind a single ask() call:
1. Append the user's text to the thread
2. Run the assistant and poll until the run is terminal
3. Fail unless the run completed
4. Read back the newest assistant-authored message
"""

from typing import Any, Iterable, Optional

from loguru import logger
from openai import AsyncOpenAI

from scope_shield.utils.errors import AssistantRunFailed


NO_RESPONSE_TEXT = "No response generated."


def extract_reply_text(messages: Iterable[Any]) -> str:
    """
    Pick the text of the most recent assistant message.

    Args:
        messages: Thread messages, newest first

    Returns:
        Text of the first text block of the newest assistant message,
        or NO_RESPONSE_TEXT when there is none
    """
    for message in messages:
        if getattr(message, "role", None) != "assistant":
            continue
        for block in getattr(message, "content", None) or []:
            if getattr(block, "type", None) != "text":
                continue
            value = getattr(getattr(block, "text", None), "value", None)
            if value:
                return value
        # Only the newest assistant message counts
        break
    return NO_RESPONSE_TEXT


class AssistantClient:
    """Thin adapter over the OpenAI Assistants API"""

    def __init__(
        self,
        assistant_id: str,
        client: Optional[AsyncOpenAI] = None,
        api_key: Optional[str] = None,
        poll_interval_ms: int = 1000,
        messages_limit: int = 5,
    ):
        """
        Initialize assistant client

        Args:
            assistant_id: OpenAI assistant to run against each thread
            client: Preconfigured AsyncOpenAI client (built from api_key if omitted)
            api_key: OpenAI API key
            poll_interval_ms: Delay between run status polls
            messages_limit: How many recent messages to scan for the reply
        """
        self.assistant_id = assistant_id
        self.client = client or AsyncOpenAI(api_key=api_key)
        self.poll_interval_ms = poll_interval_ms
        self.messages_limit = messages_limit

        logger.info(f"Initialized AssistantClient (assistant={assistant_id})")

    async def create_thread(self) -> str:
        """Create an empty thread and return its id"""
        thread = await self.client.beta.threads.create()
        logger.debug(f"Created assistant thread {thread.id}")
        return thread.id

    async def ask(self, thread_id: str, user_text: str) -> str:
        """
        Send the user's text to a thread and wait for the assistant's answer.

        Args:
            thread_id: Thread holding the conversation
            user_text: Message to append as the user

        Returns:
            Assistant reply text (NO_RESPONSE_TEXT if none was produced)

        Raises:
            AssistantRunFailed: if the run did not complete
            openai.OpenAIError: on any API or network failure
        """
        await self.client.beta.threads.messages.create(
            thread_id=thread_id,
            role="user",
            content=user_text,
        )

        run = await self.client.beta.threads.runs.create_and_poll(
            thread_id=thread_id,
            assistant_id=self.assistant_id,
            poll_interval_ms=self.poll_interval_ms,
        )
        if run.status != "completed":
            logger.warning(f"Run {run.id} on thread {thread_id} ended with status {run.status}")
            raise AssistantRunFailed(run.status)

        messages = await self.client.beta.threads.messages.list(
            thread_id=thread_id,
            limit=self.messages_limit,
            order="desc",
        )
        return extract_reply_text(messages.data)

    async def close(self) -> None:
        await self.client.close()
