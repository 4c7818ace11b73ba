"""
LLM layer - OpenAI Assistants adapter
"""

from scope_shield.llm.assistant import AssistantClient, NO_RESPONSE_TEXT, extract_reply_text

__all__ = [
    "AssistantClient",
    "NO_RESPONSE_TEXT",
    "extract_reply_text",
]
