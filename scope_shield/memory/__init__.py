"""
Memory layer - Persistent (chat, user) to assistant thread mapping
"""

from scope_shield.memory.thread_store import ThreadStore, thread_key

__all__ = [
    "ThreadStore",
    "thread_key",
]
