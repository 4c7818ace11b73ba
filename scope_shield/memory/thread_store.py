"""
Thread store - durable mapping from (chat, user) to an assistant thread id.

The whole mapping lives in memory and is mirrored to a single JSON file:
- Loaded once at startup; a missing or corrupt file yields an empty map
- Rewritten in full every time a new mapping is inserted
- Entries are only ever added, never replaced or removed

There is no locking. Two concurrent first messages from the same pair can
both create a thread; whichever write lands last is the one kept.
"""

import json
import os
from pathlib import Path
from typing import Awaitable, Callable, Dict, Optional, Union

from loguru import logger


IdType = Union[int, str]


def thread_key(chat_id: IdType, user_id: Optional[IdType]) -> str:
    """Build the "<chatId>:<userId>" key; a missing sender is an empty segment"""
    return f"{chat_id}:{'' if user_id is None else user_id}"


class ThreadStore:
    """JSON-file backed (chat, user) -> thread id mapping"""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize thread store

        Args:
            path: Location of the JSON file holding the mapping
        """
        self.path = Path(path)
        self._threads: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._threads)

    def snapshot(self) -> Dict[str, str]:
        """Copy of the current in-memory mapping"""
        return dict(self._threads)

    def load(self) -> None:
        """
        Read the mapping from disk, falling back to an empty map.

        Never raises: an absent, unreadable or malformed file is logged and
        treated as empty.
        """
        if not self.path.exists():
            logger.info(f"No thread map at {self.path}, starting empty")
            self._threads = {}
            return

        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"⚠️  Could not read thread map at {self.path}, starting empty: {e}")
            self._threads = {}
            return

        if not isinstance(payload, dict):
            logger.warning(
                f"⚠️  Thread map at {self.path} is not a JSON object "
                f"({type(payload).__name__}), starting empty"
            )
            self._threads = {}
            return

        self._threads = {
            key: value
            for key, value in payload.items()
            if isinstance(key, str) and isinstance(value, str) and value
        }
        dropped = len(payload) - len(self._threads)
        if dropped:
            logger.warning(f"Dropped {dropped} invalid entries from {self.path}")
        logger.info(f"✅ Loaded {len(self._threads)} thread mappings from {self.path}")

    def get(self, chat_id: IdType, user_id: Optional[IdType]) -> Optional[str]:
        return self._threads.get(thread_key(chat_id, user_id))

    async def get_or_create(
        self,
        chat_id: IdType,
        user_id: Optional[IdType],
        context_factory: Callable[[], Awaitable[str]],
    ) -> str:
        """
        Return the pair's thread id, creating and persisting one if needed.

        Args:
            chat_id: Chat the message came from
            user_id: Sender of the message
            context_factory: Coroutine function returning a brand-new thread id

        Returns:
            Thread id for the pair

        Raises:
            OSError: if the mapping cannot be written back to disk
        """
        key = thread_key(chat_id, user_id)
        existing = self._threads.get(key)
        if existing:
            return existing

        thread_id = await context_factory()
        self._threads[key] = thread_id
        self._save()
        logger.info(f"Created thread {thread_id} for {key}")
        return thread_id

    def _save(self) -> None:
        """Rewrite the whole mapping to disk"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = json.dumps(self._threads, indent=2)
        tmp_path = self.path.with_suffix(f"{self.path.suffix}.tmp")
        tmp_path.write_text(data, encoding="utf-8")
        try:
            os.replace(tmp_path, self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
