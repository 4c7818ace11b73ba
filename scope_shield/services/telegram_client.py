"""
Minimal async Telegram Bot API client

Only the two calls the relay needs: registering the webhook and sending
(optionally threaded) text replies.
"""

from typing import Any, Dict, Optional, Union

import httpx
from loguru import logger

from scope_shield.utils.errors import TelegramApiError


async def _request_with_client(
    client: httpx.AsyncClient,
    method: str,
    payload: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    POST a Bot API method and unwrap its "result".

    Raises:
        TelegramApiError: on network failure, non-JSON reply or ok=false
    """
    try:
        response = await client.post(f"/{method}", json=payload or {})
    except httpx.HTTPError as e:
        logger.warning(f"Telegram {method} network error: {e}")
        raise TelegramApiError(f"Telegram {method} request failed") from e

    try:
        body = response.json()
    except ValueError as e:
        raise TelegramApiError(
            f"Telegram {method} returned non-JSON (HTTP {response.status_code})",
            status_code=response.status_code,
        ) from e

    if not isinstance(body, dict) or body.get("ok") is not True:
        description = body.get("description") if isinstance(body, dict) else None
        error_code = body.get("error_code") if isinstance(body, dict) else None
        raise TelegramApiError(
            f"Telegram {method} failed: {description or f'HTTP {response.status_code}'}",
            error_code=error_code,
            status_code=response.status_code,
        )

    return body.get("result")


class TelegramClient:
    """Async client for the Telegram Bot API"""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = "https://api.telegram.org",
        timeout_s: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/bot{token}",
            timeout=timeout_s,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        return await _request_with_client(self._client, method, payload)

    async def set_webhook(self, url: str) -> bool:
        result = await self._request("setWebhook", {"url": url})
        return bool(result)

    async def send_message(
        self,
        chat_id: Union[int, str],
        text: str,
        reply_to_message_id: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Send a text message, threaded under reply_to_message_id when given.

        Returns:
            The sent Message object as returned by Telegram
        """
        data: Dict[str, Any] = {"chat_id": chat_id, "text": text}
        if reply_to_message_id is not None:
            data["reply_to_message_id"] = reply_to_message_id
        result = await self._request("sendMessage", data)
        if not isinstance(result, dict):
            raise TelegramApiError("Telegram sendMessage missing message payload")
        return result
