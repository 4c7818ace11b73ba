"""
Telegram webhook endpoint

Telegram POSTs every update to /webhook/{secret}. The secret path segment is
the only authentication. Deliveries are always acknowledged with an empty 200
so Telegram never retries, whatever happened while handling them.
"""

import secrets

from fastapi import APIRouter, HTTPException, Request, Response
from loguru import logger


router = APIRouter(tags=["telegram"])


def _secret_matches(candidate: str, expected: str) -> bool:
    return secrets.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


@router.post("/webhook/{secret}")
async def telegram_webhook(secret: str, request: Request) -> Response:
    """
    Receive a Telegram update

    **Request:** raw Telegram Update JSON, e.g.
    ```json
    {
      "update_id": 1,
      "message": {
        "message_id": 42,
        "chat": {"id": -100123, "type": "group"},
        "from": {"id": 777},
        "text": "@ScopeShield_Bot what is the refund policy?"
      }
    }
    ```

    **Response:** empty 200 (404 if the secret segment is wrong)
    """
    settings = request.app.state.settings
    if not _secret_matches(secret, settings.bot_secret):
        raise HTTPException(status_code=404, detail="Not Found")

    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Webhook body is not valid JSON, acknowledging")
        return Response(status_code=200)

    if isinstance(payload, dict):
        await request.app.state.dispatcher.handle_update(payload)
    else:
        logger.warning(f"Webhook body is {type(payload).__name__}, expected an object")

    return Response(status_code=200)
