"""
Main FastAPI application for the Scope Shield Telegram bot

This module creates and configures the FastAPI application with:
- Telegram webhook route (shared-secret path)
- Plaintext health check at /
- Lifespan wiring: thread map load, webhook registration, keep-alive task
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from loguru import logger

from scope_shield import __version__
from scope_shield.api.routes import webhook
from scope_shield.bot.dispatcher import WebhookDispatcher
from scope_shield.config.settings import Settings, load_settings
from scope_shield.llm.assistant import AssistantClient
from scope_shield.memory.thread_store import ThreadStore
from scope_shield.services.keepalive import KeepAlivePinger
from scope_shield.services.telegram_client import TelegramClient
from scope_shield.utils.errors import TelegramApiError
from scope_shield.utils.logger import setup_logger


HEALTH_TEXT = "Scope Shield Telegram bot is running."


async def register_webhook(telegram: TelegramClient, url: str) -> bool:
    """Point Telegram at our webhook; logs and returns False on failure"""
    try:
        await telegram.set_webhook(url)
    except TelegramApiError as e:
        logger.error(f"⚠️  Webhook registration failed: {e}")
        return False
    logger.info("✅ Telegram webhook registered")
    return True


def create_app(
    settings: Settings,
    *,
    store: Optional[ThreadStore] = None,
    assistant: Optional[AssistantClient] = None,
    telegram: Optional[TelegramClient] = None,
    keepalive: Optional[KeepAlivePinger] = None,
) -> FastAPI:
    """
    Build the application and its collaborators.

    Args:
        settings: Validated settings
        store: Thread store (defaults to the JSON file at settings.threads_file)
        assistant: Assistant adapter (defaults to an AsyncOpenAI-backed client)
        telegram: Bot API client
        keepalive: Self-ping task runner

    Returns:
        Configured FastAPI app
    """
    if store is None:
        store = ThreadStore(settings.threads_file)
    assistant = assistant or AssistantClient(
        assistant_id=settings.assistant_id,
        api_key=settings.openai_api_key,
        poll_interval_ms=settings.assistant_poll_interval_ms,
        messages_limit=settings.assistant_messages_limit,
    )
    telegram = telegram or TelegramClient(
        settings.telegram_token,
        base_url=settings.telegram_api_base_url,
    )
    keepalive = keepalive or KeepAlivePinger(
        settings.render_external_url,
        interval_seconds=settings.self_ping_interval_seconds,
    )
    dispatcher = WebhookDispatcher(
        store=store,
        assistant=assistant,
        transport=telegram,
        bot_username=settings.bot_username,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan events

        - Startup: load thread map, register webhook, start keep-alive
        - Shutdown: stop keep-alive, close HTTP clients
        """
        logger.info("🚀 Scope Shield bot starting...")
        store.load()
        await register_webhook(telegram, settings.webhook_url)

        keepalive_task = asyncio.create_task(keepalive.run())

        yield

        logger.info("🛑 Scope Shield bot shutting down...")
        keepalive_task.cancel()
        try:
            await keepalive_task
        except asyncio.CancelledError:
            pass

        for name, client in (("keep-alive", keepalive), ("telegram", telegram), ("assistant", assistant)):
            try:
                await client.close()
            except Exception as e:
                logger.warning(f"Error closing {name} client: {e}")
        logger.info("✅ Shutdown complete")

    app = FastAPI(
        title="Scope Shield Telegram Bot",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.dispatcher = dispatcher

    app.include_router(webhook.router)

    @app.get("/", response_class=PlainTextResponse, tags=["health"])
    async def health_check() -> str:
        """Health check endpoint"""
        return HEALTH_TEXT

    return app


def create_app_from_env() -> FastAPI:
    """App factory for `uvicorn --factory`"""
    settings = load_settings()
    setup_logger(settings.log_level, settings.log_dir)
    return create_app(settings)
