"""
Process entrypoint

Validates configuration before anything else: if a required setting is
missing the process logs it and exits with status 1 without binding a port.
"""

import sys

import uvicorn
from loguru import logger

from scope_shield.api.app import create_app
from scope_shield.config.settings import load_settings
from scope_shield.utils.errors import ConfigurationMissing
from scope_shield.utils.logger import setup_logger


def main() -> None:
    """Start the bot's HTTP server"""
    try:
        settings = load_settings()
    except ConfigurationMissing as e:
        logger.error(str(e))
        sys.exit(1)

    setup_logger(settings.log_level, settings.log_dir)

    logger.info("=" * 80)
    logger.info("Scope Shield Telegram Bot")
    logger.info("=" * 80)
    logger.info(f"Listening on {settings.host}:{settings.port}")
    logger.info(f"Mention tag for group chats: {settings.mention_tag}")
    logger.info(f"Thread map: {settings.threads_file}")
    logger.info("=" * 80)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
