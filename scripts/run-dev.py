"""
Development Server

Run the Scope Shield Telegram bot with auto-reload.

Usage:
    python scripts/run-dev.py
"""

import sys
import os
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
os.chdir(project_root)

import uvicorn
from loguru import logger

from scope_shield.config.settings import load_settings
from scope_shield.utils.errors import ConfigurationMissing


def main():
    """Start the development server (webhook registration still runs)"""
    try:
        settings = load_settings()
    except ConfigurationMissing as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info("=" * 80)
    logger.info("Scope Shield Telegram Bot - Development Server")
    logger.info("=" * 80)
    logger.info(f"Health Check: http://localhost:{settings.port}/")
    logger.info("Press CTRL+C to stop the server")
    logger.info("=" * 80)

    uvicorn.run(
        "scope_shield.api.app:create_app_from_env",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level="info",
        access_log=True,
        reload_dirs=[str(project_root / "scope_shield")]
    )


if __name__ == "__main__":
    main()
