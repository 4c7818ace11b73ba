"""
Configuration management for the application.
Loads settings from environment variables and an optional .env file.
"""

from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scope_shield.utils.errors import ConfigurationMissing

# Find project root (where .env file is located)
# This file is at scope_shield/config/settings.py, so project root is 3 levels up
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"

# Settings the process refuses to start without
REQUIRED_SETTINGS = (
    "telegram_token",
    "openai_api_key",
    "assistant_id",
    "bot_secret",
    "render_external_url",
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Telegram
    telegram_token: str = Field(default="")
    telegram_api_base_url: str = Field(default="https://api.telegram.org")
    bot_secret: str = Field(default="")  # Shared-secret segment of the webhook path
    bot_username: str = Field(default="ScopeShield_Bot")  # Mention tag is "@" + username

    # OpenAI Assistant
    openai_api_key: str = Field(default="")
    assistant_id: str = Field(default="")
    assistant_poll_interval_ms: int = Field(default=1000)
    assistant_messages_limit: int = Field(default=5)  # Recent messages scanned for the reply

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    render_external_url: str = Field(default="")  # Public base URL of this service
    self_ping_interval_seconds: float = Field(default=180.0)

    # Thread persistence
    threads_file: str = Field(default="/data/threads.json")

    # Logging
    log_level: str = Field(default="INFO")
    log_dir: Optional[str] = Field(default=None)

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def mention_tag(self) -> str:
        return f"@{self.bot_username}"

    @property
    def webhook_path(self) -> str:
        return f"/webhook/{self.bot_secret}"

    @property
    def webhook_url(self) -> str:
        return f"{self.render_external_url.rstrip('/')}{self.webhook_path}"

    def missing_required(self) -> List[str]:
        """Names of required environment variables that are unset or blank"""
        return [
            name.upper()
            for name in REQUIRED_SETTINGS
            if not str(getattr(self, name) or "").strip()
        ]


def load_settings(env_file: Optional[Union[str, Path]] = DEFAULT_ENV_FILE) -> Settings:
    """
    Load and validate application settings.

    Args:
        env_file: Optional .env file merged into the environment first
            (existing variables win). Pass None to read the environment only.

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationMissing: if any required setting is absent
    """
    if env_file is not None:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            logger.debug(f"Loaded .env from: {env_path}")

    settings = Settings()
    missing = settings.missing_required()
    if missing:
        raise ConfigurationMissing(missing)
    return settings
