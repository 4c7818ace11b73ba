"""
Custom error classes for the application
"""

from typing import Iterable, Optional


class RelayError(Exception):
    """Base exception for relay errors"""
    pass


class ConfigurationMissing(RelayError):
    """One or more required settings are absent at startup"""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            f"Missing required environment variables: {', '.join(self.missing)}"
        )


class AssistantRunFailed(RelayError):
    """Assistant run ended in a state other than 'completed'"""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Assistant run failed with status: {status}")


class TelegramApiError(RelayError):
    """Error talking to the Telegram Bot API"""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[int] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.status_code = status_code
