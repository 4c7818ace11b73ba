"""
Scope Shield - Telegram relay for an OpenAI assistant
"""

__version__ = "1.0.0"
