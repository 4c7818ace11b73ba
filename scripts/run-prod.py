"""
Production Server

Run the Scope Shield Telegram bot.

Usage:
    python scripts/run-prod.py
    # OR (after pip install -e .)
    scope-shield
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from scope_shield.main import main


if __name__ == "__main__":
    main()
