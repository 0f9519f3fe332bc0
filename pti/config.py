"""
Voice Code Settings

Settings come from environment variables (a local .env file is loaded
first):
- PTI_STRICT_GTIN: Only accept 14-digit GTINs, as printed on PTI case labels
- PTI_LOG_LEVEL: Log level for the command-line tool (default: INFO)
"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def strict_gtin_enabled() -> bool:
    """Return True when PTI_STRICT_GTIN asks for 14-digit GTINs only."""
    return os.getenv("PTI_STRICT_GTIN", "").strip().lower() in _TRUTHY


def log_level() -> str:
    return os.getenv("PTI_LOG_LEVEL", "INFO").strip().upper() or "INFO"
