"""
Codec Configuration
===================
Default settings read from the environment.
"""

import os

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUTHY_VALUES


# Configuration from environment
DEFAULT_CHARSET = os.getenv("MAILCODEC_DEFAULT_CHARSET", "UTF-8")
DEFAULT_ENCODE_BLANKS = env_flag("MAILCODEC_ENCODE_BLANKS", False)
LOG_LEVEL = os.getenv("MAILCODEC_LOG_LEVEL", "WARNING")
