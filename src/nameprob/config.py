"""
Global configuration for nameprob.
Only infrastructure knobs live here (service URL, timeout, user agent).
"""

from __future__ import annotations

import os
from typing import Final, Optional

from dotenv import load_dotenv

from ._version import __version__

load_dotenv()

# -----------------------------------------------------------------------------
# HTTP
# -----------------------------------------------------------------------------
NATIONALIZE_API_URL: Final[str] = os.getenv(
    "NAMEPROB_API_URL", "https://api.nationalize.io"
)
DEFAULT_TIMEOUT_S: Final[float] = float(os.getenv("NAMEPROB_TIMEOUT_S", "30"))
USER_AGENT: Final[str] = os.getenv(
    "NAMEPROB_USER_AGENT", f"nameprob/{__version__}"
)


def get_env(
    name: str, *, required: bool = False, default: Optional[str] = None
) -> Optional[str]:
    """Small helper to fetch env vars with an optional 'required' flag."""
    val = os.getenv(name, default)
    if required and not val:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return val


# -----------------------------------------------------------------------------
# Public exports
# -----------------------------------------------------------------------------
__all__ = [
    "NATIONALIZE_API_URL",
    "DEFAULT_TIMEOUT_S",
    "USER_AGENT",
    "get_env",
]
