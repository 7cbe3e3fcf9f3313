"""Centralised settings for blogscan.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The extraction heuristics themselves (score threshold, article cap, weight
tables) are constants in :mod:`blogscan.blog.patterns`; only the ambient
concerns around them live here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("BLOGSCAN_LOG_LEVEL", "INFO").upper()
    )

    # ------------------------------------------------------------------
    # Network helpers (page fetch + feed probe)
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("BLOGSCAN_REQUEST_TIMEOUT", "15.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "BLOGSCAN_USER_AGENT",
            "Mozilla/5.0 (compatible; blogscan/0.1; +https://github.com/blogscan)",
        )
    )

    # ------------------------------------------------------------------
    # Feed probe
    # ------------------------------------------------------------------
    verify_feeds: bool = field(
        default_factory=lambda: _env_flag("BLOGSCAN_VERIFY_FEEDS")
    )
    max_feed_probes: int = field(
        default_factory=lambda: int(os.environ.get("BLOGSCAN_MAX_FEED_PROBES", "10"))
    )


# Module-level singleton; import this everywhere:
#   from blogscan.config import settings
settings = Settings()
