import logging
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
BRACKET_LOG_ISSUES = os.getenv("BRACKET_LOG_ISSUES", "true").lower() in ("true", "1", "yes")

_DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def get_cors_origins() -> List[str]:
    """Dev origins plus any comma-separated extras from CORS_ORIGINS"""
    origins = list(_DEFAULT_CORS_ORIGINS)
    extra = os.getenv("CORS_ORIGINS", "")
    if extra:
        origins.extend(o.strip() for o in extra.split(",") if o.strip())
    return origins


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger (unknown names fall back to INFO)"""
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
