"""Configuration management for the README generator."""

import os
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Project paths (two levels up from server/core/ -> repository root)
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _resolve_path(env_name: str, default: Path) -> Path:
    value = os.getenv(env_name)
    if value:
        return Path(value).expanduser().resolve()
    return default.resolve()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return []
    values = []
    for item in raw.split(","):
        cleaned = item.strip()
        if cleaned:
            values.append(cleaned)
    # Preserve order while removing duplicates
    seen = set()
    unique: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


def _env_int_tuple(name: str, default: Tuple[int, ...]) -> Tuple[int, ...]:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        parsed = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError:
        return default
    return parsed or default


# Local storage for uploaded media (images embedded in the README)
DATA_ROOT = _resolve_path("READMEAKER_DATA_ROOT", PROJECT_ROOT / "data")
MEDIA_DIR = _resolve_path("READMEAKER_MEDIA_DIR", DATA_ROOT / "media")
MEDIA_URL_PREFIX = "/media/"
MAX_MEDIA_BYTES = int(os.getenv("MAX_MEDIA_BYTES", str(10 * 1024 * 1024)))

# API Configuration
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
CLAUDE_MODEL = os.getenv("CLAUDE_MODEL", "claude-sonnet-4-5")
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "120"))

# Description generation settings
DESCRIPTION_MAX_TOKENS = int(os.getenv("DESCRIPTION_MAX_TOKENS", "1024"))
TEMPERATURE = float(os.getenv("TEMPERATURE", "0.7"))
GENERATION_MAX_RETRIES = int(os.getenv("GENERATION_MAX_RETRIES", "3"))
RATE_LIMIT_BACKOFF_SECONDS = _env_int_tuple("RATE_LIMIT_BACKOFF_SECONDS", (30, 60, 120))

# HTTP server
SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))

_default_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
CORS_ALLOW_ORIGINS = _env_list("CORS_ALLOW_ORIGINS") or _default_cors_origins
CORS_ALLOW_CREDENTIALS = _env_flag("CORS_ALLOW_CREDENTIALS", "true")
