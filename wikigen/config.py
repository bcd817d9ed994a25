# wikigen/config.py
import logging
import os
import sys
from typing import Any, Dict, Optional

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_DEFAULT_MODEL = "llama-3.3-70b-versatile"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"


def env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, "").strip())
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, "").strip())
    except ValueError:
        return default


def _database_url() -> str:
    db_url = os.getenv("DATABASE_URL") or "sqlite:///articles.db"
    if db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql+psycopg2://", 1)
    return db_url


def load_config() -> Dict[str, Any]:
    """
    Builds the app config from the environment.

    OPENAI_API_KEY wins over GROQ_API_KEY. With only a Groq key and no
    LLM_BASE_URL, requests go to Groq's OpenAI-compatible endpoint.
    """
    openai_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    groq_key = (os.getenv("GROQ_API_KEY") or "").strip()
    use_groq = bool(groq_key and not openai_key)

    base_url = (os.getenv("LLM_BASE_URL") or "").strip() or None
    if base_url is None and use_groq:
        base_url = GROQ_BASE_URL

    model = (
        os.getenv("LLM_MODEL")
        or os.getenv("GROQ_MODEL")
        or os.getenv("OPENAI_MODEL")
        or (GROQ_DEFAULT_MODEL if use_groq else OPENAI_DEFAULT_MODEL)
    ).strip()

    return {
        "SQLALCHEMY_DATABASE_URI": _database_url(),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "LLM_API_KEY": openai_key or groq_key or None,
        "LLM_BASE_URL": base_url,
        "LLM_MODEL": model,
        "LLM_TEMPERATURE": env_float("LLM_TEMPERATURE", 0.5),
        "LLM_MAX_TOKENS": env_int("LLM_MAX_TOKENS", 4096),
        "LLM_TIMEOUT": env_float("LLM_TIMEOUT", 60.0),
        "LOG_LEVEL": (os.getenv("LOG_LEVEL") or "INFO").upper(),
    }


def configure_logging(level: Optional[str] = None) -> None:
    logger = logging.getLogger("wikigen")
    logger.setLevel((level or "INFO").upper())
    if any(getattr(h, "_wikigen", False) for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    handler._wikigen = True
    logger.addHandler(handler)
