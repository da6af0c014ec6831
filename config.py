# config.py - translator settings loaded from .env / environment
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_TIMEOUT_SECONDS = 10.0
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class TranslatorSettings:
    subscription_key: str
    endpoint: str
    location: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class Settings:
    translator: TranslatorSettings
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment, after loading any .env file."""
    load_dotenv()

    required = {
        "TRANSLATOR_KEY": os.getenv("TRANSLATOR_KEY"),
        "TRANSLATOR_ENDPOINT": os.getenv("TRANSLATOR_ENDPOINT"),
        "TRANSLATOR_LOCATION": os.getenv("TRANSLATOR_LOCATION"),
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise RuntimeError(f"Set {', '.join(missing)} in .env")

    raw_timeout = os.getenv("TRANSLATOR_TIMEOUT_SECONDS")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
    except ValueError:
        raise RuntimeError(f"TRANSLATOR_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}")
    if timeout <= 0:
        raise RuntimeError("TRANSLATOR_TIMEOUT_SECONDS must be positive")

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise RuntimeError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    translator = TranslatorSettings(
        subscription_key=required["TRANSLATOR_KEY"],
        endpoint=required["TRANSLATOR_ENDPOINT"].rstrip("/"),
        location=required["TRANSLATOR_LOCATION"],
        timeout_seconds=timeout,
    )
    return Settings(translator=translator, log_level=log_level)


@lru_cache
def get_settings() -> Settings:
    return load_settings()
