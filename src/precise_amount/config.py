"""Settings loaded from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

UNIT_DISPLAY_LENGTHS = ("long", "short", "narrow")


@dataclass(frozen=True, slots=True)
class AmountSettings:
    """Process-wide defaults.

    Attributes:
        default_locale (str): Locale used by `to_locale_string` when none is passed.
        unit_display (str): Default unit label length for the Babel formatter.
    """

    default_locale: str = "en"
    unit_display: str = "short"


def _get_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def load_settings() -> AmountSettings:
    """Read settings from `PRECISE_AMOUNT_*` environment variables.

    Raises:
        ValueError: If a variable holds an unsupported value.
    """
    load_dotenv()

    default_locale = _get_env("PRECISE_AMOUNT_DEFAULT_LOCALE", "en")
    unit_display = _get_env("PRECISE_AMOUNT_UNIT_DISPLAY", "short").lower()

    # Raise: unit labels only come in three lengths
    if unit_display not in UNIT_DISPLAY_LENGTHS:
        raise ValueError(f"Environment variable PRECISE_AMOUNT_UNIT_DISPLAY must be one of {list(UNIT_DISPLAY_LENGTHS)}, but provided value is: '{unit_display}'")

    return AmountSettings(default_locale=default_locale, unit_display=unit_display)


@lru_cache(maxsize=1)
def get_settings() -> AmountSettings:
    """Return settings loaded once per process. Call `get_settings.cache_clear()` to reload."""
    return load_settings()
