# File: availability_engine/core/config_manager.py
"""
Centralized configuration management for the availability engine.
Loads scheduling defaults from environment variables and .env files.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Read an integer setting, keeping the default when unset or malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ['yes', 'true', '1', 'y', 't', 'on']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from availability_engine/core/
    LOGS_DIR = BASE_DIR / "logs"
    ENV_FILE = BASE_DIR / ".env"

    # Slicing
    SLOT_INTERVAL_MINUTES = _env_int("SLOT_INTERVAL_MINUTES", 15)
    MONTH_SLOT_DURATION_MINUTES = _env_int("MONTH_SLOT_DURATION_MINUTES", 30)
    INDEX_SLOT_DURATION_MINUTES = _env_int("INDEX_SLOT_DURATION_MINUTES", 60)

    # Search index horizon
    INDEX_HORIZON_MONTHS = _env_int("INDEX_HORIZON_MONTHS", 3)

    # Booking window: lessons are booked at least MIN_NOTICE_DAYS ahead
    # and at most MAX_ADVANCE_DAYS ahead.
    MIN_NOTICE_DAYS = _env_int("MIN_NOTICE_DAYS", 3)
    MAX_ADVANCE_DAYS = _env_int("MAX_ADVANCE_DAYS", 30)

    # Recurring meeting expansion cap (per meeting)
    MAX_OCCURRENCES = _env_int("MAX_OCCURRENCES", 500)

    # Display
    DISPLAY_LOCALE = os.getenv("DISPLAY_LOCALE", "en")
    DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "America/Los_Angeles")
    SUPPORTED_LOCALES: List[str] = ["en", "es", "fr"]

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_bool("LOG_TO_FILE", False)

    @classmethod
    def log_level(cls) -> int:
        """Resolve LOG_LEVEL to a logging constant (INFO if unknown)."""
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Return the scheduling settings for diagnostics."""
        return {
            'slot_interval_minutes': cls.SLOT_INTERVAL_MINUTES,
            'month_slot_duration_minutes': cls.MONTH_SLOT_DURATION_MINUTES,
            'index_slot_duration_minutes': cls.INDEX_SLOT_DURATION_MINUTES,
            'index_horizon_months': cls.INDEX_HORIZON_MONTHS,
            'min_notice_days': cls.MIN_NOTICE_DAYS,
            'max_advance_days': cls.MAX_ADVANCE_DAYS,
            'max_occurrences': cls.MAX_OCCURRENCES,
            'display_locale': cls.DISPLAY_LOCALE,
            'display_timezone': cls.DISPLAY_TIMEZONE,
            'log_level': cls.LOG_LEVEL,
        }

    @classmethod
    def validate(cls) -> bool:
        """Validate that all configured values are usable."""
        errors = []

        for name in ("SLOT_INTERVAL_MINUTES", "MONTH_SLOT_DURATION_MINUTES",
                     "INDEX_SLOT_DURATION_MINUTES", "INDEX_HORIZON_MONTHS",
                     "MAX_OCCURRENCES"):
            if getattr(cls, name) <= 0:
                errors.append(f"{name} must be positive")

        if cls.MIN_NOTICE_DAYS < 0:
            errors.append("MIN_NOTICE_DAYS cannot be negative")

        if cls.MAX_ADVANCE_DAYS < cls.MIN_NOTICE_DAYS:
            errors.append("MAX_ADVANCE_DAYS must not be before MIN_NOTICE_DAYS")

        if cls.DISPLAY_LOCALE not in cls.SUPPORTED_LOCALES:
            errors.append(f"Unsupported DISPLAY_LOCALE: {cls.DISPLAY_LOCALE}")

        if errors:
            logger = logging.getLogger(__name__)
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
