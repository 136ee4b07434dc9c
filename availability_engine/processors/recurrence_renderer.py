# File: availability_engine/processors/recurrence_renderer.py
"""
Human readable labels for recurrence rules, e.g.
"RRULE:FREQ=WEEKLY;INTERVAL=2;UNTIL=20240131T000000Z" -> "Biweekly until January 31, 2024".

Formatting only: a rule that cannot be understood yields an empty or
partial label, never an exception.
"""

import re
from datetime import datetime
from typing import Dict, Optional, Tuple

from dateutil.parser import isoparse

from availability_engine.core.config_manager import Config
from availability_engine.models import Frequency
from availability_engine.utils.intl import FREQUENCY_LABELS, UNTIL_WORD, format_date, resolve_locale
from availability_engine.utils.logger import setup_logger

logger = setup_logger(__name__)

UNTIL_PATTERN = re.compile(r"^\d{8}(T\d{6}Z?)?$")


def _rule_parts(rule: str) -> Dict[str, str]:
    """Split 'RRULE:FREQ=WEEKLY;UNTIL=...' into {'FREQ': 'WEEKLY', ...}."""
    body = rule.strip()
    if body.upper().startswith("RRULE:"):
        body = body[len("RRULE:"):]
    parts = {}
    for item in body.split(";"):
        if "=" not in item:
            continue
        key, value = item.split("=", 1)
        parts[key.strip().upper()] = value.strip().upper()
    return parts


def _parse_until(value: Optional[str]) -> Optional[datetime]:
    if not value or not UNTIL_PATTERN.match(value):
        return None
    try:
        return isoparse(value).replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None


def parse_recurrence(rule: Optional[str]) -> Tuple[Optional[Frequency], Optional[datetime]]:
    """Extract the coarse frequency and the UNTIL bound of a rule."""
    if not isinstance(rule, str) or not rule.strip():
        return None, None

    parts = _rule_parts(rule)
    freq = parts.get("FREQ")
    frequency = None
    if freq == "DAILY":
        frequency = Frequency.DAILY
    elif freq == "WEEKLY":
        frequency = Frequency.BIWEEKLY if parts.get("INTERVAL") == "2" else Frequency.WEEKLY
    elif freq == "MONTHLY":
        frequency = Frequency.MONTHLY

    until = _parse_until(parts.get("UNTIL"))
    if "UNTIL" in parts and until is None:
        logger.debug(f"Ignoring malformed UNTIL in recurrence rule: {rule!r}")
    return frequency, until


def render_recurrence(rule: Optional[str], locale: Optional[str] = None) -> str:
    """
    Render a recurrence rule as a short label for display.

    Args:
        rule: RFC 5545 RRULE string (the "RRULE:" prefix is optional)
        locale: Display locale ("en", "es", "fr"; default Config.DISPLAY_LOCALE);
            others fall back to English

    Returns:
        e.g. "Weekly", "Daily until March 1, 2024", or "" when unrecognized
    """
    frequency, until = parse_recurrence(rule)
    if frequency is None:
        return ""

    locale = resolve_locale(locale or Config.DISPLAY_LOCALE)
    label = FREQUENCY_LABELS[locale][frequency.value]
    if until is not None:
        label = f"{label} {UNTIL_WORD[locale]} {format_date(until, locale)}"
    return label
