# File: availability_engine/utils/intl.py
"""
Display strings for the supported locales.
Only formatting lives here; no time-zone conversion is ever performed.
"""

from datetime import datetime
from typing import Dict, List

DEFAULT_LOCALE = "en"

WEEKDAY_NAMES: Dict[str, List[str]] = {
    # Indexed with 0 = Sunday
    "en": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
    "es": ["domingo", "lunes", "martes", "miércoles", "jueves", "viernes", "sábado"],
    "fr": ["dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"],
}

MONTH_NAMES: Dict[str, List[str]] = {
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
    "es": ["enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
           "agosto", "septiembre", "octubre", "noviembre", "diciembre"],
    "fr": ["janvier", "février", "mars", "avril", "mai", "juin", "juillet",
           "août", "septembre", "octobre", "novembre", "décembre"],
}

FREQUENCY_LABELS: Dict[str, Dict[str, str]] = {
    "en": {"Daily": "Daily", "Weekly": "Weekly", "Biweekly": "Biweekly", "Monthly": "Monthly"},
    "es": {"Daily": "Diario", "Weekly": "Semanal", "Biweekly": "Quincenal", "Monthly": "Mensual"},
    "fr": {"Daily": "Quotidien", "Weekly": "Hebdomadaire", "Biweekly": "Bimensuel", "Monthly": "Mensuel"},
}

UNTIL_WORD: Dict[str, str] = {"en": "until", "es": "hasta el", "fr": "jusqu'au"}


def resolve_locale(locale: str) -> str:
    """Map 'en-US', 'es_MX' etc. to a supported base locale, else English."""
    if not locale:
        return DEFAULT_LOCALE
    base = locale.replace('_', '-').split('-')[0].lower()
    return base if base in WEEKDAY_NAMES else DEFAULT_LOCALE


def weekday_name(weekday: int, locale: str = DEFAULT_LOCALE) -> str:
    return WEEKDAY_NAMES[resolve_locale(locale)][weekday % 7]


def format_time(instant: datetime, locale: str = DEFAULT_LOCALE, show_period: bool = True) -> str:
    """'9:30 AM' for English (12-hour clock), '9:30' / '9 h 30' elsewhere."""
    locale = resolve_locale(locale)
    if locale == "en":
        hour = instant.hour % 12 or 12
        text = f"{hour}:{instant.minute:02d}"
        if show_period:
            text += " AM" if instant.hour < 12 else " PM"
        return text
    if locale == "fr":
        return f"{instant.hour} h {instant.minute:02d}"
    return f"{instant.hour}:{instant.minute:02d}"


def format_date(instant: datetime, locale: str = DEFAULT_LOCALE) -> str:
    """'January 31, 2024' / '31 de enero de 2024' / '31 janvier 2024'."""
    locale = resolve_locale(locale)
    month = MONTH_NAMES[locale][instant.month - 1]
    if locale == "en":
        return f"{month} {instant.day}, {instant.year}"
    if locale == "es":
        return f"{instant.day} de {month} de {instant.year}"
    return f"{instant.day} {month} {instant.year}"
