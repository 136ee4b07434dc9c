# File: tests/unit/test_config.py
"""
Unit tests for configuration, logging and the small formatting utilities.
"""

import logging
import pytest
from datetime import datetime

from availability_engine.core.config_manager import Config
from availability_engine.utils.intl import format_date, format_time, resolve_locale, weekday_name
from availability_engine.utils.logger import LoggerMixin, setup_logger
from availability_engine.utils.months import days_in_month, normalize_month, weekday_of_first

pytestmark = pytest.mark.unit


# ==================== Config Tests ====================

class TestConfig:

    def test_defaults_are_valid(self):
        assert Config.validate() is True

    def test_non_positive_interval_is_invalid(self):
        class BadConfig(Config):
            SLOT_INTERVAL_MINUTES = 0

        assert BadConfig.validate() is False

    def test_booking_window_must_be_ordered(self):
        class BadConfig(Config):
            MIN_NOTICE_DAYS = 10
            MAX_ADVANCE_DAYS = 5

        assert BadConfig.validate() is False

    def test_unsupported_locale_is_invalid(self):
        class BadConfig(Config):
            DISPLAY_LOCALE = "de"

        assert BadConfig.validate() is False

    def test_log_level(self):
        class DebugConfig(Config):
            LOG_LEVEL = "DEBUG"

        class UnknownConfig(Config):
            LOG_LEVEL = "LOUD"

        assert DebugConfig.log_level() == logging.DEBUG
        assert UnknownConfig.log_level() == logging.INFO

    def test_as_dict(self):
        settings = Config.as_dict()

        assert settings['slot_interval_minutes'] == Config.SLOT_INTERVAL_MINUTES
        assert 'max_advance_days' in settings


# ==================== Logger Tests ====================

class TestLogger:

    def test_handlers_not_duplicated(self):
        first = setup_logger("availability_engine.tests")
        handler_count = len(first.handlers)
        second = setup_logger("availability_engine.tests")

        assert first is second
        assert len(second.handlers) == handler_count

    def test_mixin_logger_named_after_class(self):
        class Worker(LoggerMixin):
            pass

        assert Worker().logger.name == "Worker"


# ==================== Utility Tests ====================

class TestMonths:

    @pytest.mark.parametrize("month, year, expected", [
        (1, 2024, (1, 2024)),
        (13, 2023, (1, 2024)),
        (0, 2024, (12, 2023)),
        (-11, 2024, (1, 2023)),
        (25, 2024, (1, 2026)),
    ])
    def test_normalize_month(self, month, year, expected):
        assert normalize_month(month, year) == expected

    def test_days_in_month(self):
        assert days_in_month(2, 2024) == 29
        assert days_in_month(2, 2023) == 28
        assert days_in_month(14, 2023) == 29

    def test_weekday_of_first(self):
        assert weekday_of_first(1, 2024) == 1
        assert weekday_of_first(9, 2024) == 0


class TestIntl:

    def test_resolve_locale(self):
        assert resolve_locale("es_MX") == "es"
        assert resolve_locale("pt-BR") == "en"
        assert resolve_locale("") == "en"

    def test_weekday_name(self):
        assert weekday_name(0) == "Sunday"
        assert weekday_name(3, "fr") == "mercredi"

    def test_format_time_twelve_hour_clock(self):
        assert format_time(datetime(2024, 1, 1, 12, 5)) == "12:05 PM"
        assert format_time(datetime(2024, 1, 1, 0, 30)) == "12:30 AM"
        assert format_time(datetime(2024, 1, 1, 14, 0), show_period=False) == "2:00"

    def test_format_time_other_locales(self):
        assert format_time(datetime(2024, 1, 1, 14, 0), "es") == "14:00"
        assert format_time(datetime(2024, 1, 1, 14, 0), "fr") == "14 h 00"

    def test_format_date(self):
        assert format_date(datetime(2024, 8, 1), "fr") == "1 août 2024"
