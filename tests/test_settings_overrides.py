from __future__ import annotations

import logging
from typing import Iterable

from logging_config import ContextualFormatter
from services.decoder import build_default_decoder
from settings import get_settings


def _clear_caches(caches: Iterable) -> None:
    for cache in caches:
        cache.cache_clear()


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("SKYALERT_TIMEZONE", " Europe/Berlin ")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    caches = (get_settings, build_default_decoder)
    _clear_caches(caches)

    try:
        settings = get_settings()
        assert settings.timezone == "Europe/Berlin"
        assert settings.log_level == "DEBUG"
        assert str(build_default_decoder().location) == "Europe/Berlin"
    finally:
        _clear_caches(caches)


def test_blank_environment_falls_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("SKYALERT_TIMEZONE", "   ")
    monkeypatch.setenv("LOG_LEVEL", "")
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.timezone is None
        assert settings.log_level == "INFO"
    finally:
        get_settings.cache_clear()


def test_contextual_formatter_appends_known_extras() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")
    record = logging.LogRecord(
        name="services.decoder",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Rejected short sensor line",
        args=None,
        exc_info=None,
    )
    record.length = 12
    record.reason = "buffer too short"
    record.unrelated = "ignored"

    assert formatter.format(record) == (
        'Rejected short sensor line | length=12 reason="buffer too short"'
    )
