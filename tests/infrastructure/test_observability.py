"""Observability — JSON log formatting and settings loading."""

import json
import logging

import pytest
from pydantic import ValidationError

from llm_boost.config import Settings
from llm_boost.core.domain_types import PlanTier
from llm_boost.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "llm_boost.test", logging.INFO, __file__, 1, "crawl %s", ("started",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "llm_boost.test"
    assert log["message"] == "crawl started"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(crawl_id="crawl-1", to_status="crawling", secret="x"),
    ))
    assert log["crawl_id"] == "crawl-1"
    assert log["to_status"] == "crawling"
    assert "secret" not in log


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.crawl_timeout_minutes == 60
    assert settings.trial_tier == PlanTier.PRO


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TRIAL_TIER", " Starter ")
    monkeypatch.setenv("CRAWL_TIMEOUT_MINUTES", "15")
    settings = Settings(_env_file=None)
    assert settings.trial_tier == PlanTier.STARTER
    assert settings.crawl_timeout_minutes == 15


def test_settings_reject_unknown_trial_tier(monkeypatch):
    monkeypatch.setenv("TRIAL_TIER", "gold")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
