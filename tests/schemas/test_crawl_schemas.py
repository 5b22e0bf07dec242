"""Crawl and project schemas — boundary validation and conversion into core values."""

from datetime import timedelta, timezone

import pytest
from pydantic import ValidationError

from llm_boost.core.crawl_workflow import CrawlJob
from llm_boost.core.domain_types import CrawlStatus
from llm_boost.core.project_eligibility import Project
from llm_boost.schemas.crawl import CrawlJobRecord, CrawlStatusUpdate
from llm_boost.schemas.project import ProjectRecord


# --- CrawlJobRecord -----------------------------------------------------------

def test_record_converts_to_domain(now):
    record = CrawlJobRecord(
        id="crawl-1", project_id="proj-1", status="crawling", started_at=now,
    )
    job = record.to_domain()
    assert isinstance(job, CrawlJob)
    assert job.crawl_id == "crawl-1"
    assert job.status == CrawlStatus.CRAWLING
    assert job.started_at == now


def test_record_rejects_unknown_status():
    with pytest.raises(ValidationError):
        CrawlJobRecord(id="crawl-1", project_id="proj-1", status="scoring")


def test_record_round_trips_through_domain(now):
    record = CrawlJobRecord(id="c", project_id="p", status="pending")
    started = record.to_domain().start(at=now)
    saved = CrawlJobRecord.from_domain(started)
    assert saved.status == CrawlStatus.CRAWLING
    assert saved.started_at == now


def test_naive_timestamp_strings_are_read_as_utc(now):
    record = CrawlJobRecord(
        id="crawl-1", project_id="proj-1", status="crawling",
        started_at="2026-03-01T10:00:00", completed_at="2026-03-01T10:30:00",
    )
    assert record.started_at.tzinfo is timezone.utc
    assert record.completed_at.tzinfo is timezone.utc
    job = record.to_domain()
    assert job.is_expired(60, now) is True
    assert job.is_expired(180, now) is False
    assert job.is_expired(60, now - timedelta(hours=1, minutes=30)) is False


# --- CrawlStatusUpdate --------------------------------------------------------

def test_status_update_accepts_failed_with_message():
    update = CrawlStatusUpdate(status="failed", error_message="timeout")
    assert update.status == CrawlStatus.FAILED


def test_status_update_rejects_message_without_failure():
    with pytest.raises(ValidationError):
        CrawlStatusUpdate(status="complete", error_message="oops")


def test_status_update_rejects_unknown_status():
    with pytest.raises(ValidationError):
        CrawlStatusUpdate(status="cancelled")


def test_status_update_message_length_limit():
    with pytest.raises(ValidationError):
        CrawlStatusUpdate(status="failed", error_message="x" * 2001)


# --- ProjectRecord ------------------------------------------------------------

def test_project_record_converts_to_domain():
    record = ProjectRecord(
        id="proj-1", user_id="user-1", domain=" https://example.com ",
        settings={"max_pages": 50},
    )
    project = record.to_domain()
    assert isinstance(project, Project)
    assert project.owner_id == "user-1"
    assert project.domain == "https://example.com"
    assert project.active_crawl_id is None
    assert project.max_pages == 50
    assert project.max_depth is None


def test_project_record_keeps_active_crawl():
    record = ProjectRecord(
        id="proj-1", user_id="user-1", domain="example.com", active_crawl_id="crawl-3",
    )
    assert record.to_domain().has_active_crawl is True


def test_project_settings_reject_zero_pages():
    with pytest.raises(ValidationError):
        ProjectRecord(
            id="proj-1", user_id="user-1", domain="example.com",
            settings={"max_pages": 0},
        )
