"""Crawl Lifecycle — imperative shell around the crawl workflow core.

Invariants:
    - Never persists anything: returns new CrawlJob values for the caller to save
    - Every applied transition is logged with crawl_id and from/to status
    - InvalidTransitionError is logged as a warning and re-raised unchanged
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from llm_boost.config import get_settings
from llm_boost.core.clock import utc_now
from llm_boost.core.crawl_workflow import CrawlJob
from llm_boost.core.domain_types import CrawlStatus
from llm_boost.core.errors import InvalidTransitionError
from llm_boost.schemas.crawl import CrawlStatusUpdate

logger = logging.getLogger(__name__)

STUCK_CRAWL_MESSAGE = "Stuck in crawling state"


def apply_status_update(
    job: CrawlJob, update: CrawlStatusUpdate, now: datetime | None = None,
) -> CrawlJob:
    """Apply a validated status update and return the new job value."""
    now = now or utc_now()
    try:
        if update.status == CrawlStatus.FAILED:
            updated = job.fail(update.error_message or "Crawl failed", at=now)
        else:
            updated = job.transition(update.status, at=now)
    except InvalidTransitionError as exc:
        logger.warning(
            f"Rejected crawl transition: {exc.message}",
            extra={
                "crawl_id": job.crawl_id,
                "error_code": exc.code,
                "from_status": job.status.value,
                "to_status": update.status.value,
            },
        )
        raise

    logger.info(
        "Crawl status changed",
        extra={
            "crawl_id": job.crawl_id,
            "project_id": job.project_id,
            "from_status": job.status.value,
            "to_status": updated.status.value,
        },
    )
    return updated


def fail_stuck_crawls(
    jobs: Iterable[CrawlJob],
    timeout_minutes: int | None = None,
    now: datetime | None = None,
) -> list[CrawlJob]:
    """Return failed copies of crawling jobs that exceeded the timeout.

    Pending jobs have no started_at and are never considered stuck.
    """
    if timeout_minutes is None:
        timeout_minutes = get_settings().crawl_timeout_minutes
    now = now or utc_now()

    failed: list[CrawlJob] = []
    for job in jobs:
        if job.status != CrawlStatus.CRAWLING:
            continue
        if not job.is_expired(timeout_minutes, now):
            continue
        failed.append(job.fail(STUCK_CRAWL_MESSAGE, at=now))
        logger.warning(
            "Failing stuck crawl",
            extra={"crawl_id": job.crawl_id, "project_id": job.project_id},
        )
    return failed
