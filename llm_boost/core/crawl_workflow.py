"""Crawl Workflow — finite state machine for crawl-job status.

Invariants:
    - ALLOWED_TRANSITIONS is the single source of truth for legal edges
    - No self-loops, not even between active states (crawling -> crawling fails)
    - Terminal states (complete, failed) have no outgoing edges
    - CrawlJob is frozen: every transition returns a NEW value, caller persists it
    - is_expired is a pure predicate with a strict comparison (elapsed > timeout)
    - Naive timestamps are read as UTC; a stored status string is coerced to CrawlStatus

Design Decisions:
    - Illegal transitions raise InvalidTransitionError instead of returning an
      error dict: there is no meaningful fallback state for the caller
    - `now` is an optional argument wherever time is read
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from llm_boost.core.clock import as_utc, utc_now
from llm_boost.core.domain_types import CrawlId, CrawlStatus, ProjectId
from llm_boost.core.errors import InvalidTransitionError


INITIAL_STATUS: CrawlStatus = CrawlStatus.PENDING

ACTIVE_STATUSES: frozenset[CrawlStatus] = frozenset({
    CrawlStatus.PENDING,
    CrawlStatus.CRAWLING,
})

TERMINAL_STATUSES: frozenset[CrawlStatus] = frozenset({
    CrawlStatus.COMPLETE,
    CrawlStatus.FAILED,
})

ALLOWED_TRANSITIONS: dict[CrawlStatus, frozenset[CrawlStatus]] = {
    CrawlStatus.PENDING: frozenset({CrawlStatus.CRAWLING}),
    CrawlStatus.CRAWLING: frozenset({CrawlStatus.COMPLETE, CrawlStatus.FAILED}),
    CrawlStatus.COMPLETE: frozenset(),
    CrawlStatus.FAILED: frozenset(),
}


def is_active(status: CrawlStatus) -> bool:
    return status in ACTIVE_STATUSES


def is_terminal(status: CrawlStatus) -> bool:
    return status in TERMINAL_STATUSES


def can_transition(current: CrawlStatus, requested: CrawlStatus) -> bool:
    return requested in ALLOWED_TRANSITIONS.get(current, frozenset())


def transition(current: CrawlStatus, requested: CrawlStatus) -> CrawlStatus:
    """Return `requested` if current -> requested is a declared edge."""
    if not can_transition(current, requested):
        raise InvalidTransitionError(current, requested)
    return requested


def is_expired(
    started_at: datetime | None,
    timeout_minutes: int,
    now: datetime | None = None,
) -> bool:
    """True iff more than timeout_minutes have elapsed since started_at."""
    if started_at is None:
        return False
    now = as_utc(now or utc_now())
    return now - as_utc(started_at) > timedelta(minutes=timeout_minutes)


# --- Aggregate ----------------------------------------------------------------

@dataclass(frozen=True)
class CrawlJob:
    """Request-scoped crawl job value, rebuilt from storage on each request."""
    crawl_id: CrawlId
    project_id: ProjectId
    status: CrawlStatus = INITIAL_STATUS
    started_at: datetime | None = None
    completed_at: datetime | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        # callers may pass the stored status string
        object.__setattr__(self, "status", CrawlStatus(self.status))

    @property
    def is_active(self) -> bool:
        return is_active(self.status)

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.status)

    def can_ingest(self) -> bool:
        """Result batches are accepted only while the job is active."""
        return self.is_active

    def is_expired(self, timeout_minutes: int, now: datetime | None = None) -> bool:
        return is_expired(self.started_at, timeout_minutes, now)

    def transition(
        self, requested: CrawlStatus, at: datetime | None = None,
    ) -> "CrawlJob":
        """Move to `requested`, stamping started_at/completed_at as needed."""
        status = transition(self.status, CrawlStatus(requested))
        at = at or utc_now()
        changes: dict = {"status": status}
        if status == CrawlStatus.CRAWLING and self.started_at is None:
            changes["started_at"] = at
        if is_terminal(status):
            changes["completed_at"] = at
        return replace(self, **changes)

    def start(self, at: datetime | None = None) -> "CrawlJob":
        return self.transition(CrawlStatus.CRAWLING, at)

    def complete(self, at: datetime | None = None) -> "CrawlJob":
        return self.transition(CrawlStatus.COMPLETE, at)

    def fail(self, message: str, at: datetime | None = None) -> "CrawlJob":
        return replace(self.transition(CrawlStatus.FAILED, at), error_message=message)

    def record_batch(self, is_final: bool, at: datetime | None = None) -> "CrawlJob":
        """Apply one ingested result batch.

        A pending job is promoted to crawling first. A final batch completes
        the job; a non-final batch leaves a crawling job unchanged. Terminal
        jobs raise InvalidTransitionError.
        """
        job = self
        if job.status == CrawlStatus.PENDING:
            job = job.start(at)
        if is_final:
            return job.complete(at)
        if not job.can_ingest():
            raise InvalidTransitionError(job.status, CrawlStatus.CRAWLING)
        return job
