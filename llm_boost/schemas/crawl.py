"""Crawl Schemas — storage rows and status-update payloads for crawl jobs.

Invariants:
    - status strings are validated against CrawlStatus before reaching the core
    - CrawlStatusUpdate.error_message is only accepted with status "failed"
    - Validation errors here are shape errors, never InvalidTransitionError
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from llm_boost.core.clock import as_utc
from llm_boost.core.domain_types import CrawlId, CrawlStatus, ProjectId
from llm_boost.core.crawl_workflow import CrawlJob


class CrawlJobRecord(BaseModel):
    """Crawl job row as loaded from storage."""
    id: str = Field(min_length=1)
    project_id: str = Field(min_length=1)
    status: CrawlStatus
    started_at: datetime | None = None
    completed_at: datetime | None = None
    error_message: str | None = None

    @field_validator("started_at", "completed_at")
    @classmethod
    def naive_timestamps_are_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v) if v is not None else None

    def to_domain(self) -> CrawlJob:
        return CrawlJob(
            crawl_id=CrawlId(self.id),
            project_id=ProjectId(self.project_id),
            status=self.status,
            started_at=self.started_at,
            completed_at=self.completed_at,
            error_message=self.error_message,
        )

    @classmethod
    def from_domain(cls, job: CrawlJob) -> "CrawlJobRecord":
        return cls(
            id=job.crawl_id,
            project_id=job.project_id,
            status=job.status,
            started_at=job.started_at,
            completed_at=job.completed_at,
            error_message=job.error_message,
        )


class CrawlStatusUpdate(BaseModel):
    """Requested status change, e.g. from the crawler callback or an admin."""
    status: CrawlStatus
    error_message: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def error_message_only_when_failed(self) -> "CrawlStatusUpdate":
        if self.error_message is not None and self.status != CrawlStatus.FAILED:
            raise ValueError("error_message is only allowed when status is 'failed'")
        return self
