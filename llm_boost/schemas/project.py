"""Project Schemas — project rows and their crawl settings."""

from pydantic import BaseModel, Field

from llm_boost.core.domain_types import CrawlId, ProjectId, UserId
from llm_boost.core.project_eligibility import Project


class ProjectSettings(BaseModel):
    """Optional per-project crawl overrides, clamped to the plan later."""
    max_pages: int | None = Field(None, ge=1)
    max_depth: int | None = Field(None, ge=1)


class ProjectRecord(BaseModel):
    id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    domain: str = Field(min_length=1, max_length=2048)
    active_crawl_id: str | None = None
    settings: ProjectSettings = Field(default_factory=ProjectSettings)

    def to_domain(self) -> Project:
        return Project(
            project_id=ProjectId(self.id),
            owner_id=UserId(self.user_id),
            domain=self.domain.strip(),
            active_crawl_id=CrawlId(self.active_crawl_id) if self.active_crawl_id else None,
            max_pages=self.settings.max_pages,
            max_depth=self.settings.max_depth,
        )
