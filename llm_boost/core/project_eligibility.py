"""Project Eligibility — ownership, concurrent-crawl and credit checks for a project.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - At most one active crawl per project: active_crawl_id set <=> active job exists
    - can_start_crawl consults only active_crawl_id and credits; page limits are
      enforced at ingestion time through can_add_page
    - Project is frozen: with_active_crawl/clear_active_crawl return new values
"""

from dataclasses import dataclass, replace

from llm_boost.core.domain_types import CrawlId, PlanTier, ProjectId, UserId
from llm_boost.core import plan_entitlement
from llm_boost.core.tier_catalog import get_limits, parse_tier


@dataclass(frozen=True)
class CrawlConfig:
    """Per-crawl limits handed to the external crawler."""
    seed_urls: tuple[str, ...]
    max_pages: int
    max_depth: int


@dataclass(frozen=True)
class Project:
    project_id: ProjectId
    owner_id: UserId
    domain: str
    active_crawl_id: CrawlId | None = None
    max_pages: int | None = None
    max_depth: int | None = None

    @property
    def has_active_crawl(self) -> bool:
        return self.active_crawl_id is not None

    def is_owned_by(self, user_id: UserId) -> bool:
        return is_owned_by(self, user_id)

    def can_start_crawl(self, tier: PlanTier | str, credits_remaining: int) -> bool:
        return can_start_crawl(self, tier, credits_remaining)

    def with_active_crawl(self, crawl_id: CrawlId) -> "Project":
        return replace(self, active_crawl_id=crawl_id)

    def clear_active_crawl(self) -> "Project":
        return replace(self, active_crawl_id=None)


def is_owned_by(project: Project, user_id: UserId) -> bool:
    return project.owner_id == user_id


def can_start_crawl(
    project: Project, tier: PlanTier | str, credits_remaining: int,
) -> bool:
    """No concurrent crawl and at least one credit left."""
    parse_tier(tier)
    if project.has_active_crawl:
        return False
    return credits_remaining > 0


def can_add_page(current_page_count: int, tier: PlanTier | str) -> bool:
    return plan_entitlement.can_add_page(tier, current_page_count)


def build_crawl_config(project: Project, tier: PlanTier | str) -> CrawlConfig:
    """Project overrides clamped to the tier's page and depth limits."""
    limits = get_limits(tier)
    return CrawlConfig(
        seed_urls=(project.domain,),
        max_pages=_clamp(project.max_pages, limits.max_pages_per_crawl),
        max_depth=_clamp(project.max_depth, limits.max_crawl_depth),
    )


def _clamp(override: int | None, limit: int) -> int:
    # 0 and None both mean "use the plan limit"
    if not override:
        return limit
    return min(override, limit)
