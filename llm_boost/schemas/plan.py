"""Plan Schemas — subscription state and usage counters at the API boundary.

Invariants:
    - tier is normalized (stripped, lowercased) before enum validation
    - Usage counters are non-negative
    - EntitlementSnapshot is derived only through core.plan_entitlement
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from llm_boost.config import get_settings
from llm_boost.core.clock import as_utc
from llm_boost.core.domain_types import PlanTier, ReportType
from llm_boost.core import plan_entitlement


class PlanContext(BaseModel):
    """A user's stored plan as loaded from billing state."""
    tier: PlanTier
    trial_ends_at: datetime | None = None

    @field_validator("tier", mode="before")
    @classmethod
    def normalize_tier(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("trial_ends_at")
    @classmethod
    def naive_trial_end_is_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v) if v is not None else None

    def effective_tier(
        self, now: datetime | None = None, trial_tier: PlanTier | None = None,
    ) -> PlanTier:
        """Tier to enforce, honoring an unexpired trial (Settings.trial_tier)."""
        return plan_entitlement.resolve_effective_plan(
            self.tier,
            self.trial_ends_at,
            now,
            trial_tier or get_settings().trial_tier,
        )


class UsageCounters(BaseModel):
    """Counters maintained by the persistence layer."""
    project_count: int = Field(0, ge=0)
    page_count: int = Field(0, ge=0)
    visibility_checks_used: int = Field(0, ge=0)
    reports_used_this_month: int = Field(0, ge=0)


class EntitlementSnapshot(BaseModel):
    """Boolean affordances the dashboard renders without further logic."""
    tier: PlanTier
    max_projects: int
    max_pages_per_crawl: int
    can_create_project: bool
    can_add_page: bool
    can_run_visibility_check: bool
    can_generate_summary_report: bool
    can_generate_detailed_report: bool

    @classmethod
    def build(cls, tier: PlanTier, usage: UsageCounters) -> "EntitlementSnapshot":
        plan = plan_entitlement.Plan.from_tier(tier)
        return cls(
            tier=plan.tier,
            max_projects=plan.max_projects,
            max_pages_per_crawl=plan.max_pages_per_crawl,
            can_create_project=plan.can_create_project(usage.project_count),
            can_add_page=plan.can_add_page(usage.page_count),
            can_run_visibility_check=plan.can_run_visibility_checks(
                1, usage.visibility_checks_used,
            ),
            can_generate_summary_report=plan.can_generate_report(
                usage.reports_used_this_month, ReportType.SUMMARY,
            ),
            can_generate_detailed_report=plan.can_generate_report(
                usage.reports_used_this_month, ReportType.DETAILED,
            ),
        )
