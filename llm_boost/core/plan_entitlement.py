"""Plan Entitlement — boolean decisions over (tier, usage) pairs.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every predicate is total: returns bool, raises only UnknownTierError
    - Usage counters are trusted as already validated (non-negative ints)
    - Plan is a thin facade bound to one tier; it adds no rules of its own

Design Decisions:
    - Module-level functions are the contract; Plan exists so handlers can
      resolve the tier once per request and branch on booleans afterwards
"""

from dataclasses import dataclass
from datetime import datetime

from llm_boost.core.clock import as_utc, utc_now
from llm_boost.core.domain_types import (
    PlanTier, ReportType, Integration,
)
from llm_boost.core.tier_catalog import (
    PlanLimits, get_limits, parse_tier, tier_rank,
)


TRIAL_TIER: PlanTier = PlanTier.PRO


# --- Limit lookups ------------------------------------------------------------

def max_projects(tier: PlanTier | str) -> int:
    return get_limits(tier).max_projects


def max_pages_per_crawl(tier: PlanTier | str) -> int:
    return get_limits(tier).max_pages_per_crawl


def monthly_crawl_credits(tier: PlanTier | str) -> int | float:
    """Crawl credits granted on each monthly reset."""
    return get_limits(tier).crawls_per_month


# --- Entitlement predicates ---------------------------------------------------

def can_create_project(tier: PlanTier | str, current_project_count: int) -> bool:
    return current_project_count < get_limits(tier).max_projects


def can_run_visibility_checks(
    tier: PlanTier | str, requested: int, used_this_period: int,
) -> bool:
    """The whole batch must fit in what is left of the period allowance."""
    limit = get_limits(tier).max_visibility_checks_per_period
    return requested + used_this_period <= limit


def can_generate_report(
    tier: PlanTier | str, used_this_month: int, report_type: ReportType | str,
) -> bool:
    limits = get_limits(tier)
    if not _is_allowed_report_type(limits, report_type):
        return False
    return used_this_month < limits.max_reports_per_month


def can_add_page(tier: PlanTier | str, current_page_count: int) -> bool:
    return current_page_count < get_limits(tier).max_pages_per_crawl


def can_access_integration(
    tier: PlanTier | str, integration: Integration | str,
) -> bool:
    allowed = get_limits(tier).allowed_integrations
    return any(i.value == _value(integration) for i in allowed)


def meets_minimum_tier(tier: PlanTier | str, required: PlanTier | str) -> bool:
    return tier_rank(tier) >= tier_rank(required)


def resolve_effective_plan(
    tier: PlanTier | str,
    trial_ends_at: datetime | None,
    now: datetime | None = None,
    trial_tier: PlanTier | str = TRIAL_TIER,
) -> PlanTier:
    """Users on an unexpired trial get trial_tier; otherwise their stored tier."""
    stored = parse_tier(tier)
    if trial_ends_at is None:
        return stored
    now = as_utc(now or utc_now())
    if as_utc(trial_ends_at) > now:
        return parse_tier(trial_tier)
    return stored


# --- Helpers ------------------------------------------------------------------

def _value(member: object) -> object:
    return getattr(member, "value", member)


def _is_allowed_report_type(limits: PlanLimits, report_type: ReportType | str) -> bool:
    return any(t.value == _value(report_type) for t in limits.allowed_report_types)


# --- Facade -------------------------------------------------------------------

@dataclass(frozen=True)
class Plan:
    """Entitlement view bound to a single resolved tier."""
    tier: PlanTier

    @classmethod
    def from_tier(cls, tier: PlanTier | str) -> "Plan":
        return cls(parse_tier(tier))

    @property
    def limits(self) -> PlanLimits:
        return get_limits(self.tier)

    @property
    def max_projects(self) -> int:
        return self.limits.max_projects

    @property
    def max_pages_per_crawl(self) -> int:
        return self.limits.max_pages_per_crawl

    def can_create_project(self, current_project_count: int) -> bool:
        return can_create_project(self.tier, current_project_count)

    def can_run_visibility_checks(self, requested: int, used_this_period: int) -> bool:
        return can_run_visibility_checks(self.tier, requested, used_this_period)

    def can_generate_report(
        self, used_this_month: int, report_type: ReportType | str,
    ) -> bool:
        return can_generate_report(self.tier, used_this_month, report_type)

    def can_add_page(self, current_page_count: int) -> bool:
        return can_add_page(self.tier, current_page_count)

    def can_access_integration(self, integration: Integration | str) -> bool:
        return can_access_integration(self.tier, integration)

    def meets_minimum_tier(self, required: PlanTier | str) -> bool:
        return meets_minimum_tier(self.tier, required)
