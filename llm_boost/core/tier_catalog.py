"""Tier Catalog — static table of plan tiers and their numeric limits.

Invariants:
    - Exactly one PlanLimits row per PlanTier
    - Every limit is non-decreasing as tier rank increases
    - free and agency rows are fixed product contracts; starter/pro are product choices
    - Unknown tier strings raise UnknownTierError, never fall back to free

Design Decisions:
    - Frozen dataclass rows: the catalog is shared by every caller and must not be mutated
    - UNLIMITED is math.inf so `used < limit` comparisons need no special case
"""

import math
from dataclasses import dataclass

from llm_boost.core.domain_types import (
    PlanTier, TIER_ORDER, ReportType, Integration,
)
from llm_boost.core.errors import UnknownTierError


UNLIMITED: float = math.inf


@dataclass(frozen=True)
class PlanLimits:
    """Quantitative limits for one tier."""
    max_projects: int
    max_pages_per_crawl: int
    max_visibility_checks_per_period: int
    max_reports_per_month: int | float
    allowed_report_types: frozenset[ReportType]
    max_crawl_depth: int
    crawls_per_month: int | float
    allowed_integrations: frozenset[Integration]
    api_access: bool
    history_days: int


PLAN_LIMITS: dict[PlanTier, PlanLimits] = {
    PlanTier.FREE: PlanLimits(
        max_projects=1,
        max_pages_per_crawl=10,
        max_visibility_checks_per_period=3,
        max_reports_per_month=1,
        allowed_report_types=frozenset({ReportType.SUMMARY}),
        max_crawl_depth=2,
        crawls_per_month=2,
        allowed_integrations=frozenset(),
        api_access=False,
        history_days=30,
    ),
    PlanTier.STARTER: PlanLimits(
        max_projects=5,
        max_pages_per_crawl=100,
        max_visibility_checks_per_period=25,
        max_reports_per_month=5,
        allowed_report_types=frozenset({ReportType.SUMMARY, ReportType.DETAILED}),
        max_crawl_depth=3,
        crawls_per_month=10,
        allowed_integrations=frozenset(),
        api_access=False,
        history_days=90,
    ),
    PlanTier.PRO: PlanLimits(
        max_projects=20,
        max_pages_per_crawl=500,
        max_visibility_checks_per_period=100,
        max_reports_per_month=20,
        allowed_report_types=frozenset({ReportType.SUMMARY, ReportType.DETAILED}),
        max_crawl_depth=5,
        crawls_per_month=30,
        allowed_integrations=frozenset({Integration.GSC, Integration.PSI}),
        api_access=True,
        history_days=365,
    ),
    PlanTier.AGENCY: PlanLimits(
        max_projects=50,
        max_pages_per_crawl=2000,
        max_visibility_checks_per_period=500,
        max_reports_per_month=UNLIMITED,
        allowed_report_types=frozenset({ReportType.SUMMARY, ReportType.DETAILED}),
        max_crawl_depth=10,
        crawls_per_month=UNLIMITED,
        allowed_integrations=frozenset(Integration),
        api_access=True,
        history_days=730,
    ),
}


def parse_tier(tier: PlanTier | str) -> PlanTier:
    """Normalize a tier string to PlanTier. Raises UnknownTierError."""
    if isinstance(tier, PlanTier):
        return tier
    try:
        return PlanTier(tier)
    except ValueError:
        raise UnknownTierError(tier) from None


def get_limits(tier: PlanTier | str) -> PlanLimits:
    return PLAN_LIMITS[parse_tier(tier)]


def tier_rank(tier: PlanTier | str) -> int:
    """Position in the total order free=0 < starter < pro < agency=3."""
    return TIER_ORDER.index(parse_tier(tier))
