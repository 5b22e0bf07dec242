"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ProjectId, CrawlId, PageId wrap str — never interchange them
    - PlanTier order is free < starter < pro < agency (see TIER_ORDER)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values are the exact strings stored in the database
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ProjectId = NewType("ProjectId", str)
CrawlId = NewType("CrawlId", str)
PageId = NewType("PageId", str)


# ─── Enums ───────────────────────────────────────────────────────

class PlanTier(str, Enum):
    """Subscription plan levels — maps to DB `plan` column."""
    FREE = "free"
    STARTER = "starter"
    PRO = "pro"
    AGENCY = "agency"


TIER_ORDER: tuple[PlanTier, ...] = (
    PlanTier.FREE,
    PlanTier.STARTER,
    PlanTier.PRO,
    PlanTier.AGENCY,
)


class CrawlStatus(str, Enum):
    """Crawl job lifecycle states — maps to DB `crawl_status` column."""
    PENDING = "pending"
    CRAWLING = "crawling"
    COMPLETE = "complete"
    FAILED = "failed"


class ReportType(str, Enum):
    SUMMARY = "summary"
    DETAILED = "detailed"


class Integration(str, Enum):
    """Third-party data sources a plan may connect."""
    GSC = "gsc"
    PSI = "psi"
    GA4 = "ga4"
    CLARITY = "clarity"


class LetterGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
