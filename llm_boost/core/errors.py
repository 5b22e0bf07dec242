"""Error Hierarchy — typed, categorized exceptions raised by the domain core.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Core errors carry no HTTP status — the API shell maps category to status
    - to_response() produces the REST envelope used by the error handlers
    - Only two domain errors exist: UnknownTierError, InvalidTransitionError

Design Decisions:
    - Single hierarchy with LlmBoostError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from llm_boost.core.domain_types import CrawlStatus


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    project_id: str | None = None
    crawl_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class LlmBoostError(Exception):
    """Base exception for all domain errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "project_id": self.context.project_id,
                    "crawl_id": self.context.crawl_id,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class UnknownTierError(LlmBoostError):
    """Tier string is not in the plan catalog — data-integrity fault."""
    def __init__(self, tier: object, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown plan tier: {tier!r}",
            "UNKNOWN_TIER", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )
        self.tier = tier


class InvalidTransitionError(LlmBoostError):
    """Requested crawl status change is not a declared edge."""
    def __init__(
        self,
        current: CrawlStatus | str,
        requested: CrawlStatus | str,
        context: ErrorContext | None = None,
    ):
        current = getattr(current, "value", current)
        requested = getattr(requested, "value", requested)
        super().__init__(
            f"Cannot transition crawl from '{current}' to '{requested}'",
            "INVALID_TRANSITION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )
        self.current = current
        self.requested = requested
