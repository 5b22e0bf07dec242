"""Score Aggregator — derives a displayable summary from per-page score rows.

Invariants:
    - Grade bands are inclusive on their lower bound: 90 A, 80 B, 70 C, 60 D, else F
    - average_scores drops None, rounds half up, and returns 0 for no data
    - Each category is averaged independently: a missing value excludes a row
      from that category only
    - performanceScore comes from the opaque detail map; non-numeric values are ignored
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from llm_boost.core.domain_types import LetterGrade


GRADE_BANDS: tuple[tuple[int, LetterGrade], ...] = (
    (90, LetterGrade.A),
    (80, LetterGrade.B),
    (70, LetterGrade.C),
    (60, LetterGrade.D),
)


@dataclass(frozen=True)
class PageScoreRow:
    overall_score: float | None = None
    technical_score: float | None = None
    content_score: float | None = None
    ai_readiness_score: float | None = None
    detail: Mapping[str, Any] | None = field(default=None, compare=False)


@dataclass(frozen=True)
class CategoryScores:
    technical: int
    content: int
    ai_readiness: int
    performance: int


@dataclass(frozen=True)
class ScoreSummary:
    overall_score: int
    letter_grade: LetterGrade
    scores: CategoryScores


def letter_grade(score: float) -> LetterGrade:
    for floor, grade in GRADE_BANDS:
        if score >= floor:
            return grade
    return LetterGrade.F


def average_scores(values: Iterable[float | None]) -> int:
    """Mean of the present values, rounded half up. 0 when nothing is present."""
    present = [v for v in values if v is not None]
    if not present:
        return 0
    return math.floor(sum(present) / len(present) + 0.5)


def aggregate_page_scores(rows: Iterable[PageScoreRow | Mapping[str, Any]]) -> ScoreSummary:
    normalized = [_as_row(r) for r in rows]
    overall = average_scores(r.overall_score for r in normalized)
    return ScoreSummary(
        overall_score=overall,
        letter_grade=letter_grade(overall),
        scores=CategoryScores(
            technical=average_scores(r.technical_score for r in normalized),
            content=average_scores(r.content_score for r in normalized),
            ai_readiness=average_scores(r.ai_readiness_score for r in normalized),
            performance=average_scores(
                extract_performance_score(r.detail) for r in normalized
            ),
        ),
    )


def extract_performance_score(detail: Mapping[str, Any] | None) -> float | None:
    if not isinstance(detail, Mapping):
        return None
    value = detail.get("performanceScore")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


# --- Helpers ------------------------------------------------------------------

_ROW_KEYS: dict[str, tuple[str, str]] = {
    "overall_score": ("overall_score", "overallScore"),
    "technical_score": ("technical_score", "technicalScore"),
    "content_score": ("content_score", "contentScore"),
    "ai_readiness_score": ("ai_readiness_score", "aiReadinessScore"),
    "detail": ("detail", "detail"),
}


def _as_row(row: PageScoreRow | Mapping[str, Any]) -> PageScoreRow:
    """Accept storage rows as mappings in either snake_case or camelCase."""
    if isinstance(row, PageScoreRow):
        return row
    fields = {}
    for name, (snake, camel) in _ROW_KEYS.items():
        fields[name] = row.get(snake, row.get(camel))
    return PageScoreRow(**fields)
