"""Score Schemas — page score rows from the scoring pipeline and the summary response.

Invariants:
    - Category scores are None or within 0–100
    - Rows accept camelCase (pipeline output) or snake_case field names
    - detail is opaque: no validation beyond "mapping or None"
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from llm_boost.core.domain_types import LetterGrade
from llm_boost.core.score_aggregator import PageScoreRow, ScoreSummary


class PageScoreRowIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    overall_score: float | None = Field(None, ge=0, le=100)
    technical_score: float | None = Field(None, ge=0, le=100)
    content_score: float | None = Field(None, ge=0, le=100)
    ai_readiness_score: float | None = Field(None, ge=0, le=100)
    detail: dict[str, Any] | None = None

    def to_domain(self) -> PageScoreRow:
        return PageScoreRow(
            overall_score=self.overall_score,
            technical_score=self.technical_score,
            content_score=self.content_score,
            ai_readiness_score=self.ai_readiness_score,
            detail=self.detail,
        )


class CategoryScoresResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    technical: int
    content: int
    ai_readiness: int
    performance: int


class ScoreSummaryResponse(BaseModel):
    """Serialized with camelCase keys for the dashboard."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    overall_score: int
    letter_grade: LetterGrade
    scores: CategoryScoresResponse

    @classmethod
    def from_summary(cls, summary: ScoreSummary) -> "ScoreSummaryResponse":
        return cls(
            overall_score=summary.overall_score,
            letter_grade=summary.letter_grade,
            scores=CategoryScoresResponse(
                technical=summary.scores.technical,
                content=summary.scores.content,
                ai_readiness=summary.scores.ai_readiness,
                performance=summary.scores.performance,
            ),
        )
