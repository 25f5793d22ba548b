"""Content category enum and LLM classification result model."""

from enum import Enum

from pydantic import BaseModel, field_validator


class ContentCategory(str, Enum):
    """Fixed categories for classified content (6 values)."""

    PRINCIPLE = "원리소개"  # Principle/concept explanation
    REVIEW = "사용기"  # Usage review/experience
    OPINION = "생각정리"  # Opinion/essay
    TECH_INTRO = "기술소개"  # Technology introduction
    TUTORIAL = "튜토리얼"  # Step-by-step guide
    NEWS = "뉴스/분석"  # News/analysis


class ClassificationResult(BaseModel):
    """Primary category with confidence, plus an optional runner-up."""

    primary: ContentCategory
    confidence: float = 0.0
    secondary: ContentCategory | None = None
    secondary_confidence: float | None = None

    @field_validator("secondary", mode="before")
    @classmethod
    def _drop_unknown_secondary(cls, value: object) -> object:
        """The runner-up is advisory: blank or unrecognized values become None."""
        if isinstance(value, str) and value in {c.value for c in ContentCategory}:
            return value
        return None
