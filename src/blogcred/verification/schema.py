# src/blogcred/verification/schema.py
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class Recommendation(str, Enum):
    APPROVE = "approve"
    REVIEW = "review"
    REJECT = "reject"


class SourceType(str, Enum):
    ACADEMIC = "academic"
    GOVERNMENT = "government"
    NEWS = "news"
    TECH = "tech"
    UNKNOWN = "unknown"


class VerifiedSource(BaseModel):
    url: str = Field(..., description="Source string exactly as submitted")
    domain: str = Field(..., description="Lowercase host without leading www.")
    credibility_score: int = Field(ge=0, le=100, description="Trust score (0-100)")
    type: SourceType = Field(SourceType.UNKNOWN, description="Source category")

    @field_validator("domain")
    @classmethod
    def normalize_domain(cls, v: str) -> str:
        return v.strip().lower()

    class Config:
        frozen = True


class SubScores(BaseModel):
    """Per-analyzer scores before weighting."""

    language: float = Field(ge=0, le=100)
    sources: float = Field(ge=0, le=100)
    keywords: float = Field(ge=0, le=100)
    structure: float = Field(ge=0, le=100)
    category: float = Field(ge=0, le=100)

    class Config:
        frozen = True


class VerificationResult(BaseModel):
    is_verified: bool = False
    score: int = Field(ge=0, le=100, description="Aggregate credibility (0-100)")
    warnings: Tuple[str, ...] = ()
    sources: Tuple[VerifiedSource, ...] = ()
    recommendation: Recommendation = Recommendation.REVIEW
    sub_scores: Optional[SubScores] = Field(
        None, description="Analyzer scores; None when verification fell back to review"
    )

    class Config:
        frozen = True
