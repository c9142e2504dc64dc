# visadesk/engine/results.py
"""
Result contracts for the evaluation core.

These models are the boundary consumed by the HTTP layer and the
rendering/PDF layer. They are built once per call and never mutated;
JSON output uses camelCase keys (`totalScore`, `isPassing`, ...).
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Difficulty = Literal["easy", "moderate", "hard"]
InterviewLikelihood = Literal["low", "medium", "high"]

DIFFICULTY_ORDER = {"easy": 0, "moderate": 1, "hard": 2}


class Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# TRACE ITEMS
# =============================================================================

class ScoringCriterion(Record):
    """One scored dimension of a point-based scheme."""
    key: str
    category: str
    item: str
    score: int = Field(ge=0)
    max_score: int = Field(ge=0)
    note: Optional[str] = None

    @model_validator(mode="after")
    def _score_within_max(self):
        if self.score > self.max_score:
            raise ValueError(
                f"{self.key}: score {self.score} exceeds max {self.max_score}"
            )
        return self


class RequirementCheck(Record):
    """One named requirement of a checklist scheme."""
    key: str
    item: str
    met: bool
    critical: bool = False
    note: Optional[str] = None


# =============================================================================
# PATHWAYS & PROCESSING
# =============================================================================

class PathwayEdge(Record):
    from_scheme: str = Field(alias="from")
    to_scheme: str = Field(alias="to")
    requirements: List[str] = Field(default_factory=list)
    estimated_years: float = Field(ge=0.0)
    difficulty: Difficulty


class Route(Record):
    from_scheme: str = Field(alias="from")
    to_scheme: str = Field(alias="to")
    edges: List[PathwayEdge]
    total_years: float
    difficulty: Difficulty

    @property
    def hops(self) -> int:
        return len(self.edges)


class ProcessingEstimate(Record):
    standard_days: int
    fast_track_days: Optional[int] = None
    interview_likelihood: InterviewLikelihood
    note: Optional[str] = None


# =============================================================================
# RESULTS
# =============================================================================

class ScoreResult(Record):
    scheme_id: str
    policy_year: int
    total_score: int
    passing_score: int
    max_score: int
    is_passing: bool
    breakdown: List[ScoringCriterion]
    recommendation: str
    warnings: List[str] = Field(default_factory=list)
    required_documents: List[str] = Field(default_factory=list)
    pathways: List[Route] = Field(default_factory=list)
    processing: ProcessingEstimate
    improvement_tips: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _totals_consistent(self):
        if self.total_score != sum(c.score for c in self.breakdown):
            raise ValueError("total_score must equal the sum of breakdown scores")
        if self.is_passing != (self.total_score >= self.passing_score):
            raise ValueError("is_passing must reflect total_score >= passing_score")
        return self


class EligibilityResult(Record):
    scheme_id: str
    sub_type: Optional[str] = None
    policy_year: int
    eligible: bool
    eligibility_score: int = Field(ge=0, le=100)
    requirements: List[RequirementCheck]
    recommendation: str
    warnings: List[str] = Field(default_factory=list)
    required_documents: List[str] = Field(default_factory=list)
    pathways: List[Route] = Field(default_factory=list)
    processing: ProcessingEstimate
