"""Scoring outputs: per-job skill match and ranked company entries."""

from pydantic import BaseModel

from models.schemas.job_requirement import JobRequirement


class SkillMatchScore(BaseModel):
    """Weighted fraction of a job's requirements covered by a skill set."""
    score: int = 0  # 0-100
    matched: list[str] = []
    missing: list[str] = []


class MatchResult(SkillMatchScore):
    """A SkillMatchScore tied to the company it was computed for."""
    company_id: str


class RankedCompany(JobRequirement):
    """A job posting annotated with its match against one resume."""
    score: int = 0
    matched_skills: list[str] = []
    missing_skills: list[str] = []

    def to_match_result(self) -> MatchResult:
        return MatchResult(
            company_id=self.company_id,
            score=self.score,
            matched=list(self.matched_skills),
            missing=list(self.missing_skills),
        )
