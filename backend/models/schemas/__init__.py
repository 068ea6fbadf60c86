"""Pydantic contracts shared by the matching services."""

from models.schemas.job_requirement import JobRequirement
from models.schemas.match_result import MatchResult, RankedCompany, SkillMatchScore
from models.schemas.resume_text import SECTION_NAMES, ResumeText

__all__ = [
    "JobRequirement",
    "MatchResult",
    "RankedCompany",
    "SkillMatchScore",
    "ResumeText",
    "SECTION_NAMES",
]
