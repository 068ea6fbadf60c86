from pydantic import BaseModel

from models.schemas.application import ApplicationStatus
from models.schemas.match_result import RankedCompany


class CompanyMatch(RankedCompany):
    recommendations: list[str] = []
    application_status: ApplicationStatus | None = None
    can_apply: bool = True


class AnalysisResponse(BaseModel):
    field: str
    requested_field: str | None = None
    field_fallback: bool = False
    skills: list[str] = []
    skills_by_section: dict[str, list[str]] = {}
    matches: list[CompanyMatch] = []
    # Pooled across matches; per-company lists live on each match
    missing_skills: list[str] = []
    strength_areas: list[str] = []
    improvement_areas: list[str] = []
    score: int = 0
    student_id: str | None = None
    generation: int | None = None


class FieldInfo(BaseModel):
    name: str
    has_taxonomy: bool


class ApplicationResponse(BaseModel):
    student_id: str
    company_id: str
    status: ApplicationStatus | None = None
    can_apply: bool = True
