"""Orchestrator: resume text -> detected skills -> ranked companies.

Pipeline:
1. Resolve the career field (unknown fields fall back to the default)
2. Skill extraction over the full text, plus related fields
3. Per-section extraction (display only)
4. Field pre-filter of the company catalog
5. Weighted scoring, threshold filter, stable ranking
6. Display aggregates: overall score, pooled missing skills, hints

Every call builds a fresh response; nothing is accumulated across calls.
"""

import logging

from config import settings
from models.responses import AnalysisResponse, CompanyMatch
from models.schemas.resume_text import ResumeText
from services import ranking
from services.company_catalog import CompanyCatalog, get_catalog
from services.errors import InputError
from services.ranking import RankingConfig
from services.skill_extractor import MatchMode, extract_skills, extract_skills_by_section
from services.skill_taxonomy import SkillTaxonomy, get_taxonomy

logger = logging.getLogger(__name__)

NO_RESUME_TEXT_MESSAGE = "No resume text provided"


def default_ranking_config() -> RankingConfig:
    return RankingConfig(min_score=settings.match_threshold)


def analyze(
    resume: ResumeText,
    field_name: str | None,
    *,
    taxonomy: SkillTaxonomy | None = None,
    catalog: CompanyCatalog | None = None,
    config: RankingConfig | None = None,
    mode: MatchMode | None = None,
    cross_field: bool | None = None,
) -> AnalysisResponse:
    """Run the matching pipeline for one resume and career field."""
    if not resume.full_text or not resume.full_text.strip():
        raise InputError(NO_RESUME_TEXT_MESSAGE)

    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    catalog = catalog if catalog is not None else get_catalog()
    config = config if config is not None else default_ranking_config()
    cross_field = settings.cross_field_matching if cross_field is None else cross_field

    # --- Field resolution ---
    effective_field, fell_back = taxonomy.resolve_field(field_name)
    related = catalog.related_fields(effective_field) if cross_field else []

    # --- Skill extraction ---
    detected = extract_skills(
        resume.full_text, effective_field,
        taxonomy=taxonomy, related_fields=related, mode=mode,
    )
    by_section = extract_skills_by_section(
        resume.sections, effective_field,
        taxonomy=taxonomy, related_fields=related, mode=mode,
    )

    # --- Ranking (field pre-filter uses the field the student asked for) ---
    candidate_jobs = catalog.jobs_for_field(field_name or effective_field)
    ranked = ranking.rank_companies(candidate_jobs, detected, config)

    matches = [
        CompanyMatch(**company.model_dump(), recommendations=ranking.recommendations(company))
        for company in ranked
    ]

    logger.info(
        "Analysis for field %s: %d skills detected, %d/%d companies above %d",
        effective_field, len(detected), len(ranked), len(candidate_jobs), config.min_score,
    )

    return AnalysisResponse(
        field=effective_field,
        requested_field=field_name,
        field_fallback=fell_back,
        skills=list(detected),
        skills_by_section=by_section,
        matches=matches,
        missing_skills=ranking.pooled_missing_skills(ranked),
        strength_areas=ranking.strength_areas(detected),
        improvement_areas=ranking.improvement_areas(ranked),
        score=ranking.overall_score(ranked),
    )
