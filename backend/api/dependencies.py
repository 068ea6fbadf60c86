"""Shared dependencies for API routes."""

from functools import lru_cache

from models.responses import AnalysisResponse
from services.analysis_state import AnalysisState
from services.application_service import ApplicationRegistry
from services.company_catalog import CompanyCatalog, get_catalog
from services.skill_taxonomy import SkillTaxonomy, get_taxonomy


def get_skill_taxonomy() -> SkillTaxonomy:
    return get_taxonomy()


def get_company_catalog() -> CompanyCatalog:
    return get_catalog()


@lru_cache()
def get_analysis_state() -> AnalysisState[AnalysisResponse]:
    return AnalysisState()


@lru_cache()
def get_application_registry() -> ApplicationRegistry:
    return ApplicationRegistry()
