"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_analysis_state, get_application_registry
from api.router import limiter
from main import app
from models.schemas.job_requirement import JobRequirement
from services.analysis_state import AnalysisState
from services.application_service import ApplicationRegistry
from services.company_catalog import COMPANY_DATABASE, build_catalog
from services.skill_taxonomy import SKILLS_DATABASE, SkillTaxonomy

SAMPLE_RESUME = """Jane Student
jane.student@example.edu | (555) 010-2030

Skills
JavaScript, React, TypeScript, HTML, CSS, Jest

Experience
Built dashboards with React and Redux using Node.js and Express with SQL databases

Education
B.S. Computer Science | State University | 2024
"""


@pytest.fixture
def taxonomy():
    return SkillTaxonomy(SKILLS_DATABASE)


@pytest.fixture
def web_taxonomy():
    """Single-field taxonomy used by the concrete extraction scenario."""
    return SkillTaxonomy({"Web": {"core": {"React": ["react", "reactjs"]}}}, default_field="Web")


@pytest.fixture
def catalog():
    return build_catalog(COMPANY_DATABASE)


@pytest.fixture
def make_job():
    def _make(company_id: str, requirements: dict[str, float], fields=("Web",)) -> JobRequirement:
        return JobRequirement(
            company_id=company_id,
            company_name=company_id.title(),
            career_fields=list(fields),
            requirements=requirements,
        )
    return _make


@pytest.fixture
def client():
    """TestClient with fresh per-test state and rate limiting off."""
    state = AnalysisState()
    registry = ApplicationRegistry()
    app.dependency_overrides[get_analysis_state] = lambda: state
    app.dependency_overrides[get_application_registry] = lambda: registry
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        limiter.enabled = True
        app.dependency_overrides.clear()


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME
