import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import (
    get_analysis_state,
    get_application_registry,
    get_company_catalog,
    get_skill_taxonomy,
)
from config import settings
from models.requests import ApplyRequest, ReviewRequest, TextAnalyzeRequest
from models.responses import AnalysisResponse, ApplicationResponse, FieldInfo
from models.schemas.job_requirement import JobRequirement
from models.schemas.resume_text import ResumeText
from services import pdf_parser, resume_analyzer
from services.analysis_state import AnalysisState
from services.application_service import ApplicationRegistry, can_apply
from services.company_catalog import CompanyCatalog
from services.errors import AnalysisError, ApplicationError, ExtractionFailure
from services.section_parser import parse_sections
from services.skill_taxonomy import AVAILABLE_FIELDS, SkillTaxonomy

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _with_student(
    result: AnalysisResponse,
    student_id: str | None,
    generation: int | None,
    state: AnalysisState[AnalysisResponse],
    registry: ApplicationRegistry,
) -> AnalysisResponse:
    """Attach application status to each match and publish the result."""
    if not student_id:
        return result

    matches = []
    for match in result.matches:
        status = registry.status(student_id, match.company_id)
        matches.append(
            match.model_copy(update={"application_status": status, "can_apply": can_apply(status)})
        )
    result = result.model_copy(
        update={"matches": matches, "student_id": student_id, "generation": generation}
    )
    if not state.publish(student_id, generation, result):
        logger.info(
            "Discarding stale analysis for %s (generation %d, current %d)",
            student_id, generation, state.current_generation(student_id),
        )
    return result


@router.get("/health")
async def health(
    taxonomy: SkillTaxonomy = Depends(get_skill_taxonomy),
    catalog: CompanyCatalog = Depends(get_company_catalog),
):
    return {
        "status": "ok",
        "fields": len(taxonomy),
        "companies": len(catalog),
    }


@router.get("/fields", response_model=list[FieldInfo])
async def list_fields(taxonomy: SkillTaxonomy = Depends(get_skill_taxonomy)):
    names = list(AVAILABLE_FIELDS) + [f for f in taxonomy.fields() if f not in AVAILABLE_FIELDS]
    return [FieldInfo(name=name, has_taxonomy=taxonomy.has_field(name)) for name in names]


@router.get("/companies", response_model=list[JobRequirement])
async def list_companies(
    field: str | None = None,
    catalog: CompanyCatalog = Depends(get_company_catalog),
):
    if field:
        return catalog.jobs_for_field(field)
    return list(catalog.jobs)


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    field: str | None = Form(None),
    student_id: str | None = Form(None),
    taxonomy: SkillTaxonomy = Depends(get_skill_taxonomy),
    catalog: CompanyCatalog = Depends(get_company_catalog),
    state: AnalysisState[AnalysisResponse] = Depends(get_analysis_state),
    registry: ApplicationRegistry = Depends(get_application_registry),
):
    content = await resume_file.read()
    try:
        pdf_parser.validate_upload(
            resume_file.filename,
            resume_file.content_type,
            len(content),
            settings.max_upload_size_mb,
        )
    except AnalysisError as e:
        raise HTTPException(status_code=400, detail=e.message)

    generation = state.begin(student_id) if student_id else None

    try:
        resume = pdf_parser.get_resume_text(content)
        result = resume_analyzer.analyze(resume, field, taxonomy=taxonomy, catalog=catalog)
    except ExtractionFailure as e:
        if student_id:
            state.reset(student_id)
        raise HTTPException(status_code=400, detail=e.message)
    except AnalysisError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return _with_student(result, student_id, generation, state, registry)


@router.post("/analyze/text", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_text(
    request: Request,
    body: TextAnalyzeRequest,
    taxonomy: SkillTaxonomy = Depends(get_skill_taxonomy),
    catalog: CompanyCatalog = Depends(get_company_catalog),
    state: AnalysisState[AnalysisResponse] = Depends(get_analysis_state),
    registry: ApplicationRegistry = Depends(get_application_registry),
):
    generation = state.begin(body.student_id) if body.student_id else None
    resume = ResumeText(full_text=body.resume_text, sections=parse_sections(body.resume_text))

    try:
        result = resume_analyzer.analyze(resume, body.field, taxonomy=taxonomy, catalog=catalog)
    except AnalysisError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return _with_student(result, body.student_id, generation, state, registry)


@router.get("/students/{student_id}/analysis", response_model=AnalysisResponse)
async def latest_analysis(
    student_id: str,
    state: AnalysisState[AnalysisResponse] = Depends(get_analysis_state),
):
    result = state.latest(student_id)
    if result is None:
        raise HTTPException(status_code=404, detail="No analysis available for this student")
    return result


@router.post("/applications", response_model=ApplicationResponse, status_code=201)
async def apply_to_job(
    body: ApplyRequest,
    catalog: CompanyCatalog = Depends(get_company_catalog),
    registry: ApplicationRegistry = Depends(get_application_registry),
):
    if catalog.get(body.company_id) is None:
        raise HTTPException(status_code=404, detail="Company not found")
    try:
        application = registry.apply(body.student_id, body.company_id)
    except ApplicationError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return ApplicationResponse(
        student_id=application.student_id,
        company_id=application.company_id,
        status=application.status,
        can_apply=False,
    )


@router.get("/applications/{student_id}/{company_id}", response_model=ApplicationResponse)
async def application_status(
    student_id: str,
    company_id: str,
    registry: ApplicationRegistry = Depends(get_application_registry),
):
    status = registry.status(student_id, company_id)
    return ApplicationResponse(
        student_id=student_id,
        company_id=company_id,
        status=status,
        can_apply=can_apply(status),
    )


@router.patch("/applications/{student_id}/{company_id}", response_model=ApplicationResponse)
async def review_application(
    student_id: str,
    company_id: str,
    body: ReviewRequest,
    registry: ApplicationRegistry = Depends(get_application_registry),
):
    if registry.status(student_id, company_id) is None:
        raise HTTPException(status_code=404, detail="Application not found")
    try:
        application = registry.review(student_id, company_id, body.status)
    except ApplicationError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return ApplicationResponse(
        student_id=student_id,
        company_id=company_id,
        status=application.status,
        can_apply=False,
    )
