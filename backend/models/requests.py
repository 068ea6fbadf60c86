from pydantic import BaseModel, Field

from models.schemas.application import ApplicationStatus


class TextAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    field: str | None = Field(None, description="Career field; unknown fields fall back to the default")
    student_id: str | None = Field(None, max_length=64)


class ApplyRequest(BaseModel):
    student_id: str = Field(..., min_length=1, max_length=64)
    company_id: str = Field(..., min_length=1, max_length=128)


class ReviewRequest(BaseModel):
    status: ApplicationStatus
