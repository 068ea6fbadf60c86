"""Job application lifecycle, owned by the company review workflow."""

from enum import Enum

from pydantic import BaseModel


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Application(BaseModel):
    student_id: str
    company_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
