"""Resume text as handed over by the PDF extraction collaborator."""

from pydantic import BaseModel

SECTION_NAMES = ("education", "experience", "skills", "projects", "other")


class ResumeText(BaseModel):
    full_text: str
    sections: dict[str, str] = {}
