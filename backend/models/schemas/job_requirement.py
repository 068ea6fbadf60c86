"""A company's job posting with weighted skill requirements."""

from typing import Annotated

from pydantic import BaseModel, Field

Weight = Annotated[float, Field(ge=0.0, le=1.0)]


class JobRequirement(BaseModel):
    """Job posting owned by a company; read-only to the matcher.

    ``requirements`` maps canonical skill -> importance weight (0-1).
    Order is kept and drives the order of matched/missing lists.
    """
    company_id: str
    company_name: str
    position: str = ""
    career_fields: list[str] = []
    location: str = ""
    salary_range: str = ""
    requirements: dict[str, Weight] = {}
    description: str = ""
