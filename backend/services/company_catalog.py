"""Company catalog: job postings with weighted skill requirements."""

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

import yaml

from config import settings
from models.schemas.job_requirement import JobRequirement

logger = logging.getLogger(__name__)

COMPANY_DATABASE: list[dict[str, Any]] = [
    {
        "company_name": "Tech Solutions Inc",
        "position": "Full Stack Developer",
        "career_fields": ["Software Development", "Frontend Development", "Backend Development"],
        "requirements": {
            "JavaScript": 0.9,
            "React": 0.8,
            "Node.js": 0.8,
            "SQL": 0.7,
            "Git": 0.6,
            "AWS": 0.5,
        },
        "description": "Leading tech company specializing in web applications",
        "location": "Remote",
        "salary_range": "$90,000 - $130,000",
    },
    {
        "company_name": "Data Insights AI",
        "position": "Data Scientist",
        "career_fields": ["Data Science"],
        "requirements": {
            "Python": 0.9,
            "Machine Learning": 0.9,
            "Statistics": 0.8,
            "SQL": 0.7,
            "TensorFlow": 0.6,
            "Pandas": 0.6,
            "Scikit-learn": 0.5,
        },
        "description": "AI research and development company focused on machine learning solutions",
        "location": "New York",
        "salary_range": "$100,000 - $150,000",
    },
    {
        "company_name": "Frontend Masters",
        "position": "Senior Frontend Developer",
        "career_fields": ["Frontend Development", "Software Development"],
        "requirements": {
            "JavaScript": 0.9,
            "React": 0.9,
            "TypeScript": 0.8,
            "CSS": 0.8,
            "HTML": 0.7,
            "Vue.js": 0.6,
        },
        "description": "Leading e-commerce platform focusing on user experience",
        "location": "San Francisco",
        "salary_range": "$120,000 - $160,000",
    },
    {
        "company_name": "Cloud Systems Pro",
        "position": "Backend Engineer",
        "career_fields": ["Backend Development", "Software Development"],
        "requirements": {
            "Java": 0.9,
            "Spring Boot": 0.8,
            "SQL": 0.8,
            "Microservices": 0.7,
            "Docker": 0.7,
            "Kubernetes": 0.6,
        },
        "description": "Enterprise cloud solutions provider",
        "location": "Austin",
        "salary_range": "$95,000 - $140,000",
    },
    {
        "company_name": "AI Research Labs",
        "position": "Machine Learning Engineer",
        "career_fields": ["Data Science", "Software Development"],
        "requirements": {
            "Python": 0.9,
            "TensorFlow": 0.9,
            "Machine Learning": 0.8,
            "Deep Learning": 0.8,
            "NLP": 0.7,
            "SQL": 0.6,
        },
        "description": "Cutting-edge AI research company",
        "location": "Boston",
        "salary_range": "$130,000 - $180,000",
    },
    {
        "company_name": "Innovative Web Solutions",
        "position": "Frontend Developer",
        "career_fields": ["Frontend Development"],
        "requirements": {
            "React": 0.9,
            "TypeScript": 0.8,
            "CSS": 0.8,
            "HTML": 0.7,
            "Jest": 0.6,
            "GraphQL": 0.5,
        },
        "description": "Digital agency specializing in modern web applications",
        "location": "Chicago",
        "salary_range": "$85,000 - $120,000",
    },
]


def slugify(name: str) -> str:
    """'Tech Solutions Inc' -> 'tech-solutions-inc'."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


class CompanyCatalog:
    """Ordered, read-only collection of job postings."""

    def __init__(self, jobs: Iterable[JobRequirement]):
        self._jobs: tuple[JobRequirement, ...] = tuple(jobs)
        self._by_id: dict[str, JobRequirement] = {}
        for job in self._jobs:
            if job.company_id in self._by_id:
                raise ValueError(f"Duplicate company_id in catalog: {job.company_id}")
            self._by_id[job.company_id] = job

    def __len__(self) -> int:
        return len(self._jobs)

    @property
    def jobs(self) -> tuple[JobRequirement, ...]:
        return self._jobs

    def get(self, company_id: str) -> JobRequirement | None:
        return self._by_id.get(company_id)

    def jobs_for_field(self, field_name: str) -> list[JobRequirement]:
        """Postings that list ``field_name`` among their fields, in catalog order."""
        return [job for job in self._jobs if field_name in job.career_fields]

    def related_fields(self, field_name: str) -> list[str]:
        """Fields that share at least one posting with ``field_name``.

        e.g. "Frontend Development" -> ["Software Development", "Backend Development"]
        because Tech Solutions Inc lists all three.
        """
        related: dict[str, None] = {}
        for job in self.jobs_for_field(field_name):
            for other in job.career_fields:
                if other != field_name:
                    related.setdefault(other, None)
        return list(related)


def build_catalog(records: Iterable[dict[str, Any]]) -> CompanyCatalog:
    """Validate raw company records, deriving company_id from the name if absent."""
    jobs = []
    for record in records:
        data = dict(record)
        data.setdefault("company_id", slugify(data.get("company_name", "")))
        jobs.append(JobRequirement(**data))
    return CompanyCatalog(jobs)


def load_catalog(path: str | Path) -> CompanyCatalog:
    """Load company records from a YAML list."""
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Catalog file not found: {filepath}")
    with open(filepath, encoding="utf-8") as f:
        records = yaml.safe_load(f) or []
    if not isinstance(records, list):
        raise ValueError(f"Catalog file must contain a list of companies: {filepath}")
    logger.info("Loaded %d companies from %s", len(records), filepath)
    return build_catalog(records)


@lru_cache()
def get_catalog() -> CompanyCatalog:
    if settings.catalog_file:
        return load_catalog(settings.catalog_file)
    return build_catalog(COMPANY_DATABASE)
