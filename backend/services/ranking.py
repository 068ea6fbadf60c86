"""Rank job postings by match score and derive display aggregates."""

from dataclasses import dataclass
from typing import Iterable, Sequence

from models.schemas.job_requirement import JobRequirement
from models.schemas.match_result import RankedCompany
from services.match_scorer import round_half_up, score_match

DEFAULT_MIN_SCORE = 30


@dataclass(frozen=True)
class RankingConfig:
    """Companies with ``score <= min_score`` are dropped from the ranking."""

    min_score: int = DEFAULT_MIN_SCORE


def rank_companies(
    jobs: Iterable[JobRequirement],
    detected_skills: Iterable[str],
    config: RankingConfig | None = None,
) -> list[RankedCompany]:
    """Score each job, drop low scorers, sort by score descending.

    sorted() is stable, so equal scores keep their input order.
    """
    config = config if config is not None else RankingConfig()
    detected = frozenset(detected_skills)

    scored = []
    for job in jobs:
        result = score_match(detected, job.requirements)
        if result.score <= config.min_score:
            continue
        scored.append(
            RankedCompany(
                **job.model_dump(),
                score=result.score,
                matched_skills=result.matched,
                missing_skills=result.missing,
            )
        )

    return sorted(scored, key=lambda c: c.score, reverse=True)


def overall_score(ranked: Sequence[RankedCompany]) -> int:
    """Mean score of the surviving companies, 0 when none survived."""
    if not ranked:
        return 0
    return round_half_up(sum(c.score for c in ranked) / len(ranked))


def pooled_missing_skills(ranked: Iterable[RankedCompany]) -> list[str]:
    """Deduplicated missing skills across all ranked companies, in rank order."""
    pooled: dict[str, None] = {}
    for company in ranked:
        for skill in company.missing_skills:
            pooled.setdefault(skill, None)
    return list(pooled)


def strength_areas(detected_skills: Sequence[str], limit: int = 3) -> list[str]:
    return list(detected_skills[:limit])


def improvement_areas(ranked: Iterable[RankedCompany], limit: int = 3) -> list[str]:
    return pooled_missing_skills(ranked)[:limit]


def recommendations(company: RankedCompany) -> list[str]:
    """Resume tailoring hints for one company's missing skills."""
    return [f"Add or highlight your {skill} experience" for skill in company.missing_skills]
