"""Weighted requirement matching for a single job posting."""

import math
from typing import Iterable, Mapping

from models.schemas.match_result import SkillMatchScore


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_match(detected_skills: Iterable[str], requirements: Mapping[str, float]) -> SkillMatchScore:
    """Score a detected skill set against a job's weighted requirements.

    score = round(100 * achieved_weight / total_weight), half-up.
    A job with no requirements (or only zero weights) scores 0.
    matched/missing follow the order of ``requirements``.
    """
    detected = set(detected_skills)
    total_weight = 0.0
    achieved_weight = 0.0
    matched: list[str] = []
    missing: list[str] = []

    for skill, weight in requirements.items():
        total_weight += weight
        if skill in detected:
            achieved_weight += weight
            matched.append(skill)
        else:
            missing.append(skill)

    if total_weight <= 0:
        score = 0
    else:
        score = min(100, max(0, round_half_up(100 * achieved_weight / total_weight)))

    return SkillMatchScore(score=score, matched=matched, missing=missing)
