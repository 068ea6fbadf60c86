"""Taxonomy-driven skill extraction from resume text.

A canonical skill is detected when any of its synonym phrases matches the
text. Two matching modes exist:

1. ``whole_word`` (default): every whitespace-separated token of the phrase
   must appear as a standalone word, in any order, case-insensitively.
   "java" does NOT match inside "javascript"; "c plus plus" matches
   "plus ... c ... plus".
2. ``substring`` (legacy, deprecated): the phrase is a plain substring of
   the lowercased text. Kept only so older scoring can be reproduced.
"""

import logging
import re
from functools import lru_cache
from typing import Iterable, Literal, Mapping

from config import settings
from services.skill_taxonomy import SkillTaxonomy, get_taxonomy

logger = logging.getLogger(__name__)

MatchMode = Literal["whole_word", "substring"]


@lru_cache(maxsize=4096)
def _token_pattern(token: str) -> re.Pattern:
    # Lookarounds instead of \b so tokens ending in symbols ("c++", "c#") still match
    return re.compile(rf"(?<!\w){re.escape(token)}(?!\w)")


def phrase_matches(phrase: str, text_lower: str, mode: MatchMode = "whole_word") -> bool:
    """Check one synonym phrase against already-lowercased text."""
    phrase = phrase.lower().strip()
    if not phrase:
        return False
    if mode == "substring":
        return phrase in text_lower
    return all(_token_pattern(token).search(text_lower) for token in phrase.split())


def _scan_field(
    skills: Mapping[str, Iterable[str]],
    text_lower: str,
    mode: MatchMode,
    found: dict[str, None],
) -> None:
    for skill, synonyms in skills.items():
        if skill in found:
            continue
        for synonym in synonyms:
            if phrase_matches(synonym, text_lower, mode):
                logger.debug("Found skill: %s (matched: %s)", skill, synonym)
                found[skill] = None
                break


def extract_skills(
    text: str | None,
    field_name: str,
    *,
    taxonomy: SkillTaxonomy | None = None,
    related_fields: Iterable[str] = (),
    mode: MatchMode | None = None,
) -> tuple[str, ...]:
    """Return canonical skills detected in ``text`` for a career field.

    Unknown fields fall back to the taxonomy's default field (logged).
    Skills of ``related_fields`` are scanned too and unioned in, so a
    Frontend resume mentioning Express still accrues Node.js.

    Blank text yields an empty result; callers decide whether that is an
    error. The result holds taxonomy names only, in detection order.
    """
    if text is None or not text.strip():
        logger.debug("No text to extract skills from")
        return ()

    taxonomy = taxonomy if taxonomy is not None else get_taxonomy()
    mode = mode or settings.match_mode
    text_lower = text.lower()
    found: dict[str, None] = {}

    try:
        effective_field, _ = taxonomy.resolve_field(field_name)
        _scan_field(taxonomy.skills_for_field(effective_field), text_lower, mode, found)

        for related in related_fields:
            if related != effective_field and taxonomy.has_field(related):
                _scan_field(taxonomy.skills_for_field(related), text_lower, mode, found)
    except Exception:
        logger.exception("Error extracting skills for field %s", field_name)
        return ()

    return tuple(found)


def extract_skills_by_section(
    sections: Mapping[str, str],
    field_name: str,
    *,
    taxonomy: SkillTaxonomy | None = None,
    related_fields: Iterable[str] = (),
    mode: MatchMode | None = None,
) -> dict[str, list[str]]:
    """Run extraction per resume section. Sections with no hits are omitted."""
    related = tuple(related_fields)
    by_section: dict[str, list[str]] = {}
    for name, content in sections.items():
        skills = extract_skills(
            content, field_name, taxonomy=taxonomy, related_fields=related, mode=mode
        )
        if skills:
            by_section[name] = list(skills)
    return by_section
