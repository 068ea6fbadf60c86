"""Tests for weighted requirement scoring."""

import itertools

from services.match_scorer import round_half_up, score_match

REQUIREMENTS = {
    "JavaScript": 0.9,
    "React": 0.8,
    "Node.js": 0.8,
    "SQL": 0.7,
    "Git": 0.6,
    "AWS": 0.5,
}


def test_weighted_scenario():
    result = score_match({"React"}, {"React": 0.8, "SQL": 0.2})
    assert result.score == 80
    assert result.matched == ["React"]
    assert result.missing == ["SQL"]


def test_empty_requirements_score_zero():
    result = score_match({"React"}, {})
    assert result.score == 0
    assert result.matched == []
    assert result.missing == []


def test_zero_weights_score_zero():
    result = score_match({"React"}, {"React": 0.0, "SQL": 0.0})
    assert result.score == 0
    assert result.matched == ["React"]
    assert result.missing == ["SQL"]


def test_full_and_no_match():
    assert score_match(set(REQUIREMENTS), REQUIREMENTS).score == 100
    assert score_match(set(), REQUIREMENTS).score == 0


def test_lists_follow_requirement_order():
    result = score_match({"AWS", "JavaScript", "SQL"}, REQUIREMENTS)
    assert result.matched == ["JavaScript", "SQL", "AWS"]
    assert result.missing == ["React", "Node.js", "Git"]


def test_tech_solutions_score():
    # Tech Solutions Inc: 3.2 of 4.3 weight covered
    result = score_match({"JavaScript", "React", "Node.js", "SQL"}, REQUIREMENTS)
    assert result.score == 74


def test_accepts_any_iterable():
    assert score_match(["React", "React"], {"React": 0.8, "SQL": 0.2}).score == 80
    assert score_match(("React",), {"React": 0.8, "SQL": 0.2}).score == 80


def test_rounds_half_up():
    assert round_half_up(62.5) == 63
    assert round_half_up(0.5) == 1
    assert round_half_up(74.4) == 74
    # 1 of 8 equal weights = 12.5%
    reqs = {f"s{i}": 0.5 for i in range(8)}
    assert score_match({"s0"}, reqs).score == 13


def test_scoring_is_deterministic():
    skills = sorted(REQUIREMENTS)
    for size in range(len(skills) + 1):
        for subset in itertools.combinations(skills, size):
            assert score_match(set(subset), REQUIREMENTS) == score_match(set(subset), REQUIREMENTS)


def test_adding_a_matched_skill_never_lowers_score():
    skills = sorted(REQUIREMENTS)
    for size in range(len(skills)):
        for subset in itertools.combinations(skills, size):
            base = score_match(set(subset), REQUIREMENTS).score
            for extra in set(skills) - set(subset):
                assert score_match(set(subset) | {extra}, REQUIREMENTS).score >= base


def test_extra_detected_skills_do_not_matter():
    base = score_match({"React"}, REQUIREMENTS)
    noisy = score_match({"React", "Haskell", "COBOL"}, REQUIREMENTS)
    assert base == noisy


def test_score_stays_in_range():
    skills = sorted(REQUIREMENTS)
    for size in range(len(skills) + 1):
        for subset in itertools.combinations(skills, size):
            assert 0 <= score_match(set(subset), REQUIREMENTS).score <= 100
