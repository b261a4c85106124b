"""
Keyword-overlap scoring between a job's required skills and a person's skills.
"""

import math
from typing import Iterable, List, Union

from .value_objects import MatchResult, SkillSet

SkillInput = Union[SkillSet, Iterable[str], None]


def _normalize(terms: SkillInput) -> List[str]:
    if terms is None:
        return []
    if isinstance(terms, SkillSet):
        return terms.normalized()
    return [term.lower() for term in terms if isinstance(term, str)]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def terms_overlap(required_term: str, possessed_term: str) -> bool:
    """
    Bidirectional substring containment on lower-cased terms.

    Lenient on purpose: "java" and "javascript" overlap in both directions.
    """
    return possessed_term in required_term or required_term in possessed_term


def match_skills(required: SkillInput, possessed: SkillInput) -> MatchResult:
    """
    Score how many required terms are covered by the possessed terms.

    The score is the rounded percentage of required entries that overlap
    with at least one possessed term; an empty requirement list scores 0.
    `matching_terms` holds the lower-cased required terms that matched, in
    requirement order without repeats.
    """
    required_terms = _normalize(required)
    if not required_terms:
        return MatchResult(score=0, matching_terms=())

    possessed_terms = _normalize(possessed)

    matched_count = 0
    matching: List[str] = []
    for required_term in required_terms:
        if any(terms_overlap(required_term, p) for p in possessed_terms):
            matched_count += 1
            if required_term not in matching:
                matching.append(required_term)

    score = _round_half_up(100 * matched_count / len(required_terms))
    return MatchResult(score=score, matching_terms=tuple(matching))
