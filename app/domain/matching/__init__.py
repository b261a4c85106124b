"""
Matching domain module: the skill matcher and the value objects it works on.

The rankings built on the matcher live in `services`, which depends on the
jobs, applications and users domains and is imported from there directly.
"""

from .value_objects import SkillSet, MatchResult, parse_skill_set
from .skill_matcher import match_skills

__all__ = [
    "SkillSet",
    "MatchResult",
    "parse_skill_set",
    "match_skills",
]
