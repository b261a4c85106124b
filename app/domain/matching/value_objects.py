"""
Matching domain value objects representing immutable business concepts.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple
import logging

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

_SKILL_LIST_ADAPTER = TypeAdapter(List[str])


@dataclass(frozen=True)
class SkillSet:
    """
    Ordered sequence of free-text skill terms.

    Terms are kept exactly as entered; no uniqueness or canonicalization is
    enforced. Case is only normalized when two skill sets are compared.
    """

    terms: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "terms", tuple(self.terms))

    @classmethod
    def of(cls, terms: Optional[Iterable[str]]) -> "SkillSet":
        return cls(tuple(terms or ()))

    def normalized(self) -> List[str]:
        """Lower-cased terms in their original order."""
        return [term.lower() for term in self.terms]

    def is_empty(self) -> bool:
        return len(self.terms) == 0

    def to_list(self) -> List[str]:
        return list(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)


def parse_skill_set(raw: Any, source: str = "skills") -> SkillSet:
    """
    Validate stored skill data into a SkillSet.

    Accepts a list of strings or its JSON text. Anything else is logged and
    treated as an empty skill set so that scoring never sees non-string
    entries.
    """
    if raw is None or raw == "":
        return SkillSet()

    try:
        if isinstance(raw, (str, bytes)):
            terms = _SKILL_LIST_ADAPTER.validate_json(raw)
        else:
            terms = _SKILL_LIST_ADAPTER.validate_python(raw, strict=True)
    except PydanticValidationError as e:
        logger.warning(f"Discarding malformed skill data from {source}: {e.error_count()} error(s)")
        return SkillSet()

    return SkillSet.of(terms)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing required skills against possessed skills."""

    score: int = 0
    matching_terms: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError("Match score must be between 0 and 100")
        object.__setattr__(self, "matching_terms", tuple(self.matching_terms))

    @property
    def has_match(self) -> bool:
        return self.score > 0

    def matching_skills(self) -> List[str]:
        return list(self.matching_terms)
