"""
Unit tests for keyword-overlap skill scoring.
"""
import pytest

from app.domain.matching import MatchResult, SkillSet, match_skills
from app.domain.matching.skill_matcher import terms_overlap


pytestmark = pytest.mark.unit


class TestMatchScore:
    """Tests for the percentage score."""

    def test_partial_coverage_rounds_to_nearest(self):
        """Two of three requirements covered scores 67."""
        result = match_skills(["Python", "SQL", "Docker"], ["python", "docker"])

        assert result.score == 67
        assert result.matching_skills() == ["python", "docker"]

    def test_shorter_possessed_term_covers_punctuated_requirement(self):
        """A bare "node" covers "Node.js" while "docker" covers nothing."""
        result = match_skills(["React", "Node.js", "SQL"], ["react", "node", "docker"])

        assert result.score == 67
        assert result.matching_skills() == ["react", "node.js"]

    def test_full_coverage_scores_100(self):
        result = match_skills(["python", "sql"], ["SQL", "Python", "Go"])
        assert result.score == 100

    def test_no_overlap_scores_zero(self):
        result = match_skills(["rust", "haskell"], ["python"])

        assert result.score == 0
        assert result.matching_skills() == []
        assert not result.has_match

    def test_half_rounds_up(self):
        """1 of 8 is 12.5%, reported as 13."""
        required = ["alpha", "kilo", "lima", "mike", "oscar", "papa", "quebec", "romeo"]
        assert match_skills(required, ["alpha"]).score == 13

    def test_one_third_rounds_down(self):
        assert match_skills(["alpha", "kilo", "lima"], ["alpha"]).score == 33

    @pytest.mark.parametrize(
        "required,possessed",
        [
            (["python"], ["python"]),
            (["python", "go", "sql"], ["go"]),
            (["a", "b", "c", "d", "e", "f", "g"], ["c", "f"]),
            (["python"], []),
        ],
    )
    def test_score_is_within_bounds(self, required, possessed):
        assert 0 <= match_skills(required, possessed).score <= 100


class TestEmptyInputs:
    """Tests for missing or empty skill lists."""

    def test_empty_requirements_score_zero(self):
        """A job that asks for nothing is not a match for anyone."""
        result = match_skills([], ["python", "sql"])

        assert result.score == 0
        assert result.matching_skills() == []

    def test_empty_possessed_scores_zero(self):
        assert match_skills(["python"], []).score == 0

    def test_none_is_treated_as_empty(self):
        assert match_skills(None, ["python"]).score == 0
        assert match_skills(["python"], None).score == 0

    def test_empty_skill_sets(self):
        assert match_skills(SkillSet(), SkillSet.of(["python"])) == MatchResult()


class TestTermOverlap:
    """Tests for case folding and substring containment."""

    def test_case_insensitive(self):
        result = match_skills(["PyThOn"], ["PYTHON"])

        assert result.score == 100
        assert result.matching_skills() == ["python"]

    def test_required_term_inside_possessed_term(self):
        """'java' is covered by a candidate who knows 'javascript'."""
        assert match_skills(["java"], ["javascript"]).score == 100

    def test_possessed_term_inside_required_term(self):
        """'javascript' is covered by a candidate who knows 'java'."""
        assert match_skills(["javascript"], ["java"]).score == 100

    def test_multi_word_terms(self):
        result = match_skills(["machine learning", "docker"], ["Machine Learning Engineering"])

        assert result.score == 50
        assert result.matching_skills() == ["machine learning"]

    def test_terms_overlap_is_symmetric(self):
        assert terms_overlap("react", "react native")
        assert terms_overlap("react native", "react")
        assert not terms_overlap("vue", "react")


class TestMatchingTerms:
    """Tests for the list of matched requirement terms."""

    def test_matching_terms_follow_requirement_order(self):
        result = match_skills(["Docker", "Python", "AWS"], ["aws", "python", "docker"])
        assert result.matching_skills() == ["docker", "python", "aws"]

    def test_duplicate_requirements_count_but_are_listed_once(self):
        result = match_skills(["python", "Python", "go"], ["python"])

        assert result.score == 67
        assert result.matching_skills() == ["python"]

    def test_non_string_entries_are_ignored(self):
        result = match_skills(["python", 42, None], ["python", 7])

        assert result.score == 100
        assert result.matching_skills() == ["python"]
