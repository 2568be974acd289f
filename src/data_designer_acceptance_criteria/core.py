# Acceptance criteria scoring engine.
#
# Grades a Markdown-flavoured acceptance criteria document on four weighted
# dimensions (Structure 25, Clarity 30, Testability 25, Completeness 20) using
# the compiled rule tables in ``patterns``, then subtracts a small capped
# deduction for filler language found by ``slop``.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from data_designer_acceptance_criteria import patterns as p
from data_designer_acceptance_criteria.slop import SlopResult, detect_slop

logger = logging.getLogger(__name__)

NO_CONTENT_ISSUE = "No content to validate"

# ---------------------------------------------------------------------------
# Rubric
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rubric:
    """Point values and tier thresholds used by the scorers."""

    structure_max: int = 25
    clarity_max: int = 30
    testability_max: int = 25
    completeness_max: int = 20

    summary_points: int = 10
    checkbox_full_min: int = 3
    checkbox_full_points: int = 10
    checkbox_partial_points: int = 5
    out_of_scope_points: int = 5

    # (minimum count, points), highest tier first
    action_verb_tiers: tuple[tuple[int, int], ...] = ((5, 15), (3, 10), (1, 5))
    metric_tiers: tuple[tuple[int, int], ...] = ((3, 15), (1, 8))

    vague_minor_max: int = 2
    vague_minor_penalty: int = 5
    vague_major_penalty: int = 15
    user_story_penalty: int = 5
    gherkin_penalty: int = 5
    compound_penalty: int = 3
    implementation_penalty: int = 5

    criterion_ideal_min: int = 3
    criterion_ideal_max: int = 7
    criterion_ideal_points: int = 8
    criterion_partial_points: int = 4
    case_coverage_full_points: int = 6
    case_coverage_partial_points: int = 3
    section_full_ratio: float = 0.9
    section_full_points: int = 6
    section_partial_ratio: float = 0.6
    section_partial_points: int = 3

    slop_multiplier: float = 0.6
    slop_deduction_cap: int = 5
    slop_issue_limit: int = 2

    min_text_length: int = 1


DEFAULT_RUBRIC = Rubric()

# ---------------------------------------------------------------------------
# Detection records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StructureDetection:
    has_summary: bool
    checkbox_count: int
    has_out_of_scope: bool
    indicators: tuple[str, ...]

    @property
    def has_checkboxes(self) -> bool:
        return self.checkbox_count > 0

    def to_payload(self) -> dict[str, object]:
        return {
            "has_summary": self.has_summary,
            "has_checkboxes": self.has_checkboxes,
            "checkbox_count": self.checkbox_count,
            "has_out_of_scope": self.has_out_of_scope,
            "indicators": list(self.indicators),
        }


@dataclass(frozen=True)
class ClarityDetection:
    action_verb_count: int
    metrics_count: int
    has_thresholds: bool
    indicators: tuple[str, ...]

    @property
    def has_action_verbs(self) -> bool:
        return self.action_verb_count > 0

    @property
    def has_metrics(self) -> bool:
        return self.metrics_count > 0

    def to_payload(self) -> dict[str, object]:
        return {
            "has_action_verbs": self.has_action_verbs,
            "action_verb_count": self.action_verb_count,
            "has_metrics": self.has_metrics,
            "metrics_count": self.metrics_count,
            "has_thresholds": self.has_thresholds,
            "indicators": list(self.indicators),
        }


@dataclass(frozen=True)
class TestabilityDetection:
    vague_term_count: int
    vague_terms: tuple[str, ...]
    has_user_story_anti_pattern: bool
    has_gherkin_anti_pattern: bool
    has_compound_criteria: bool
    implementation_terms: tuple[str, ...]
    indicators: tuple[str, ...]

    @property
    def has_implementation_details(self) -> bool:
        return bool(self.implementation_terms)

    @property
    def has_issues(self) -> bool:
        return (
            self.vague_term_count > 0
            or self.has_user_story_anti_pattern
            or self.has_gherkin_anti_pattern
            or self.has_implementation_details
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "vague_term_count": self.vague_term_count,
            "vague_terms": list(self.vague_terms),
            "has_user_story_anti_pattern": self.has_user_story_anti_pattern,
            "has_gherkin_anti_pattern": self.has_gherkin_anti_pattern,
            "has_compound_criteria": self.has_compound_criteria,
            "has_implementation_details": self.has_implementation_details,
            "implementation_terms": list(self.implementation_terms),
            "has_issues": self.has_issues,
            "indicators": list(self.indicators),
        }


@dataclass(frozen=True)
class CompletenessDetection:
    criterion_count: int
    error_case_count: int
    edge_case_count: int
    has_permissions: bool
    indicators: tuple[str, ...]

    @property
    def has_error_cases(self) -> bool:
        return self.error_case_count > 0

    @property
    def has_edge_cases(self) -> bool:
        return self.edge_case_count > 0

    def to_payload(self) -> dict[str, object]:
        return {
            "criterion_count": self.criterion_count,
            "has_error_cases": self.has_error_cases,
            "error_case_count": self.error_case_count,
            "has_edge_cases": self.has_edge_cases,
            "edge_case_count": self.edge_case_count,
            "has_permissions": self.has_permissions,
            "indicators": list(self.indicators),
        }


@dataclass(frozen=True)
class SectionDetection:
    found: tuple[p.Section, ...]
    missing: tuple[p.Section, ...]

    @property
    def coverage(self) -> float:
        return sum(s.weight for s in self.found) / p.TOTAL_SECTION_WEIGHT

    def to_payload(self) -> dict[str, object]:
        return {
            "found": [{"name": s.name, "weight": s.weight} for s in self.found],
            "missing": [{"name": s.name, "weight": s.weight} for s in self.missing],
            "coverage": self.coverage,
        }


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DimensionScore:
    score: int
    max_score: int
    issues: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "issues": list(self.issues),
            "strengths": list(self.strengths),
        }


@dataclass(frozen=True)
class SlopDeduction:
    penalty: float
    deduction: int
    issues: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {"penalty": self.penalty, "deduction": self.deduction, "issues": list(self.issues)}


@dataclass(frozen=True)
class ValidationResult:
    total_score: int
    structure: DimensionScore
    clarity: DimensionScore
    testability: DimensionScore
    completeness: DimensionScore
    slop_detection: SlopDeduction

    @property
    def dimensions(self) -> dict[str, DimensionScore]:
        return {
            "structure": self.structure,
            "clarity": self.clarity,
            "testability": self.testability,
            "completeness": self.completeness,
        }

    def all_issues(self, limit: int | None = None) -> list[str]:
        """Dimension issues in dimension order, optionally truncated."""
        issues = [issue for dim in self.dimensions.values() for issue in dim.issues]
        return issues if limit is None else issues[:limit]

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"total_score": self.total_score}
        payload.update({name: dim.to_payload() for name, dim in self.dimensions.items()})
        payload["slop_detection"] = self.slop_detection.to_payload()
        return payload

# ---------------------------------------------------------------------------
# Detectors
# ---------------------------------------------------------------------------


def _indicators(*pairs: tuple[bool, str]) -> tuple[str, ...]:
    return tuple(message for present, message in pairs if present)


def detect_structure(text: str) -> StructureDetection:
    has_summary = p.SUMMARY_RE.search(text) is not None
    checkbox_count = p.count_matches(p.CHECKBOX_RE, text)
    has_out_of_scope = p.OUT_OF_SCOPE_RE.search(text) is not None
    return StructureDetection(
        has_summary=has_summary,
        checkbox_count=checkbox_count,
        has_out_of_scope=has_out_of_scope,
        indicators=_indicators(
            (has_summary, "Summary section found"),
            (checkbox_count > 0, f"{checkbox_count} checkbox criteria"),
            (has_out_of_scope, "Out of Scope section found"),
        ),
    )


def detect_clarity(text: str) -> ClarityDetection:
    verbs = p.count_matches(p.ACTION_VERB_RE, text)
    metrics = p.count_matches(p.METRIC_RE, text)
    has_thresholds = p.THRESHOLD_RE.search(text) is not None
    return ClarityDetection(
        action_verb_count=verbs,
        metrics_count=metrics,
        has_thresholds=has_thresholds,
        indicators=_indicators(
            (verbs > 0, f"{verbs} action verbs"),
            (metrics > 0, f"{metrics} measurable metrics"),
            (has_thresholds, "Specific thresholds defined"),
        ),
    )


def detect_testability(text: str) -> TestabilityDetection:
    vague_count = p.count_matches(p.VAGUE_TERM_RE, text)
    user_story = p.USER_STORY_RE.search(text) is not None
    gherkin = p.GHERKIN_RE.search(text) is not None
    compound = p.COMPOUND_RE.search(text) is not None
    impl_terms = p.unique_matches(p.IMPLEMENTATION_RE, text)
    return TestabilityDetection(
        vague_term_count=vague_count,
        vague_terms=p.unique_matches(p.VAGUE_TERM_RE, text),
        has_user_story_anti_pattern=user_story,
        has_gherkin_anti_pattern=gherkin,
        has_compound_criteria=compound,
        implementation_terms=impl_terms,
        indicators=_indicators(
            (vague_count > 0, f"{vague_count} vague terms found"),
            (user_story, "User story syntax detected (use checkboxes instead)"),
            (gherkin, "Gherkin syntax detected (use simple checkboxes)"),
            (compound, "Compound criteria found (split into separate items)"),
            (bool(impl_terms), f"Implementation details found: {', '.join(impl_terms[:3])}"),
        ),
    )


def detect_completeness(text: str, rubric: Rubric | None = None) -> CompletenessDetection:
    rubric = rubric or DEFAULT_RUBRIC
    criteria = p.count_matches(p.CHECKBOX_RE, text)
    errors = p.count_matches(p.ERROR_CASE_RE, text)
    edges = p.count_matches(p.EDGE_CASE_RE, text)
    return CompletenessDetection(
        criterion_count=criteria,
        error_case_count=errors,
        edge_case_count=edges,
        has_permissions=p.PERMISSION_RE.search(text) is not None,
        indicators=_indicators(
            (rubric.criterion_ideal_min <= criteria <= rubric.criterion_ideal_max,
             f"Good criterion count ({rubric.criterion_ideal_min}-{rubric.criterion_ideal_max})"),
            (criteria < rubric.criterion_ideal_min, "Too few criteria (add more)"),
            (criteria > rubric.criterion_ideal_max, "Too many criteria (consider splitting)"),
            (errors > 0, "Error cases covered"),
            (edges > 0, "Edge cases addressed"),
        ),
    )


def detect_sections(text: str) -> SectionDetection:
    found = tuple(s for s in p.REQUIRED_SECTIONS if s.pattern.search(text))
    missing = tuple(s for s in p.REQUIRED_SECTIONS if s not in found)
    return SectionDetection(found=found, missing=missing)


# ---------------------------------------------------------------------------
# Scorers
# ---------------------------------------------------------------------------


def _tier_index(count: int, tiers: tuple[tuple[int, int], ...]) -> int | None:
    """Index of the first (highest) tier ``count`` reaches, or None."""
    for index, (minimum, _) in enumerate(tiers):
        if count >= minimum:
            return index
    return None


def _tier_points(tiers: tuple[tuple[int, int], ...], index: int | None) -> int:
    return 0 if index is None else tiers[index][1]


def _clamp(score: int, max_score: int) -> int:
    return max(0, min(score, max_score))


def score_structure(text: str, rubric: Rubric | None = None) -> DimensionScore:
    """Summary section, checkbox criteria and Out of Scope section."""
    rubric = rubric or DEFAULT_RUBRIC
    detection = detect_structure(text)
    issues: list[str] = []
    strengths: list[str] = []
    score = 0

    if detection.has_summary:
        score += rubric.summary_points
        strengths.append("Summary section present")
    else:
        issues.append("Add a Summary section describing the feature/change")

    if detection.checkbox_count >= rubric.checkbox_full_min:
        score += rubric.checkbox_full_points
        strengths.append(f"{detection.checkbox_count} checkbox criteria found")
    elif detection.has_checkboxes:
        score += rubric.checkbox_partial_points
        issues.append("Add more checkbox criteria (recommend 3-7)")
    else:
        issues.append('Missing checkbox criteria - use "- [ ]" format')

    if detection.has_out_of_scope:
        score += rubric.out_of_scope_points
        strengths.append("Out of Scope section present")
    else:
        issues.append("Add Out of Scope section to set clear boundaries")

    return DimensionScore(_clamp(score, rubric.structure_max), rubric.structure_max, tuple(issues), tuple(strengths))


def score_clarity(text: str, rubric: Rubric | None = None) -> DimensionScore:
    """Action verbs and measurable metrics with units."""
    rubric = rubric or DEFAULT_RUBRIC
    detection = detect_clarity(text)
    issues: list[str] = []
    strengths: list[str] = []

    verbs = detection.action_verb_count
    verb_tiers = rubric.action_verb_tiers
    verb_tier = _tier_index(verbs, verb_tiers)
    verb_points = _tier_points(verb_tiers, verb_tier)
    # The lowest tier still pays points but reads as an issue.
    if verb_tier == 0:
        strengths.append(f"{verbs} action verbs for testable behavior")
    elif verb_tier is not None and verb_tier < len(verb_tiers) - 1:
        strengths.append(f"{verbs} action verbs found")
    elif verbs > 0:
        issues.append("Add more action verbs (implement, create, display, validate, etc.)")
    else:
        issues.append("Missing action verbs - criteria should describe testable behavior")

    metrics = detection.metrics_count
    metric_tier = _tier_index(metrics, rubric.metric_tiers)
    metric_points = _tier_points(rubric.metric_tiers, metric_tier)
    if metric_tier == 0:
        strengths.append(f"{metrics} measurable metrics with units")
    elif metrics > 0:
        issues.append("Add more measurable metrics (time limits, percentages, counts)")
    else:
        issues.append("No measurable metrics - add specific numbers with units")

    if detection.has_thresholds:
        strengths.append("Specific thresholds defined")

    return DimensionScore(
        _clamp(verb_points + metric_points, rubric.clarity_max), rubric.clarity_max, tuple(issues), tuple(strengths)
    )


def score_testability(text: str, rubric: Rubric | None = None) -> DimensionScore:
    """Start from the maximum and deduct for vague terms and anti-patterns."""
    rubric = rubric or DEFAULT_RUBRIC
    detection = detect_testability(text)
    issues: list[str] = []
    strengths: list[str] = []
    score = rubric.testability_max

    # Raw occurrence count picks the tier; distinct terms are only for the message.
    if detection.vague_term_count == 0:
        strengths.append("No vague terms - criteria are specific")
    elif detection.vague_term_count <= rubric.vague_minor_max:
        score -= rubric.vague_minor_penalty
        issues.append(f"Remove vague terms: {', '.join(detection.vague_terms[:2])}")
    else:
        score -= rubric.vague_major_penalty
        issues.append(f"{detection.vague_term_count} vague terms found: {', '.join(detection.vague_terms[:3])}")

    if detection.has_user_story_anti_pattern:
        score -= rubric.user_story_penalty
        issues.append("Remove user story syntax - use simple checkboxes instead")

    if detection.has_gherkin_anti_pattern:
        score -= rubric.gherkin_penalty
        issues.append("Remove Given/When/Then syntax - use simple checkboxes")

    if detection.has_compound_criteria:
        score -= rubric.compound_penalty
        issues.append("Split compound criteria (and/or) into separate items")

    if detection.has_implementation_details:
        score -= rubric.implementation_penalty
        issues.append(f"Remove implementation details: {', '.join(detection.implementation_terms[:3])}")

    if detection.vague_term_count == 0 and not detection.has_compound_criteria:
        strengths.append("All criteria are independently verifiable")

    return DimensionScore(_clamp(score, rubric.testability_max), rubric.testability_max, tuple(issues), tuple(strengths))


def score_completeness(text: str, rubric: Rubric | None = None) -> DimensionScore:
    """Criterion count, error and edge case coverage, section coverage."""
    rubric = rubric or DEFAULT_RUBRIC
    detection = detect_completeness(text, rubric)
    sections = detect_sections(text)
    issues: list[str] = []
    strengths: list[str] = []
    score = 0

    count = detection.criterion_count
    if rubric.criterion_ideal_min <= count <= rubric.criterion_ideal_max:
        score += rubric.criterion_ideal_points
        strengths.append(f"{count} criteria (ideal range {rubric.criterion_ideal_min}-{rubric.criterion_ideal_max})")
    elif count > rubric.criterion_ideal_max:
        score += rubric.criterion_partial_points
        issues.append("Too many criteria - consider splitting into smaller issues")
    elif count > 0:
        score += rubric.criterion_partial_points
        issues.append("Add more criteria (recommend 3-7 per issue)")
    else:
        issues.append("No checkbox criteria found")

    if detection.has_error_cases and detection.has_edge_cases:
        score += rubric.case_coverage_full_points
        strengths.append("Error states and edge cases addressed")
    elif detection.has_error_cases:
        score += rubric.case_coverage_partial_points
        issues.append("Add edge case criteria (boundaries, empty states, concurrency)")
    elif detection.has_edge_cases:
        score += rubric.case_coverage_partial_points
        issues.append("Add error case criteria (invalid input, timeouts, failures)")
    else:
        issues.append("Add error handling and edge case criteria")

    total_sections = len(p.REQUIRED_SECTIONS)
    if sections.coverage >= rubric.section_full_ratio:
        score += rubric.section_full_points
        strengths.append(f"{len(sections.found)}/{total_sections} sections present")
    elif sections.coverage >= rubric.section_partial_ratio:
        score += rubric.section_partial_points
        issues.append(f"Missing sections: {', '.join(s.name for s in sections.missing)}")
    else:
        issues.append("Add required sections: " + ", ".join(s.name for s in p.REQUIRED_SECTIONS))

    return DimensionScore(
        _clamp(score, rubric.completeness_max), rubric.completeness_max, tuple(issues), tuple(strengths)
    )

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def _empty_result(rubric: Rubric) -> ValidationResult:
    def _empty(max_score: int) -> DimensionScore:
        return DimensionScore(score=0, max_score=max_score, issues=(NO_CONTENT_ISSUE,))

    return ValidationResult(
        total_score=0,
        structure=_empty(rubric.structure_max),
        clarity=_empty(rubric.clarity_max),
        testability=_empty(rubric.testability_max),
        completeness=_empty(rubric.completeness_max),
        slop_detection=SlopDeduction(penalty=0.0, deduction=0),
    )


def slop_deduction(slop: SlopResult, rubric: Rubric | None = None) -> SlopDeduction:
    """Turn a continuous slop penalty into the capped integer deduction."""
    rubric = rubric or DEFAULT_RUBRIC
    if slop.penalty <= 0:
        return SlopDeduction(penalty=slop.penalty, deduction=0)
    deduction = min(rubric.slop_deduction_cap, math.floor(slop.penalty * rubric.slop_multiplier))
    return SlopDeduction(penalty=slop.penalty, deduction=deduction, issues=slop.issues[: rubric.slop_issue_limit])


def validate_document(text: object, rubric: Rubric | None = None) -> ValidationResult:
    """Score an acceptance criteria document.

    Args:
        text: The document. ``None``, non-strings and blank strings are not an
            error: they produce an all-zero result.
        rubric: Optional point/threshold overrides.

    Returns:
        ``ValidationResult`` with the four dimension scores, the slop
        deduction, and ``total_score`` in 0..100.
    """
    rubric = rubric or DEFAULT_RUBRIC
    if not isinstance(text, str) or len(text.strip()) < rubric.min_text_length:
        logger.debug("No content to validate, returning empty result")
        return _empty_result(rubric)

    structure = score_structure(text, rubric)
    clarity = score_clarity(text, rubric)
    testability = score_testability(text, rubric)
    completeness = score_completeness(text, rubric)
    slop = slop_deduction(detect_slop(text), rubric)

    subtotal = structure.score + clarity.score + testability.score + completeness.score
    total = max(0, subtotal - slop.deduction)
    logger.debug(f"Scored document: {subtotal} - {slop.deduction} slop = {total}")

    return ValidationResult(
        total_score=total,
        structure=structure,
        clarity=clarity,
        testability=testability,
        completeness=completeness,
        slop_detection=slop,
    )
