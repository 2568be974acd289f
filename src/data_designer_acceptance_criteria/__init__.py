# SPDX-License-Identifier: Apache-2.0
"""Acceptance criteria grader plugin for NeMo Data Designer.

Adds an ``acceptance-criteria`` column type that scores text on a 100-point
rubric (Structure 25, Clarity 30, Testability 25, Completeness 20) with a
small deduction for AI filler language. No LLM calls, no API dependencies.

Usage::

    from data_designer_acceptance_criteria import AcceptanceCriteriaColumnConfig

    builder.add_column(AcceptanceCriteriaColumnConfig(
        name="ac_check",
        target_columns=["acceptance_criteria"],
        min_score=70,
    ))
"""

from data_designer_acceptance_criteria.config import AcceptanceCriteriaColumnConfig
from data_designer_acceptance_criteria.core import Rubric, ValidationResult, validate_document
from data_designer_acceptance_criteria.grading import color_tier, letter_grade, score_label
from data_designer_acceptance_criteria.slop import detect_slop

__all__ = [
    "AcceptanceCriteriaColumnConfig",
    "validate_document",
    "Rubric",
    "ValidationResult",
    "detect_slop",
    "letter_grade",
    "score_label",
    "color_tier",
]
