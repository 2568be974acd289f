from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class AcceptanceCriteriaColumnConfig(SingleColumnConfig):
    """Grade acceptance criteria text columns against a 100-point rubric.

    Scores each row on Structure, Clarity, Testability and Completeness with
    regex-based detectors, subtracts a small deduction for filler language, and
    reports the total with a letter grade and readiness label.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        min_score: Minimum total score (0-100) for ``is_valid=True``. Defaults to 70
            (the "Ready" label).
        include_issues: Include the flattened list of rubric and filler-language issues.
        include_dimensions: Include per-dimension score, max score, issues and strengths.
    """

    target_columns: list[str]
    min_score: int = Field(default=70, ge=0, le=100, description="Minimum total score for is_valid=True")
    include_issues: bool = Field(default=True, description="Include issue strings in output")
    include_dimensions: bool = Field(default=False, description="Include per-dimension breakdown in output")
    column_type: Literal["acceptance-criteria"] = "acceptance-criteria"

    @staticmethod
    def get_column_emoji() -> str:
        return "✅"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
