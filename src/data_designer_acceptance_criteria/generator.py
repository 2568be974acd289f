from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_acceptance_criteria.config import AcceptanceCriteriaColumnConfig
from data_designer_acceptance_criteria.core import ValidationResult, validate_document
from data_designer_acceptance_criteria.grading import letter_grade, score_label

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def build_row_output(result: ValidationResult, config: AcceptanceCriteriaColumnConfig) -> dict:
    output: dict = {
        "is_valid": result.total_score >= config.min_score,
        "ac_score": result.total_score,
        "ac_grade": letter_grade(result.total_score),
        "ac_label": score_label(result.total_score),
    }
    if config.include_issues:
        output["ac_issues"] = result.all_issues() + list(result.slop_detection.issues)
    if config.include_dimensions:
        output["ac_dimensions"] = {name: dim.to_payload() for name, dim in result.dimensions.items()}
    return output


class AcceptanceCriteriaColumnGenerator(ColumnGeneratorFullColumn[AcceptanceCriteriaColumnConfig]):
    """Column generator that grades acceptance criteria text via regex detectors."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"✅ Grading column {self.config.name!r} as acceptance criteria")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_score: {self.config.min_score}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = "\n".join(str(v) for v in row.values if v is not None)
            results.append(build_row_output(validate_document(text), self.config))

        data = data.copy()
        data[self.config.name] = results
        return data
