import pytest
from pydantic import ValidationError

from data_designer_acceptance_criteria.config import AcceptanceCriteriaColumnConfig
from data_designer_acceptance_criteria.core import validate_document
from data_designer_acceptance_criteria.generator import build_row_output


DOC = """## Summary
Implement invoice export.
## Acceptance Criteria
- [ ] Display the export button within 200ms
- [ ] Show an error when the export times out after 30 seconds
- [ ] Save up to 500 rows per file
## Out of Scope
- Scheduled exports
"""


class TestAcceptanceCriteriaColumnConfig:
    def test_defaults(self):
        config = AcceptanceCriteriaColumnConfig(name="ac_check", target_columns=["criteria"])
        assert config.min_score == 70
        assert config.include_issues
        assert not config.include_dimensions
        assert config.column_type == "acceptance-criteria"
        assert config.required_columns == ["criteria"]
        assert config.side_effect_columns == []

    def test_rejects_out_of_range_min_score(self):
        with pytest.raises(ValidationError):
            AcceptanceCriteriaColumnConfig(name="ac_check", target_columns=["criteria"], min_score=150)


class TestBuildRowOutput:
    def test_default_output(self):
        config = AcceptanceCriteriaColumnConfig(name="ac_check", target_columns=["criteria"])
        result = validate_document(DOC)
        output = build_row_output(result, config)
        assert set(output) == {"is_valid", "ac_score", "ac_grade", "ac_label", "ac_issues"}
        assert output["ac_score"] == result.total_score
        assert output["is_valid"] == (result.total_score >= 70)
        assert output["ac_issues"] == result.all_issues() + list(result.slop_detection.issues)

    def test_empty_text_is_invalid(self):
        config = AcceptanceCriteriaColumnConfig(name="ac_check", target_columns=["criteria"], min_score=0)
        output = build_row_output(validate_document(""), config)
        assert output["ac_score"] == 0
        assert output["ac_grade"] == "F"
        assert output["ac_label"] == "Incomplete"
        assert output["is_valid"]

    def test_dimensions_only(self):
        config = AcceptanceCriteriaColumnConfig(
            name="ac_check", target_columns=["criteria"], include_issues=False, include_dimensions=True
        )
        output = build_row_output(validate_document(DOC), config)
        assert "ac_issues" not in output
        assert set(output["ac_dimensions"]) == {"structure", "clarity", "testability", "completeness"}
        assert output["ac_dimensions"]["structure"]["max_score"] == 25
