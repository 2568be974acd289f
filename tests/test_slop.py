import pytest

from data_designer_acceptance_criteria.slop import SLOP_CATEGORIES, SlopRules, detect_slop


SLOPPY_TEXT = "It's worth noting that we leverage a robust cache. Perhaps it helps."

PRECISE_TEXT = (
    "- [ ] Display the invoice list within 200ms\n"
    "- [ ] Show an error message when the upload exceeds 10 MB\n"
)


class TestDetectSlop:
    def test_precise_text_has_no_penalty(self):
        result = detect_slop(PRECISE_TEXT)
        assert result.penalty == 0
        assert result.issues == ()

    def test_empty_and_non_string(self):
        for value in ("", "   ", None, 12):
            result = detect_slop(value)
            assert result.penalty == 0
            assert result.issues == ()

    def test_penalty_sums_distinct_phrase_weights(self):
        result = detect_slop(SLOPPY_TEXT)
        assert result.penalty == 5.0
        assert {h.phrase for h in result.hits} == {"it's worth noting", "leverage", "robust", "perhaps"}

    def test_issues_ordered_by_severity_then_position(self):
        result = detect_slop(SLOPPY_TEXT)
        assert result.issues == (
            "Filler phrase: 'it's worth noting'",
            "Buzzword: 'leverage'",
            "Buzzword: 'robust'",
        )

    def test_repeats_do_not_grow_penalty(self):
        result = detect_slop("A robust form. A robust table. A robust chart.")
        assert result.penalty == 1.0
        assert result.issues == ("Buzzword: 'robust' (3x)",)

    def test_frequency_breaks_severity_ties(self):
        result = detect_slop("Perhaps it is robust. Robust again.")
        assert result.issues[0] == "Buzzword: 'robust' (2x)"

    def test_curly_apostrophe(self):
        assert detect_slop("It’s important to note the limit.").penalty == 2.0

    def test_ai_disclosure_is_most_severe(self):
        result = detect_slop("Perhaps. As an AI, I cannot verify this.")
        assert result.issues[0] == "AI self-disclosure: 'as an ai'"

    def test_placeholders(self):
        result = detect_slop("- [ ] Display [insert metric here] on load")
        assert result.penalty == 3.0
        assert result.hits[0].category == "placeholder"

    def test_rubric_vocabulary_is_not_slop(self):
        assert detect_slop("Navigate to a seamless dashboard").penalty == 0

    def test_custom_issue_limit(self):
        result = detect_slop(SLOPPY_TEXT, rules=SlopRules(issue_limit=1))
        assert len(result.issues) == 1

    def test_categories_are_enumerable(self):
        assert set(SLOP_CATEGORIES) == {"filler_phrase", "hedging", "buzzword", "transition", "meta_chat", "ai_disclosure"}
        assert all(SLOP_CATEGORIES.values())

    def test_categories_are_read_only(self):
        with pytest.raises(TypeError):
            SLOP_CATEGORIES["buzzword"] = ("synergy",)


class TestSlopRules:
    def test_hashable(self):
        assert hash(SlopRules()) == hash(SlopRules())
        assert SlopRules(buzzword_weight=3) != SlopRules()

    def test_weight_override(self):
        # filler 2 + leverage 3 + robust 3 + perhaps 1
        result = detect_slop(SLOPPY_TEXT, rules=SlopRules(buzzword_weight=3))
        assert result.penalty == 9.0
        assert detect_slop(SLOPPY_TEXT).penalty == 5.0

    def test_placeholder_weight_override(self):
        assert detect_slop("Show [TBD] on load", rules=SlopRules(placeholder_weight=1)).penalty == 1.0
