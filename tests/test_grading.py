from data_designer_acceptance_criteria.grading import color_tier, letter_grade, score_band, score_label


class TestLetterGrade:
    def test_boundaries(self):
        assert [letter_grade(s) for s in (100, 90, 89, 80, 79, 70, 69, 60, 59, 0)] == [
            "A", "A", "B", "B", "C", "C", "D", "D", "F", "F",
        ]


class TestScoreLabel:
    def test_boundaries(self):
        assert score_label(80) == "Excellent"
        assert score_label(79) == "Ready"
        assert score_label(70) == "Ready"
        assert score_label(69) == "Needs Work"
        assert score_label(50) == "Needs Work"
        assert score_label(49) == "Draft"
        assert score_label(30) == "Draft"
        assert score_label(29) == "Incomplete"
        assert score_label(0) == "Incomplete"


class TestColorTier:
    def test_boundaries(self):
        assert color_tier(70) == "green"
        assert color_tier(69) == "yellow"
        assert color_tier(50) == "yellow"
        assert color_tier(49) == "orange"
        assert color_tier(30) == "orange"
        assert color_tier(29) == "red"

    def test_dimension_percentage(self):
        assert color_tier(18, max_score=25) == "green"
        assert color_tier(10, max_score=20) == "yellow"
        assert color_tier(0, max_score=0) == "red"

    def test_every_integer_has_exactly_one_band(self):
        previous = None
        for total in range(101):
            band = score_band(total)
            assert all(band)
            if previous is not None:
                # monotone: never drops to a worse tier as the score rises
                assert "FDCBA".index(band[0]) >= "FDCBA".index(previous[0])
            previous = band
