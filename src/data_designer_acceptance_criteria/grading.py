from __future__ import annotations

_GRADES = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))
_LABELS = ((80, "Excellent"), (70, "Ready"), (50, "Needs Work"), (30, "Draft"))
_COLORS = ((70, "green"), (50, "yellow"), (30, "orange"))


def _step(value: float, table: tuple[tuple[int, str], ...], floor: str) -> str:
    for minimum, name in table:
        if value >= minimum:
            return name
    return floor


def letter_grade(total: float) -> str:
    """A (90+), B (80+), C (70+), D (60+), else F."""
    return _step(total, _GRADES, "F")


def score_label(total: float) -> str:
    return _step(total, _LABELS, "Incomplete")


def color_tier(score: float, max_score: float = 100) -> str:
    """Color name for a score, measured as a percentage of ``max_score``."""
    percentage = (score / max_score) * 100 if max_score > 0 else 0
    return _step(percentage, _COLORS, "red")


def score_band(total: float) -> tuple[str, str, str]:
    return letter_grade(total), score_label(total), color_tier(total)
