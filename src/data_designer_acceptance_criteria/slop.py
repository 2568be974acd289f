# Filler-language detector for acceptance criteria. Phrase tables follow the
# slop-guard prose linter (https://github.com/eric-tramel/slop-guard, MIT),
# trimmed to the phrases that make a criterion less precise.
#
# Scores distinct phrase hits only: repeating one filler phrase does not grow
# the penalty, using many different ones does.

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SlopRules:
    """Severity weights per category and how many issues to report."""

    ai_disclosure_weight: int = 5
    placeholder_weight: int = 3
    meta_chat_weight: int = 3
    filler_phrase_weight: int = 2
    buzzword_weight: int = 1
    hedging_weight: int = 1
    transition_weight: int = 1
    issue_limit: int = 3

    def weight(self, category: str) -> int:
        return getattr(self, f"{category}_weight")


DEFAULT_SLOP_RULES = SlopRules()

# ---------------------------------------------------------------------------
# Phrase tables
# ---------------------------------------------------------------------------

_FILLER_PHRASES = [
    "it's worth noting", "it's important to note", "at the end of the day",
    "in today's fast-paced", "let's dive in", "let's break this down",
    "without further ado", "in summary", "in conclusion", "in other words",
    "to put it simply", "the bottom line is", "the key takeaway", "needless to say",
    "it goes without saying", "for all intents and purposes", "at this point in time",
    "when it comes to", "plays a crucial role", "a wide range of",
]
_HEDGING = [
    "it seems", "it appears that", "might possibly", "could potentially", "perhaps",
    "arguably", "to some extent", "generally speaking", "in most cases", "more or less",
    "sort of", "kind of", "somewhat", "may or may not", "ideally", "hopefully",
]
# "navigate" and "seamless" are left out: the rubric already scores them.
_BUZZWORDS = [
    "leverage", "leverages", "synergy", "robust", "cutting-edge", "game-changing",
    "best-in-class", "world-class", "holistic", "paradigm", "groundbreaking",
    "revolutionary", "innovative", "streamline", "empower", "unlock", "elevate",
    "delve", "tapestry", "landscape", "comprehensive", "pivotal", "crucial",
    "next-generation", "state-of-the-art",
]
_TRANSITIONS = [
    "furthermore", "moreover", "additionally", "notably", "importantly",
    "interestingly", "remarkably",
]
_META_CHAT = [
    "great question", "i hope this helps", "let me know if", "feel free to",
    "would you like me to", "happy to help", "don't hesitate to",
]
_AI_DISCLOSURE = [
    "as an ai", "as a language model", "i don't have personal", "i'm just an ai",
    "as of my last training", "as of my knowledge cutoff",
]
_PLACEHOLDER_RE = re.compile(
    r"\[insert [^\]]*\]|\[describe [^\]]*\]|\[your [^\]]*\]|\[todo[^\]]*\]|\[tbd\]",
    re.IGNORECASE,
)


def _phrase_re(phrase: str) -> re.Pattern[str]:
    body = re.escape(phrase).replace("'", "['’]")
    return re.compile(r"\b" + body + r"\b", re.IGNORECASE)


SLOP_CATEGORIES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "filler_phrase": tuple(_FILLER_PHRASES),
    "hedging": tuple(_HEDGING),
    "buzzword": tuple(_BUZZWORDS),
    "transition": tuple(_TRANSITIONS),
    "meta_chat": tuple(_META_CHAT),
    "ai_disclosure": tuple(_AI_DISCLOSURE),
})
_COMPILED: tuple[tuple[str, str, re.Pattern[str]], ...] = tuple(
    (category, phrase, _phrase_re(phrase))
    for category, phrases in SLOP_CATEGORIES.items()
    for phrase in phrases
)

_LABELS = {
    "ai_disclosure": "AI self-disclosure",
    "placeholder": "Unfinished placeholder",
    "meta_chat": "Chat filler",
    "filler_phrase": "Filler phrase",
    "buzzword": "Buzzword",
    "hedging": "Hedging",
    "transition": "Filler transition",
}

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SlopHit:
    category: str
    phrase: str
    count: int
    weight: int
    position: int

    @property
    def issue(self) -> str:
        suffix = f" ({self.count}x)" if self.count > 1 else ""
        return f"{_LABELS[self.category]}: '{self.phrase}'{suffix}"

    def to_payload(self) -> dict[str, object]:
        return {
            "category": self.category,
            "phrase": self.phrase,
            "count": self.count,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class SlopResult:
    penalty: float
    issues: tuple[str, ...]
    hits: tuple[SlopHit, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "penalty": self.penalty,
            "issues": list(self.issues),
            "hits": [h.to_payload() for h in self.hits],
        }


_NO_SLOP = SlopResult(penalty=0.0, issues=())

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def detect_slop(text: object, rules: SlopRules | None = None) -> SlopResult:
    """Find filler, hedging and buzzword phrases in ``text``.

    Args:
        text: Document to scan. Anything that is not a non-empty string yields
            a zero penalty.
        rules: Optional weight overrides.

    Returns:
        ``SlopResult`` whose penalty is the summed weight of each distinct
        phrase found, and whose issues name the most severe phrases first.
    """
    if not isinstance(text, str) or not text.strip():
        return _NO_SLOP
    rules = rules or DEFAULT_SLOP_RULES

    hits: list[SlopHit] = []
    for category, phrase, pattern in _COMPILED:
        matches = list(pattern.finditer(text))
        if matches:
            hits.append(SlopHit(category, phrase, len(matches), rules.weight(category), matches[0].start()))

    placeholders: dict[str, list[int]] = {}
    for m in _PLACEHOLDER_RE.finditer(text):
        placeholders.setdefault(m.group(0).lower(), []).append(m.start())
    for placeholder, positions in placeholders.items():
        hits.append(SlopHit("placeholder", placeholder, len(positions), rules.placeholder_weight, positions[0]))

    if not hits:
        return _NO_SLOP

    hits.sort(key=lambda h: (-h.weight, -h.count, h.position))
    return SlopResult(
        penalty=float(sum(h.weight for h in hits)),
        issues=tuple(h.issue for h in hits[: rules.issue_limit]),
        hits=tuple(hits),
    )
