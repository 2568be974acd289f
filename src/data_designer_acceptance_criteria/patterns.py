"""Compiled rule tables shared by the acceptance criteria detectors.

Every pattern is compiled once at import time and treated as read-only.
Section headings anchor at line starts (``re.MULTILINE``); everything else is
case-insensitive and may match anywhere in the document.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Section:
    name: str
    pattern: re.Pattern[str]
    weight: int


def _heading(words: str) -> re.Pattern[str]:
    # Markdown ``#`` markers are optional so pasted plain-text headings still count.
    return re.compile(r"^[ \t]*(?:#+[ \t]*)?" + words, re.IGNORECASE | re.MULTILINE)


SUMMARY_RE = _heading(r"summary")
ACCEPTANCE_CRITERIA_RE = _heading(r"acceptance\s+criteria")
OUT_OF_SCOPE_RE = _heading(r"out\s+of\s+scope")

REQUIRED_SECTIONS: tuple[Section, ...] = (
    Section("Summary", SUMMARY_RE, 3),
    Section("Acceptance Criteria", ACCEPTANCE_CRITERIA_RE, 4),
    Section("Out of Scope", OUT_OF_SCOPE_RE, 2),
)
TOTAL_SECTION_WEIGHT = sum(s.weight for s in REQUIRED_SECTIONS)

CHECKBOX_RE = re.compile(r"^[ \t]*-[ \t]*\[[ \t]*x?[ \t]*\]", re.IGNORECASE | re.MULTILINE)

# ---------------------------------------------------------------------------
# Clarity
# ---------------------------------------------------------------------------

ACTION_VERBS = (
    "implement", "create", "build", "render", "handle", "display", "show", "hide",
    "enable", "disable", "validate", "submit", "load", "save", "delete", "update",
    "fetch", "send", "receive", "trigger", "navigate", "redirect", "authenticate",
    "authorize",
)
ACTION_VERB_RE = re.compile(r"\b(" + "|".join(ACTION_VERBS) + r")\b", re.IGNORECASE)

METRIC_UNITS = (
    "ms", "milliseconds?", "seconds?", "s", "%", "percent", "kb", "mb", "gb", "tb",
    "px", "items?", "users?", "requests?", "errors?", "days?", "hours?", "minutes?",
    "calls?", "connections?", "records?", "retries", "retry", "attempts?", "rows?",
    "entries", "entry", "results?", "pages?", "clicks?", "taps?", "events?",
)
# A bare number is not a metric: the unit group is mandatory.
METRIC_RE = re.compile(
    r"(?:≤|≥|<|>|=|under|within|less than|more than|at least|at most)?\s*"
    r"\d+(?:\.\d+)?\s*(" + "|".join(METRIC_UNITS) + r")(?!\w)",
    re.IGNORECASE,
)
THRESHOLD_RE = re.compile(
    r"\b(exactly|at least|at most|maximum|minimum|up to|no more than|no less than)\s+\d+",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Testability
# ---------------------------------------------------------------------------

VAGUE_TERM_RE = re.compile(
    r"\b(works?\s+correctly|handles?\s+properly|appropriate(?:ly)?|intuitive(?:ly)?"
    r"|user[- ]friendly|seamless(?:ly)?|fast|slow|good|bad|nice|better|worse"
    r"|adequate(?:ly)?|sufficient(?:ly)?|reasonable|reasonably|acceptable|properly"
    r"|correctly|as\s+expected|as\s+needed)\b",
    re.IGNORECASE,
)
# Roles span up to eight words on one line ("as the registered user I want").
# The bound keeps each "as a" start from rescanning the rest of a long line.
USER_STORY_RE = re.compile(
    r"\bas\s+(?:a|an|the)\s+(?:\w+[ \t]+){0,7}?\w+,?\s*\bi\s+want\b",
    re.IGNORECASE,
)
# Only at the start of a line or checkbox item, never mid-sentence.
GHERKIN_RE = re.compile(
    r"^[ \t]*(?:-[ \t]*\[[ \t]*x?[ \t]*\][ \t]*)?(given|when|then)[ \t]+",
    re.IGNORECASE | re.MULTILINE,
)
COMPOUND_RE = re.compile(r"\b(and|or)\b", re.IGNORECASE)

IMPLEMENTATION_TERMS = (
    r"postgres(?:ql)?", "mysql", "mongodb", "redis", "sql", "react", "vue", "angular",
    "svelte", "tailwind", "css", "scss", "sass", "aws", "lambda", "s3", "ec2", "gcp",
    "azure", "docker", "kubernetes", "k8s", r"api\s+endpoint", r"microservices?",
    "graphql", r"rest\s+api", "webpack", "vite", "npm", "yarn",
)
IMPLEMENTATION_RE = re.compile(r"\b(" + "|".join(IMPLEMENTATION_TERMS) + r")\b", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Completeness
# ---------------------------------------------------------------------------

ERROR_CASE_RE = re.compile(
    r"\b(error|fail|invalid|empty|null|undefined|missing|timeout|offline|denied"
    r"|unauthorized|forbidden|not found|exception)\b",
    re.IGNORECASE,
)
# No bare "first", "last" or "none": they show up in ordinary prose.
EDGE_CASE_RE = re.compile(
    r"\b(edge\s+case|boundary\s+condition|boundary\s+value|upper\s+limit|lower\s+limit"
    r"|maximum\s+value|minimum\s+value|empty\s+state|no\s+results|only\s+one"
    r"|zero\s+items?|overflow|underflow|race\s+condition|concurrent|simultaneous)\b",
    re.IGNORECASE,
)
PERMISSION_RE = re.compile(
    r"\b(permission|role|admin|user|guest|authenticated|logged in|logged out)\b",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_WHITESPACE_RE = re.compile(r"\s+")


def count_matches(pattern: re.Pattern[str], text: str) -> int:
    """Total number of hits, repeats included."""
    return sum(1 for _ in pattern.finditer(text))


def unique_matches(pattern: re.Pattern[str], text: str) -> tuple[str, ...]:
    """Distinct lowercased hits in first-seen order."""
    seen: dict[str, None] = {}
    for m in pattern.finditer(text):
        seen.setdefault(_WHITESPACE_RE.sub(" ", m.group(0).strip().lower()), None)
    return tuple(seen)
