"""Lexical signal extraction.

Scans free text for absolute-language markers, vague-pronoun counts and
time references. The vocabularies are fixed; the score calibration in
``reftruth.scoring.coherence`` depends on this exact matching granularity.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

ABSOLUTES: tuple[str, ...] = ("always", "never", "everyone", "no one", "all", "none")

RELATIVE_TIME: tuple[str, ...] = (
    "today",
    "yesterday",
    "tomorrow",
    "last week",
    "last month",
    "last year",
    "this week",
    "this month",
    "this year",
    "recently",
    "soon",
)

# Abbreviations carry a trailing space so "mar" does not hit "market".
MONTH_WORDS: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
    "jan ",
    "feb ",
    "mar ",
    "apr ",
    "jun ",
    "jul ",
    "aug ",
    "sep ",
    "oct ",
    "nov ",
    "dec ",
)

VAGUE_PRONOUNS: tuple[str, ...] = ("they", "people", "everyone", "no one", "we")

YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b", re.ASCII)

VAGUE_PRONOUN_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(p) for p in VAGUE_PRONOUNS) + r")\b",
    re.IGNORECASE | re.ASCII,
)


def extract_time_references(text: str | None) -> list[str]:
    """Extract time tokens from text.

    Vocabulary tokens (relative phrases, then months) are matched as
    case-insensitive substrings; 4-digit 19xx/20xx years are appended in
    the order they occur. Duplicates are dropped, first occurrence wins.
    """
    lower = (text or "").lower()
    refs = [token for token in (*RELATIVE_TIME, *MONTH_WORDS) if token in lower]
    refs.extend(YEAR_PATTERN.findall(lower))
    return list(dict.fromkeys(refs))


def find_absolutes(claim: str | None) -> list[str]:
    """Return each absolute-vocabulary word contained in the claim, once."""
    lower = (claim or "").lower()
    return [word for word in ABSOLUTES if word in lower]


def count_vague_pronouns(claim: str | None) -> int:
    """Count whole-word vague pronoun occurrences (not distinct words)."""
    return len(VAGUE_PRONOUN_PATTERN.findall(claim or ""))


def has_year(*texts: str | None) -> bool:
    """Whether a 19xx/20xx year appears in the space-joined texts."""
    joined = " ".join(t or "" for t in texts)
    return YEAR_PATTERN.search(joined) is not None


def is_relative_time(token: str) -> bool:
    return token in RELATIVE_TIME


def is_month(token: str) -> bool:
    return (token or "").lower() in MONTH_WORDS


@dataclass(frozen=True)
class LexicalSignals:
    """All lexical signals extracted from one claim record."""

    time_refs: tuple[str, ...] = ()
    absolutes: tuple[str, ...] = ()
    vague_pronouns: int = 0
    has_explicit_month: bool = False
    has_year: bool = False

    @property
    def has_relative(self) -> bool:
        return any(is_relative_time(t) for t in self.time_refs)


def scan_signals(claim: str | None, context: str | None) -> LexicalSignals:
    """Extract every lexical signal used by the scoring path.

    Time references are taken from the claim and then the context.
    Year detection looks at context and claim only.
    """
    time_refs = tuple(
        dict.fromkeys(
            extract_time_references(claim) + extract_time_references(context)
        )
    )
    return LexicalSignals(
        time_refs=time_refs,
        absolutes=tuple(find_absolutes(claim)),
        vague_pronouns=count_vague_pronouns(claim),
        has_explicit_month=any(is_month(t) for t in time_refs),
        has_year=has_year(context, claim),
    )
