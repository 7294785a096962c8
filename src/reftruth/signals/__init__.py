"""Signals module: fixed-vocabulary lexical markers in claim text.

Three kinds of signal feed the coherence sub-scores:
- Absolute language ("always", "never", "everyone", ...)
- Vague pronouns ("they", "people", "we", ...)
- Time references (relative phrases, month names, 19xx/20xx years)

Matching is plain substring / word-boundary regex. There is no parsing.
"""

from reftruth.signals.lexical import (
    ABSOLUTES,
    MONTH_WORDS,
    RELATIVE_TIME,
    VAGUE_PRONOUNS,
    LexicalSignals,
    count_vague_pronouns,
    extract_time_references,
    find_absolutes,
    has_year,
    scan_signals,
)

__all__ = [
    "ABSOLUTES",
    "MONTH_WORDS",
    "RELATIVE_TIME",
    "VAGUE_PRONOUNS",
    "LexicalSignals",
    "count_vague_pronouns",
    "extract_time_references",
    "find_absolutes",
    "has_year",
    "scan_signals",
]
