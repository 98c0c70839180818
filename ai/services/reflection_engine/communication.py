# -*- coding: utf-8 -*-
"""
Communication coach: speaking-style report and a light grammar check.

Same shape as the reflection engine (fixed rules, fixed fallback) but smaller:
- analyze_communication_style: word count / avg sentence length / readability / vocabulary tier
- check_grammar: 3 independent advisories, or a single "no issues" line
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .clarity import round_half_up

_WS_RX = re.compile(r"\s+")
_SENTENCE_SPLIT_RX = re.compile(r"[.!?]+")
_LOWER_I_RX = re.compile(r"\bi\s")
_TERMINAL_RX = re.compile(r"[.!?]$")

LONG_SENTENCE_WORDS = 25
LONG_WORD_CHARS = 8
SUSPICIOUS_WORD_CHARS = 15

ISSUE_LOWERCASE_I = '⚠ Capitalize "I" when referring to yourself'
ISSUE_NO_PUNCTUATION = "⚠ Consider ending with punctuation"
ISSUE_LONG_WORDS = "⚠ Some words are very long - verify spelling"
NO_ISSUES = "✅ No major grammar issues detected"


def _sentence_count(text: str) -> int:
    # 空の区切り（末尾の "." の後など）は数えない。最低 1。
    segments = [s for s in _SENTENCE_SPLIT_RX.split(text) if s.strip()]
    return max(1, len(segments))


def _vocabulary_tier(ratio: float) -> str:
    if ratio > 0.3:
        return "Advanced"
    if ratio > 0.15:
        return "Moderate"
    return "Simple and clear"


def analyze_communication_style(text: str) -> Tuple[str, ...]:
    """Return the ordered style report lines for a speaking / writing sample."""
    stripped = text.strip()
    words = len(_WS_RX.split(stripped))
    sentences = _sentence_count(text)
    per_sentence = words / sentences

    lines: List[str] = [
        f"Word count: {words}",
        f"Avg words per sentence: {round_half_up(per_sentence)}",
    ]
    if per_sentence > LONG_SENTENCE_WORDS:
        lines.append("Consider shorter sentences for clarity")
    else:
        lines.append("Good sentence length for readability")

    long_words = sum(1 for w in text.split(" ") if len(w) > LONG_WORD_CHARS)
    lines.append(f"Vocabulary: {_vocabulary_tier(long_words / words)}")
    return tuple(lines)


def check_grammar(text: str) -> Tuple[str, ...]:
    issues: List[str] = []
    if _LOWER_I_RX.search(text):
        issues.append(ISSUE_LOWERCASE_I)
    if not _TERMINAL_RX.search(text.strip()):
        issues.append(ISSUE_NO_PUNCTUATION)
    if any(len(w) > SUSPICIOUS_WORD_CHARS for w in text.split(" ")):
        issues.append(ISSUE_LONG_WORDS)
    return tuple(issues) if issues else (NO_ISSUES,)


def format_grammar_report(issues: Iterable[str], separator: str = "\n") -> str:
    return separator.join(issues)
