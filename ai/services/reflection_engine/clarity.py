
from __future__ import annotations
import math
from typing import List
from .models import ClarityScores
from . import rules as R

THOUGHT_MIN, THOUGHT_MAX = 40, 100
COMM_FLOOR, COMM_BASE, COMM_PER_SENTENCE, COMM_MAX = 50, 60, 5, 95
COMM_MIN_CHARS = 50  # at or below: fixed floor score

def round_half_up(x: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upward
    return int(math.floor(x + 0.5))

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))

def split_sentences(text: str) -> List[str]:
    """Sentences with terminal punctuation. A trailing fragment without it is dropped."""
    return R.SENTENCE_RX.findall(text)

def _word_count(segment: str) -> int:
    return len(segment.split(" "))

def score_clarity(text: str) -> ClarityScores:
    sentences = split_sentences(text)
    # no terminal punctuation at all: the whole text is a single sentence
    basis = sentences or [text]
    avg = sum(_word_count(s) for s in basis) / (len(basis) or 1)
    thought = round_half_up(clamp(100 - avg * 2, THOUGHT_MIN, THOUGHT_MAX))
    if len(text) > COMM_MIN_CHARS:
        communication = round_half_up(min(COMM_MAX, COMM_BASE + len(sentences) * COMM_PER_SENTENCE))
    else:
        communication = COMM_FLOOR
    return ClarityScores(thought=thought, communication=communication)

def extract_summary(text: str) -> str:
    m = R.SENTENCE_RX.search(text)
    if m:
        return m.group(0).strip()
    return text[:R.SUMMARY_FALLBACK_CHARS] + "..."
