
from __future__ import annotations
from typing import Iterable, List, Tuple
from .models import EmotionTag, LABELS
from . import rules as R

# Detectors — each one scans the same text independently and returns labels.
# Policy:
# - Never return an empty sequence: substitute the detector's default instead.
# - Rule order is output order.
# - Lower-casing happens here, callers pass the raw text.

def collect_labels(text: str, rule_set: Iterable[R.Rule], default: str) -> Tuple[str, ...]:
    """Collect labels of matching rules in order; (default,) when nothing matches."""
    hits = [r.label for r in rule_set if r.pattern.search(text)]
    return tuple(hits) if hits else (default,)

def _with_default(labels: List[str], default: str) -> Tuple[str, ...]:
    return tuple(labels) if labels else (default,)

def detect_emotions(text: str) -> Tuple[EmotionTag, ...]:
    lower = text.lower()
    found = [tag for tag in LABELS if any(kw in lower for kw in R.EMOTION_KEYWORDS[tag])]
    return tuple(found) if found else (EmotionTag.NEUTRAL,)

def detect_patterns(text: str) -> Tuple[str, ...]:
    return collect_labels(text.lower(), R.PATTERN_RULES, R.DEFAULT_PATTERN)

def detect_biases(text: str) -> Tuple[str, ...]:
    return collect_labels(text.lower(), R.BIAS_RULES, R.DEFAULT_BIAS)

def identify_strengths(text: str) -> Tuple[str, ...]:
    lower = text.lower()
    out: List[str] = []
    if len(text) > R.DETAILED_MIN_CHARS:
        out.append(R.DETAILED_LABEL)
    out.extend(r.label for r in R.STRENGTH_RULES if r.pattern.search(lower))
    return _with_default(out, R.DEFAULT_STRENGTH)

def identify_blind_spots(text: str) -> Tuple[str, ...]:
    lower = text.lower()
    # inverse sense: a missing cue is the blind spot
    out = [r.label for r in R.BLIND_SPOT_ABSENCE_RULES if not r.pattern.search(lower)]
    if len(R.SENTENCE_DELIMITER_RX.split(text)) < R.SHALLOW_SEGMENT_LIMIT:
        out.append(R.SHALLOW_LABEL)
    return _with_default(out, R.DEFAULT_BLIND_SPOT)

def classify_root_cause(text: str) -> str:
    lower = text.lower()
    for r in R.ROOT_CAUSE_RULES:
        if r.pattern.search(lower):
            return r.label
    return R.DEFAULT_ROOT_CAUSE

def suggest_improvements(text: str) -> Tuple[str, ...]:
    out: List[str] = []
    if R.NEGATION_RX.search(text.lower()):
        out.append(R.REFRAME_SUGGESTION)
    # naive single-space split, same word count the app has always shown
    if len(text.split(" ")) < R.EXPAND_MIN_WORDS:
        out.append(R.EXPAND_SUGGESTION)
    out.extend(R.CLOSING_SUGGESTIONS)
    return tuple(out)
