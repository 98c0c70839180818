
from __future__ import annotations
from .models import Analysis
from .clarity import score_clarity, extract_summary
from .detectors import (
    detect_emotions, detect_patterns, detect_biases, identify_strengths,
    identify_blind_spots, classify_root_cause, suggest_improvements,
)

# Reflection analysis — pure function of the text.
# Policy:
# - Caller rejects empty / whitespace-only text before calling (no validation here).
# - No I/O, no shared state: the same text always yields an equal Analysis.
# - Every detector sees the raw text; none depends on another's output.

def analyze(text: str) -> Analysis:
    clarity = score_clarity(text)
    return Analysis(
        summary=extract_summary(text),
        emotions=detect_emotions(text),
        patterns=detect_patterns(text),
        strengths=identify_strengths(text),
        blind_spots=identify_blind_spots(text),
        root_cause=classify_root_cause(text),
        biases=detect_biases(text),
        improvements=suggest_improvements(text),
        thought_clarity=clarity.thought,
        communication_clarity=clarity.communication,
    )
