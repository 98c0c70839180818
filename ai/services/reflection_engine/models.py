
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

class EmotionTag(str, Enum):
    JOY = "joy"
    STRESS = "stress"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    CONFUSION = "confusion"
    NEUTRAL = "neutral"  # fallback only, never detected from keywords

# detection order (NEUTRAL excluded)
LABELS = tuple(t for t in EmotionTag if t is not EmotionTag.NEUTRAL)

@dataclass(frozen=True)
class Analysis:
    summary: str
    emotions: Tuple[EmotionTag, ...]
    patterns: Tuple[str, ...]
    strengths: Tuple[str, ...]
    blind_spots: Tuple[str, ...]
    root_cause: str
    biases: Tuple[str, ...]
    improvements: Tuple[str, ...]
    thought_clarity: int      # 40..100
    communication_clarity: int  # 50..95

    def to_dict(self) -> Dict[str, Any]:
        # camelCase keys, the form the app/history store has always used
        return {
            "summary": self.summary,
            "emotions": [e.value for e in self.emotions],
            "patterns": list(self.patterns),
            "strengths": list(self.strengths),
            "blindSpots": list(self.blind_spots),
            "rootCause": self.root_cause,
            "biases": list(self.biases),
            "improvements": list(self.improvements),
            "thoughtClarity": self.thought_clarity,
            "communicationClarity": self.communication_clarity,
        }

@dataclass(frozen=True)
class ClarityScores:
    thought: int
    communication: int
