# -*- coding: utf-8 -*-
"""
Static keyword / regex tables for the reflection engine.

- すべて import 時に確定する不変データ（実行時に書き換えない）。
- ルールは「評価順 = 出力順」。順番を入れ替えると結果のラベル順も変わる。
- キーワードは部分一致（トークン化しない）。"sadness" は "sad" にヒットする。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Tuple

from .models import EmotionTag


@dataclass(frozen=True)
class Rule:
    pattern: re.Pattern
    label: str


def _rule(rx: str, label: str) -> Rule:
    return Rule(pattern=re.compile(rx), label=label)


# ---------- Emotions ----------

EMOTION_KEYWORDS: Dict[EmotionTag, Tuple[str, ...]] = {
    EmotionTag.JOY: ("happy", "excited", "joy", "great", "amazing", "wonderful", "love"),
    EmotionTag.STRESS: ("stress", "anxious", "worried", "overwhelmed", "pressure", "tense"),
    EmotionTag.SADNESS: ("sad", "depressed", "down", "upset", "disappointed", "hurt"),
    EmotionTag.ANGER: ("angry", "frustrated", "annoyed", "irritated", "mad"),
    EmotionTag.FEAR: ("afraid", "scared", "fear", "nervous", "terrified"),
    EmotionTag.CONFUSION: ("confused", "uncertain", "unclear", "lost", "unsure"),
}

# ---------- Patterns / Biases ----------

PATTERN_RULES: Tuple[Rule, ...] = (
    _rule(r"\bi\s+(always|never|constantly|can't|won't)", "Absolute thinking detected"),
    _rule(r"\bshould\b|\bmust\b|\bhave to\b", "Self-imposed pressure"),
    _rule(r"\bwhy (did|do|does|is)", "Self-questioning and reflection"),
    _rule(r"\bbut\b|\bhowever\b", "Considering alternatives"),
)
DEFAULT_PATTERN = "Thoughtful exploration of ideas"

BIAS_RULES: Tuple[Rule, ...] = (
    _rule(r"\balways\b|\bnever\b|\beveryone\b|\bno one\b", "Overgeneralization"),
    _rule(r"\bshould\b|\bmust\b", "Should statements"),
    _rule(r"\bi (can't|won't|couldn't)", "Negative self-labeling"),
)
DEFAULT_BIAS = "No significant biases detected"

# ---------- Strengths / Blind spots ----------

DETAILED_MIN_CHARS = 100

STRENGTH_RULES: Tuple[Rule, ...] = (
    _rule(r"\bbecause\b|\bsince\b|\btherefore\b", "Logical reasoning"),
    _rule(r"\bfeel\b|\bfeeling\b|\bemot", "Emotional awareness"),
)
DETAILED_LABEL = "Detailed self-expression"
DEFAULT_STRENGTH = "Clear communication"

# 「含まれていない」ときにラベルを出す（逆向きのルール）
BLIND_SPOT_ABSENCE_RULES: Tuple[Rule, ...] = (
    _rule(r"\bother|\bpeople|\bthey\b", "Limited external perspective"),
    _rule(r"\bsolution|\bfix|\bimprove|\bchange\b", "Focus on action steps needed"),
)
SHALLOW_SEGMENT_LIMIT = 3
SHALLOW_LABEL = "Could explore thoughts more deeply"
DEFAULT_BLIND_SPOT = "Well-rounded perspective"

# ---------- Root cause (first match wins) ----------

ROOT_CAUSE_RULES: Tuple[Rule, ...] = (
    _rule(r"stress|pressure|overwhelm", "Possible overcommitment or unrealistic expectations"),
    _rule(r"fear|anxious|worry", "Uncertainty about outcomes or fear of failure"),
    _rule(r"sad|disappoint|hurt", "Unmet expectations or loss"),
)
DEFAULT_ROOT_CAUSE = "Exploring personal growth and understanding"

# ---------- Improvements ----------

NEGATION_RX = re.compile(r"\bi\s+(can't|won't|never)")
REFRAME_SUGGESTION = "Reframe negative statements into possibilities"
EXPAND_MIN_WORDS = 30
EXPAND_SUGGESTION = "Expand on your thoughts for deeper insight"
CLOSING_SUGGESTIONS: Tuple[str, ...] = (
    "Consider multiple perspectives on this situation",
    "Identify one actionable step forward",
)

# ---------- Sentences ----------

SENTENCE_RX = re.compile(r"[^.!?]+[.!?]+")
SENTENCE_DELIMITER_RX = re.compile(r"[.!?]")
SUMMARY_FALLBACK_CHARS = 100
