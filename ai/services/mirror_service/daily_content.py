# -*- coding: utf-8 -*-
"""
今日の単語 / フレーズ / 書く練習のお題、気分への一言。

- 日付で決まるローテーション（同じ日は何度呼んでも同じ内容）。
- テーブルは固定。増やすときは末尾に足す（既存の日の割り当ては変わる点に注意）。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DailyWord:
    word: str
    definition: str
    pronunciation: str


@dataclass(frozen=True)
class DailyPhrase:
    phrase: str
    definition: str


WORDS = (
    DailyWord("Perspicacious", "Having a ready insight into things; perceptive", "per-spi-KAY-shus"),
    DailyWord("Equanimity", "Mental calmness and composure, especially in difficult situations", "ee-kwuh-NIM-i-tee"),
    DailyWord("Sagacious", "Having or showing keen mental discernment and good judgment", "suh-GAY-shus"),
    DailyWord("Resilience", "The capacity to recover quickly from difficulties", "ri-ZIL-yuhns"),
)

PHRASES = (
    DailyPhrase("Food for thought", "Something worth thinking carefully about"),
    DailyPhrase("Break the ice", "To make people feel more comfortable"),
    DailyPhrase("Piece of cake", "Something very easy to do"),
)

PROMPTS = (
    "Describe a moment today when you felt truly present.",
    "What would you tell your younger self about handling challenges?",
    "Write about a habit you want to build and why it matters to you.",
)

MOOD_RESPONSES: Dict[str, str] = {
    "amazing": "That's wonderful! Let's channel this positive energy into reflection and growth.",
    "good": "Great to hear! A positive mindset is perfect for self-improvement.",
    "neutral": "Sometimes neutral is balanced. Let's explore what's on your mind.",
    "stressed": "I understand. Let's work through this together with some calming reflection.",
    "upset": "I'm here for you. Take a moment to express what you're feeling.",
}


def _pick(table, day: date, offset: int = 0):
    return table[(day.toordinal() + offset) % len(table)]


def daily_content(day: Optional[date] = None) -> Dict[str, Any]:
    day = day or date.today()
    word = _pick(WORDS, day)
    phrase = _pick(PHRASES, day)
    # 例文の 2 語目は当日の単語と重ならないよう 1 つずらす
    partner = _pick(WORDS, day, offset=1)
    return {
        "date": day.isoformat(),
        "word": asdict(word),
        "phrase": asdict(phrase),
        "sentence": f"The {word.word.lower()} leader maintained {partner.word.lower()} during the crisis.",
        "pronunciation": f'Try saying "{word.word}" slowly: {word.pronunciation} (emphasize the capitalized syllable)',
        "prompt": _pick(PROMPTS, day),
    }


def mood_response(mood: Optional[str]) -> str:
    key = (mood or "").strip().lower()
    return MOOD_RESPONSES.get(key, MOOD_RESPONSES["neutral"])
