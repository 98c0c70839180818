# -*- coding: utf-8 -*-
"""
Mirror チャット応答（固定文）

- 会話記憶なし（stateless）。メッセージ 1 件に対して 1 つの固定文を返す。
- ルールは上から順に評価し、最初にヒットしたものを採用する。
"""

from __future__ import annotations

import re
from typing import Tuple

_REPLY_RULES: Tuple[Tuple[re.Pattern, str], ...] = (
    (
        re.compile(r"confused|don't understand|unclear"),
        "Let's break this down together. What specific part feels confusing? "
        "Sometimes writing it out helps clarify our thoughts.",
    ),
    (
        re.compile(r"upset|sad|down|depressed"),
        "I hear you. It's okay to feel this way. Would you like to explore what's contributing "
        "to these feelings? Sometimes understanding the 'why' helps.",
    ),
    (
        re.compile(r"help|improve|better"),
        "That's a great mindset! Let's identify one small, specific action you can take today. "
        "What area of your life would you like to improve?",
    ),
    (
        re.compile(r"stress|anxious|overwhelm"),
        "Take a deep breath. You're doing more than you realize. Let's try a grounding exercise: "
        "Name 5 things you can see, 4 you can touch, 3 you can hear, 2 you can smell, and 1 you can taste.",
    ),
    (
        re.compile(r"thank|thanks|appreciate"),
        "You're welcome! I'm here whenever you need to reflect or talk. Your growth journey is inspiring. 🌱",
    ),
)

DEFAULT_REPLY = "That's interesting. Tell me more about your thoughts on this. What stands out most to you?"


def generate_reply(message: str) -> str:
    lower = message.lower()
    for rx, reply in _REPLY_RULES:
        if rx.search(lower):
            return reply
    return DEFAULT_REPLY
