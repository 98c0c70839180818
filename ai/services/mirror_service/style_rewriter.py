# -*- coding: utf-8 -*-
"""style_rewriter.py

目的
----
- ジャーナル本文を「Professional / Casual / Concise」の 3 つの文体に書き換えて見せる。
- 言い換えは生成ではなくテンプレ置換のみ（同じ入力なら常に同じ出力）。

設計
----
- スタイルは ID で登録し、表示名と説明を持たせる。
- 未登録の style_id は StyleRewriteError（ValueError）。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List


class StyleRewriteError(ValueError):
    """Unknown rewrite style."""


@dataclass(frozen=True)
class RewriteStyleInfo:
    style_id: str
    label: str
    description: str


_FILLER_RX = re.compile(r"\b(um|uh|like|you know)\b", flags=re.IGNORECASE)
CASUAL_PREVIEW_CHARS = 100


def _professional(text: str) -> str:
    return f"In professional terms: {_FILLER_RX.sub('', text).strip()}"


def _casual(text: str) -> str:
    return f"Simply put: {text[:CASUAL_PREVIEW_CHARS]}... (more naturally flowing)"


def _concise(text: str) -> str:
    return text.split(".")[0] + ". Key point captured efficiently."


_STYLES: Dict[str, RewriteStyleInfo] = {
    "professional": RewriteStyleInfo(
        style_id="professional",
        label="Professional",
        description="フィラー語（um / uh / like / you know）を取り除いて前置きを付ける",
    ),
    "casual": RewriteStyleInfo(
        style_id="casual",
        label="Casual",
        description="先頭 100 文字だけを軽い口調で包む",
    ),
    "concise": RewriteStyleInfo(
        style_id="concise",
        label="Concise",
        description="最初の文だけを残す",
    ),
}

_RENDERERS: Dict[str, Callable[[str], str]] = {
    "professional": _professional,
    "casual": _casual,
    "concise": _concise,
}


def list_styles() -> List[RewriteStyleInfo]:
    return list(_STYLES.values())


def rewrite(text: str, style_id: str) -> str:
    renderer = _RENDERERS.get(style_id)
    if renderer is None:
        raise StyleRewriteError(f"Unknown rewrite style: {style_id}")
    return renderer(text)


def rewrite_all(text: str) -> List[Dict[str, str]]:
    """登録順に全スタイルで書き換える。"""
    return [{"style": info.label, "text": rewrite(text, info.style_id)} for info in _STYLES.values()]
