# -*- coding: utf-8 -*-
"""
Journal API for Mirror
----------------------
- POST /journal/entries   : ジャーナルを保存（タイトル省略時は "Untitled Entry"）
- GET  /journal/entries   : 直近のジャーナル（新しい順、プレビュー付き）
- POST /journal/analyze   : 感情とパターンだけの簡易解析（保存しない）
- POST /journal/rewrite   : Professional / Casual / Concise の 3 文体に書き換え
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, Query
from pydantic import BaseModel, Field

from reflection_engine import analyze

from .api_reflection import TextRequest, require_text
from .mirror_store import MirrorStore
from .observability import log_event, text_stats
from .style_rewriter import rewrite_all

logger = logging.getLogger("mirror.journal")

EMPTY_JOURNAL_MESSAGE = "Write something first!"
DEFAULT_TITLE = "Untitled Entry"
PREVIEW_CHARS = 80


# ---------- Models ----------

class JournalSaveRequest(BaseModel):
    title: Optional[str] = Field(default=None, description="タイトル（空なら Untitled Entry）")
    text: str = Field(..., description="本文")


class JournalEntry(BaseModel):
    id: str
    title: str
    text: str
    date: str
    preview: str


class JournalListResponse(BaseModel):
    items: List[JournalEntry]


class JournalAnalysisResponse(BaseModel):
    emotions: List[str]
    patterns: List[str]


class RewriteVersion(BaseModel):
    style: str
    text: str


class JournalRewriteResponse(BaseModel):
    versions: List[RewriteVersion]


def _to_entry(raw: dict) -> JournalEntry:
    text = str(raw.get("text") or "")
    return JournalEntry(
        id=str(raw.get("id") or ""),
        title=str(raw.get("title") or DEFAULT_TITLE),
        text=text,
        date=str(raw.get("date") or ""),
        preview=f"{text[:PREVIEW_CHARS]}...",
    )


# ---------- Routes ----------

def register_journal_routes(app: FastAPI, store: MirrorStore) -> None:

    @app.post("/journal/entries", response_model=JournalEntry)
    async def journal_save(req: JournalSaveRequest) -> JournalEntry:
        text = require_text(req.text, EMPTY_JOURNAL_MESSAGE)
        title = (req.title or "").strip() or DEFAULT_TITLE
        entry = store.add_journal_entry(title, text)
        log_event(logger, "journal_saved", **text_stats(text))
        return _to_entry(entry)

    @app.get("/journal/entries", response_model=JournalListResponse)
    async def journal_list(
        limit: int = Query(default=5, ge=1, le=100, description="返す件数"),
    ) -> JournalListResponse:
        return JournalListResponse(items=[_to_entry(e) for e in store.list_journal_entries(limit=limit)])

    @app.post("/journal/analyze", response_model=JournalAnalysisResponse)
    async def journal_analyze(req: TextRequest) -> JournalAnalysisResponse:
        text = require_text(req.text, EMPTY_JOURNAL_MESSAGE)
        result = analyze(text)
        return JournalAnalysisResponse(
            emotions=[e.value for e in result.emotions],
            patterns=list(result.patterns),
        )

    @app.post("/journal/rewrite", response_model=JournalRewriteResponse)
    async def journal_rewrite(req: TextRequest) -> JournalRewriteResponse:
        text = require_text(req.text, EMPTY_JOURNAL_MESSAGE)
        return JournalRewriteResponse(versions=[RewriteVersion(**v) for v in rewrite_all(text)])
