# -*- coding: utf-8 -*-
"""
Reflection / Communication API for Mirror
-----------------------------------------
- POST /reflection/analyze     : 振り返りテキストを解析し、履歴に保存する
- GET  /reflection/history     : 振り返り履歴（新しい順）
- POST /communication/analyze  : 話し方スタイル + 簡易文法チェック

設計メモ:
- 解析は reflection_engine（純関数）。このモジュールは入力チェックと保存だけを担う。
- 空文字 / 空白のみの入力はエンジンに渡す前に 400 で弾く。
- ログには本文を出さない（文字数・語数・検出件数のみ）。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field, ValidationError

from reflection_engine import analyze, analyze_communication_style, check_grammar, format_grammar_report

from .mirror_store import MirrorStore
from .observability import elapsed_ms, log_event, monotonic_ms, new_run_id, text_stats

logger = logging.getLogger("mirror.reflection")


# ---------- Models ----------

class TextRequest(BaseModel):
    text: str = Field(..., description="ユーザーが入力した本文（前後の空白は除去して扱う）")


class AnalysisPayload(BaseModel):
    summary: str
    emotions: List[str]
    patterns: List[str]
    strengths: List[str]
    blindSpots: List[str]
    rootCause: str
    biases: List[str]
    improvements: List[str]
    thoughtClarity: int
    communicationClarity: int


class ReflectionAnalyzeResponse(BaseModel):
    id: str
    date: str
    analysis: AnalysisPayload
    meta: Dict[str, Any] = {}


class ReflectionHistoryItem(BaseModel):
    id: str
    date: str
    text: str
    analysis: AnalysisPayload


class ReflectionHistoryResponse(BaseModel):
    items: List[ReflectionHistoryItem]


class CommunicationResponse(BaseModel):
    grammar: List[str]
    grammar_text: str
    analysis: List[str]


def require_text(text: Optional[str], message: str) -> str:
    """前後の空白を除いた本文を返す。空なら 400。"""
    cleaned = (text or "").strip()
    if not cleaned:
        raise HTTPException(status_code=400, detail=message)
    return cleaned


# ---------- Routes ----------

def register_reflection_routes(app: FastAPI, store: MirrorStore) -> None:
    """
    与えられた FastAPI インスタンスに振り返り / コミュニケーション系のエンドポイントを登録する。
    """

    @app.post("/reflection/analyze", response_model=ReflectionAnalyzeResponse)
    async def reflection_analyze(req: TextRequest) -> ReflectionAnalyzeResponse:
        text = require_text(req.text, "Please share your thoughts first.")
        run_id = new_run_id("refl")
        started = monotonic_ms()

        result = analyze(text).to_dict()
        item = store.add_reflection(text, result)

        log_event(
            logger,
            "reflection_analyzed",
            run_id=run_id,
            elapsed_ms=elapsed_ms(started),
            emotions=result["emotions"],
            n_patterns=len(result["patterns"]),
            n_biases=len(result["biases"]),
            **text_stats(text),
        )
        return ReflectionAnalyzeResponse(
            id=item["id"],
            date=item["date"],
            analysis=AnalysisPayload(**result),
            meta={"run_id": run_id, "engine": "rule", "version": "1.0.0"},
        )

    @app.get("/reflection/history", response_model=ReflectionHistoryResponse)
    async def reflection_history(
        limit: int = Query(default=20, ge=1, le=200, description="返す件数"),
    ) -> ReflectionHistoryResponse:
        out: List[ReflectionHistoryItem] = []
        for it in store.list_reflections(limit=limit):
            try:
                out.append(ReflectionHistoryItem(**it))
            except ValidationError:
                # 古い形式の analysis（項目不足）は表示対象外
                log_event(logger, "reflection_history_item_skipped", level="warning", id=it.get("id"))
        return ReflectionHistoryResponse(items=out)

    @app.post("/communication/analyze", response_model=CommunicationResponse)
    async def communication_analyze(req: TextRequest) -> CommunicationResponse:
        text = require_text(req.text, "Please enter text to analyze.")
        grammar = list(check_grammar(text))
        report = list(analyze_communication_style(text))
        log_event(logger, "communication_analyzed", n_issues=len(grammar), **text_stats(text))
        return CommunicationResponse(
            grammar=grammar,
            grammar_text=format_grammar_report(grammar),
            analysis=report,
        )
