# -*- coding: utf-8 -*-
"""observability.py

Mirror: ログ/計測の可観測性
---------------------------

目的
- 解析・保存の各イベントを 1 行 JSON でログへ残し、あとから絞り込めるようにする。
- どのリクエストで何が起きたかを run_id で突き合わせられるようにする。

方針
- logging に JSON 文字列を流す（OBS_LOG_JSON=false ならプレーン文字列）。
- ユーザーの本文（reflection / journal / chat）はログに出さない。長さ・件数のみ。

主な環境変数
- OBS_LOG_JSON=true/false（default true）
"""

from __future__ import annotations

import json
import logging
import os
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict


OBS_LOG_JSON = (os.getenv("OBS_LOG_JSON", "true").strip().lower() != "false")


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _safe_default(o: Any) -> str:
    try:
        return str(o)
    except Exception:
        return repr(o)


def _safe_json_dumps(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"), default=_safe_default)


def log_event(logger: logging.Logger, event: str, *, level: str = "info", **fields: Any) -> None:
    """Write a structured event log.

    - level: info|warning|error|debug
    - event: stable identifier (e.g., reflection_analyzed)
    - logger 側の例外は握りつぶさず呼び出し元へ伝播する
    """
    payload: Dict[str, Any] = {
        "ts": _iso_now(),
        "event": event,
        **fields,
    }

    msg = _safe_json_dumps(payload) if OBS_LOG_JSON else f"{event} {payload}"

    fn = getattr(logger, level, logger.info)
    fn(msg)


def text_stats(text: str) -> Dict[str, int]:
    """本文の代わりにログへ出す統計（文字数・語数）。"""
    s = text or ""
    return {"chars": len(s), "words": len(s.split())}


# ----------------------------
# Run context helpers
# ----------------------------

def new_run_id(prefix: str = "run") -> str:
    """Short run id for correlation."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def elapsed_ms(start_ms: float) -> int:
    try:
        return int(max(0.0, monotonic_ms() - float(start_ms)))
    except (TypeError, ValueError):
        return 0
