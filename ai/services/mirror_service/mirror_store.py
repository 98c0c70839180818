# -*- coding: utf-8 -*-
"""
mirror_store.py

Mirror アプリの状態ストア（振り返り履歴 / ジャーナル / 目標 / 統計）。

目的:
- reflection_engine.analyze() の結果を {date, text, analysis} として履歴に積む。
- ジャーナル・目標・統計をまとめて 1 つの JSON ドキュメントとして保持する。
- 解析エンジン自体はこのストアを読み書きしない（呼び出し側の API 層だけが触る）。

JSON スキーマ:
    {
      "reflectionHistory": [ {"id", "date", "text", "analysis"}, ... ],   # 古い順
      "journalEntries":    [ {"id", "title", "text", "date"}, ... ],      # 新しい順
      "goals": { "daily": [...], "weekly": [...], "habits": [...] },
      "stats": { "reflections": 0, "wordsLearned": 0, "goalsCompleted": 0, "streak": 0 }
    }
"""

from __future__ import annotations

import copy
import json
import logging
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger("mirror.store")

GOAL_TYPES = ("daily", "weekly", "habits")

try:
    HISTORY_LIMIT = int(os.getenv("MIRROR_HISTORY_LIMIT", "200") or "200")
except ValueError:
    HISTORY_LIMIT = 200


class UnknownGoalTypeError(ValueError):
    """goal_type が daily / weekly / habits 以外。"""


def _default_path() -> Path:
    env = (os.getenv("MIRROR_STATE_PATH") or "").strip()
    if env:
        return Path(env)
    # .../ai/services/mirror_service/mirror_store.py -> parents[2] = .../ai
    return Path(__file__).resolve().parents[2] / "data" / "state" / "mirror_state.json"


def _empty_state() -> Dict[str, Any]:
    return {
        "reflectionHistory": [],
        "journalEntries": [],
        "goals": {t: [] for t in GOAL_TYPES},
        "stats": {"reflections": 0, "wordsLearned": 0, "goalsCompleted": 0, "streak": 0},
    }


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


def _clean_id(value: Any) -> str:
    # 旧データは Date.now() の数値 id を持つことがある
    if value is None or value == "":
        return _new_id()
    return str(value)


def _clean_reflection(item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    if not isinstance(item.get("text"), str) or not isinstance(item.get("analysis"), dict):
        return None
    return {
        "id": _clean_id(item.get("id")),
        "date": str(item.get("date") or ""),
        "text": item["text"],
        "analysis": item["analysis"],
    }


def _clean_goal(item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    if not isinstance(item.get("text"), str):
        return None
    return {"id": _clean_id(item.get("id")), "text": item["text"], "completed": bool(item.get("completed"))}


def _clean_items(items: List[Any], clean: Callable[[Dict[str, Any]], Optional[Dict[str, Any]]], key: str) -> List[Dict[str, Any]]:
    """保存済みの各要素を正規化する。壊れた要素は捨てて warning を出す。"""
    out: List[Dict[str, Any]] = []
    dropped = 0
    for item in items:
        cleaned = clean(item) if isinstance(item, dict) else None
        if cleaned is None:
            dropped += 1
            continue
        out.append(cleaned)
    if dropped:
        logger.warning("Dropped %d malformed item(s) from mirror state %s", dropped, key)
    return out


class MirrorStore:
    """
    - in-memory で dict を保持しつつ、更新時に JSON に書き戻すシンプル実装。
    - 書き込みは tmp に書いてから replace（途中で落ちても壊れたファイルを残さない）。
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else _default_path()
        self._lock = threading.Lock()
        self._state: Dict[str, Any] = self._load()

    # ---------- Reflections ----------

    def add_reflection(self, text: str, analysis: Dict[str, Any]) -> Dict[str, Any]:
        item = {"id": _new_id(), "date": _now_iso(), "text": text, "analysis": analysis}
        with self._lock:
            history: List[Dict[str, Any]] = self._state["reflectionHistory"]
            history.append(item)
            # 上限件数（古いものから間引く）
            if HISTORY_LIMIT > 0 and len(history) > HISTORY_LIMIT:
                del history[0 : len(history) - HISTORY_LIMIT]
            self._state["stats"]["reflections"] += 1
            self._save()
        return copy.deepcopy(item)

    def list_reflections(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """新しい順で返す。"""
        with self._lock:
            items = list(reversed(self._state["reflectionHistory"]))
        if limit is not None:
            items = items[: max(0, limit)]
        return copy.deepcopy(items)

    # ---------- Journal ----------

    def add_journal_entry(self, title: str, text: str) -> Dict[str, Any]:
        entry = {"id": _new_id(), "title": title, "text": text, "date": _now_iso()}
        with self._lock:
            self._state["journalEntries"].insert(0, entry)
            self._save()
        return copy.deepcopy(entry)

    def list_journal_entries(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        with self._lock:
            items = list(self._state["journalEntries"])
        if limit is not None:
            items = items[: max(0, limit)]
        return copy.deepcopy(items)

    # ---------- Goals ----------

    def _goal_list(self, goal_type: str) -> List[Dict[str, Any]]:
        if goal_type not in GOAL_TYPES:
            raise UnknownGoalTypeError(f"unknown goal type: {goal_type}")
        return self._state["goals"].setdefault(goal_type, [])

    def add_goal(self, goal_type: str, text: str) -> Dict[str, Any]:
        goal = {"id": _new_id(), "text": text, "completed": False}
        with self._lock:
            self._goal_list(goal_type).append(goal)
            self._save()
        return dict(goal)

    def toggle_goal(self, goal_type: str, goal_id: str) -> Dict[str, Any]:
        """完了/未完了を反転する。完了にしたときだけ goalsCompleted を加算。"""
        with self._lock:
            goals = self._goal_list(goal_type)
            goal = next((g for g in goals if g.get("id") == goal_id), None)
            if goal is None:
                raise KeyError(goal_id)
            goal["completed"] = not bool(goal.get("completed"))
            if goal["completed"]:
                self._state["stats"]["goalsCompleted"] += 1
            self._save()
            return dict(goal)

    def delete_goal(self, goal_type: str, goal_id: str) -> None:
        with self._lock:
            goals = self._goal_list(goal_type)
            kept = [g for g in goals if g.get("id") != goal_id]
            if len(kept) == len(goals):
                raise KeyError(goal_id)
            self._state["goals"][goal_type] = kept
            self._save()

    def get_goals(self) -> Dict[str, List[Dict[str, Any]]]:
        with self._lock:
            return copy.deepcopy(self._state["goals"])

    # ---------- Stats ----------

    def get_stats(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._state["stats"])

    # ---------- 内部実装 ----------

    def _load(self) -> Dict[str, Any]:
        state = _empty_state()
        path = self.path
        if not path.exists():
            return state
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Failed to read mirror state at %s: %s", path, exc)
            return state
        if not isinstance(raw, dict):
            logger.warning("mirror state is not a dict: %r", type(raw))
            return state

        if isinstance(raw.get("reflectionHistory"), list):
            state["reflectionHistory"] = _clean_items(raw["reflectionHistory"], _clean_reflection, "reflectionHistory")
        if isinstance(raw.get("journalEntries"), list):
            state["journalEntries"] = raw["journalEntries"]
        goals = raw.get("goals")
        if isinstance(goals, dict):
            for t in GOAL_TYPES:
                if isinstance(goals.get(t), list):
                    state["goals"][t] = _clean_items(goals[t], _clean_goal, f"goals.{t}")
        stats = raw.get("stats")
        if isinstance(stats, dict):
            for k in state["stats"]:
                try:
                    state["stats"][k] = int(stats.get(k, 0) or 0)
                except (TypeError, ValueError):
                    pass
        return state

    def _save(self) -> None:
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(json.dumps(self._state, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(path)
