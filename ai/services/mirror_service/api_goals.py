# -*- coding: utf-8 -*-
"""
Goals / Stats API for Mirror
----------------------------
- GET    /goals                               : 全目標（daily / weekly / habits）
- POST   /goals/{goal_type}                   : 目標を追加
- POST   /goals/{goal_type}/{goal_id}/toggle  : 完了 / 未完了を切り替え
- DELETE /goals/{goal_type}/{goal_id}         : 目標を削除
- POST   /goals/routine                       : 目標から 1 日のルーティンを組み立てる
- GET    /stats                               : 振り返り回数・達成数など

エラー:
- goal_type 不正 → 400 / goal_id 不明 → 404 / 目標ゼロでルーティン → 400
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .mirror_store import MirrorStore, UnknownGoalTypeError
from .observability import log_event
from .routine import generate_routine

logger = logging.getLogger("mirror.goals")


class GoalCreateRequest(BaseModel):
    text: str = Field(..., description="目標の本文")


class Goal(BaseModel):
    id: str
    text: str
    completed: bool = False


class GoalsResponse(BaseModel):
    daily: List[Goal] = []
    weekly: List[Goal] = []
    habits: List[Goal] = []


class RoutineResponse(BaseModel):
    routine: List[str]
    motivation: str


class StatsResponse(BaseModel):
    reflections: int
    wordsLearned: int  # placeholder: nothing increments it yet
    goalsCompleted: int
    streak: int  # placeholder: nothing increments it yet


def register_goal_routes(app: FastAPI, store: MirrorStore) -> None:

    # NOTE: /goals/routine は /goals/{goal_type} より先に登録する（パスが衝突するため）
    @app.post("/goals/routine", response_model=RoutineResponse)
    async def goals_routine() -> RoutineResponse:
        try:
            out = generate_routine(store.get_goals())
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return RoutineResponse(**out)

    @app.get("/goals", response_model=GoalsResponse)
    async def goals_list() -> GoalsResponse:
        return GoalsResponse(**store.get_goals())

    @app.post("/goals/{goal_type}", response_model=Goal)
    async def goals_add(goal_type: str, req: GoalCreateRequest) -> Goal:
        text = req.text.strip()
        if not text:
            raise HTTPException(status_code=400, detail="Goal text is required")
        try:
            goal = store.add_goal(goal_type, text)
        except UnknownGoalTypeError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        log_event(logger, "goal_added", goal_type=goal_type)
        return Goal(**goal)

    @app.post("/goals/{goal_type}/{goal_id}/toggle", response_model=Goal)
    async def goals_toggle(goal_type: str, goal_id: str) -> Goal:
        try:
            goal = store.toggle_goal(goal_type, goal_id)
        except UnknownGoalTypeError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        except KeyError:
            raise HTTPException(status_code=404, detail="Goal not found")
        log_event(logger, "goal_toggled", goal_type=goal_type, completed=goal["completed"])
        return Goal(**goal)

    @app.delete("/goals/{goal_type}/{goal_id}")
    async def goals_delete(goal_type: str, goal_id: str) -> Dict[str, Any]:
        try:
            store.delete_goal(goal_type, goal_id)
        except UnknownGoalTypeError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        except KeyError:
            raise HTTPException(status_code=404, detail="Goal not found")
        return {"status": "ok", "id": goal_id}

    @app.get("/stats", response_model=StatsResponse)
    async def stats() -> StatsResponse:
        return StatsResponse(**store.get_stats())
