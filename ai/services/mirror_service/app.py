# -*- coding: utf-8 -*-
"""
Mirror Self-Reflection API
--------------------------
- POST /reflection/analyze : rule-based reflection analysis (+ history)
- POST /communication/analyze, /journal/*, /goals/*, /stats
- POST /chat               : canned, stateless reply
- GET  /daily              : word / phrase / prompt of the day
- POST /mood               : one-line response to the selected mood
- GET  /healthz            : health check
Notes:
- Analysis is a pure function of the text (no ML, no network)
- User text is persisted only in the local state file (MIRROR_STATE_PATH)
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .api_goals import register_goal_routes
from .api_journal import register_journal_routes
from .api_reflection import register_reflection_routes, require_text
from .chat_responder import generate_reply
from .daily_content import daily_content, mood_response
from .mirror_store import MirrorStore
from .observability import log_event

APP_NAME = os.getenv("MIRROR_APP_NAME", "Mirror")
HOST = os.getenv("MIRROR_HOST", "0.0.0.0")
try:
    PORT = int(os.getenv("MIRROR_PORT", "8780"))
except ValueError:
    PORT = 8780
# For release, set MIRROR_CORS_ORIGINS to a comma-separated list of allowed origins.
ALLOWED_ORIGINS_RAW = os.getenv("MIRROR_CORS_ORIGINS", "*")
ALLOWED_ORIGINS = [o.strip() for o in ALLOWED_ORIGINS_RAW.split(",") if o.strip()] or ["*"]

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("mirror")


# ---------- Models ----------
class ChatRequest(BaseModel):
    message: str = Field(..., description="チャット本文")


class ChatResponse(BaseModel):
    reply: str


class MoodRequest(BaseModel):
    mood: Optional[str] = Field(default=None, description="amazing / good / neutral / stressed / upset")


class MoodResponse(BaseModel):
    mood: str
    message: str


# ---------- App ----------
def create_app(store: Optional[MirrorStore] = None) -> FastAPI:
    """FastAPI アプリを組み立てる。store を渡せばそれを使う（テスト用）。"""
    store = store if store is not None else MirrorStore()
    app = FastAPI(title=APP_NAME, version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_reflection_routes(app, store)
    register_journal_routes(app, store)
    register_goal_routes(app, store)

    @app.get("/healthz")
    def healthz() -> Dict[str, Any]:
        return {"status": "ok", "app": APP_NAME}

    @app.post("/chat", response_model=ChatResponse)
    async def chat(req: ChatRequest) -> ChatResponse:
        message = require_text(req.message, "Message is required")
        reply = generate_reply(message)
        log_event(logger, "chat_replied", chars=len(message))
        return ChatResponse(reply=reply)

    @app.get("/daily")
    def daily() -> Dict[str, Any]:
        return daily_content()

    @app.post("/mood", response_model=MoodResponse)
    def mood(req: MoodRequest) -> MoodResponse:
        return MoodResponse(mood=(req.mood or "neutral"), message=mood_response(req.mood))

    return app


app = create_app()


# ---------- Entrypoint ----------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("mirror_service.app:app", host=HOST, port=PORT, log_level="info")
