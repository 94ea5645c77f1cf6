"""Chat API routes."""

import asyncio
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from cobrowse.domain.models import ConversationTurn, PageSnapshot
from cobrowse.domain.relay import ChatRelay

chat_router = APIRouter(prefix="/api", tags=["Chat"])


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] [web] {msg}", file=sys.stderr)


class HistoryTurn(BaseModel):
    role: Optional[str] = "user"
    content: Optional[str] = ""


class ChatRequest(BaseModel):
    # Optional so a missing message is a 400, not pydantic's 422
    message: Optional[str] = None
    conversationHistory: Optional[List[HistoryTurn]] = None
    pageContent: Optional[Dict[str, Any]] = None


class ActionModel(BaseModel):
    type: str
    data: Dict[str, str]


class ChatResponse(BaseModel):
    text: str
    actions: List[ActionModel]


class HealthResponse(BaseModel):
    status: str
    timestamp: str


@chat_router.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest, request: Request):
    if not req.message:
        return JSONResponse(status_code=400, content={"error": "Message is required"})

    relay: ChatRelay = request.app.state.relay
    timeout = request.app.state.request_timeout
    history = [
        ConversationTurn(role=t.role or "user", content=t.content or "")
        for t in req.conversationHistory or []
    ]
    try:
        result = await asyncio.wait_for(
            relay.process_message(
                req.message,
                history,
                PageSnapshot.from_dict(req.pageContent),
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        _log(f"chat timed out after {timeout}s")
        return JSONResponse(
            status_code=504,
            content={"error": "Gateway timeout", "message": "Model did not respond in time"},
        )
    except Exception as e:
        _log(f"Backend error: {e!r}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": "Failed to process message"},
        )
    return result.to_dict()


@chat_router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc).isoformat())
