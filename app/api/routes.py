"""
API route aggregator: register endpoints; no logic, only delegate to handlers.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse

from app.agent.graph import AgentExecutor
from app.api.handlers import handle_chat
from app.core.config import CHAT_PAGE
from app.schemas.chat import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter()


def get_executor(request: Request) -> AgentExecutor:
    """Agent executor built at startup (see app.main.lifespan)."""
    return request.app.state.executor


# --- System ---

@router.get("/", tags=["system"], summary="Chat UI", include_in_schema=False)
def root() -> FileResponse:
    return FileResponse(CHAT_PAGE, media_type="text/html")


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Chat ---

@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["chat"],
    summary="Ask the resume agent",
    description="Send {message}; receive {response}. 400 when message is missing or empty, 500 on agent failure.",
)
def post_chat(body: ChatRequest | None = None, executor: AgentExecutor = Depends(get_executor)):
    return handle_chat(body, executor)
