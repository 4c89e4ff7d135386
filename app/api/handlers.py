"""
API handlers: read request data, call the agent, map results/errors to HTTP.

Responsibility: Bridge HTTP types and the agent executor. Marshalling and
exception-to-HTTP mapping. Lives in the API layer so the agent stays free of FastAPI/HTTP types.
"""

import logging
from typing import Any, Protocol

from fastapi.responses import JSONResponse

from app.schemas.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

MISSING_MESSAGE_ERROR = "Missing input message"
GENERIC_ERROR = "Something went wrong."


class Executor(Protocol):
    def invoke(self, inputs: dict[str, Any]) -> dict[str, Any]: ...


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def handle_chat(body: ChatRequest | None, executor: Executor) -> ChatResponse | JSONResponse:
    """
    Validate the message, run the agent, map failures to 400/500.
    Agent errors are logged with traceback; the client only sees GENERIC_ERROR.
    """
    message = (body.message if body else None) or ""
    if not message.strip():
        logger.info("[api:handle_chat] rejected empty message")
        return error_response(400, MISSING_MESSAGE_ERROR)

    logger.info("[api:handle_chat] IN  message=%r", message)
    try:
        result = executor.invoke({"input": message})
    except Exception:
        logger.exception("Agent Error")
        return error_response(500, GENERIC_ERROR)

    output = str(result.get("output") or "")
    logger.info("[api:handle_chat] OUT tools_used=%s response_len=%d", result.get("tools_used", []), len(output))
    return ChatResponse(response=output)
