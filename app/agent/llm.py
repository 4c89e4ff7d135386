"""
Agent LLM: OpenAI chat completions with tool calling.

The client is built once at startup; a missing OPENAI_API_KEY is a startup error,
not a per-request one.
"""

import json
import logging
from typing import Any

from openai import APIError, OpenAI

from app.core.config import (
    AGENT_MAX_TOKENS,
    AGENT_TEMPERATURE,
    LLM_API_TIMEOUT,
    OPENAI_API_KEY,
    OPENAI_LLM_MODEL,
)
from app.core.errors import ConfigurationError, ServiceUnavailableError

logger = logging.getLogger(__name__)


def build_client(api_key: str | None = None) -> OpenAI:
    """Construct the OpenAI client. Raises ConfigurationError when no API key is configured."""
    key = (api_key if api_key is not None else OPENAI_API_KEY).strip()
    if not key:
        raise ConfigurationError("OPENAI_API_KEY is not set; the chat agent cannot start")
    logger.info("[llm] client ready model=%s timeout=%.0fs", OPENAI_LLM_MODEL, LLM_API_TIMEOUT)
    return OpenAI(api_key=key, timeout=LLM_API_TIMEOUT)


def _parse_tool_calls(raw_tool_calls: list[Any]) -> list[dict[str, Any]]:
    tool_calls = []
    for tc in raw_tool_calls:
        fid = getattr(tc, "id", None) or ""
        fn = getattr(tc, "function", None)
        if not fn:
            continue
        fname = getattr(fn, "name", None) or ""
        fargs = getattr(fn, "arguments", None) or "{}"
        try:
            args = json.loads(fargs) if isinstance(fargs, str) else fargs
        except json.JSONDecodeError:
            args = {}
        tool_calls.append({"id": fid, "name": fname, "arguments": args})
    return tool_calls


def chat_with_tools(
    client: OpenAI,
    messages: list[dict[str, Any]],
    tools: list[dict[str, Any]],
    max_tokens: int = AGENT_MAX_TOKENS,
    temperature: float = AGENT_TEMPERATURE,
    model: str = OPENAI_LLM_MODEL,
) -> tuple[str | None, list[dict[str, Any]] | None]:
    """
    Call OpenAI chat with tools. Used for agentic (tool-calling) mode.
    Returns (content, tool_calls). If tool_calls is non-empty, caller should execute
    them and call again with tool results; if content is set and no tool_calls, that's the final answer.
    Raises ServiceUnavailableError when the provider call fails.
    """
    logger.info("[llm:chat_with_tools] IN  messages=%d tools=%s", len(messages), [t["function"]["name"] for t in tools])
    try:
        response = client.chat.completions.create(
            model=model,
            messages=messages,
            tools=tools,
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except APIError as e:
        logger.warning("[llm:chat_with_tools] provider error: %s", e)
        raise ServiceUnavailableError(f"LLM provider error: {e}") from e
    msg = response.choices[0].message if response.choices else None
    if not msg:
        return None, None
    content = (getattr(msg, "content", None) or "").strip() or None
    tool_calls = _parse_tool_calls(getattr(msg, "tool_calls", None) or [])
    if tool_calls:
        logger.info("[llm:chat_with_tools] OUT tool_calls=%s", [t["name"] for t in tool_calls])
    if content:
        logger.info("[llm:chat_with_tools] OUT content_len=%d", len(content))
    return content, tool_calls if tool_calls else None
