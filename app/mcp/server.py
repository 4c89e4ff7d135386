"""
Minimal MCP-style tool server: exposes the resume lookup tool through a
standardized interface so external agents can discover and call it directly,
without going through the chat agent.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.agent.tools import RESUME_TOOL_NAME, build_resume_tool
from app.core.resume_store import get_resume

logger = logging.getLogger(__name__)

mcp_router = APIRouter(tags=["mcp"])


class ResumeInfoRequest(BaseModel):
    """Request body for MCP tool getResumeInfo."""
    question: str = ""


@mcp_router.get(
    "/tools",
    summary="MCP tool discovery",
    description="List the tools this server exposes with their input schemas.",
)
def mcp_list_tools() -> dict[str, list[dict]]:
    tool = build_resume_tool(get_resume())
    return {
        "tools": [
            {"name": tool.name, "description": tool.description, "input_schema": tool.input_schema},
        ]
    }


@mcp_router.post(
    f"/tools/{RESUME_TOOL_NAME}",
    summary=f"MCP tool: {RESUME_TOOL_NAME}",
    description="Answer a question about the resume with the keyword lookup (no LLM involved).",
)
def mcp_get_resume_info(body: ResumeInfoRequest):
    question = (body.question or "").strip()
    if not question:
        return JSONResponse(status_code=400, content={"error": "Missing question"})
    logger.info("[mcp:%s] IN  question=%r", RESUME_TOOL_NAME, question)
    answer = build_resume_tool(get_resume()).invoke({"question": question})
    return {"answer": answer}
