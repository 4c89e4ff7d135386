"""
Agent tools: definitions and execution for tool-calling (agentic) mode.

A Tool is a named, schema-typed callable: the agent sees its name, description and
JSON schema; invoke() validates the model's arguments against the schema and runs
the handler. The chat agent is configured with a single tool, getResumeInfo.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, Field

from app.schemas.resume import ResumeDocument
from app.services.resume_lookup import answer_question

logger = logging.getLogger(__name__)

RESUME_TOOL_NAME = "getResumeInfo"
RESUME_TOOL_DESCRIPTION = (
    "Answers user questions about Roshan Poudel's resume, including contact info, skills, "
    "experience, education, certifications, and projects."
)


class ResumeQuestion(BaseModel):
    """Input schema for getResumeInfo."""

    question: str = Field(..., description="User's question about Roshan's resume")


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[..., str]

    @property
    def input_schema(self) -> dict[str, Any]:
        schema = self.input_model.model_json_schema()
        schema.pop("title", None)
        for prop in schema.get("properties", {}).values():
            prop.pop("title", None)
        return schema

    def to_openai(self) -> dict[str, Any]:
        """OpenAI function-calling definition."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema,
            },
        }

    def invoke(self, arguments: dict[str, Any] | None) -> str:
        """Validate arguments and run the handler. Raises pydantic.ValidationError on bad input."""
        args = self.input_model.model_validate(arguments or {})
        logger.info("[tools:%s] IN  arguments=%r", self.name, args.model_dump())
        result = self.handler(**args.model_dump())
        logger.info("[tools:%s] OUT result_len=%d", self.name, len(result))
        return result


def build_resume_tool(resume: ResumeDocument) -> Tool:
    """getResumeInfo bound to an already loaded resume document."""

    def _handler(question: str) -> str:
        return answer_question(question, resume)

    return Tool(
        name=RESUME_TOOL_NAME,
        description=RESUME_TOOL_DESCRIPTION,
        input_model=ResumeQuestion,
        handler=_handler,
    )


def execute_tool(tools: dict[str, Tool], name: str, arguments: dict[str, Any]) -> str:
    """
    Execute a tool by name with the given arguments. Returns a string result for the LLM.
    Unknown names are reported back to the model rather than raised.
    """
    logger.info("[tools] execute_tool name=%r arguments=%r", name, arguments)
    tool = tools.get(name)
    if tool is None:
        return f"Unknown tool: {name}"
    return tool.invoke(arguments)
