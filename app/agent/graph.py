"""
LangGraph agent: tool-calling loop (agent → tools → agent … → END).

The agent node asks the LLM for the next step; if it requests tools, the tools node
runs them and feeds the results back. One agent call plus its tool calls is one
iteration. After max_iterations tool rounds without a final answer the executor
raises AgentIterationLimitError.
"""

import json
import logging
from typing import Any, Literal, TypedDict

from langgraph.graph import END, StateGraph
from openai import OpenAI

from app.agent.llm import chat_with_tools
from app.agent.tools import Tool, execute_tool
from app.core.config import (
    AGENT_MAX_TOKENS,
    AGENT_SYSTEM_PROMPT,
    AGENT_TEMPERATURE,
    MAX_AGENT_ITERATIONS,
)
from app.core.errors import AgentIterationLimitError

logger = logging.getLogger(__name__)


class AgentState(TypedDict):
    messages: list  # OpenAI chat messages, system prompt first
    pending_tool_calls: list  # [{"id", "name", "arguments"}] requested by the last agent step
    output: str | None  # final answer; None until the model stops calling tools
    iterations: int
    tools_used: list


class AgentExecutor:
    """Runs a question through the LLM with a fixed set of tools and returns the final text."""

    def __init__(
        self,
        client: OpenAI,
        tools: list[Tool],
        system_prompt: str = AGENT_SYSTEM_PROMPT,
        max_iterations: int = MAX_AGENT_ITERATIONS,
        max_tokens: int = AGENT_MAX_TOKENS,
        temperature: float = AGENT_TEMPERATURE,
    ) -> None:
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        self.client = client
        self.tools = {tool.name: tool for tool in tools}
        self.system_prompt = system_prompt
        self.max_iterations = max_iterations
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._tool_schemas = [tool.to_openai() for tool in tools]
        self._graph = self._build_graph()

    # --- nodes ---

    def _agent_step(self, state: AgentState) -> dict:
        """Node 1: ask the LLM for a final answer or tool calls."""
        logger.info("[graph:agent] IN  iteration=%d messages=%d", state["iterations"], len(state["messages"]))
        content, tool_calls = chat_with_tools(
            self.client,
            state["messages"],
            self._tool_schemas,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        if not tool_calls:
            logger.info("[graph:agent] OUT final answer_len=%d", len(content or ""))
            return {"output": content or "", "pending_tool_calls": []}
        assistant_msg: dict = {"role": "assistant", "content": content or ""}
        assistant_msg["tool_calls"] = [
            {"id": tc["id"], "type": "function", "function": {"name": tc["name"], "arguments": json.dumps(tc.get("arguments") or {})}}
            for tc in tool_calls
        ]
        logger.info("[graph:agent] OUT tool_calls=%s", [tc["name"] for tc in tool_calls])
        return {"messages": state["messages"] + [assistant_msg], "pending_tool_calls": tool_calls}

    def _tools_step(self, state: AgentState) -> dict:
        """Node 2: run requested tools and append their results as tool messages."""
        messages = list(state["messages"])
        tools_used = list(state["tools_used"])
        for tc in state["pending_tool_calls"]:
            name = tc.get("name", "")
            result = execute_tool(self.tools, name, tc.get("arguments") or {})
            tools_used.append(name)
            messages.append({"role": "tool", "tool_call_id": tc.get("id", ""), "content": result})
        iterations = state["iterations"] + 1
        logger.info("[graph:tools] OUT iteration=%d tools_used=%s", iterations, tools_used)
        return {
            "messages": messages,
            "pending_tool_calls": [],
            "iterations": iterations,
            "tools_used": tools_used,
        }

    # --- routing ---

    def _route_after_agent(self, state: AgentState) -> Literal["tools", "__end__"]:
        return "tools" if state["pending_tool_calls"] else END

    def _route_after_tools(self, state: AgentState) -> Literal["agent", "__end__"]:
        next_node = "agent" if state["iterations"] < self.max_iterations else END
        logger.info("[graph:route_after_tools] iteration=%d max_iter=%d -> %s", state["iterations"], self.max_iterations, next_node)
        return next_node

    def _build_graph(self):
        graph = StateGraph(AgentState)
        graph.add_node("agent", self._agent_step)
        graph.add_node("tools", self._tools_step)
        graph.set_entry_point("agent")
        graph.add_conditional_edges("agent", self._route_after_agent)
        graph.add_conditional_edges("tools", self._route_after_tools)
        return graph.compile()

    def invoke(self, inputs: dict[str, Any]) -> dict[str, Any]:
        """
        Run the agent for inputs["input"]. Returns {"output", "tools_used", "iterations"}.
        Raises ValueError for an empty input, AgentIterationLimitError when the loop is exhausted;
        LLM and tool errors propagate unchanged.
        """
        question = str(inputs.get("input") or "").strip()
        if not question:
            raise ValueError("input is required")
        logger.info("[run_agent] START question=%r", question)
        initial: AgentState = {
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": question},
            ],
            "pending_tool_calls": [],
            "output": None,
            "iterations": 0,
            "tools_used": [],
        }
        final = self._graph.invoke(initial, {"recursion_limit": 2 * self.max_iterations + 5})
        if final.get("output") is None:
            logger.warning("[run_agent] iteration limit reached tools_used=%s", final.get("tools_used"))
            raise AgentIterationLimitError(self.max_iterations)
        answer = final["output"]
        logger.info("[run_agent] END iterations=%d tools_used=%s answer_len=%d", final["iterations"], final["tools_used"], len(answer))
        return {"output": answer, "tools_used": list(final["tools_used"]), "iterations": final["iterations"]}


def build_executor(client: OpenAI, tools: list[Tool]) -> AgentExecutor:
    """Executor with the app's fixed system prompt and iteration cap."""
    return AgentExecutor(client, tools, system_prompt=AGENT_SYSTEM_PROMPT, max_iterations=MAX_AGENT_ITERATIONS)
