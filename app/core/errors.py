"""
Application errors for clean API error handling.

Startup errors (ConfigurationError, ResumeLoadError) are never caught by the app:
they abort startup. AgentError and its subclasses are raised by the agent executor
and mapped to a generic 500 at the HTTP boundary.
"""


class ConfigurationError(Exception):
    """Raised when a required setting (e.g. OPENAI_API_KEY) is missing at client construction."""


class ResumeLoadError(Exception):
    """Raised when the resume file is missing, unreadable, or does not match the expected shape."""

    def __init__(self, message: str, path: str = "") -> None:
        self.message = message
        self.path = path
        super().__init__(message)


class ServiceUnavailableError(Exception):
    """Raised when the model provider is unreachable or returns no usable response."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AgentError(Exception):
    """Base error for agent executor failures."""


class AgentIterationLimitError(AgentError):
    """Raised when the tool-calling loop hits max_iterations without a final answer."""

    def __init__(self, max_iterations: int) -> None:
        self.max_iterations = max_iterations
        super().__init__(f"Agent stopped after {max_iterations} iterations without a final answer")
