"""Schemas for the chat endpoint."""

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request body for POST /chat. message is optional here so a missing field is answered with 400, not 422."""

    message: str | None = Field(None, description="User question for the agent.")


class ChatResponse(BaseModel):
    """Response for POST /chat."""

    response: str = Field(..., description="Final answer from the agent.")


class ErrorResponse(BaseModel):
    """Error payload for 4xx/5xx responses. Never carries internal error detail."""

    error: str = Field(..., description="User-facing error message.")

    model_config = {
        "json_schema_extra": {
            "examples": [{"error": "Missing input message"}, {"error": "Something went wrong."}]
        }
    }
