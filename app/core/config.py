"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root (one level above the app package)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent

# Static resume document, loaded once at startup
RESUME_PATH: Path = Path(
    os.getenv("RESUME_PATH", "").strip() or PROJECT_ROOT / "data" / "resume.json"
)

# Chat UI page served at GET /
STATIC_DIR: Path = Path(__file__).resolve().parent.parent / "static"
CHAT_PAGE: Path = STATIC_DIR / "chat.html"

# Server
HOST: str = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT: int = int(os.getenv("PORT", "9000").strip() or "9000")
LOG_LEVEL: str = (os.getenv("LOG_LEVEL", "INFO").strip() or "INFO").upper()

# OpenAI (agent LLM). Required: the app refuses to start without it.
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "").strip()
OPENAI_LLM_MODEL: str = (
    os.getenv("OPENAI_LLM_MODEL", "gpt-4o-mini").strip() or "gpt-4o-mini"
)

# API timeouts (seconds)
LLM_API_TIMEOUT: float = 60.0

# Agent loop
MAX_AGENT_ITERATIONS: int = 5
AGENT_MAX_TOKENS: int = 2048
AGENT_TEMPERATURE: float = 0.7
AGENT_SYSTEM_PROMPT: str = "You are a helpful assistant that uses tools when needed."

# Streamlit client
API_BASE: str = os.getenv("API_BASE", "http://localhost:9000").strip() or "http://localhost:9000"
