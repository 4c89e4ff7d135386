# Run from project root: uvicorn app.main:app --port 9000   (or: python -m app.main)

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.agent.graph import build_executor
from app.agent.llm import build_client
from app.agent.tools import build_resume_tool
from app.api.routes import router
from app.core.config import HOST, LOG_LEVEL, PORT
from app.core.resume_store import init_resume
from app.mcp.server import mcp_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup errors (bad resume file, missing API key) propagate and abort startup.
    resume = init_resume()
    client = build_client()
    app.state.executor = build_executor(client, [build_resume_tool(resume)])
    logger.info("Server started at: http://localhost:%d", PORT)
    yield


app = FastAPI(title="Resume Chat Agent", lifespan=lifespan)
app.include_router(router)
app.include_router(mcp_router, prefix="/mcp")


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
