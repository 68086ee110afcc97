"""
AIOS Brain FastAPI Server
Exposes the registered knowledge store over HTTP.
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from .config import Config
from .registry import service_manager, start_services
from .store import KnowledgeStore

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Boot only if the host has not already published a brain
    if service_manager.get_service(Config.brain.SERVICE_NAME) is None:
        start_services(service_manager)
    yield


app = FastAPI(
    title="AIOS Brain Server",
    description="Shared knowledge store and thought stream",
    version=VERSION,
    lifespan=lifespan,
)


# ============================================================================
# Request/Response Models
# ============================================================================

class ThoughtRequest(BaseModel):
    thought: str


class QueryRequest(BaseModel):
    question: str


class StoreRequest(BaseModel):
    key: str
    value: str


class QueryResponse(BaseModel):
    question: str
    answer: str


class StateResponse(BaseModel):
    state: str


class ThoughtsResponse(BaseModel):
    thoughts: List[str]
    count: int


# ============================================================================
# Helper Functions
# ============================================================================

def get_brain() -> KnowledgeStore:
    """Look up the published store, 404 if nothing is registered."""
    name = Config.brain.SERVICE_NAME
    brain = service_manager.get_service(name)
    if brain is None:
        raise HTTPException(
            status_code=404,
            detail=f"Service '{name}' is not registered"
        )
    return brain


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "running",
        "service": "AIOS Brain Server",
        "version": VERSION,
        "services": service_manager.list_services(),
    }


@app.post("/thought")
async def send_thought(req: ThoughtRequest):
    """Append a thought to the stream; `key = value` thoughts are also learned."""
    get_brain().submit(req.thought)
    return {"status": "accepted"}


@app.post("/query", response_model=QueryResponse)
async def query_knowledge(req: QueryRequest):
    answer = get_brain().query(req.question)
    return QueryResponse(question=req.question, answer=answer)


@app.post("/knowledge")
async def store_knowledge(req: StoreRequest):
    get_brain().store(req.key, req.value)
    return {"status": "stored"}


@app.get("/status", response_model=StateResponse)
async def get_status():
    return StateResponse(state=get_brain().get_status())


@app.get("/thoughts", response_model=ThoughtsResponse)
async def recent_thoughts(limit: Optional[int] = Query(default=None, ge=0)):
    """Most recent thoughts, oldest first."""
    thoughts = get_brain().recent_thoughts(limit)
    return ThoughtsResponse(thoughts=thoughts, count=len(thoughts))


@app.post("/shutdown", response_model=StateResponse)
async def shutdown_brain():
    brain = get_brain()
    brain.shutdown()
    return StateResponse(state=brain.get_status())


# ============================================================================
# Server Startup
# ============================================================================

def start_server(host: str = None, port: int = None, reload: bool = None):
    """Start the AIOS Brain server."""
    host = host or Config.server.HOST
    port = port or Config.server.PORT
    if reload is None:
        reload = Config.server.RELOAD
    logger.info(f"AIOS Brain server starting on {host}:{port}")

    uvicorn.run(
        "aios_brain.server:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


if __name__ == "__main__":
    start_server(reload=True)
