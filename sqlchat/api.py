# sqlchat/api.py
# FastAPI server exposing the SQL chat agent and its history.

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool

from .config import Settings, configure_logging
from .models import AiResponse, ChatHistoryResponse, ChatRequest
from .service import AiService

logger = logging.getLogger(__name__)

service: Optional[AiService] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global service
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    service = AiService.from_settings(settings)
    logger.info("AI service initialized")
    yield
    service = None


app = FastAPI(title="SQL Chat", lifespan=lifespan)


def get_service() -> AiService:
    if service is None:
        raise HTTPException(status_code=503, detail="AI service is not initialized")
    return service


@app.get("/health")
async def health_check():
    return {"status": "healthy", "agent_ready": service is not None}


@app.post("/ai/chat", response_model=AiResponse)
async def chat(request: ChatRequest, ai: AiService = Depends(get_service)):
    # The agent run is blocking, keep it off the event loop
    return await run_in_threadpool(ai.chat, request.prompt)


@app.get("/ai/history", response_model=List[ChatHistoryResponse])
async def chat_history(ai: AiService = Depends(get_service)):
    return await run_in_threadpool(ai.get_all_chat_history)


def run() -> None:
    uvicorn.run("sqlchat.api:app", host="0.0.0.0", port=8000)
