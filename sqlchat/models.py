# sqlchat/models.py

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    prompt: str = Field(..., min_length=1)


class AiResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    sql_query: Optional[str] = Field(default=None, alias="sqlQuery")
    result: List[Dict[str, Any]] = Field(default_factory=list)
    error: Optional[str] = None


class ChatHistoryResponse(BaseModel):
    """A stored interaction, as returned by the history endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="_id")
    prompt: str
    sql_query: str = Field(alias="sqlQuery")
    result: List[Dict[str, Any]] = Field(default_factory=list)
