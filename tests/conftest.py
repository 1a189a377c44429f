"""Shared test fixtures for sqlchat."""

from typing import Any, Dict, List, Optional

import pytest
from langchain_core.agents import AgentAction
from sqlalchemy import create_engine

from sqlchat.config import Settings
from sqlchat.history import HistoryStore


def query_step(sql: Any, observation: Any, tool: str = "sql_db_query"):
    """Build an ``(AgentAction, observation)`` pair as the executor returns them."""
    return (AgentAction(tool=tool, tool_input=sql, log=""), observation)


class FakeExecutor:
    """Stands in for the LangChain AgentExecutor.

    Returns a canned result (or raises) and records every input it was given.
    """

    def __init__(self, result: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def invoke(self, inputs: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.calls.append(inputs)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def history(tmp_path) -> HistoryStore:
    store = HistoryStore(create_engine(f"sqlite:///{tmp_path / 'history.db'}"))
    store.create_schema()
    return store


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        llm_provider="openai",
        openai_api_key="sk-test",
        database_url=f"sqlite:///{tmp_path / 'primary.db'}",
        sqlite_path=str(tmp_path / "secondary.db"),
        history_database_url=f"sqlite:///{tmp_path / 'history.db'}",
    )
