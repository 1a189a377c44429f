# sqlchat/history.py

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    insert,
    select,
)

logger = logging.getLogger(__name__)

metadata = MetaData()

query_history = Table(
    "query_history",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("prompt", Text, nullable=False),
    Column("sql_query", Text, nullable=False),
    Column("query_result", JSON, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


class HistoryStore:
    """
    Append-only log of prompts that produced SQL, with the rows they returned.
    """

    def __init__(self, engine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str) -> "HistoryStore":
        store = cls(create_engine(url))
        store.create_schema()
        return store

    def create_schema(self) -> None:
        metadata.create_all(self.engine)

    def save(self, prompt: str, sql_query: str, rows: List[Dict[str, Any]]) -> int:
        with self.engine.begin() as conn:
            result = conn.execute(
                insert(query_history).values(
                    prompt=prompt,
                    sql_query=sql_query,
                    query_result=rows,
                    created_at=datetime.now(timezone.utc),
                )
            )
            record_id = result.inserted_primary_key[0]
        logger.info("Chat history saved (id=%s)", record_id)
        return record_id

    def list_all(self) -> List[Dict[str, Any]]:
        with self.engine.connect() as conn:
            rows = conn.execute(select(query_history).order_by(query_history.c.id))
            return [dict(row._mapping) for row in rows]
