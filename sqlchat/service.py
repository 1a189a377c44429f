# sqlchat/service.py

import logging
from typing import List

from .agent import build_agent_executor
from .config import Settings
from .db import connect_sources, select_source
from .history import HistoryStore
from .llm import build_chat_model
from .models import AiResponse, ChatHistoryResponse
from .steps import has_sql, scan_steps

logger = logging.getLogger(__name__)

NO_RESPONSE_ERROR = "No response from LLM. Please try again."
SERVER_ERROR = "Server error. Try again with a different prompt."


class AiService:
    """
    Sends prompts to the SQL agent and records the ones that produced SQL.
    """

    def __init__(self, executor, history: HistoryStore):
        self.executor = executor
        self.history = history

    @classmethod
    def from_settings(cls, settings: Settings) -> "AiService":
        sources = connect_sources(settings)
        db = select_source(sources, settings.agent_source)
        llm = build_chat_model(settings)
        executor = build_agent_executor(llm, db, settings)
        history = HistoryStore.from_url(settings.history_database_url)
        logger.info("SQL agent bound to %s data source", settings.agent_source)
        return cls(executor, history)

    def chat(self, prompt: str) -> AiResponse:
        response = AiResponse(prompt=prompt)

        try:
            logger.info("Starting chat with prompt: %s", prompt)
            result = self.executor.invoke({"input": prompt})
            logger.info("LLM execution completed")

            steps = result.get("intermediate_steps") if result else None
            if steps is None:
                logger.warning("No intermediate steps found in result")
                response.error = NO_RESPONSE_ERROR
                return response

            logger.info("Number of intermediate steps: %s", len(steps))
            response.sql_query, response.result = scan_steps(steps)

            if has_sql(response.sql_query):
                self.history.save(response.prompt, response.sql_query, response.result)
            else:
                logger.info("Skipping history save - no valid SQL generated")

            return response
        except Exception:
            logger.exception("Error in chat for prompt: %s", prompt)
            response.error = SERVER_ERROR
            return response

    def get_all_chat_history(self) -> List[ChatHistoryResponse]:
        return [
            ChatHistoryResponse(
                id=record["id"],
                prompt=record["prompt"],
                sql_query=record["sql_query"],
                result=record["query_result"] or [],
            )
            for record in self.history.list_all()
        ]
