# sqlchat/agent.py

import logging

from langchain_community.agent_toolkits import SQLDatabaseToolkit, create_sql_agent

from .config import Settings
from .prompts import SQL_PREFIX, suffix_for

logger = logging.getLogger(__name__)

# Name of the toolkit tool that executes SQL against the database
QUERY_TOOL_NAME = "sql_db_query"


def build_agent_executor(llm, db, settings: Settings):
    """
    Create the specialized SQL agent over a single data source.

    The executor returns its intermediate steps so the generated SQL and the
    rows it produced can be recovered after the run.
    """
    agent_type = settings.resolved_agent_type
    toolkit = SQLDatabaseToolkit(db=db, llm=llm)

    logger.info(
        "Building SQL agent (type=%s, top_k=%s, max_iterations=%s)",
        agent_type,
        settings.agent_top_k,
        settings.agent_max_iterations,
    )
    return create_sql_agent(
        llm=llm,
        toolkit=toolkit,
        agent_type=agent_type,
        prefix=SQL_PREFIX,
        suffix=suffix_for(agent_type),
        top_k=settings.agent_top_k,
        max_iterations=settings.agent_max_iterations,
        verbose=settings.agent_verbose,
        agent_executor_kwargs={
            "return_intermediate_steps": True,
            "handle_parsing_errors": True,
        },
    )
