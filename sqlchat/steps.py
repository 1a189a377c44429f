# sqlchat/steps.py

import json
import logging
from typing import Any, Iterable, List, Optional, Tuple

from .agent import QUERY_TOOL_NAME

logger = logging.getLogger(__name__)

NO_SQL_GENERATED = "No SQL generated"


def clean_sql(tool_input: Any) -> str:
    """
    Returns the SQL string a query tool was called with, with backslashes
    and double quotes removed.
    """
    if isinstance(tool_input, dict):
        tool_input = tool_input.get("query", "")
    sql = str(tool_input)
    return sql.replace("\\", "").replace('"', "").strip()


def parse_rows(observation: Any) -> Optional[List[dict]]:
    """
    Decodes a query tool observation into result rows.

    Returns None unless the observation is a JSON array of objects.
    """
    if isinstance(observation, str):
        try:
            observation = json.loads(observation)
        except ValueError as e:
            logger.debug("Error parsing observation: %s", e)
            return None
    if isinstance(observation, list) and all(isinstance(row, dict) for row in observation):
        return observation
    return None


def scan_steps(steps: Iterable[Tuple[Any, Any]]) -> Tuple[str, List[dict]]:
    sql_query = NO_SQL_GENERATED
    rows: List[dict] = []

    for index, (action, observation) in enumerate(steps):
        tool = getattr(action, "tool", None)
        logger.debug("Step %s: %s", index, tool)
        if tool != QUERY_TOOL_NAME:
            continue
        sql_query = clean_sql(action.tool_input)
        parsed = parse_rows(observation)
        if parsed is not None:
            rows = parsed

    return sql_query, rows


def has_sql(sql_query: Optional[str]) -> bool:
    return bool(sql_query) and sql_query != NO_SQL_GENERATED
