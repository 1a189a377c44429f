# sqlchat/db.py

import json
import logging
from typing import Dict

from langchain_community.utilities import SQLDatabase
from sqlalchemy import create_engine
from sqlalchemy.engine import URL

from .config import ConfigError, Settings

logger = logging.getLogger(__name__)


class JSONSQLDatabase(SQLDatabase):
    """
    SQLDatabase that answers queries with a JSON array of row objects
    instead of the repr of a list of tuples, so column names reach the agent
    and the rows can be decoded from its observations.
    """

    def run(self, command, fetch="all", include_columns=False, *, parameters=None, execution_options=None):
        result = self._execute(
            command, fetch, parameters=parameters, execution_options=execution_options
        )
        if fetch == "cursor":
            return result
        return json.dumps([dict(row) for row in result], default=str)


def build_postgres_url(settings: Settings):
    if settings.database_url:
        return settings.database_url
    if not settings.db_name:
        raise ConfigError("Set DATABASE_URL or DB_NAME for the postgres data source")
    return URL.create(
        drivername=settings.db_driver,
        username=settings.db_user,
        password=settings.db_pass,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


def build_sqlite_url(settings: Settings) -> str:
    return f"sqlite:///{settings.sqlite_path}"


def connect_sources(settings: Settings) -> Dict[str, SQLDatabase]:
    """
    Opens both relational data sources. Only one of them is handed to the
    agent, but a broken connection on either should fail startup.
    """
    sources = {}
    for name, url in (
        ("postgres", build_postgres_url(settings)),
        ("sqlite", build_sqlite_url(settings)),
    ):
        db = JSONSQLDatabase(create_engine(url))
        logger.info("Connected %s data source (%s dialect)", name, db.dialect)
        sources[name] = db
    return sources


def select_source(sources: Dict[str, SQLDatabase], name: str) -> SQLDatabase:
    try:
        return sources[name]
    except KeyError:
        raise ConfigError(
            f"Unknown SQL_AGENT_SOURCE {name!r}; expected one of {', '.join(sorted(sources))}"
        )
