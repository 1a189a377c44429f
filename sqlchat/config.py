# sqlchat/config.py

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

TRUE_VALUES = ("1", "true", "yes", "on")

# Agent type that works best with each provider's tool calling.
DEFAULT_AGENT_TYPES = {
    "openai": "openai-tools",
    "google": "tool-calling",
    "groq": "tool-calling",
}


class ConfigError(Exception):
    """Raised when the environment does not describe a usable setup."""


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    llm_provider: str = "openai"
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    google_api_key: Optional[str] = None
    google_model: str = "gemini-1.5-flash-latest"
    groq_api_key: Optional[str] = None
    groq_model: str = "mixtral-8x7b-32768"
    llm_temperature: float = 0.0
    llm_max_tokens: int = 2048

    database_url: Optional[str] = None
    db_driver: str = "postgresql+psycopg2"
    db_user: Optional[str] = None
    db_pass: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: Optional[str] = None
    sqlite_path: str = "data.sqlite"

    agent_source: str = "postgres"
    agent_type: Optional[str] = None
    agent_top_k: int = 20
    agent_max_iterations: int = 15
    agent_verbose: bool = False

    history_database_url: str = "sqlite:///chat_history.db"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Loads .env (if present) and reads every setting from the environment.
        """
        load_dotenv()
        return cls(
            llm_provider=os.getenv("LLM_PROVIDER", "openai").strip().lower(),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            google_api_key=os.getenv("GOOGLE_API_KEY"),
            google_model=os.getenv("GOOGLE_MODEL", "gemini-1.5-flash-latest"),
            groq_api_key=os.getenv("GROQ_API_KEY"),
            groq_model=os.getenv("GROQ_MODEL", "mixtral-8x7b-32768"),
            llm_temperature=_get_float("LLM_TEMPERATURE", 0.0),
            llm_max_tokens=_get_int("LLM_MAX_TOKENS", 2048),
            database_url=os.getenv("DATABASE_URL") or None,
            db_driver=os.getenv("DB_DRIVER", "postgresql+psycopg2"),
            db_user=os.getenv("DB_USER"),
            db_pass=os.getenv("DB_PASS"),
            db_host=os.getenv("DB_HOST", "localhost"),
            db_port=_get_int("DB_PORT", 5432),
            db_name=os.getenv("DB_NAME"),
            sqlite_path=os.getenv("SQLITE_PATH", "data.sqlite"),
            agent_source=os.getenv("SQL_AGENT_SOURCE", "postgres").strip().lower(),
            agent_type=os.getenv("SQL_AGENT_TYPE") or None,
            agent_top_k=_get_int("SQL_AGENT_TOP_K", 20),
            agent_max_iterations=_get_int("SQL_AGENT_MAX_ITERATIONS", 15),
            agent_verbose=_get_bool("SQL_AGENT_VERBOSE"),
            history_database_url=os.getenv("HISTORY_DATABASE_URL", "sqlite:///chat_history.db"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def resolved_agent_type(self) -> str:
        if self.agent_type:
            return self.agent_type
        return DEFAULT_AGENT_TYPES.get(self.llm_provider, "tool-calling")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Reduce noise from HTTP clients and the SQL engine
    for noisy in ("httpx", "httpcore", "openai", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
