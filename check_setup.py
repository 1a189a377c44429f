import sys

from sqlchat.config import ConfigError, Settings
from sqlchat.db import connect_sources, select_source
from sqlchat.history import HistoryStore

REQUIRED_KEYS = {
    "openai": ("openai_api_key", "OPENAI_API_KEY"),
    "google": ("google_api_key", "GOOGLE_API_KEY"),
    "groq": ("groq_api_key", "GROQ_API_KEY"),
}


def check_environment(settings: Settings) -> None:
    if settings.llm_provider not in REQUIRED_KEYS:
        raise ConfigError(f"Unsupported LLM provider: {settings.llm_provider}")
    attr, env_name = REQUIRED_KEYS[settings.llm_provider]
    if not getattr(settings, attr):
        raise ConfigError(f"{env_name} is not set")
    if not (settings.database_url or settings.db_name):
        raise ConfigError("Set DATABASE_URL or DB_NAME for the postgres data source")


def main() -> int:
    # --- 1. Load env vars and VALIDATE them ---
    try:
        settings = Settings.from_env()
        check_environment(settings)
    except ConfigError as e:
        print(f"❌ (Step 1) Configuration error: {e}")
        print("   Please ensure a '.env' file exists and contains all required variables.")
        return 1
    print("✅ (Step 1) Environment variables loaded successfully.")

    # --- 2. Data sources ---
    try:
        print("\n--- (Step 2) Connecting to data sources... ---")
        sources = connect_sources(settings)
        select_source(sources, settings.agent_source)
    except Exception as e:
        print(f"❌ (Step 2) Data source connection FAILED: {e}")
        return 1
    for name, db in sources.items():
        tables = ", ".join(db.get_usable_table_names()) or "(no tables)"
        marker = " <- agent" if name == settings.agent_source else ""
        print(f"✅ (Step 2) {name}: {tables}{marker}")

    # --- 3. History store ---
    try:
        print("\n--- (Step 3) Opening history store... ---")
        store = HistoryStore.from_url(settings.history_database_url)
        count = len(store.list_all())
    except Exception as e:
        print(f"❌ (Step 3) History store FAILED: {e}")
        return 1
    print(f"✅ (Step 3) History store ready ({count} saved interactions).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
