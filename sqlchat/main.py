# sqlchat/main.py

import json
from typing import Optional

from .config import Settings, configure_logging
from .service import AiService


def print_response(response) -> None:
    if response.error:
        print(f"\n❌ {response.error}\n")
        return

    print("\n--- Generated SQL ---\n")
    print(response.sql_query)
    print("\n--- Result ---\n")
    if response.result:
        for row in response.result:
            print(json.dumps(row, default=str))
    else:
        print("(no rows)")
    print()


def run_console(service: Optional[AiService] = None):
    """
    Starts a command-line loop to chat with the SQL agent.
    """
    if service is None:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        service = AiService.from_settings(settings)

    print("🤖 SQL chat agent is ready!")
    print("Ask anything about your data (e.g., 'How many orders were placed last week?').")
    print("Type 'exit' or 'quit' to end.")

    try:
        while True:
            question = input(">> ").strip()
            if not question:
                continue
            if question.lower() in ("exit", "quit"):
                break

            print_response(service.chat(question))

    except KeyboardInterrupt:
        print("\nGoodbye!")


if __name__ == "__main__":
    run_console()
