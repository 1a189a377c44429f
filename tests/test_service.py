"""Tests for AiService.chat and the history read path."""

import pytest
from conftest import FakeExecutor, query_step

from sqlchat.service import NO_RESPONSE_ERROR, SERVER_ERROR, AiService
from sqlchat.steps import NO_SQL_GENERATED


def _service(history, result=None, error=None):
    return AiService(FakeExecutor(result=result, error=error), history)


def test_prompt_is_forwarded_as_input(history):
    service = _service(history, result={"output": "", "intermediate_steps": []})

    service.chat("How many users?")

    assert service.executor.calls == [{"input": "How many users?"}]


def test_sql_and_rows_are_returned_and_saved(history):
    steps = [
        query_step("", "users", tool="sql_db_list_tables"),
        query_step({"query": "SELECT name FROM users LIMIT 2"}, '[{"name": "Ann"}, {"name": "Bo"}]'),
    ]
    service = _service(history, result={"output": "Ann and Bo", "intermediate_steps": steps})

    response = service.chat("Name two users")

    assert response.prompt == "Name two users"
    assert response.sql_query == "SELECT name FROM users LIMIT 2"
    assert response.result == [{"name": "Ann"}, {"name": "Bo"}]
    assert response.error is None

    saved = history.list_all()
    assert len(saved) == 1
    assert saved[0]["prompt"] == "Name two users"
    assert saved[0]["sql_query"] == "SELECT name FROM users LIMIT 2"
    assert saved[0]["query_result"] == [{"name": "Ann"}, {"name": "Bo"}]


def test_sql_without_parseable_rows_is_still_saved(history):
    steps = [query_step("SELECT nope FROM users", "Error: no such column: nope")]
    service = _service(history, result={"output": "", "intermediate_steps": steps})

    response = service.chat("broken")

    assert response.sql_query == "SELECT nope FROM users"
    assert response.result == []
    assert len(history.list_all()) == 1


def test_no_query_step_uses_sentinel_and_skips_save(history):
    steps = [query_step("", "users", tool="sql_db_list_tables")]
    service = _service(history, result={"output": "I don't know", "intermediate_steps": steps})

    response = service.chat("What is the weather?")

    assert response.sql_query == NO_SQL_GENERATED
    assert response.result == []
    assert response.error is None
    assert history.list_all() == []


def test_answer_without_tool_calls_uses_sentinel(history):
    service = _service(history, result={"output": "I don't know", "intermediate_steps": []})

    response = service.chat("weather?")

    assert response.prompt == "weather?"
    assert response.sql_query == NO_SQL_GENERATED
    assert response.result == []
    assert response.error is None
    assert history.list_all() == []


@pytest.mark.parametrize(
    "result",
    [None, {}, {"output": "hi"}, {"output": "hi", "intermediate_steps": None}],
)
def test_missing_steps_is_reported(history, result):
    service = _service(history, result=result)

    response = service.chat("hello")

    assert response.prompt == "hello"
    assert response.error == NO_RESPONSE_ERROR
    assert response.sql_query is None
    assert response.result == []
    assert history.list_all() == []


def test_agent_failure_becomes_server_error(history):
    service = _service(history, error=RuntimeError("rate limited"))

    response = service.chat("How many users?")

    assert response.prompt == "How many users?"
    assert response.error == SERVER_ERROR
    assert history.list_all() == []


def test_history_failure_becomes_server_error(history):
    class BrokenHistory:
        def save(self, *args):
            raise RuntimeError("disk full")

    steps = [query_step("SELECT 1", '[{"1": 1}]')]
    service = AiService(FakeExecutor(result={"intermediate_steps": steps}), BrokenHistory())

    response = service.chat("one")

    assert response.error == SERVER_ERROR


def test_get_all_chat_history_maps_records(history):
    history.save("first", "SELECT 1", [{"1": 1}])
    history.save("second", "SELECT 2", [])
    service = _service(history)

    records = service.get_all_chat_history()

    assert [r.prompt for r in records] == ["first", "second"]
    assert records[0].sql_query == "SELECT 1"
    assert records[0].result == [{"1": 1}]
    assert records[1].result == []
    assert records[0].id < records[1].id


def test_get_all_chat_history_empty(history):
    assert _service(history).get_all_chat_history() == []


def test_from_settings_wires_agent_and_history(settings):
    service = AiService.from_settings(settings)

    assert service.executor.return_intermediate_steps is True
    assert service.history.list_all() == []
