import logging

import pytest

from user_cluster_api.app.handlers import users as handlers
from user_cluster_api.app.handlers.users import HandlerResult

HANDLER_LOGGER = "user_cluster_api.app.handlers.users"


def handler_records(caplog):
    return [record for record in caplog.records if record.name == HANDLER_LOGGER]


@pytest.mark.parametrize(
    "call, message, expected_ids",
    [
        (lambda store: handlers.get_user_by_id(store, "1"), "Retrieved", [1]),
        (lambda store: handlers.insert_user(store, {"id": 5, "name": "X", "email": "x@e.com"}), "Inserted", [1, 2, 3, 5]),
        (lambda store: handlers.update_user(store, {"id": 2, "name": "Y", "email": "y@e.com"}), "Updated", [1, 2, 3]),
        (lambda store: handlers.delete_user_by_id(store, "2"), "Deleted", [1, 3]),
    ],
)
def test_success_logs_one_info_event(call, message, expected_ids, store, caplog):
    caplog.set_level(logging.INFO)
    result = call(store)
    assert result.ok
    assert result.error is None
    assert [user.id for user in result.users] == expected_ids
    records = handler_records(caplog)
    assert [(record.levelno, record.getMessage()) for record in records] == [(logging.INFO, message)]


def test_empty_result_is_a_success(store, caplog):
    caplog.set_level(logging.INFO)
    result = handlers.get_user_by_id(store, "42")
    assert result == HandlerResult.success([])
    assert [record.levelno for record in handler_records(caplog)] == [logging.INFO]


@pytest.mark.parametrize("call", [handlers.get_user_by_id, handlers.delete_user_by_id])
def test_malformed_id_is_a_failure(call, store, caplog):
    caplog.set_level(logging.INFO)
    result = call(store, "abc")
    assert not result.ok
    assert result.users == []
    assert result.error == "invalid literal for int() with base 10: 'abc'"
    records = handler_records(caplog)
    assert [(record.levelno, record.getMessage()) for record in records] == [(logging.ERROR, result.error)]


@pytest.mark.parametrize("call", [handlers.insert_user, handlers.update_user])
def test_incomplete_payload_is_a_failure(call, store, caplog):
    caplog.set_level(logging.INFO)
    result = call(store, {"id": 5, "name": "X"})
    assert not result.ok
    assert result.error == "'email'"
    assert [record.levelno for record in handler_records(caplog)] == [logging.ERROR]


def test_uncomparable_id_is_a_failure(store):
    result = handlers.insert_user(store, {"id": "5", "name": "X", "email": "x@e.com"})
    assert not result.ok
    assert "not supported" in result.error


def test_payload_values_are_taken_verbatim(store):
    result = handlers.insert_user(store, {"id": 4, "name": "", "email": "nope", "extra": True})
    assert result.ok
    assert result.users[-1].model_dump() == {"id": 4, "name": "", "email": "nope"}


@pytest.mark.parametrize("call", [handlers.insert_user, handlers.update_user])
def test_payload_that_is_not_an_object_is_a_failure(call, store, caplog):
    caplog.set_level(logging.INFO)
    result = call(store, [1, 2])
    assert not result.ok
    assert result.error == "list indices must be integers or slices, not str"
    records = handler_records(caplog)
    assert [(record.levelno, record.getMessage()) for record in records] == [(logging.ERROR, result.error)]
