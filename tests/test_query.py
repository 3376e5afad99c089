import json

import pytest
import requests

from cypher_rest_sdk import SerializationError, TransportError


def test_on_replaces_params_without_merging(conn):
    query = conn.cypher("RETURN {a}, {b}").on({"a": 1}).on({"b": 2})
    assert query.params == {"b": 2}


def test_on_none_resets_params(conn):
    query = conn.cypher("RETURN 1").on({"a": 1}).on(None)
    assert query.params == {}


def test_on_returns_same_builder(conn):
    query = conn.cypher("RETURN 1")
    assert query.on({"a": 1}) is query


def test_execute_sends_bound_params(conn, http_session, sent_payload):
    params = {
        "name1": "Mike",
        "name2": "Matt",
        "nested": {"tags": ["a", "b"], "score": 1.5, "active": True, "none": None},
    }
    conn.cypher("MERGE (p:Person {name: {name1}}) RETURN p").on(params).execute()

    assert sent_payload() == {"query": "MERGE (p:Person {name: {name1}}) RETURN p", "params": params}
    args, kwargs = http_session.post.call_args
    assert args == ("http://localhost:7474/db/data/cypher",)
    assert kwargs["headers"] == {"Content-Type": "application/json"}


def test_execute_without_params_sends_empty_mapping(conn, sent_payload):
    conn.cypher("RETURN 1").execute()
    assert sent_payload() == {"query": "RETURN 1", "params": {}}


def test_serialize_is_json(conn):
    body = conn.cypher("RETURN {x}").on({"x": "é"}).serialize()
    assert json.loads(body.decode("utf-8")) == {"query": "RETURN {x}", "params": {"x": "é"}}


@pytest.mark.parametrize("value", [object(), {1, 2}, float("nan")])
def test_unencodable_params_fail_before_network(conn, http_session, value):
    results = conn.cypher("RETURN {x}").on({"x": value}).execute()

    assert isinstance(results.error, SerializationError)
    http_session.post.assert_not_called()
    with pytest.raises(SerializationError):
        results.as_int()


def test_transport_failure_is_stored_on_results(conn, http_session):
    http_session.post.side_effect = requests.ConnectionError("connection refused")

    results = conn.cypher("RETURN 1").execute()

    assert not results.ok
    assert isinstance(results.error, TransportError)
    assert "connection refused" in str(results.error)
    with pytest.raises(TransportError):
        results.as_int()


def test_execute_does_not_retry(conn, http_session):
    http_session.post.side_effect = requests.Timeout("read timed out")
    conn.cypher("RETURN 1").execute()
    assert http_session.post.call_count == 1


def test_too_deeply_nested_params_fail_before_network(conn, http_session):
    params = {}
    for _ in range(100000):
        params = {"child": params}

    results = conn.cypher("RETURN 1").on({"tree": params}).execute()

    assert isinstance(results.error, SerializationError)
    http_session.post.assert_not_called()
