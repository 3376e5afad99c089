import json

import requests

from cypher_rest_sdk import CypherRestError, SerializationError, ServerFault, TransportError, TypeConversionError
from cypher_rest_sdk.error import from_json_error, from_request_exception


def test_hierarchy():
    for cls in (SerializationError, TransportError, TypeConversionError, ServerFault):
        assert issubclass(cls, CypherRestError)


def test_prefixed_messages():
    assert str(SerializationError("x")) == "Serialization error: x"
    assert str(TransportError("x")) == "Transport error: x"
    assert str(TypeConversionError("x")) == "Type conversion error: x"


def test_server_fault_message_is_verbatim():
    fault = ServerFault("boom", "E", "pkg.E", ["a", "b"])
    assert str(fault) == "boom"
    assert fault.message == "boom"
    assert fault.stacktrace == ["a", "b"]


def test_server_fault_from_body():
    body = json.dumps({
        "message": "Unknown identifier `q`",
        "exception": "SyntaxException",
        "fullname": "org.neo4j.cypher.SyntaxException",
        "stacktrace": ["frame1", "frame2"],
    }).encode("utf-8")
    fault = ServerFault.from_body(body)
    assert fault.message == "Unknown identifier `q`"
    assert fault.exception == "SyntaxException"
    assert fault.fullname == "org.neo4j.cypher.SyntaxException"
    assert fault.stacktrace == ["frame1", "frame2"]


def test_server_fault_from_invalid_utf8_body():
    fault = ServerFault.from_body(b"\xff\xfe")
    assert fault.message == ""


def test_from_json_error():
    try:
        json.loads("{\n  oops")
    except json.JSONDecodeError as e:
        error = from_json_error(e)
    assert isinstance(error, SerializationError)
    assert "line 2" in str(error)


def test_from_request_exception():
    error = from_request_exception(requests.ConnectionError("refused"))
    assert isinstance(error, TransportError)
    assert str(error) == "Transport error: ConnectionError: refused"


def test_server_fault_from_too_deeply_nested_body():
    fault = ServerFault.from_body(b"[" * 100000 + b"]" * 100000)
    assert fault.message == ""
    assert fault.stacktrace == []
