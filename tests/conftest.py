import json
from unittest.mock import MagicMock

import pytest
import requests

from cypher_rest_sdk import Connection, HttpTransport


def make_response(status_code=200, body=b""):
    response = MagicMock()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        body = body.encode("utf-8")
    response.content = body
    return response


@pytest.fixture
def http_session():
    session = MagicMock(spec=requests.Session)
    session.post.return_value = make_response(200, {"columns": [], "data": []})
    return session


@pytest.fixture
def conn(http_session):
    return Connection.open("http://localhost", 7474, transport=HttpTransport(session=http_session))


@pytest.fixture
def respond(http_session):
    """Set the next response returned by the mocked session"""
    def _respond(body, status_code=200):
        http_session.post.return_value = make_response(status_code, body)
    return _respond


@pytest.fixture
def sent_payload(http_session):
    """Decode the JSON body of the last POST"""
    def _sent():
        return json.loads(http_session.post.call_args.kwargs["data"])
    return _sent
