"""
Error types for the Cypher REST SDK
"""

from typing import List, Optional, Union
import json
import logging

import requests

logger = logging.getLogger(__name__)


class CypherRestError(Exception):
    """
    Base exception for all Cypher REST SDK errors.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class SerializationError(CypherRestError):
    """Serialization/deserialization errors"""
    def __init__(self, message: str):
        super().__init__(f"Serialization error: {message}")

    @classmethod
    def from_json_error(cls, error: json.JSONDecodeError) -> "SerializationError":
        """Create SerializationError from json.JSONDecodeError"""
        return cls(f"JSON error: {error.msg} at line {error.lineno}, column {error.colno}")

class TransportError(CypherRestError):
    """Connection, DNS, timeout and body read errors"""
    def __init__(self, message: str):
        super().__init__(f"Transport error: {message}")

    @classmethod
    def from_request_exception(cls, error: requests.RequestException) -> "TransportError":
        """Create TransportError from a requests exception"""
        return cls(f"{type(error).__name__}: {error}")

class TypeConversionError(CypherRestError):
    """Type conversion errors"""
    def __init__(self, message: str):
        super().__init__(f"Type conversion error: {message}")

class ServerFault(CypherRestError):
    """
    Error reported by the server on a non-200 response.

    The message is kept verbatim so str(fault) is exactly what the server said.
    """
    def __init__(
        self,
        message: str = "",
        exception: str = "",
        fullname: str = "",
        stacktrace: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.exception = exception
        self.fullname = fullname
        self.stacktrace = list(stacktrace) if stacktrace else []

    def __repr__(self) -> str:
        return f"ServerFault(message={self.message!r}, exception={self.exception!r})"

    @classmethod
    def from_body(cls, body: Union[str, bytes]) -> "ServerFault":
        """
        Decode a fault body

        Best effort: a body that is not JSON, or fields of the wrong type,
        leave the affected fields empty instead of raising.
        """
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        try:
            payload = json.loads(body) if body else {}
        except (json.JSONDecodeError, RecursionError) as e:
            logger.debug("Fault body is not valid JSON: %s", e)
            return cls()
        if not isinstance(payload, dict):
            logger.debug("Fault body is not a JSON object: %r", payload)
            return cls()

        def text(key: str) -> str:
            value = payload.get(key)
            return value if isinstance(value, str) else ""

        stacktrace = payload.get("stacktrace")
        if not isinstance(stacktrace, list):
            stacktrace = []
        return cls(
            message=text("message"),
            exception=text("exception"),
            fullname=text("fullname"),
            stacktrace=[frame for frame in stacktrace if isinstance(frame, str)],
        )


# ============================================================================
# Error Conversion Helpers
# ============================================================================

def from_json_error(error: json.JSONDecodeError) -> SerializationError:
    """
    Convert json.JSONDecodeError to SerializationError.
    """
    return SerializationError.from_json_error(error)


def from_request_exception(error: requests.RequestException) -> TransportError:
    """
    Convert a requests exception to TransportError.
    """
    return TransportError.from_request_exception(error)


__all__ = [
    'CypherRestError',
    'SerializationError',
    'TransportError',
    'TypeConversionError',
    'ServerFault',
    'from_json_error',
    'from_request_exception',
]
