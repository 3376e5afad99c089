'''
Query construction and execution

A QueryBuilder pairs Cypher text with a parameter mapping and runs it
against the connection it was created from.
'''

import json
import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from .error import CypherRestError, SerializationError
from .result import Results

if TYPE_CHECKING:
    from .connection import Connection

logger = logging.getLogger(__name__)


class QueryBuilder:
    '''
    A Cypher query and its parameters

    Parameters are substituted by the server; names are not checked against
    the query text here, so a mismatch shows up as a ServerFault on execute().

    Examples:
        >>> conn = Connection.open("http://localhost", 7474)
        >>> name = conn.cypher("MATCH (p:Person {name: {name}}) RETURN p.name") \\
        ...     .on({"name": "Mike"}) \\
        ...     .execute() \\
        ...     .as_string()
    '''

    def __init__(self, connection: 'Connection', query: str):
        '''
        Internal constructor - use connection.cypher() instead
        '''
        self._connection = connection
        self.query = query
        self.params: Dict[str, Any] = {}

    @property
    def connection(self) -> 'Connection':
        return self._connection

    def on(self, params: Optional[Dict[str, Any]]) -> 'QueryBuilder':
        '''
        Set the query parameters

        Replaces any previously bound parameters; the mappings are not merged.
        '''
        self.params = dict(params) if params else {}
        return self

    def to_payload(self) -> Dict[str, Any]:
        '''
        Request body as a dict
        '''
        return {"query": self.query, "params": self.params}

    def serialize(self) -> bytes:
        '''
        Encode the request body as JSON

        Raises:
            SerializationError: If a parameter value is not JSON-representable
        '''
        try:
            return json.dumps(self.to_payload(), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Cannot encode query parameters: {e}") from e

    def execute(self) -> Results:
        '''
        Execute the query and decode the response

        Returns:
            Results with columns and data, or with error set if encoding,
            the HTTP round trip or the server failed
        '''
        try:
            body = self.serialize()
            status_code, content = self._connection.transport.post(self._connection.cypher_url, body)
        except CypherRestError as e:
            logger.debug("Query failed before a response was decoded: %s", e)
            return Results.from_error(e)

        return Results.from_response(status_code, content)

    def __repr__(self) -> str:
        return f"QueryBuilder(query={self.query!r}, params={self.params!r})"


__all__ = ['QueryBuilder']
