"""
Connection to a graph database's HTTP query endpoint
This module provides the main entry point for issuing Cypher queries.
"""

from typing import Any, Dict, Optional

from .config import ConnectionConfig, DEFAULT_HOST, DEFAULT_PORT
from .result import Results
from .transport import HttpTransport

CYPHER_PATH = "/db/data/cypher"


class Connection:
    """
    Target of Cypher queries

    Holds the host, port and the derived endpoint URL. A Connection never
    changes after construction and can be shared by any number of queries.
    All of them go through its transport's requests.Session, which is not
    guaranteed thread-safe; give each thread its own Connection (or its own
    HttpTransport) instead of sharing one across threads.
    """

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                 transport: Optional[HttpTransport] = None):
        self._host = host
        self._port = port
        self._cypher_url = f"{host}:{port}{CYPHER_PATH}"
        self._transport = transport if transport is not None else HttpTransport()

    @classmethod
    def open(cls, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
             transport: Optional[HttpTransport] = None) -> "Connection":
        """
        Create a connection to the query endpoint at host:port

        Args:
            host: Scheme and host name, e.g. "http://localhost"
            port: Port of the HTTP endpoint
            transport: Transport to send requests with (defaults to HttpTransport)

        Returns:
            Connection instance
        """
        return cls(host, port, transport)

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> "Connection":
        """Create a connection from a ConnectionConfig"""
        return cls(config.host, config.port, HttpTransport(timeout=config.timeout))

    @classmethod
    def from_env(cls) -> "Connection":
        """Create a connection from CYPHER_REST_* environment variables"""
        return cls.from_config(ConnectionConfig.from_env())

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def cypher_url(self) -> str:
        """Endpoint queries are POSTed to"""
        return self._cypher_url

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    def cypher(self, query: str):
        """
        Start a query against this connection

        Args:
            query: Cypher query text

        Returns:
            QueryBuilder with no parameters bound
        """
        from .query import QueryBuilder
        return QueryBuilder(self, query)

    def query(self, query: str, params: Optional[Dict[str, Any]] = None) -> Results:
        """
        Build, bind and execute a query in one call

        Returns:
            Results; failures are reported on Results.error
        """
        return self.cypher(query).on(params).execute()

    def close(self):
        """Close the transport"""
        self._transport.close()

    def __repr__(self) -> str:
        return f"Connection({self._cypher_url!r})"


__all__ = ['Connection']
