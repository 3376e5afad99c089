"""
Cypher REST SDK - typed Python client for a graph database's HTTP Cypher endpoint

This package sends Cypher queries to `{host}:{port}/db/data/cypher` and decodes
the tabular JSON response into Python values, nodes and relationships.

Quick Start
-----------

```python
from cypher_rest_sdk import Connection

conn = Connection.open("http://localhost", 7474)

name = (
    conn.cypher("MERGE (p:Person {name: {name}}) RETURN p.name")
    .on({"name": "Mike"})
    .execute()
    .as_string()
)
```

Architecture
-----------

```
Your Application
       │
       ▼
┌─────────────────────────────────────────┐
│  Cypher REST SDK (this package)         │
│  - Connection (endpoint target)         │
│  - QueryBuilder (text + parameters)     │
│  - Results (typed accessors)            │
└─────────────────────────────────────────┘
       │  HttpTransport (requests)
       ▼
┌─────────────────────────────────────────┐
│  Graph database HTTP endpoint           │
│  POST /db/data/cypher                   │
└─────────────────────────────────────────┘
```

Failures never escape execute(): they are stored on Results.error and raised
by whichever accessor is called next.
"""

from .error import (
    CypherRestError,
    SerializationError,
    TransportError,
    TypeConversionError,
    ServerFault,
)
from .config import ConnectionConfig
from .connection import Connection
from .query import QueryBuilder
from .records import JsonValue, Node, Relationship
from .result import Results, Shape
from .transport import HttpTransport

__version__ = "0.1.0"

__all__ = [
    "Connection",
    "ConnectionConfig",
    "QueryBuilder",
    "Results",
    "Shape",
    "Node",
    "Relationship",
    "JsonValue",
    "HttpTransport",
    "CypherRestError",
    "SerializationError",
    "TransportError",
    "TypeConversionError",
    "ServerFault",
]
