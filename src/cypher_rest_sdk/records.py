"""
Graph element records decoded from query results
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

# Values produced by the json module for a decoded response
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


@dataclass
class Node:
    """A node returned by a query, reduced to its property map"""
    properties: Dict[str, JsonValue] = field(default_factory=dict)


@dataclass
class Relationship:
    """
    A relationship returned by a query

    ``start`` and ``end`` are the server's references (URLs) to the
    endpoint nodes, exactly as returned.
    """
    properties: Dict[str, JsonValue] = field(default_factory=dict)
    type: str = ""
    start: str = ""
    end: str = ""


__all__ = ['JsonValue', 'Node', 'Relationship']
