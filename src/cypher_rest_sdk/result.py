'''
Result handling and typed accessors

This module decodes the endpoint's tabular JSON response and projects its
first row onto the shape the caller's query returns: an integer, a string,
a node, a relationship, or a list of one of those.
'''

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .error import CypherRestError, SerializationError, ServerFault, TypeConversionError
from .records import JsonValue, Node, Relationship

logger = logging.getLogger(__name__)

HTTP_OK = 200


class Shape(Enum):
    '''
    Shapes a query result can be decoded into
    '''
    INT = "int"
    INTS = "ints"
    STRING = "string"
    STRINGS = "strings"
    NODE = "node"
    NODES = "nodes"
    RELATIONSHIP = "relationship"
    RELATIONSHIPS = "relationships"


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


def _to_int(value: JsonValue) -> int:
    # bool is a subclass of int but never a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeConversionError(f"expected a number, got {_type_name(value)}: {value!r}")
    try:
        return int(value)
    except (ValueError, OverflowError) as e:
        raise TypeConversionError(f"cannot convert {value!r} to int: {e}") from e


def _to_string(value: JsonValue) -> str:
    if not isinstance(value, str):
        raise TypeConversionError(f"expected a string, got {_type_name(value)}: {value!r}")
    return value


def _field(element: Dict[str, Any], key: str, expected: type, kind: str) -> Any:
    value = element.get(key)
    if not isinstance(value, expected):
        raise TypeConversionError(
            f"{kind} field '{key}' must be {expected.__name__}, got {_type_name(value)}"
        )
    return value


def _to_node(value: JsonValue) -> Node:
    if not isinstance(value, dict):
        raise TypeConversionError(f"expected a node object, got {_type_name(value)}")
    return Node(properties=_field(value, "data", dict, "node"))


def _to_relationship(value: JsonValue) -> Relationship:
    if not isinstance(value, dict):
        raise TypeConversionError(f"expected a relationship object, got {_type_name(value)}")
    return Relationship(
        properties=_field(value, "data", dict, "relationship"),
        type=_field(value, "type", str, "relationship"),
        start=_field(value, "start", str, "relationship"),
        end=_field(value, "end", str, "relationship"),
    )


class Results:
    '''
    Columns and rows returned by one query execution

    If error is set the query failed and columns/data carry nothing. Every
    typed accessor raises that error unchanged in that case, so the usual
    pattern is a single call:

        >>> count = conn.cypher("MATCH (p:Person) RETURN count(p)").execute().as_int()

    The accessors assume the shape of the first row; calling one that does
    not match what the query returns raises TypeConversionError.
    '''

    def __init__(self, columns: Optional[List[Any]] = None, data: Optional[List[Any]] = None,
                 error: Optional[CypherRestError] = None, status_code: Optional[int] = None):
        self.columns = columns if columns is not None else []
        self.data = data if data is not None else []
        self.error = error
        self.status_code = status_code

    @classmethod
    def from_error(cls, error: CypherRestError, status_code: Optional[int] = None) -> 'Results':
        '''
        Create a failed result
        '''
        return cls(error=error, status_code=status_code)

    @classmethod
    def from_response(cls, status_code: int, body: Union[str, bytes]) -> 'Results':
        '''
        Decode an HTTP response from the query endpoint

        A non-200 status is decoded as a ServerFault. A 200 body that is not a
        JSON object yields a SerializationError. Neither raises.
        '''
        if status_code != HTTP_OK:
            fault = ServerFault.from_body(body)
            logger.debug("Server fault (status %d): %s", status_code, fault.message)
            return cls.from_error(fault, status_code)

        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            return cls.from_error(SerializationError.from_json_error(e), status_code)
        except RecursionError as e:
            return cls.from_error(SerializationError(f"Response nested too deeply: {e}"), status_code)
        except UnicodeDecodeError as e:
            return cls.from_error(SerializationError(f"Response is not valid UTF-8: {e}"), status_code)

        if not isinstance(payload, dict):
            return cls.from_error(
                SerializationError(f"Expected a JSON object, got {_type_name(payload)}"),
                status_code,
            )

        columns = payload.get("columns", [])
        data = payload.get("data", [])
        if not isinstance(columns, list) or not isinstance(data, list):
            return cls.from_error(SerializationError("'columns' and 'data' must be arrays"), status_code)
        return cls(columns=columns, data=data, status_code=status_code)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def ok(self) -> bool:
        '''True if the query succeeded'''
        return self.error is None

    def raise_for_error(self) -> None:
        '''
        Raise the stored error, if any
        '''
        if self.error is not None:
            raise self.error

    def row_count(self) -> int:
        '''
        Get the number of rows in the result
        '''
        return len(self.data)

    def column_names(self) -> List[Any]:
        '''
        Get the column descriptors in the result
        '''
        return self.columns

    def get_row(self, index: int) -> Optional[List[JsonValue]]:
        '''
        Get a specific row by index
        '''
        if 0 <= index < len(self.data):
            return self.data[index]
        return None

    def is_empty(self) -> bool:
        '''
        Check if the result is empty (no rows)
        '''
        return len(self.data) == 0

    def rows(self) -> List[List[JsonValue]]:
        '''
        Get all rows
        '''
        return self.data

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def _first_row(self) -> List[JsonValue]:
        self.raise_for_error()
        if self.is_empty():
            raise TypeConversionError("No rows returned")
        row = self.data[0]
        if not isinstance(row, list):
            raise TypeConversionError(f"expected a row array, got {_type_name(row)}")
        return row

    def _first_value(self) -> JsonValue:
        row = self._first_row()
        if not row:
            raise TypeConversionError("First row has no values")
        return row[0]

    def as_int(self) -> int:
        '''
        Use when the query returns one integer

        Numbers arrive as JSON numbers and are truncated towards zero.
        '''
        return _to_int(self._first_value())

    def as_ints(self) -> List[int]:
        '''
        Use when the query returns several integers in one row
        '''
        return [_to_int(value) for value in self._first_row()]

    def as_string(self) -> str:
        '''
        Use when the query returns one string
        '''
        return _to_string(self._first_value())

    def as_strings(self) -> List[str]:
        '''
        Use when the query returns several strings in one row
        '''
        return [_to_string(value) for value in self._first_row()]

    def as_node(self) -> Node:
        '''
        Use when the query returns one node

        Examples:
            >>> node = conn.cypher("MATCH (p:Person) RETURN p LIMIT 1").execute().as_node()
            >>> node.properties["name"]
            'Mike'
        '''
        return _to_node(self._first_value())

    def as_nodes(self) -> List[Node]:
        '''
        Use when the query returns several nodes in one row
        '''
        return [_to_node(value) for value in self._first_row()]

    def as_relationship(self) -> Relationship:
        '''
        Use when the query returns one relationship
        '''
        return _to_relationship(self._first_value())

    def as_relationships(self) -> List[Relationship]:
        '''
        Use when the query returns several relationships in one row
        '''
        return [_to_relationship(value) for value in self._first_row()]

    def decode(self, shape: Shape) -> Any:
        '''
        Decode the result into the given shape

        Equivalent to calling the matching as_* accessor; useful when the
        expected shape is chosen alongside the query text.

        Examples:
            >>> conn.cypher("RETURN 1, 2").execute().decode(Shape.INTS)
            [1, 2]
        '''
        return getattr(self, _ACCESSORS[shape])()

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Results(error={self.error!r})"
        return f"Results(columns={self.columns!r}, rows={len(self.data)})"


_ACCESSORS = {
    Shape.INT: "as_int",
    Shape.INTS: "as_ints",
    Shape.STRING: "as_string",
    Shape.STRINGS: "as_strings",
    Shape.NODE: "as_node",
    Shape.NODES: "as_nodes",
    Shape.RELATIONSHIP: "as_relationship",
    Shape.RELATIONSHIPS: "as_relationships",
}


__all__ = ['Results', 'Shape']
