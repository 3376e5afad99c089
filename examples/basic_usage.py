"""
Cypher REST SDK - Basic Usage Example

This example demonstrates the core features of the Cypher REST SDK:
- Connecting to the HTTP Cypher endpoint
- Binding query parameters
- Decoding scalars, nodes and relationships
- Handling server faults

Requires a graph database serving /db/data/cypher. Configure it with
CYPHER_REST_HOST / CYPHER_REST_PORT (defaults: http://localhost, 7474).

Run with: python3 examples/basic_usage.py
"""

import logging
import sys

from cypher_rest_sdk import (
    Connection,
    CypherRestError,
    ServerFault,
    Shape,
)

PEOPLE = {"name1": "Mike", "name2": "Matt"}

MERGE_PEOPLE = """
MERGE (p1:Person {name: {name1}})
MERGE (p2:Person {name: {name2}})
CREATE UNIQUE p1-[k:KNOWS]->p2
"""


def main() -> int:
    """Run the basic usage example"""
    logging.basicConfig(level=logging.INFO)
    print("=== Cypher REST SDK Basic Usage Example ===\n")

    conn = Connection.from_env()
    print(f"Endpoint: {conn.cypher_url}\n")

    try:
        # 1. Single string
        print("1. Returning a string...")
        name = conn.cypher(MERGE_PEOPLE + "RETURN p1.name").on(PEOPLE).execute().as_string()
        print(f"   p1.name = {name}\n")

        # 2. Several integers
        print("2. Returning several integers...")
        ids = conn.cypher(MERGE_PEOPLE + "RETURN id(p1), id(p2)").on(PEOPLE).execute().as_ints()
        print(f"   ids = {ids}\n")

        # 3. Nodes
        print("3. Returning nodes...")
        nodes = conn.cypher(MERGE_PEOPLE + "RETURN p1, p2").on(PEOPLE).execute().as_nodes()
        for node in nodes:
            print(f"   - {node.properties}")
        print()

        # 4. Relationship, decoded by shape
        print("4. Returning a relationship...")
        rel = conn.cypher(MERGE_PEOPLE + "RETURN k").on(PEOPLE).execute().decode(Shape.RELATIONSHIP)
        print(f"   {rel.start} -[{rel.type}]-> {rel.end}\n")

        # 5. Server faults are raised by the accessor
        print("5. Handling a server fault...")
        results = conn.cypher("RETURN {missing}").execute()
        try:
            results.as_int()
        except ServerFault as e:
            print(f"   Server reported {e.exception}: {e.message}\n")

        print("=== Example completed successfully ===")
        return 0

    except CypherRestError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    finally:
        conn.close()


if __name__ == "__main__":
    sys.exit(main())
