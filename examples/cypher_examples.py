"""
Examples demonstrating Cypher to SQL translation
Run this to see how supported statements map to SQL and how the
unsupported ones are reported
"""

from cypher2sql import CypherToSQLConverter, CypherTranslationError, TranslatorConfig


def print_translation(title: str, cypher: str, config: TranslatorConfig = None):
    """Helper to show Cypher to SQL translation"""
    print(f"\n{'='*80}")
    print(f"Example: {title}")
    print(f"{'='*80}")
    print(f"\nCypher Query:")
    print(cypher)

    converter = CypherToSQLConverter(config)

    try:
        sql = converter.convert(cypher)

        print(f"\nGenerated SQL:")
        print(sql)
    except CypherTranslationError as e:
        print(f"\nError: {e}")


def main():
    """Run all examples"""

    # Example 1: Whole node
    print_translation(
        "Return Whole Node",
        "MATCH (n:Person) RETURN n"
    )

    # Example 2: Filter and projection
    print_translation(
        "Filter and Projection",
        "MATCH (n:Person) WHERE n.age > 30 AND n.name <> 'Bob' RETURN n.name, n.age"
    )

    # Example 3: Anonymous node
    print_translation(
        "Anonymous Node",
        "MATCH (:Company) RETURN name"
    )

    # Example 4: Create
    print_translation(
        "Create Node",
        "CREATE (n:Person {name: 'Alice', age: 30, active: true, manager: null})"
    )

    # Example 5: Dialect and pretty printing
    print_translation(
        "Postgres, Pretty Printed",
        "MATCH (p:Product) WHERE p.price >= 9.99 RETURN p.name AS product, p.price",
        TranslatorConfig(dialect='postgres', pretty=True, identify=True)
    )

    # Example 6: Missing label
    print_translation(
        "Missing Label",
        "MATCH (n) RETURN n"
    )

    # Example 7: Empty create
    print_translation(
        "Create Without Properties",
        "CREATE (n:Person)"
    )

    # Example 8: Relationships are outside the supported grammar
    print_translation(
        "Relationship Pattern",
        "MATCH (a:Person)-[:KNOWS]->(b:Person) RETURN a.name"
    )

    # Example 9: Malformed property map
    print_translation(
        "Malformed Property Map",
        "CREATE (n:Person {name})"
    )


if __name__ == "__main__":
    main()
