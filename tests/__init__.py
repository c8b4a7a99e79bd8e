"""
Test Suite for the Bookshelf GraphQL API

Test Organization:
- conftest.py: Shared fixtures (stores for both backends, sample data, clients)
- test_cursor.py: Cursor encoding and decoding
- test_connection.py: Cursor-paginated listings
- test_relations.py: Book → author and author → books resolution
- test_entities.py: Lookups and add/update/delete
- test_store.py: Store contract, run against both backends
- test_graphql.py: The /graphql endpoint end to end
- test_main.py: Root, health and startup
- test_config.py: Settings validation

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_connection.py

    # Run with verbose output
    pytest -v
"""
