"""
Services Package

Business logic between the GraphQL resolvers and the entity store:

- cursor: opaque pagination cursors
- connection: cursor-paginated listings
- relations: book → author and author → books lookups
- entities: point lookups and CRUD operations
- seed: the sample dataset
"""
