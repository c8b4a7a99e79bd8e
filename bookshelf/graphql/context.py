"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- The entity store opened by the application lifespan
- The application settings

The context is created fresh for each GraphQL request and passed to all
resolvers via the `info` parameter. The store itself is shared by every
request.
"""

from fastapi import Request
from strawberry.fastapi import BaseContext

from bookshelf.config import Settings
from bookshelf.store.base import EntityStore


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Attributes:
        store: Entity store for all reads and writes
        settings: Application settings
    """

    def __init__(self, store: EntityStore, settings: Settings):
        super().__init__()
        self.store = store
        self.settings = settings

    def page_size(self, first: int | None) -> int:
        """The requested page size, or the configured default."""
        return self.settings.default_page_size if first is None else first


async def get_context(request: Request) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Called by Strawberry for every GraphQL request. The store and settings
    were placed on app.state by the lifespan handler.

    Args:
        request: FastAPI request object

    Returns:
        GraphQLContext for this request
    """
    store: EntityStore = request.app.state.store
    settings: Settings = request.app.state.settings

    return GraphQLContext(store=store, settings=settings)
